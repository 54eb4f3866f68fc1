"""
Validation errors raised while building domain value objects.

These are raised before any repository call is made, so they never reach the
repository/service error taxonomy. The API layer reports them as 422.
"""


class EmptyValueError(ValueError):
    """Base for "trimmed value is empty" failures. `field` names the offending field."""

    field: str = "value"
    message: str = "Value cannot be empty"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class PostTitleEmptyError(EmptyValueError):
    field = "title"
    message = "Blog post title cannot be empty"


class PostBodyEmptyError(EmptyValueError):
    field = "body"
    message = "Blog post body cannot be empty"


__all__ = ["EmptyValueError", "PostTitleEmptyError", "PostBodyEmptyError"]
