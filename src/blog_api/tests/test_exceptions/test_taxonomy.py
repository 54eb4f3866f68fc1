import pytest

from blog_api.domain import PostId, PostTitle
from blog_api.exceptions import (
    CreatePostDuplicateError,
    CreatePostError,
    CreatePostUnknownError,
    DuplicateError,
    GetPostError,
    GetPostNotFoundError,
    GetPostUnknownError,
    NotFoundError,
    RepositoryError,
    ServiceError,
    UnknownRepositoryError,
    UpdatePostDuplicateError,
    UpdatePostError,
    UpdatePostNotFoundError,
    UpdatePostUnknownError,
)


class TestErrorTaxonomy:

    def test_variants_carry_operation_and_kind(self):
        """
        Behavior:
                - Every variant is catchable by its operation base and by its kind base.

        Importance:
                - The service and API layers dispatch on kind; callers of a single
                  operation catch by operation. Neither may lose the classification.
        """
        title = PostTitle.try_create("T")
        post_id = PostId.new()

        cases = [
            (CreatePostDuplicateError(title), CreatePostError, DuplicateError),
            (CreatePostUnknownError(RuntimeError()), CreatePostError, UnknownRepositoryError),
            (GetPostNotFoundError(post_id), GetPostError, NotFoundError),
            (GetPostUnknownError(RuntimeError()), GetPostError, UnknownRepositoryError),
            (UpdatePostNotFoundError(post_id), UpdatePostError, NotFoundError),
            (UpdatePostDuplicateError(title), UpdatePostError, DuplicateError),
            (UpdatePostUnknownError(RuntimeError()), UpdatePostError, UnknownRepositoryError),
        ]
        for error, operation_base, kind_base in cases:
            assert isinstance(error, operation_base)
            assert isinstance(error, kind_base)
            assert isinstance(error, RepositoryError)

    def test_messages(self):
        title = PostTitle.try_create("Hello")
        post_id = PostId.new()

        assert CreatePostDuplicateError(title).message == "Blog post with title Hello already exists."
        assert UpdatePostDuplicateError(title).message == "Blog post with title Hello already exists."
        assert GetPostNotFoundError(post_id).message == f"Could not find blog post with id {post_id}."
        assert UpdatePostNotFoundError(post_id).message == f"Could not find blog post with id {post_id}."
        assert GetPostNotFoundError(title=title).message == "Could not find blog post with title Hello."

    def test_error_codes(self):
        title = PostTitle.try_create("x")

        assert CreatePostDuplicateError(title).error_code == "duplicate"
        assert UpdatePostNotFoundError(PostId.new()).error_code == "not_found"
        assert GetPostUnknownError(RuntimeError("boom")).error_code == "unknown"
        assert RepositoryError("plain").error_code is None

    def test_unknown_keeps_cause(self):
        cause = RuntimeError("connection refused")

        error = UnknownRepositoryError(cause)

        assert error.cause is cause
        assert error.message == "connection refused"
        assert UnknownRepositoryError().message == "Unknown repository error"

    def test_str_includes_diagnostics_message_does_not(self):
        error = CreatePostDuplicateError(PostTitle.try_create("x"), constraint="uq_posts_title")

        assert "uq_posts_title" in str(error)
        assert "uq_posts_title" not in error.message
        assert error.fields == ["title"]

    def test_service_error_wraps_repository_error(self):
        inner = UpdatePostNotFoundError(PostId.new())

        error = ServiceError(inner)

        assert error.error is inner
        assert error.error_code == "not_found"
        assert "UpdatePostNotFoundError" in repr(error)

    def test_get_not_found_requires_id_or_title(self):
        """
        Behavior:
                - Build GetPostNotFoundError with neither an id nor a title.
                - Expect TypeError instead of a message naming "id None".
        """
        with pytest.raises(TypeError):
            GetPostNotFoundError()

        assert "None" not in GetPostNotFoundError(title=PostTitle.try_create("T")).message
