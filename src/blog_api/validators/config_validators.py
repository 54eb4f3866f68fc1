from typing import Callable


def _normalize(value: str | None, transform: Callable[[str], str]) -> str | None:
    if value is None:
        return None
    return transform(str(value).strip())


def to_uppercase(value: str | None) -> str | None:
    """Strip and uppercase an environment value (None passes through)."""
    return _normalize(value, str.upper)


def to_lowercase(value: str | None) -> str | None:
    """Strip and lowercase an environment value (None passes through)."""
    return _normalize(value, str.lower)
