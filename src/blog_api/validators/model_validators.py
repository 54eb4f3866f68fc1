"""Keyword checks run by BaseRepository before any SQL is built."""

from sqlalchemy import inspect as sa_inspect


def _required_columns(model) -> list[str]:
    # NOT NULL, no Python/server default, not an autoincrementing key
    return [
        col.name
        for col in model.__table__.columns
        if not col.nullable
        and col.default is None
        and col.server_default is None
        and not (col.primary_key and col.autoincrement is True)
    ]


def validate_model_kwargs(model, kwargs: dict, *, insert: bool = False) -> None:
    """
    Raise ValueError for keys that are not mapped attributes of `model`.

    With `insert=True`, required columns that are absent (or None) are reported too.
    """
    mapped = {attr.key for attr in sa_inspect(model).attrs}
    unknown = sorted(key for key in kwargs if key not in mapped)
    if unknown:
        raise ValueError(f"Unknown field(s) for {model.__name__}: {', '.join(unknown)}")

    if insert:
        missing = [name for name in _required_columns(model) if kwargs.get(name) is None]
        if missing:
            raise ValueError(f"Missing required field(s): {', '.join(missing)} for {model.__name__}")
