"""Declarative base shared by every ORM model (import it from model modules)."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Constraint names are deterministic: the storage adapter recognises the unique title
# constraint in Postgres errors by its name, "uq_posts_title".
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
