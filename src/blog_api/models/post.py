from sqlalchemy import Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func
from datetime import datetime, timezone
from blog_api.database.base import Base
import uuid


class PostModel(Base):
    """
    SQLAlchemy model for the `posts` table.

    This is the storage-side shape of a post. It never leaves the repository layer:
    `PostRepository` converts rows into `blog_api.domain.Post` before returning.
    """
    __tablename__ = "posts"

    # Unique identifier for the post (primary key).
    # `Uuid` is backend-agnostic: native UUID on Postgres, CHAR(32) on SQLite.
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # Title (must be unique and non-null). No length cap: any non-empty title is valid.
    # With the naming convention on Base the constraint is named "uq_posts_title".
    title: Mapped[str] = mapped_column(
        Text,
        unique=True,
        nullable=False
    )

    body: Mapped[str] = mapped_column(
        Text,
        nullable=False
    )

    # Set on insert. The Python-side default keeps sub-second precision on backends
    # whose CURRENT_TIMESTAMP only has one-second resolution (SQLite).
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<PostModel(id={self.id!r}, title={self.title!r})>"
