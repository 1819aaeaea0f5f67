"""Article model for PostgreSQL."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column, DateTime, Text
from sqlmodel import Field, SQLModel

from newshub.constants import TITLE_MAX_LENGTH


class ArticleStatus(str, Enum):
    """Publication state of an article."""

    DRAFT = "draft"
    PUBLISHED = "published"


class Article(SQLModel, table=True):
    """
    Article row - the only content entity.
    Drafts are visible in the admin dashboard only; published articles are public.
    """

    __tablename__ = "articles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    # Content
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    content: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    excerpt: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    featured_image_url: str | None = Field(default=None, max_length=2048)

    # Raw attachment records: {"url": ..., "filename": ..., "type": ...}
    attachments: list[dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False, default=list)
    )

    # Status
    status: ArticleStatus = Field(default=ArticleStatus.DRAFT, index=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_type=DateTime(timezone=True), index=True
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_type=DateTime(timezone=True)
    )

    # Owning author from the auth service
    author_id: str = Field(max_length=64, index=True)
