"""Article schemas for API request/response validation."""

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationError,
    model_validator,
)

from newshub.constants import ARTICLE_ROUTE, TITLE_MAX_LENGTH
from newshub.models import Article, ArticleStatus
from newshub.services.content import reading_minutes

logger = logging.getLogger(__name__)

Title = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=TITLE_MAX_LENGTH)
]


class Attachment(BaseModel):
    """A file linked from an article, stored as ``{"url", "filename", "type"}``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    url: str = Field(..., min_length=1, max_length=2048)
    filename: str = Field(..., min_length=1, max_length=255)
    kind: Literal["image", "attachment"] = Field(default="attachment", alias="type")


def parse_attachments(rows: Iterable[Any] | None) -> list[Attachment]:
    """Validate stored attachment rows, dropping ones that don't fit the shape."""
    attachments = []
    for row in rows or []:
        try:
            attachments.append(Attachment.model_validate(row))
        except ValidationError:
            logger.warning("Skipping malformed attachment row %r", row)
    return attachments


class ArticleCreate(BaseModel):
    """Schema for creating an article from the editor."""

    title: Title
    content: str = ""
    featured_image_url: str | None = None
    attachments: list[Attachment] = Field(default_factory=list)
    status: ArticleStatus = ArticleStatus.DRAFT


class ArticleUpdate(BaseModel):
    """Partial update - only the provided fields are changed."""

    title: Title | None = None
    content: str | None = None
    featured_image_url: str | None = None
    attachments: list[Attachment] | None = None
    status: ArticleStatus | None = None

    @model_validator(mode="after")
    def reject_null_fields(self) -> "ArticleUpdate":
        # content and attachments may be omitted, not cleared to null
        for name in ("content", "attachments"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class ArticleCard(BaseModel):
    """Listing entry: everything but the body."""

    id: str
    path: str
    title: str
    excerpt: str
    featured_image_url: str | None = None
    status: ArticleStatus
    created_at: datetime
    updated_at: datetime
    reading_minutes: int

    @classmethod
    def from_model(cls, article: Article) -> "ArticleCard":
        return cls(
            id=str(article.id),
            path=ARTICLE_ROUTE.format(article_id=article.id),
            title=article.title,
            excerpt=article.excerpt,
            featured_image_url=article.featured_image_url,
            status=article.status,
            created_at=article.created_at,
            updated_at=article.updated_at,
            reading_minutes=reading_minutes(article.content or ""),
        )


class ArticleResponse(ArticleCard):
    """Full article for the detail view and the editor."""

    content: str
    attachments: list[Attachment]
    author_id: str

    @classmethod
    def from_model(cls, article: Article) -> "ArticleResponse":
        card = ArticleCard.from_model(article)
        return cls(
            **card.model_dump(),
            content=article.content or "",
            attachments=parse_attachments(article.attachments),
            author_id=article.author_id,
        )


class ArticleListResponse(BaseModel):
    """Schema for the home listing."""

    articles: list[ArticleCard]
    total: int


class DashboardStats(BaseModel):
    total: int
    published: int
    drafts: int


class DashboardResponse(BaseModel):
    """Admin dashboard: every article regardless of status, plus counts."""

    articles: list[ArticleCard]
    stats: DashboardStats
