"""Article data access on PostgreSQL.

Every operation is a single round trip to the database. Failures are logged
and re-raised as ``RemoteOperationError`` - nothing is retried and no partial
state is kept.
"""

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newshub.constants import TITLE_MAX_LENGTH
from newshub.exceptions import (
    ArticleNotFoundError,
    ArticleValidationError,
    PermissionDeniedError,
    RemoteOperationError,
)
from newshub.models import Article, ArticleStatus
from newshub.schemas.article import ArticleCreate, ArticleUpdate, DashboardStats
from newshub.services.content import derive_excerpt

logger = logging.getLogger(__name__)


def validate_title(title: str | None) -> str:
    """Return the trimmed title or raise if it is blank or too long."""
    cleaned = (title or "").strip()
    if not cleaned:
        raise ArticleValidationError("Title is required")
    if len(cleaned) > TITLE_MAX_LENGTH:
        raise ArticleValidationError(
            f"Title must be at most {TITLE_MAX_LENGTH} characters"
        )
    return cleaned


def _parse_id(article_id: str) -> UUID:
    try:
        return UUID(str(article_id))
    except ValueError:
        # Malformed ids can't exist in the table
        raise ArticleNotFoundError(article_id) from None


def check_owner(article: Article, author_id: str | None) -> None:
    """Refuse changes by anyone but the article's author."""
    if author_id is not None and article.author_id != author_id:
        raise PermissionDeniedError("Only the author can change this article")


async def list_articles(db: AsyncSession, published_only: bool = True) -> Sequence[Article]:
    """List articles, newest first. Drafts are included only for the dashboard."""
    query = select(Article).order_by(Article.created_at.desc())
    if published_only:
        query = query.where(Article.status == ArticleStatus.PUBLISHED)

    try:
        result = await db.execute(query)
    except SQLAlchemyError as e:
        logger.exception("Error fetching articles")
        raise RemoteOperationError("Failed to load articles") from e
    return result.scalars().all()


async def get_article(db: AsyncSession, article_id: str) -> Article:
    """Get any article by ID, whatever its status."""
    article_uuid = _parse_id(article_id)
    try:
        article = await db.get(Article, article_uuid)
    except SQLAlchemyError as e:
        logger.exception("Error fetching article %s", article_id)
        raise RemoteOperationError("Failed to load article") from e

    if article is None:
        raise ArticleNotFoundError(article_id)
    return article


async def get_published_article(db: AsyncSession, article_id: str) -> Article:
    """Get an article for the public detail view; drafts are reported as missing."""
    article_uuid = _parse_id(article_id)
    query = select(Article).where(
        Article.id == article_uuid,
        Article.status == ArticleStatus.PUBLISHED,
    )
    try:
        result = await db.execute(query)
    except SQLAlchemyError as e:
        logger.exception("Error fetching article %s", article_id)
        raise RemoteOperationError("Failed to load article") from e

    article = result.scalar_one_or_none()
    if article is None:
        raise ArticleNotFoundError(article_id)
    return article


async def create_article(db: AsyncSession, data: ArticleCreate, author_id: str) -> Article:
    """
    Insert a new article owned by ``author_id``.

    The title is checked before anything is sent to the database.
    """
    title = validate_title(data.title)

    article = Article(
        title=title,
        content=data.content,
        excerpt=derive_excerpt(data.content),
        featured_image_url=data.featured_image_url or None,
        attachments=[a.model_dump(by_alias=True) for a in data.attachments],
        status=data.status,
        author_id=author_id,
    )
    db.add(article)
    try:
        await db.commit()
        await db.refresh(article)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Error creating article")
        raise RemoteOperationError("Failed to create article") from e

    logger.info("Created article %s (%s)", article.id, article.status.value)
    return article


async def update_article(
    db: AsyncSession,
    article_id: str,
    changes: ArticleUpdate,
    author_id: str | None = None,
) -> Article:
    """Apply a partial update; the excerpt follows the content.

    When ``author_id`` is given the article must belong to that author.
    """
    updates = changes.model_dump(exclude_unset=True, by_alias=True)
    for field in ("content", "attachments"):
        if field in updates and updates[field] is None:
            raise ArticleValidationError(f"{field.capitalize()} cannot be null")
    if "title" in updates:
        updates["title"] = validate_title(updates["title"])
    if updates.get("status") is None:
        updates.pop("status", None)
    if "featured_image_url" in updates:
        updates["featured_image_url"] = updates["featured_image_url"] or None

    article = await get_article(db, article_id)
    check_owner(article, author_id)

    for field, value in updates.items():
        setattr(article, field, value)
    if "content" in updates:
        article.excerpt = derive_excerpt(article.content or "")
    article.updated_at = datetime.now(UTC)

    db.add(article)
    try:
        await db.commit()
        await db.refresh(article)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Error updating article %s", article_id)
        raise RemoteOperationError("Failed to update article") from e

    logger.info("Updated article %s", article.id)
    return article


async def delete_article(
    db: AsyncSession, article_id: str, author_id: str | None = None
) -> None:
    """Delete an article permanently."""
    article = await get_article(db, article_id)
    check_owner(article, author_id)
    try:
        await db.delete(article)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Error deleting article %s", article_id)
        raise RemoteOperationError("Failed to delete article") from e

    logger.info("Deleted article %s", article_id)


def dashboard_stats(articles: Sequence[Article]) -> DashboardStats:
    """Count articles per status for the dashboard header."""
    published = sum(1 for a in articles if a.status == ArticleStatus.PUBLISHED)
    drafts = sum(1 for a in articles if a.status == ArticleStatus.DRAFT)
    return DashboardStats(total=len(articles), published=published, drafts=drafts)
