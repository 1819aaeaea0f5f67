"""Public article endpoints: home listing and detail view."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from newshub.db.postgres import get_session as get_db
from newshub.schemas.article import ArticleCard, ArticleListResponse, ArticleResponse
from newshub.services import article_service

router = APIRouter()


@router.get("", response_model=ArticleListResponse)
async def list_articles(db: AsyncSession = Depends(get_db)) -> ArticleListResponse:
    """Published articles, newest first."""
    articles = await article_service.list_articles(db, published_only=True)
    return ArticleListResponse(
        articles=[ArticleCard.from_model(a) for a in articles],
        total=len(articles),
    )


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(article_id: str, db: AsyncSession = Depends(get_db)) -> ArticleResponse:
    """
    Get a published article by ID.

    Missing and unpublished articles both answer 404 "Article not found".
    """
    article = await article_service.get_published_article(db, article_id)
    return ArticleResponse.from_model(article)
