"""Models package - SQLModel database models."""

from newshub.models.article import Article, ArticleStatus

__all__ = ["Article", "ArticleStatus"]
