"""Edit-form state for a single article.

Mirrors what the admin editor holds while an article is open: uploads are
folded into the featured image or the attachment list, and the result is
turned into a create or update payload on save.
"""

from dataclasses import dataclass, field

from newshub.exceptions import ArticleValidationError
from newshub.models import Article, ArticleStatus
from newshub.schemas.article import ArticleUpdate, Attachment, parse_attachments
from newshub.services.article_service import validate_title


@dataclass
class ArticleEditor:
    title: str = ""
    content: str = ""
    featured_image_url: str = ""
    attachments: list[Attachment] = field(default_factory=list)
    status: ArticleStatus = ArticleStatus.DRAFT

    @classmethod
    def for_article(cls, article: Article | None) -> "ArticleEditor":
        """Blank editor for a new article, or one pre-filled from ``article``."""
        if article is None:
            return cls()
        return cls(
            title=article.title,
            content=article.content,
            featured_image_url=article.featured_image_url or "",
            attachments=parse_attachments(article.attachments),
            status=article.status,
        )

    def apply_upload(self, upload: Attachment) -> None:
        """Images become the featured image; anything else is attached."""
        if upload.kind == "image":
            self.featured_image_url = upload.url
        else:
            self.attachments.append(
                Attachment(url=upload.url, filename=upload.filename, kind="attachment")
            )

    def remove_attachment(self, index: int) -> Attachment:
        if not 0 <= index < len(self.attachments):
            raise ArticleValidationError(f"No attachment at position {index}")
        return self.attachments.pop(index)

    def clear_featured_image(self) -> None:
        self.featured_image_url = ""

    def to_update(self) -> ArticleUpdate:
        return ArticleUpdate(
            title=validate_title(self.title),
            content=self.content,
            featured_image_url=self.featured_image_url or None,
            attachments=list(self.attachments),
            status=self.status,
        )
