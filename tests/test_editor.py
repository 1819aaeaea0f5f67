"""Tests for the article editing workflow."""

import pytest

from newshub.exceptions import ArticleValidationError
from newshub.models import ArticleStatus
from newshub.schemas.article import Attachment
from newshub.services.editor import ArticleEditor


class TestArticleEditor:
    def test_blank_for_new_article(self):
        editor = ArticleEditor.for_article(None)

        assert editor.title == ""
        assert editor.attachments == []
        assert editor.status == ArticleStatus.DRAFT

    def test_prefilled_from_article(self, make_article):
        article = make_article(
            featured_image_url="https://cdn/cover.png",
            attachments=[{"url": "https://cdn/a.pdf", "filename": "a.pdf", "type": "attachment"}],
        )

        editor = ArticleEditor.for_article(article)

        assert editor.title == "Hello world"
        assert editor.featured_image_url == "https://cdn/cover.png"
        assert editor.attachments == [Attachment(url="https://cdn/a.pdf", filename="a.pdf")]
        assert editor.status == ArticleStatus.PUBLISHED

    def test_legacy_attachment_rows_are_dropped(self, make_article):
        article = make_article(
            attachments=[
                {"url": "https://cdn/legacy.pdf"},
                {"url": "https://cdn/a.pdf", "filename": "a.pdf", "type": "attachment"},
            ]
        )

        editor = ArticleEditor.for_article(article)

        assert [a.filename for a in editor.attachments] == ["a.pdf"]

    def test_image_upload_replaces_featured_image(self):
        editor = ArticleEditor(featured_image_url="https://cdn/old.png")

        editor.apply_upload(Attachment(url="https://cdn/new.png", filename="new.png", kind="image"))

        assert editor.featured_image_url == "https://cdn/new.png"
        assert editor.attachments == []

    def test_attachment_uploads_keep_insertion_order(self):
        editor = ArticleEditor()

        editor.apply_upload(Attachment(url="https://cdn/1.pdf", filename="1.pdf"))
        editor.apply_upload(Attachment(url="https://cdn/2.pdf", filename="2.pdf"))

        assert [a.filename for a in editor.attachments] == ["1.pdf", "2.pdf"]

    def test_remove_attachment_by_position(self):
        editor = ArticleEditor(
            attachments=[
                Attachment(url="https://cdn/1.pdf", filename="1.pdf"),
                Attachment(url="https://cdn/2.pdf", filename="2.pdf"),
            ]
        )

        removed = editor.remove_attachment(0)

        assert removed.filename == "1.pdf"
        assert [a.filename for a in editor.attachments] == ["2.pdf"]

    def test_remove_out_of_range(self):
        with pytest.raises(ArticleValidationError):
            ArticleEditor().remove_attachment(0)

    def test_to_update_trims_title_and_nulls_empty_image(self):
        editor = ArticleEditor(title="  Title  ", content="<p>x</p>")

        update = editor.to_update()

        assert update.title == "Title"
        assert update.featured_image_url is None
        assert "featured_image_url" in update.model_fields_set

    def test_blank_title_cannot_be_saved(self):
        with pytest.raises(ArticleValidationError):
            ArticleEditor(title="   ").to_update()

    def test_clear_featured_image(self):
        editor = ArticleEditor(featured_image_url="https://cdn/x.png")
        editor.clear_featured_image()
        assert editor.to_update().featured_image_url is None
