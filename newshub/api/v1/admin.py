"""Admin endpoints: sign-in, dashboard and article editing.

Everything except login requires a bearer token issued by the auth service.
"""

from typing import Literal

from fastapi import APIRouter, Depends, File, Response, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from newshub.api.deps import get_access_token, get_current_author
from newshub.config import Settings, get_settings
from newshub.db.postgres import get_session as get_db
from newshub.db.storage import FileKind, ObjectStorage, get_storage
from newshub.schemas.article import (
    ArticleCard,
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
    Attachment,
    DashboardResponse,
)
from newshub.schemas.auth import AuthUser, LoginRequest, SessionResponse
from newshub.services import article_service
from newshub.services.auth_service import AuthClient, get_auth_client
from newshub.services.editor import ArticleEditor
from newshub.services.upload_service import check_size, upload_file

router = APIRouter()


def _max_bytes(kind: str, settings: Settings) -> int:
    return settings.max_image_bytes if kind == "image" else settings.max_attachment_bytes


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

@router.post("/login", response_model=SessionResponse)
async def login(
    credentials: LoginRequest,
    auth: AuthClient = Depends(get_auth_client),
) -> SessionResponse:
    """Sign in with email and password."""
    return await auth.sign_in(credentials.email, credentials.password)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    token: str = Depends(get_access_token),
    auth: AuthClient = Depends(get_auth_client),
) -> Response:
    await auth.sign_out(token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=AuthUser)
async def me(author: AuthUser = Depends(get_current_author)) -> AuthUser:
    return author


# ---------------------------------------------------------------------------
# Dashboard and CRUD
# ---------------------------------------------------------------------------

@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    author: AuthUser = Depends(get_current_author),
    db: AsyncSession = Depends(get_db),
) -> DashboardResponse:
    """All articles, drafts included, with per-status counts."""
    articles = await article_service.list_articles(db, published_only=False)
    return DashboardResponse(
        articles=[ArticleCard.from_model(a) for a in articles],
        stats=article_service.dashboard_stats(articles),
    )


@router.post("/articles", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    article_in: ArticleCreate,
    author: AuthUser = Depends(get_current_author),
    db: AsyncSession = Depends(get_db),
) -> ArticleResponse:
    article = await article_service.create_article(db, article_in, author_id=author.id)
    return ArticleResponse.from_model(article)


@router.get("/articles/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    author: AuthUser = Depends(get_current_author),
    db: AsyncSession = Depends(get_db),
) -> ArticleResponse:
    """Load any article, whatever its status, into the editor."""
    article = await article_service.get_article(db, article_id)
    return ArticleResponse.from_model(article)


@router.patch("/articles/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: str,
    changes: ArticleUpdate,
    author: AuthUser = Depends(get_current_author),
    db: AsyncSession = Depends(get_db),
) -> ArticleResponse:
    article = await article_service.update_article(db, article_id, changes, author_id=author.id)
    return ArticleResponse.from_model(article)


@router.delete("/articles/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: str,
    author: AuthUser = Depends(get_current_author),
    db: AsyncSession = Depends(get_db),
) -> Response:
    await article_service.delete_article(db, article_id, author_id=author.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---------------------------------------------------------------------------
# Uploads
# ---------------------------------------------------------------------------

async def _store(
    storage: ObjectStorage,
    file: UploadFile,
    kind: FileKind,
    max_bytes: int,
) -> Attachment:
    filename = file.filename or kind
    # The declared size is known before the body is read
    if file.size is not None:
        check_size(file.size, max_bytes, filename, kind)
    data = await file.read()
    return await upload_file(
        storage,
        data,
        filename=filename,
        kind=kind,
        max_bytes=max_bytes,
        content_type=file.content_type,
    )


@router.post("/uploads/{kind}", response_model=Attachment, status_code=status.HTTP_201_CREATED)
async def upload(
    kind: Literal["image", "attachment"],
    file: UploadFile = File(...),
    author: AuthUser = Depends(get_current_author),
    storage: ObjectStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> Attachment:
    """Store a file for an article that hasn't been saved yet."""
    return await _store(storage, file, kind, _max_bytes(kind, settings))


async def _open_editor(db: AsyncSession, article_id: str, author: AuthUser) -> ArticleEditor:
    article = await article_service.get_article(db, article_id)
    article_service.check_owner(article, author.id)
    return ArticleEditor.for_article(article)


async def _save_editor(
    db: AsyncSession, article_id: str, editor: ArticleEditor, author: AuthUser
) -> ArticleResponse:
    article = await article_service.update_article(
        db, article_id, editor.to_update(), author_id=author.id
    )
    return ArticleResponse.from_model(article)


@router.post("/articles/{article_id}/attachments", response_model=ArticleResponse)
async def add_attachment(
    article_id: str,
    file: UploadFile = File(...),
    author: AuthUser = Depends(get_current_author),
    db: AsyncSession = Depends(get_db),
    storage: ObjectStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> ArticleResponse:
    """Upload a file and append it to the article's downloads."""
    editor = await _open_editor(db, article_id, author)
    attachment = await _store(storage, file, "attachment", settings.max_attachment_bytes)
    editor.apply_upload(attachment)
    return await _save_editor(db, article_id, editor, author)


@router.delete("/articles/{article_id}/attachments/{index}", response_model=ArticleResponse)
async def remove_attachment(
    article_id: str,
    index: int,
    author: AuthUser = Depends(get_current_author),
    db: AsyncSession = Depends(get_db),
) -> ArticleResponse:
    editor = await _open_editor(db, article_id, author)
    editor.remove_attachment(index)
    return await _save_editor(db, article_id, editor, author)


@router.put("/articles/{article_id}/featured-image", response_model=ArticleResponse)
async def set_featured_image(
    article_id: str,
    file: UploadFile = File(...),
    author: AuthUser = Depends(get_current_author),
    db: AsyncSession = Depends(get_db),
    storage: ObjectStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> ArticleResponse:
    editor = await _open_editor(db, article_id, author)
    image = await _store(storage, file, "image", settings.max_image_bytes)
    editor.apply_upload(image)
    return await _save_editor(db, article_id, editor, author)


@router.delete("/articles/{article_id}/featured-image", response_model=ArticleResponse)
async def clear_featured_image(
    article_id: str,
    author: AuthUser = Depends(get_current_author),
    db: AsyncSession = Depends(get_db),
) -> ArticleResponse:
    editor = await _open_editor(db, article_id, author)
    editor.clear_featured_image()
    return await _save_editor(db, article_id, editor, author)
