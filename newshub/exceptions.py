"""Domain errors raised by services and translated to HTTP responses by the API."""


class NewsHubError(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ArticleValidationError(NewsHubError):
    """Article input rejected before any remote call."""


class ArticleNotFoundError(NewsHubError):
    """Article does not exist, or is not visible to the caller."""

    def __init__(self, article_id: str) -> None:
        super().__init__("Article not found")
        self.article_id = article_id


class UploadTooLargeError(NewsHubError):
    """File exceeds the caller-supplied size ceiling."""

    def __init__(self, size: int, max_bytes: int) -> None:
        megabytes = round(max_bytes / (1024 * 1024))
        super().__init__(f"File size must be less than {megabytes}MB")
        self.size = size
        self.max_bytes = max_bytes


class AuthenticationError(NewsHubError):
    """Credentials or token rejected by the auth service."""


class RemoteOperationError(NewsHubError):
    """A call to the database, object store or auth service failed."""


class PermissionDeniedError(NewsHubError):
    """Signed-in author does not own the article."""
