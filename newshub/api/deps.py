"""Shared FastAPI dependencies."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from newshub.exceptions import AuthenticationError
from newshub.schemas.auth import AuthUser
from newshub.services.auth_service import AuthClient, get_auth_client

bearer_scheme = HTTPBearer(auto_error=False)


async def get_access_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """Bearer token from the Authorization header."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Sign in required")
    return credentials.credentials


async def get_current_author(
    token: str = Depends(get_access_token),
    auth: AuthClient = Depends(get_auth_client),
) -> AuthUser:
    """Signed-in author resolved through the auth service."""
    return await auth.get_user(token)
