"""Client for the external auth service that owns admin accounts."""

import logging
from typing import Any

import httpx

from newshub.config import Settings, get_settings
from newshub.exceptions import AuthenticationError, RemoteOperationError
from newshub.schemas.auth import AuthUser, SessionResponse

logger = logging.getLogger(__name__)


class AuthClient:
    """Password sign-in and token introspection against the auth REST API."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self.http_client = httpx.AsyncClient(
            base_url=self.settings.auth_url.rstrip("/"),
            timeout=10.0,
            headers={"apikey": self.settings.auth_api_key},
            transport=transport,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self.http_client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.exception("Auth service request %s %s failed", method, path)
            raise RemoteOperationError("Authentication service unavailable") from e

        if response.status_code in (400, 401, 403, 422):
            raise AuthenticationError("Invalid credentials")
        if response.is_error:
            logger.warning(
                "Auth service returned %s for %s %s", response.status_code, method, path
            )
            raise RemoteOperationError("Authentication service unavailable")
        return response

    async def sign_in(self, email: str, password: str) -> SessionResponse:
        """Exchange email/password for an access token."""
        response = await self._request(
            "POST",
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        data = response.json()
        return SessionResponse(
            access_token=data["access_token"],
            token_type=data.get("token_type", "bearer"),
            expires_in=data.get("expires_in"),
            user=AuthUser(id=str(data["user"]["id"]), email=data["user"].get("email")),
        )

    async def get_user(self, access_token: str) -> AuthUser:
        """Resolve the user an access token belongs to."""
        response = await self._request(
            "GET", "/user", headers={"Authorization": f"Bearer {access_token}"}
        )
        data = response.json()
        return AuthUser(id=str(data["id"]), email=data.get("email"))

    async def sign_out(self, access_token: str) -> None:
        await self._request(
            "POST", "/logout", headers={"Authorization": f"Bearer {access_token}"}
        )

    async def close(self) -> None:
        await self.http_client.aclose()


_auth_client: AuthClient | None = None


def get_auth_client() -> AuthClient:
    """Dependency returning the shared auth client."""
    global _auth_client
    if _auth_client is None:
        _auth_client = AuthClient()
    return _auth_client
