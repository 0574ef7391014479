"""
Google OAuth adapter - authorization code exchange.

Provides:
- Code → access token exchange against Google's token endpoint
- Userinfo lookup (email, name, picture)

The frontend runs Google's popup flow and posts the resulting authorization
code to the user service, which calls this adapter. Whatever Google reports
as the email is the user's identity here.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from inkpost.config.settings import settings
from inkpost.shared.core.exceptions import AuthenticationError, ExternalServiceError

logger = logging.getLogger(__name__)


@dataclass
class GoogleProfile:
    """Identity returned by Google's userinfo endpoint."""

    email: str
    name: str
    picture: str


class GoogleOAuthAdapter:
    """
    Adapter for Google's OAuth 2.0 endpoints.
    """

    TOKEN_URL = "https://oauth2.googleapis.com/token"
    USERINFO_URL = "https://www.googleapis.com/oauth2/v2/userinfo"

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        redirect_uri: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize Google OAuth adapter.

        Args:
            client_id: OAuth client id
            client_secret: OAuth client secret
            redirect_uri: Redirect URI used when the code was issued
            http_client: Shared httpx client (tests inject a MockTransport)
        """
        self.client_id = client_id or settings.GOOGLE_CLIENT_ID
        self.client_secret = client_secret or settings.GOOGLE_CLIENT_SECRET
        self.redirect_uri = redirect_uri or settings.GOOGLE_REDIRECT_URI
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Lazy-loaded HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=settings.HTTP_CLIENT_TIMEOUT_SECONDS)
        return self._http_client

    async def exchange_code(self, code: str) -> GoogleProfile:
        """
        Exchange an authorization code for the signed-in user's profile.

        Args:
            code: Authorization code from the frontend

        Returns:
            GoogleProfile of the user

        Raises:
            AuthenticationError: If Google rejects the code
            ExternalServiceError: If Google cannot be reached or misbehaves
        """
        try:
            token_response = await self.http_client.post(
                self.TOKEN_URL,
                data={
                    "code": code,
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                    "redirect_uri": self.redirect_uri,
                    "grant_type": "authorization_code",
                },
            )
        except httpx.HTTPError as e:
            logger.error("Google token exchange failed: %s", e)
            raise ExternalServiceError("Google", "Could not reach identity provider") from e

        if token_response.status_code in (400, 401):
            logger.warning("Google rejected authorization code: %s", token_response.text[:200])
            raise AuthenticationError("Invalid authorization code")
        if token_response.is_error:
            raise ExternalServiceError(
                "Google",
                details={"status_code": token_response.status_code},
            )

        access_token = token_response.json().get("access_token")
        if not access_token:
            raise AuthenticationError("Identity provider returned no access token")

        return await self.fetch_profile(access_token)

    async def fetch_profile(self, access_token: str) -> GoogleProfile:
        """
        Fetch the userinfo profile for an access token.

        Raises:
            AuthenticationError: If the token is rejected or has no email
            ExternalServiceError: If Google cannot be reached
        """
        try:
            response = await self.http_client.get(
                self.USERINFO_URL,
                headers={"Authorization": f"Bearer {access_token}"},
            )
        except httpx.HTTPError as e:
            logger.error("Google userinfo request failed: %s", e)
            raise ExternalServiceError("Google", "Could not reach identity provider") from e

        if response.status_code == 401:
            raise AuthenticationError("Identity provider rejected access token")
        if response.is_error:
            raise ExternalServiceError("Google", details={"status_code": response.status_code})

        data = response.json()
        email = data.get("email")
        if not email:
            raise AuthenticationError("Identity provider returned no email")

        return GoogleProfile(
            email=email,
            name=data.get("name") or email.split("@")[0],
            picture=data.get("picture") or "",
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None


_google_adapter: Optional[GoogleOAuthAdapter] = None


def get_google_oauth_adapter() -> GoogleOAuthAdapter:
    """Get or create Google OAuth adapter singleton."""
    global _google_adapter
    if _google_adapter is None:
        _google_adapter = GoogleOAuthAdapter()
    return _google_adapter
