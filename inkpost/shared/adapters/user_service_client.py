"""
User service client - author profile lookups.

The blog service renders an author card next to every blog. Profiles live in
the user service, so they are fetched over HTTP from its public
`GET /api/v1/user/{id}` endpoint.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from inkpost.config.settings import settings
from inkpost.shared.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class UserServiceClient:
    """
    HTTP client for the user service.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: User service base URL
            http_client: Shared httpx client (tests inject a MockTransport)
        """
        self.base_url = (base_url or settings.USER_SERVICE_URL).rstrip("/")
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Lazy-loaded HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=settings.HTTP_CLIENT_TIMEOUT_SECONDS)
        return self._http_client

    async def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Fetch a public user profile.

        Args:
            user_id: User id as stored in blogs.author

        Returns:
            Profile dict, or None if the user does not exist

        Raises:
            ExternalServiceError: If the user service is unreachable or errors
        """
        url = f"{self.base_url}/api/v1/user/{user_id}"
        try:
            response = await self.http_client.get(url)
        except httpx.HTTPError as e:
            logger.error("User service request failed for %s: %s", user_id, e)
            raise ExternalServiceError("user-service", "Could not load author profile") from e

        if response.status_code == 404:
            return None
        if response.is_error:
            logger.error(
                "User service returned %s for %s", response.status_code, user_id
            )
            raise ExternalServiceError(
                "user-service",
                "Could not load author profile",
                details={"status_code": response.status_code},
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error("User service returned a non-JSON body for %s", user_id)
            raise ExternalServiceError("user-service", "Could not load author profile") from e

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None


_user_service_client: Optional[UserServiceClient] = None


def get_user_service_client() -> UserServiceClient:
    """Get or create user service client singleton."""
    global _user_service_client
    if _user_service_client is None:
        _user_service_client = UserServiceClient()
    return _user_service_client
