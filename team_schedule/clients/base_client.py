from typing import Any, Dict, Optional

import httpx
from loguru import logger

from team_schedule.config.settings import settings
from team_schedule.models.errors import TransportError


class BaseClient:
    """Synchronous JSON-over-HTTP client shared by the API collaborators."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = (base_url or settings.nhl_api_base_url).rstrip("/")
        self.client = client or httpx.Client(
            timeout=httpx.Timeout(settings.request_timeout),
            follow_redirects=True,
            headers={
                "User-Agent": settings.user_agent,
                "Accept": "application/json",
            },
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _make_request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Makes one HTTP request; no retries.

        Raises:
            TransportError: on a non-2xx status or when no response arrives.
        """
        url = self._url(path)
        logger.debug(f"Making request {method} {url} params={params}")
        try:
            response = self.client.request(method, url, params=params)
        except httpx.RequestError as e:
            logger.error(f"Request error for {method} {url}: {e}")
            raise TransportError(url, None, str(e) or type(e).__name__) from e

        if not response.is_success:
            description = self._describe_failure(response)
            logger.error(
                f"HTTP error for {method} {response.url}: {response.status_code} - {description}"
            )
            raise TransportError(str(response.url), response.status_code, description)

        logger.debug(f"Request successful: {response.status_code} for {response.url}")
        return response

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = self._make_request("GET", path, params=params)
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {response.url}: {e}")
            raise TransportError(
                str(response.url), response.status_code, f"Invalid JSON body: {e}"
            ) from e

    @staticmethod
    def _describe_failure(response: httpx.Response) -> str:
        """Prefers the API's own error message over the HTTP reason phrase."""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return response.reason_phrase or "Unknown error"

    def close(self) -> None:
        """Closes the underlying HTTP client."""
        self.client.close()
        logger.debug(f"Closed HTTP client for {self.base_url}")

    def __enter__(self) -> "BaseClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
