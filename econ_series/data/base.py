"""Shared HTTP plumbing for the API fetchers."""

import logging

import httpx

from econ_series.config import Settings
from econ_series.errors import RemoteServiceError


logger = logging.getLogger(__name__)


class BaseFetcher:
    """Lazy httpx client, context management and JSON request helpers.

    Subclasses set ``API`` to the credential family they need; the key is
    checked at construction so a missing credential fails before any request.
    """

    API: str = ""

    def __init__(
        self, settings: Settings | None = None, client: httpx.Client | None = None
    ) -> None:
        self.settings = settings or Settings()
        self.api_key = self.settings.require(self.API)
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.settings.http_timeout)
            self._owns_client = True
        return self._client

    def close(self) -> None:
        """Close HTTP client if we created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "BaseFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _request_json(self, method: str, url: str, **kwargs) -> dict:
        """Issue one request and decode a JSON object body.

        Any transport failure, non-2xx status or non-object body is raised as
        RemoteServiceError. No retries.
        """
        try:
            response = self.client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"{method} {url} failed with HTTP {status}")
            raise RemoteServiceError(
                f"{self.API.upper()} API returned HTTP {status}", status_code=status
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise RemoteServiceError(f"{self.API.upper()} API request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteServiceError(
                f"{self.API.upper()} API returned invalid JSON",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise RemoteServiceError(
                f"{self.API.upper()} API returned {type(data).__name__}, expected an object",
                status_code=response.status_code,
            )
        return data
