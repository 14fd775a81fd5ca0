"""Read-only client for the Contentful Content Management API."""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from ..config import CMA_BASE_URL, CMA_CONTENT_TYPE, Settings
from .retry import make_request_with_retry
from .urls import get_entry_url, get_environment_url, get_locales_url, get_space_url

logger = logging.getLogger(__name__)


class ContentfulError(Exception):
    """Raised when the API answers with a non-success status."""

    def __init__(self, status_code: int, url: str, body: Any = None):
        self.status_code = status_code
        self.url = url
        self.body = body
        super().__init__(f"Contentful API returned {status_code} for {url}")


@dataclass(frozen=True)
class FetchedEntry:
    """Raw payloads needed for one analysis run."""

    space_name: str | None
    environment_id: str
    locales: Any
    entry: Any


class ContentfulClient:
    """
    Minimal CMA client covering the requests the analyzer needs.

    Use as a context manager so the underlying httpx client is closed.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = CMA_BASE_URL,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self._client = httpx.Client(timeout=timeout, follow_redirects=True)
        self._headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": CMA_CONTENT_TYPE,
        }

    def __enter__(self) -> "ContentfulClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get_json(self, url: str) -> Any:
        """
        GET a CMA resource and decode its JSON body.

        Raises:
            ContentfulError: For any non-200 response after retries
        """
        response = make_request_with_retry(self._client, url, headers=self._headers)

        if response.status_code != 200:
            raise ContentfulError(response.status_code, url, _response_body(response))

        return response.json()

    def get_space(self, space_id: str) -> dict[str, Any]:
        return self.get_json(get_space_url(space_id, self.base_url))

    def get_environment(self, space_id: str, environment_id: str) -> dict[str, Any]:
        return self.get_json(get_environment_url(space_id, environment_id, self.base_url))

    def get_locales(self, space_id: str, environment_id: str) -> dict[str, Any]:
        return self.get_json(get_locales_url(space_id, environment_id, self.base_url))

    def get_entry(self, space_id: str, environment_id: str, entry_id: str) -> dict[str, Any]:
        return self.get_json(get_entry_url(space_id, environment_id, entry_id, self.base_url))


def _response_body(response: httpx.Response) -> Any:
    """Decode an error body as JSON when possible, else return its text."""
    try:
        return response.json()
    except ValueError:
        return response.text


def fetch_entry(settings: Settings) -> FetchedEntry:
    """
    Fetch the space, environment locales and entry named by settings.

    Args:
        settings: Settings with access token, space and entry ids

    Returns:
        FetchedEntry with raw payloads

    Raises:
        ContentfulError: If any request fails with a non-success status
        httpx.TransportError: If the network fails after retries
    """
    with ContentfulClient(settings.access_token, base_url=settings.base_url) as client:
        logger.info("Connecting to Contentful...")
        space = client.get_space(settings.space_id)
        space_name = space.get("name") if isinstance(space, dict) else None
        logger.info("Space: %s", space_name or settings.space_id)

        environment = client.get_environment(settings.space_id, settings.environment_id)
        sys_data = environment.get("sys") if isinstance(environment, dict) else None
        environment_id = sys_data.get("id") if isinstance(sys_data, dict) else None
        environment_id = environment_id or settings.environment_id
        logger.info("Environment: %s", environment_id)

        logger.info("Fetching locales...")
        locales = client.get_locales(settings.space_id, settings.environment_id)
        items = locales.get("items") if isinstance(locales, dict) else locales
        logger.info("Found %d locales in the space", len(items) if isinstance(items, list) else 0)

        logger.info("Fetching entry: %s", settings.entry_id)
        entry = client.get_entry(settings.space_id, settings.environment_id, settings.entry_id)

    return FetchedEntry(
        space_name=space_name,
        environment_id=environment_id,
        locales=locales,
        entry=entry,
    )
