"""API page fetcher - GET collection pages over aiohttp."""

import asyncio
import logging
from typing import Optional

import aiohttp

from ..config import Config
from ..exceptions import ApiResponseError, ConfigurationError
from ..models import Page
from .base import BasePageFetcher

logger = logging.getLogger(__name__)


class ApiPageFetcher(BasePageFetcher):
    """
    Fetch collection pages from the API with session pooling.

    Sends the bearer token and API revision headers on every request. No
    retry or rate-limit handling: a failed request raises and the caller
    decides what to do.
    """

    def __init__(
        self,
        api_token: Optional[str] = None,
        revision: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        """
        Initialize API fetcher.

        Args:
            api_token: Personal API token (defaults to Config.WANIKANI_API_TOKEN)
            revision: API revision header (defaults to Config.WANIKANI_API_REVISION)
            timeout: Total request timeout in seconds (defaults to Config.TIMEOUT)
        """
        self.api_token = api_token if api_token is not None else Config.WANIKANI_API_TOKEN
        self.revision = revision or Config.WANIKANI_API_REVISION
        self.timeout = timeout or Config.TIMEOUT
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_lock = asyncio.Lock()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create a shared aiohttp session (connection pooling)."""
        async with self._session_lock:
            if self._session is None or self._session.closed:
                if not self.api_token:
                    raise ConfigurationError(
                        "No API token configured - set WANIKANI_API_TOKEN"
                    )
                headers = {
                    "Authorization": f"Bearer {self.api_token}",
                    "Wanikani-Revision": self.revision,
                    "User-Agent": Config.USER_AGENT,
                }
                self._session = aiohttp.ClientSession(
                    headers=headers,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                )
            return self._session

    async def close(self) -> None:
        """Close the aiohttp session. Call this when done with the fetcher."""
        async with self._session_lock:
            if self._session and not self._session.closed:
                await self._session.close()
            self._session = None

    async def fetch_page(self, url: str) -> Page:
        """
        GET one collection page and decode it.

        Raises:
            ApiResponseError: On any non-200 status
            SchemaMismatch: If the body does not match the page schema
            aiohttp.ClientError: On transport failures
        """
        session = await self._get_session()

        async with session.get(url) as response:
            if response.status != 200:
                body = await response.text()
                raise ApiResponseError(response.status, url, body[:200])
            raw = await response.read()

        logger.debug("Fetched %d bytes from %s", len(raw), url)
        return Page.from_json(raw)
