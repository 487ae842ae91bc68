"""Base page fetcher class."""

from abc import ABC, abstractmethod

from ..models import Page


class BasePageFetcher(ABC):
    """
    Abstract base class for page fetchers.

    A page fetcher is the capability the collection walker is given: turn a
    page URL into a decoded Page. Instances are callable so they can be
    injected into the walker directly.

    Provides lifecycle management and async context manager support.
    Subclasses should implement fetch_page() and optionally override close().
    """

    @abstractmethod
    async def fetch_page(self, url: str) -> Page:
        """
        Fetch and decode one page.

        Args:
            url: Absolute URL of the page

        Returns:
            The decoded page

        Raises:
            SchemaMismatch: If the payload does not match the schema
        """
        pass

    async def close(self) -> None:
        """
        Close any open resources (sessions, connections, etc.).

        Subclasses should override this to clean up their resources.
        """
        pass

    async def __call__(self, url: str) -> Page:
        return await self.fetch_page(url)

    async def __aenter__(self) -> "BasePageFetcher":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - ensure resources are closed."""
        await self.close()
