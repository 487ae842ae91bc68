"""
Collection Walker - lazy traversal of cursor-paginated collections.

Pages are fetched strictly one after another: the link to page N+1 is only
known once page N has arrived. Subjects are yielded as soon as their page is
decoded, so a consumer that stops early never triggers further requests.
"""

import logging
from typing import AsyncIterator, Awaitable, Callable, List, Set

from ..exceptions import FetchError, PaginationCycle, SchemaMismatch
from ..models import Page, Subject

logger = logging.getLogger(__name__)

PageFetch = Callable[[str], Awaitable[Page]]


class CollectionWalker:
    """
    Walk every page of a collection through an injected fetch capability.

    Usage:
        walker = CollectionWalker(fetcher)
        async for subject in walker.walk(url):
            ...

    The walker holds no state shared between traversals; the counters only
    describe the most recent walk.
    """

    def __init__(self, fetch_page: PageFetch):
        """
        Args:
            fetch_page: Async callable turning a page URL into a decoded Page
        """
        self.fetch_page = fetch_page
        self.fetch_count = 0
        self.pages_walked = 0

    async def _fetch(self, url: str, page_index: int) -> Page:
        self.fetch_count += 1
        logger.debug("Fetching page %d: %s", page_index, url)
        try:
            return await self.fetch_page(url)
        except SchemaMismatch as e:
            e.page_index = page_index
            e.url = url
            logger.warning("Page %d does not match schema: %s", page_index, url)
            raise
        except Exception as e:
            logger.warning("Page %d fetch failed (%s): %s", page_index, e, url)
            raise FetchError(page_index, url) from e

    async def walk(self, initial_url: str) -> AsyncIterator[Subject]:
        """
        Yield every subject of the collection starting at initial_url.

        Subjects come out in page order, each page's internal order kept.
        Duplicates across pages are passed through unchanged.

        Raises:
            FetchError: The fetch capability failed for a page
            SchemaMismatch: A page payload did not decode
            PaginationCycle: A next-page link revisits a fetched URL
        """
        self.fetch_count = 0
        self.pages_walked = 0
        seen: Set[str] = set()
        url = initial_url
        page_index = 0
        total = 0

        while True:
            if url in seen:
                logger.warning("Pagination cycle at page %d: %s", page_index, url)
                raise PaginationCycle(url, page_index)
            seen.add(url)

            page = await self._fetch(url, page_index)
            self.pages_walked += 1

            for subject in page.data:
                total += 1
                yield subject

            if not page.has_next:
                break
            url = page.next_link
            page_index += 1

        logger.info("Walked %d pages, %d subjects", self.pages_walked, total)


def walk(fetch_page: PageFetch, initial_url: str) -> AsyncIterator[Subject]:
    """Shorthand for ``CollectionWalker(fetch_page).walk(initial_url)``."""
    return CollectionWalker(fetch_page).walk(initial_url)


async def collect(fetch_page: PageFetch, initial_url: str) -> List[Subject]:
    """
    Buffer a whole traversal into a list.

    If the walk fails nothing is returned; the partial buffer is dropped and
    the error propagates.
    """
    return [subject async for subject in walk(fetch_page, initial_url)]
