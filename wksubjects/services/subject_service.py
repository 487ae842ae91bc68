"""
Subject Service - query building and full-collection traversal.

Ties a page fetcher to the collection walker so callers can ask for
"all kanji on levels 1-3" or "everything updated since T" without dealing
with URLs or page boundaries.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import AsyncIterator, Callable, List, Optional, Union
from urllib.parse import urlencode

from ..config import Config
from ..fetchers import ApiPageFetcher, BasePageFetcher
from ..models import Subject, SubjectType
from ..pagination import CollectionWalker

logger = logging.getLogger(__name__)

MAX_LEVEL = 60


def _format_timestamp(value: Union[datetime, str]) -> str:
    """Render a timestamp filter as ISO-8601 UTC."""
    if isinstance(value, str):
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


@dataclass
class SubjectQuery:
    """Filters for the subjects collection endpoint."""

    ids: List[int] = field(default_factory=list)
    types: List[SubjectType] = field(default_factory=list)
    slugs: List[str] = field(default_factory=list)
    levels: List[int] = field(default_factory=list)
    hidden: Optional[bool] = None
    updated_after: Optional[Union[datetime, str]] = None

    def __post_init__(self):
        for level in self.levels:
            if not 1 <= level <= MAX_LEVEL:
                raise ValueError(f"Level must be between 1 and {MAX_LEVEL}, got {level}")
        for subject_id in self.ids:
            if subject_id <= 0:
                raise ValueError(f"Subject IDs must be positive, got {subject_id}")
        self.types = [SubjectType(t) for t in self.types]

    def params(self) -> dict:
        """Query string parameters, empty filters omitted."""
        params = {}
        if self.ids:
            params["ids"] = ",".join(str(i) for i in self.ids)
        if self.types:
            params["types"] = ",".join(t.value for t in self.types)
        if self.slugs:
            params["slugs"] = ",".join(self.slugs)
        if self.levels:
            params["levels"] = ",".join(str(level) for level in self.levels)
        if self.hidden is not None:
            params["hidden"] = "true" if self.hidden else "false"
        if self.updated_after is not None:
            params["updated_after"] = _format_timestamp(self.updated_after)
        return params

    def to_url(self, base_url: str) -> str:
        """Build the URL of the first page for this query."""
        url = f"{base_url.rstrip('/')}/subjects"
        params = self.params()
        if params:
            url += "?" + urlencode(params, safe=",:")
        return url


class SubjectService:
    """
    Service for reading subjects from the API.

    Usage:
        async with SubjectService() as service:
            kanji = await service.get_all(SubjectQuery(types=[SubjectType.KANJI]))
    """

    def __init__(
        self,
        fetcher: Optional[BasePageFetcher] = None,
        base_url: Optional[str] = None,
    ):
        """
        Initialize subject service.

        Args:
            fetcher: Page fetcher to use (an ApiPageFetcher is created if None)
            base_url: API root URL (defaults to Config.WANIKANI_API_URL)
        """
        self._owns_fetcher = fetcher is None
        self.fetcher = fetcher or ApiPageFetcher()
        self.base_url = base_url or Config.WANIKANI_API_URL

    def url_for(self, query: Optional[SubjectQuery] = None) -> str:
        return (query or SubjectQuery()).to_url(self.base_url)

    def iter_subjects(self, query: Optional[SubjectQuery] = None) -> AsyncIterator[Subject]:
        """Lazily yield every subject matching the query."""
        url = self.url_for(query)
        logger.info("Walking subjects from %s", url)
        return CollectionWalker(self.fetcher).walk(url)

    async def get_all(self, query: Optional[SubjectQuery] = None) -> List[Subject]:
        """Fetch every matching subject. Raises instead of returning a partial list."""
        return [subject async for subject in self.iter_subjects(query)]

    async def find_first(
        self,
        predicate: Callable[[Subject], bool],
        query: Optional[SubjectQuery] = None,
    ) -> Optional[Subject]:
        """
        Return the first subject matching predicate, or None.

        Stops fetching as soon as a match is found.
        """
        subjects = self.iter_subjects(query)
        try:
            async for subject in subjects:
                if predicate(subject):
                    return subject
            return None
        finally:
            await subjects.aclose()

    async def close(self) -> None:
        """Close the fetcher if this service created it."""
        if self._owns_fetcher:
            await self.fetcher.close()

    async def __aenter__(self) -> "SubjectService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
