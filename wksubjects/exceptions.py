"""Exceptions raised while decoding and walking subject collections."""

from typing import Any, Dict, List, Optional


class SubjectClientError(Exception):
    """Base class for every error raised by wksubjects."""
    pass


class ConfigurationError(SubjectClientError):
    """Required configuration is missing or invalid."""
    pass


class SchemaMismatch(SubjectClientError):
    """
    A page payload does not match the record schema.

    Raised when a field is present with an incompatible type. The whole page
    fails; no field is silently defaulted.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        page_index: Optional[int] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.errors = errors or []
        self.page_index = page_index
        self.url = url

    def __str__(self) -> str:
        base = super().__str__()
        if self.page_index is None:
            return base
        return f"{base} (page {self.page_index}: {self.url})"


class FetchError(SubjectClientError):
    """Fetching one page failed. The original exception is ``__cause__``."""

    def __init__(self, page_index: int, url: str):
        super().__init__(f"Failed to fetch page {page_index}: {url}")
        self.page_index = page_index
        self.url = url


class PaginationCycle(SubjectClientError):
    """A next-page link points back to a page already fetched in this walk."""

    def __init__(self, url: str, page_index: int):
        super().__init__(
            f"Next-page link revisits {url} (would be page {page_index})"
        )
        self.url = url
        self.page_index = page_index


class ApiResponseError(SubjectClientError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, status: int, url: str, message: str = ""):
        text = f"API Error {status} for {url}"
        if message:
            text += f": {message}"
        super().__init__(text)
        self.status = status
        self.url = url
        self.message = message
