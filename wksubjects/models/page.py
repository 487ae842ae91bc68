"""Page envelope of a paginated collection response."""

from typing import List, Optional, Union

from pydantic import Field, StrictInt, StrictStr, ValidationError

from ..exceptions import SchemaMismatch
from .subject import Subject, WireModel


class PageSpec(WireModel):
    per_page: StrictInt = 0
    next_url: StrictStr = ""


class Page(WireModel):
    """
    One fetched page: pagination metadata plus its slice of subjects.

    A page has no identity beyond its position in a traversal.
    """

    pages: PageSpec = Field(default_factory=PageSpec)
    data: List[Subject] = Field(default_factory=list)

    @property
    def has_next(self) -> bool:
        """True if the API linked a following page."""
        return bool(self.pages.next_url)

    @property
    def next_link(self) -> Optional[str]:
        """Opaque URL of the following page, or None on the last page."""
        return self.pages.next_url if self.has_next else None

    @classmethod
    def from_json(cls, raw: Union[str, bytes]) -> "Page":
        """
        Decode one response body.

        Raises:
            SchemaMismatch: If the body is not valid JSON or any field has
                an incompatible type.
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise SchemaMismatch(
                f"Page payload does not match schema ({e.error_count()} errors)",
                errors=e.errors(include_url=False),
            ) from e
