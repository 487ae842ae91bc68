"""wksubjects - Async client for paginated vocabulary subject collections"""

__version__ = "1.0.0"

from .config import Config
from .exceptions import (
    ApiResponseError,
    ConfigurationError,
    FetchError,
    PaginationCycle,
    SchemaMismatch,
    SubjectClientError,
)
from .models import Page, Subject, SubjectType
from .fetchers import ApiPageFetcher, BasePageFetcher
from .pagination import CollectionWalker, collect, walk
from .services import SubjectExporter, SubjectQuery, SubjectService

__all__ = [
    'Config',
    'ApiResponseError',
    'ConfigurationError',
    'FetchError',
    'PaginationCycle',
    'SchemaMismatch',
    'SubjectClientError',
    'Page',
    'Subject',
    'SubjectType',
    'ApiPageFetcher',
    'BasePageFetcher',
    'CollectionWalker',
    'collect',
    'walk',
    'SubjectExporter',
    'SubjectQuery',
    'SubjectService',
]
