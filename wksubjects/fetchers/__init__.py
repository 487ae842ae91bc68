"""Fetchers module - page fetch capabilities for the collection walker."""

from .base import BasePageFetcher
from .api import ApiPageFetcher

__all__ = [
    'BasePageFetcher',
    'ApiPageFetcher',
]
