"""Pagination module."""

from .walker import CollectionWalker, PageFetch, collect, walk

__all__ = ['CollectionWalker', 'PageFetch', 'collect', 'walk']
