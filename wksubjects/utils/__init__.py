"""Utils module."""

from .helpers import ensure_dir
from .logger import setup_logger

__all__ = [
    'ensure_dir',
    'setup_logger',
]
