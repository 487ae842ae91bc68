"""Utility functions."""

from pathlib import Path
from typing import Union


def ensure_dir(path: Union[str, Path]) -> None:
    """Ensure directory exists."""
    Path(path).mkdir(parents=True, exist_ok=True)
