"""Export subjects to a JSON Lines file."""

import logging
import os
import uuid
from pathlib import Path
from typing import AsyncIterable, Union

import aiofiles

from ..models import Subject
from ..utils import ensure_dir

logger = logging.getLogger(__name__)


class SubjectExporter:
    """
    Write a stream of subjects as JSON Lines, one record per line.

    Uses atomic write pattern: the stream goes to a temp file that only
    replaces the target once it has been consumed completely. If the stream
    fails the temp file is removed, so the target never holds a partial
    collection.
    """

    def __init__(self, output_path: Union[str, Path]):
        self.output_path = Path(output_path)

    async def export(self, subjects: AsyncIterable[Subject]) -> int:
        """
        Consume subjects and write them out.

        Args:
            subjects: Async iterable of subjects, e.g. a collection walk

        Returns:
            Number of subjects written
        """
        ensure_dir(self.output_path.parent)
        temp_path = f"{self.output_path}.{uuid.uuid4().hex[:8]}.tmp"
        count = 0
        try:
            async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                async for subject in subjects:
                    await f.write(subject.model_dump_json() + "\n")
                    count += 1
            os.replace(temp_path, self.output_path)
        except BaseException:
            # Clean up temp file on failure
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

        logger.info("Exported %d subjects to %s", count, self.output_path)
        return count
