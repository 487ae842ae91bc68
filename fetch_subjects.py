"""
wksubjects: Subject collection downloader
------------------------------------------

Walks the subjects collection and writes every record to a JSON Lines file.
"""

import argparse
import asyncio
import logging
import os
import sys

from wksubjects.config import Config
from wksubjects.exceptions import SubjectClientError
from wksubjects.models import SubjectType
from wksubjects.services import SubjectExporter, SubjectQuery, SubjectService
from wksubjects.utils import setup_logger

logger = logging.getLogger("fetch_subjects")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Download subjects as JSON Lines.")
    parser.add_argument(
        "--type", dest="types", action="append", default=[],
        choices=[t.value for t in SubjectType],
        help="Subject type to include (repeatable)",
    )
    parser.add_argument(
        "--level", dest="levels", action="append", type=int, default=[],
        help="Level to include (repeatable)",
    )
    parser.add_argument("--updated-after", help="Only subjects updated after this ISO-8601 time")
    parser.add_argument(
        "--output", default=os.path.join(Config.OUTPUT_DIR, "subjects.jsonl"),
        help="Output file (default: %(default)s)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every page fetch")
    return parser.parse_args(argv)


async def main(argv=None) -> bool:
    """Main entry point."""
    args = parse_args(argv)
    setup_logger(level="DEBUG" if args.verbose else None)

    try:
        query = SubjectQuery(
            types=args.types,
            levels=args.levels,
            updated_after=args.updated_after,
        )
    except ValueError as e:
        logger.error("Invalid query: %s", e)
        return False

    try:
        async with SubjectService() as service:
            exporter = SubjectExporter(args.output)
            count = await exporter.export(service.iter_subjects(query))
    except SubjectClientError as e:
        logger.error("Download failed: %s", e)
        if e.__cause__ is not None:
            logger.error("Caused by: %r", e.__cause__)
        return False

    logger.info("Saved %d subjects to %s", count, args.output)
    return True


if __name__ == "__main__":
    try:
        success = asyncio.run(main())
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        logger.warning("Aborted by user.")
        sys.exit(1)
