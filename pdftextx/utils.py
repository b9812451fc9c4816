"""Utility helpers for pdftextx."""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, List

from .exceptions import InvalidRangeError, PageOutOfBoundsError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


@contextmanager
def time_block(logger: logging.Logger, message: str) -> Iterator[None]:
    """Context manager that logs the execution time of a code block."""
    start = datetime.now(tz=timezone.utc)
    logger.debug("Starting %s", message)
    try:
        yield
    finally:
        end = datetime.now(tz=timezone.utc)
        elapsed = (end - start).total_seconds()
        logger.info("%s completed in %.2fs", message, elapsed)


def parse_page_spec(page_spec: str) -> List[int]:
    """Parse ``"1,3-5"`` into sorted unique zero-based page indices."""

    if not page_spec or not page_spec.strip():
        raise InvalidRangeError("Page specification cannot be empty")

    pages: set[int] = set()
    for token in page_spec.split(","):
        token = token.strip()
        if "-" in token:
            match = re.match(r"^(\d+)-(\d+)$", token)
            if not match:
                raise InvalidRangeError(
                    f"Invalid page range format: '{token}'. Expected 'start-end'."
                )

            start = int(match.group(1))
            end = int(match.group(2))
            if start > end:
                raise InvalidRangeError(
                    f"Invalid range '{token}': start page ({start}) must be <= end page ({end})."
                )
            if start < 1:
                raise PageOutOfBoundsError(
                    f"Invalid range '{token}': page numbers must be >= 1."
                )

            pages.update(range(start, end + 1))
        else:
            if not token.isdigit():
                raise InvalidRangeError(
                    f"Invalid page number: '{token}'. Expected a positive integer."
                )

            page_num = int(token)
            if page_num < 1:
                raise PageOutOfBoundsError(
                    f"Invalid page number: {page_num}. Page numbers must be >= 1."
                )

            pages.add(page_num)

    return [page - 1 for page in sorted(pages)]
