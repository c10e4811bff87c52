"""Page and range slicing of ordered results.

Both parsers return a slice spec with a usable fallback already in it:
non-numeric pages become page 1, pages at or below zero become an empty
slice, and an unparseable range falls back to page mode.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, TypeVar, Union

import structlog

logger = structlog.get_logger(__name__)

PAGE_SIZE = 10

_RANGE_REGEX = re.compile(r"^\[\s*(?P<start>\d+)\s*,\s*(?P<end>\d+)\s*\]$")

T = TypeVar("T")


@dataclass(frozen=True)
class SliceSpec:
    """Half-open ``[start, stop)`` window into the ordered results."""

    start: int
    stop: int
    mode: str
    malformed: bool = False

    @property
    def cache_key(self) -> str:
        return f"{self.start}:{self.stop}"

    def apply(self, items: Sequence[T]) -> List[T]:
        """Slice ``items``; windows past the end give an empty list."""
        if self.stop <= self.start:
            return []
        return list(items[self.start:self.stop])


EMPTY_PAGE = SliceSpec(start=0, stop=0, mode="page")


def parse_page(raw: Optional[Union[int, str]]) -> SliceSpec:
    """
    Parse a 1-indexed page number.

    Args:
        raw: Page value as received, or None for the first page

    Returns:
        SliceSpec covering ``[(page - 1) * 10, page * 10)``
    """
    if raw is None:
        return page_slice(1)

    try:
        page = int(str(raw).strip())
    except ValueError:
        logger.debug("Non-numeric page, using first page", raw=raw)
        return page_slice(1, malformed=True)

    if page <= 0:
        return EMPTY_PAGE

    return page_slice(page)


def page_slice(page: int, malformed: bool = False) -> SliceSpec:
    start = (page - 1) * PAGE_SIZE
    return SliceSpec(start=start, stop=start + PAGE_SIZE, mode="page", malformed=malformed)


def parse_range(raw: Optional[str], page: Optional[Union[int, str]] = None) -> SliceSpec:
    """
    Parse a closed, zero-based index interval such as ``[10,19]``.

    At most PAGE_SIZE items are returned whatever the span. An inverted
    interval is a valid request for nothing. Anything unparseable falls
    back to page mode with ``page``.

    Args:
        raw: Range value as received
        page: Page value to fall back on

    Returns:
        SliceSpec for the range, or for the fallback page
    """
    if raw is None:
        return parse_page(page)

    match = _RANGE_REGEX.match(str(raw).strip())
    if not match:
        logger.debug("Malformed range, falling back to page mode", raw=raw, page=page)
        fallback = parse_page(page)
        return SliceSpec(start=fallback.start, stop=fallback.stop, mode="page", malformed=True)

    start = int(match.group("start"))
    end = int(match.group("end"))
    if end < start:
        return SliceSpec(start=start, stop=start, mode="range")

    stop = min(end + 1, start + PAGE_SIZE)
    return SliceSpec(start=start, stop=stop, mode="range")


def parse_pagination(
    page: Optional[Union[int, str]] = None,
    range_: Optional[str] = None
) -> SliceSpec:
    """Pick range mode when a range was given, page mode otherwise."""
    if range_ is not None:
        return parse_range(range_, page)
    return parse_page(page)
