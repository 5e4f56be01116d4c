"""Ordering of issues by the date embedded in their PDF reference."""

import re
from collections.abc import Iterable

from schemas.metadata import Issue

DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})")

# Key for references without a date; sorts after every dated issue
FALLBACK_DATE_KEY = (0, 1, 1)


def extract_date_key(pdf: str) -> tuple[int, int, int]:
    """Extract a (year, month, day) sort key from a PDF reference.

    The first ``YYYY-MM-DD`` substring anywhere in the reference is used.

    Examples:
        >>> extract_date_key("issues/2024-06-10-summer.pdf")
        (2024, 6, 10)
        >>> extract_date_key("issues/summer.pdf")
        (0, 1, 1)
    """
    match = DATE_PATTERN.search(pdf)
    if match is None:
        return FALLBACK_DATE_KEY

    year, month, day = match.groups()
    return (_to_int(year, 0), _to_int(month, 1), _to_int(day, 1))


def _to_int(value: str, default: int) -> int:
    # \d also matches non-ASCII digits; only ASCII digits count as a date
    if not (value.isascii() and value.isdigit()):
        return default
    return int(value)


def sort_issues(issues: Iterable[Issue]) -> list[Issue]:
    """Return issues newest first.

    Issues with equal keys keep their input order.
    """
    return sorted(issues, key=lambda issue: extract_date_key(issue.pdf), reverse=True)
