"""
Date-range helpers shared by the record extractors.

Dates stay as the raw tokens found in the text ("01/2020", "março 2019",
"Present"); nothing here converts them to calendar values.
"""

from typing import Optional

from curriculo.contexts.parsing.extraction_patterns import DatePatterns
from curriculo.contexts.parsing.resume_data_structure import DateRange


def find_date_tokens(line: str) -> list[str]:
    """Return every date-like token of a line, left to right."""
    return [match.group(0) for match in DatePatterns.DATE_TOKEN.finditer(line)]


def is_record_boundary(line: str) -> bool:
    """A line containing any date-like token opens a new record."""
    return DatePatterns.DATE_TOKEN.search(line) is not None


def is_ongoing(token: str) -> bool:
    """Check whether an end token means "still running"."""
    return bool(token) and DatePatterns.ONGOING.search(token) is not None


def extract_date_range(line: str) -> Optional[DateRange]:
    """
    Build a DateRange from the first two date tokens of a line.

    Args:
        line: Record header line, e.g. "Engineer - Acme 01/2020 - Present"

    Returns:
        DateRange, or None when the line has no date token

    Example:
        >>> extract_date_range("Acme 2019 - 2021")
        DateRange(start='2019', end='2021', ongoing=False)
        >>> extract_date_range("Acme 03/2022")
        DateRange(start='03/2022', end='', ongoing=False)
    """
    tokens = find_date_tokens(line)
    if not tokens:
        return None

    start = tokens[0]
    end = tokens[1] if len(tokens) > 1 else ""
    return DateRange(start=start, end=end, ongoing=is_ongoing(end))


def strip_date_tokens(line: str) -> str:
    """
    Remove every date token from a line, then drop brackets left empty.

    Example:
        >>> strip_date_tokens("Engineer at Acme (2019 - 2021)")
        'Engineer at Acme '
    """
    stripped = DatePatterns.DATE_TOKEN.sub("", line)
    return DatePatterns.EMPTY_BRACKETS.sub("", stripped)
