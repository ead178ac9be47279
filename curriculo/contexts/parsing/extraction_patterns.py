"""
Reusable patterns and constants for résumé field extraction.

This module provides the date, contact, separator and proficiency patterns
shared by the entity extractors.

Pattern classes follow the convention from section_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# MONTH VOCABULARY
# =============================================================================

# Full month names are unambiguous enough to count as dates on their own.
# "May" is left out: it collides with the English modal verb.
FULL_MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)

# Short forms ("set", "out", "may") only count when followed by a year
ABBREVIATED_MONTH_NAMES = (
    "may",
    "sept",
    "jan",
    "feb",
    "fev",
    "mar",
    "apr",
    "abr",
    "mai",
    "jun",
    "jul",
    "aug",
    "ago",
    "sep",
    "set",
    "oct",
    "out",
    "nov",
    "dec",
    "dez",
)

_FULL_MONTHS = "|".join(FULL_MONTH_NAMES)
_ANY_MONTH = "|".join(FULL_MONTH_NAMES + ABBREVIATED_MONTH_NAMES)

# End tokens that mark a record as still running
ONGOING_KEYWORDS = ("present", "current", "atualmente", "hoje")


# =============================================================================
# DATE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class DatePatterns:
    """
    Regex patterns for date-like tokens in experience/education lines.

    DATE_TOKEN alternatives, tried left to right at each position:
    - Month name + 4-digit year (EN/PT, "Jan. 2020", "março 2019")
    - MM/YYYY ("01/2020")
    - Full month name alone ("September")
    - Bare plausible year ("2019")
    - Ongoing keywords (present/current/atualmente/hoje)
    """

    DATE_TOKEN: re.Pattern = re.compile(
        rf"\b(?:(?:{_ANY_MONTH})\.?,?\s+\d{{4}}\b"
        r"|\d{1,2}/\d{4}\b"
        rf"|(?:{_FULL_MONTHS})\b"
        r"|(?:19|20)\d{2}\b"
        rf"|(?:{'|'.join(ONGOING_KEYWORDS)})\b)",
        re.IGNORECASE,
    )

    ONGOING: re.Pattern = re.compile(rf"\b(?:{'|'.join(ONGOING_KEYWORDS)})\b", re.IGNORECASE)

    # Brackets left empty once their dates are removed, e.g. "( - )"
    EMPTY_BRACKETS: re.Pattern = re.compile(r"[(\[]\s*[-–—/,]*\s*[)\]]")


# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """Regex patterns for contact details in the personal info block."""

    EMAIL: re.Pattern = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

    # Separators are limited to space/dot/dash so a match never spans lines
    PHONE: re.Pattern = re.compile(r"(?:\+?\d{1,3}[-. ]?)?\(?\d{2,4}\)?[-. ]?\d{3,4}[-. ]?\d{3,4}")

    URL: re.Pattern = re.compile(
        r"https?://[^\s]+|www\.[^\s]+|linkedin\.com/in/[^\s]+|github\.com/[^\s]+",
        re.IGNORECASE,
    )

    # Labelled "Field: value" lines
    NATIONALITY: re.Pattern = re.compile(
        r"^(?:nationality|nacionalidade)\s*:\s*(.+)$", re.IGNORECASE
    )
    DATE_OF_BIRTH: re.Pattern = re.compile(
        r"^(?:date\s+of\s+birth|birth\s*date|data\s+de\s+nascimento)\s*:\s*(.+)$", re.IGNORECASE
    )
    WORK_PERMIT: re.Pattern = re.compile(
        r"^(?:work\s+permit|visa(?:\s+status)?|autorização\s+de\s+trabalho)\s*:\s*(.+)$",
        re.IGNORECASE,
    )


# Trailing punctuation picked up by greedy URL matches ("site.com),")
URL_TRAILING_PUNCTUATION = ".,;:)]>\"'"

# Labelled personal fields: attribute name -> pattern
LABELLED_PERSONAL_FIELDS = (
    ("nationality", ContactPatterns.NATIONALITY),
    ("date_of_birth", ContactPatterns.DATE_OF_BIRTH),
    ("work_permit", ContactPatterns.WORK_PERMIT),
)


# =============================================================================
# RECORD HEADER SEPARATORS
# =============================================================================


@dataclass(frozen=True)
class SeparatorPatterns:
    """
    Separators between title and organization on a record header line.

    Tried in priority order; the first one that yields two non-empty parts wins.
    A plain hyphen needs whitespace on one side so "Full-Stack" stays whole.
    """

    DASH: re.Pattern = re.compile(r"\s*[–—]\s*|\s+-\s*|\s*-\s+")
    PIPE: re.Pattern = re.compile(r"\s*\|\s*")
    AT: re.Pattern = re.compile(r"\s+at\s+", re.IGNORECASE)
    DOUBLE_SPACE: re.Pattern = re.compile(r"\s{2,}")


RECORD_SEPARATORS = (
    SeparatorPatterns.DASH,
    SeparatorPatterns.PIPE,
    SeparatorPatterns.AT,
    SeparatorPatterns.DOUBLE_SPACE,
)

# Characters trimmed from both ends of a split part
PART_EDGE_CHARS = " \t-–—|,;:"


# =============================================================================
# BULLETS AND LIST ITEMS
# =============================================================================


@dataclass(frozen=True)
class BulletPatterns:
    """Bullet glyph patterns for highlight lines and skill lists."""

    # Leading glyph of a highlight line
    LEADING_BULLET: re.Pattern = re.compile(r"^[•\-*]\s*")

    # Skill list item separators: commas, bullet glyphs, newlines
    SKILL_SEPARATOR: re.Pattern = re.compile(r"[,•\n]")

    # Language line separator: first of ':', '-', '(' (en dash treated as '-')
    LANGUAGE_SEPARATOR: re.Pattern = re.compile(r"[:\-–(]")


BULLET_GLYPHS = ("•", "-", "*")


# =============================================================================
# LANGUAGE PROFICIENCY
# =============================================================================

# Ordered level -> keyword group (EN + PT); first group with a hit wins
LANGUAGE_LEVEL_KEYWORDS = (
    ("Native", ("native", "nativo", "nativa", "mother tongue", "língua materna", "materna")),
    ("Fluent", ("fluent", "fluente", "fluência")),
    ("Advanced", ("advanced", "avançado", "avançada")),
    ("Beginner", ("basic", "básico", "básica", "beginner", "iniciante", "elementary", "elementar")),
)

DEFAULT_LANGUAGE_LEVEL = "Intermediate"


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def is_bullet_line(line: str) -> bool:
    """Check whether a line starts with a bullet glyph."""
    return line.lstrip().startswith(BULLET_GLYPHS)


def strip_bullet(line: str) -> str:
    """Remove a leading bullet glyph and the whitespace after it."""
    return BulletPatterns.LEADING_BULLET.sub("", line.strip(), count=1)


def contains_url(text: str) -> bool:
    """Check for a URL-like substring."""
    return ContactPatterns.URL.search(text) is not None


def match_language_level(text: str) -> str:
    """
    Map free-text proficiency to a level name.

    Args:
        text: Lowercased proficiency text (e.g., "native", "fluente", "b2")

    Returns:
        Matched level, or DEFAULT_LANGUAGE_LEVEL when no keyword matches
    """
    for level, keywords in LANGUAGE_LEVEL_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return level
    return DEFAULT_LANGUAGE_LEVEL


def split_record_header(text: str) -> list[str]:
    """
    Split a date-stripped header line into at most two parts.

    Args:
        text: Header line with date tokens already removed

    Returns:
        [] for an empty line, [title] when no separator applies,
        otherwise [title, organization]
    """
    cleaned = text.strip(PART_EDGE_CHARS)
    if not cleaned:
        return []

    for separator in RECORD_SEPARATORS:
        parts = [part.strip(PART_EDGE_CHARS) for part in separator.split(cleaned, maxsplit=1)]
        parts = [part for part in parts if part]
        if len(parts) == 2:
            return parts

    return [cleaned]
