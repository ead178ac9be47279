"""
Raw résumé text normalizer for the Parsing context.

Cleans text handed over by the file readers (PDF/DOCX/TXT) before section
classification, and guesses the résumé language from section vocabulary.

Design principle: Normalize BEFORE parsing. Every later stage works on the
line stream produced here and never sees raw layout artifacts.
"""

import re

from curriculo.contexts.parsing.section_patterns import score_language_indicators

# C0 and C1 control characters except tab (\x09) and newline (\x0A)
CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0B-\x1F\x7F-\x9F]")

# Zero-width characters and BOM left behind by PDF extraction
ZERO_WIDTH_RE = re.compile(r"[\u200b-\u200d\u2060\ufeff]")

MULTISPACE_RE = re.compile(r" {3,}")
MULTINEWLINE_RE = re.compile(r"\n{4,}")

LANGUAGE_GUESSES = ("pt", "en", "mixed", "unknown")


def normalize_line_endings(text: str) -> str:
    """Convert \\r\\n and lone \\r to \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def remove_garbage_chars(text: str) -> str:
    """
    Strip control and zero-width characters, then collapse whitespace runs.

    Runs of 3+ spaces become 2 (two spaces still act as a column separator
    for the record extractors); runs of 4+ newlines become 3.

    Args:
        text: Text with normalized line endings

    Returns:
        Cleaned text
    """
    text = ZERO_WIDTH_RE.sub("", text)
    text = CONTROL_CHARS_RE.sub("", text)
    text = MULTISPACE_RE.sub("  ", text)
    text = MULTINEWLINE_RE.sub("\n\n\n", text)
    return text


def detect_language(text: str, tie_margin: int = 1) -> str:
    """
    Guess the dominant résumé language from section vocabulary.

    Args:
        text: Résumé text
        tie_margin: Largest score difference still reported as "mixed"

    Returns:
        "pt", "en", "mixed" or "unknown"
    """
    pt_score, en_score = score_language_indicators(text)

    if pt_score == 0 and en_score == 0:
        return "unknown"
    if pt_score > 0 and en_score > 0 and abs(pt_score - en_score) <= tie_margin:
        return "mixed"
    return "pt" if pt_score > en_score else "en"


def normalize_text(text: str) -> str:
    """
    Apply every text cleaning step.

    Args:
        text: Raw extracted résumé text

    Returns:
        Cleaned text with surrounding whitespace trimmed
    """
    return remove_garbage_chars(normalize_line_endings(text)).strip()


def to_line_stream(text: str) -> list[str]:
    """
    Split normalized text into trimmed, non-empty lines (order preserved).

    Args:
        text: Output of normalize_text()

    Returns:
        List of lines
    """
    return [line.strip() for line in text.split("\n") if line.strip()]


def preprocess_resume_text(text: str, tie_margin: int = 1) -> tuple[str, str]:
    """
    Normalize résumé text and guess its language.

    This is the main entry point for text normalization.

    Args:
        text: Raw extracted résumé text
        tie_margin: Passed to detect_language()

    Returns:
        (cleaned_text, language_guess)
    """
    cleaned = normalize_text(text)
    return cleaned, detect_language(cleaned, tie_margin=tie_margin)
