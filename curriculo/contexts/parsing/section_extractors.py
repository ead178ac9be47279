"""
Extractors for list-like sections: summary, skills and languages.
"""

from curriculo.contexts.parsing.extraction_patterns import (
    DEFAULT_LANGUAGE_LEVEL,
    BulletPatterns,
    match_language_level,
    strip_bullet,
)
from curriculo.contexts.parsing.logger import _log_debug
from curriculo.contexts.parsing.record_extractors import ExtractionResult
from curriculo.contexts.parsing.resume_data_structure import (
    LanguageEntry,
    SkillCategories,
    SkillSet,
    Summary,
)
from curriculo.utils.identifiers import IdGenerator


def extract_summary(lines: list[str]) -> Summary:
    """Summary is the block text as-is, one line per line."""
    return Summary(raw_text="\n".join(lines))


def extract_skills(lines: list[str], min_length: int = 2) -> SkillSet:
    """
    Split a skills block into a flat item list.

    Items are separated by commas, bullet glyphs and newlines. Items shorter
    than min_length are dropped, repeats keep their first position, and
    everything lands in the "other" bucket. The joined block text is kept
    verbatim in raw_blocks.

    Args:
        lines: Lines of the skills block(s)
        min_length: Shortest item kept

    Returns:
        SkillSet

    Example:
        >>> extract_skills(["React, Node.js", "Python"]).categorized.other
        ['React', 'Node.js', 'Python']
    """
    text = "\n".join(lines)
    if not text:
        return SkillSet()

    items = []
    seen = set()
    for raw_item in BulletPatterns.SKILL_SEPARATOR.split(text):
        item = BulletPatterns.LEADING_BULLET.sub("", raw_item.strip()).strip()
        if len(item) < min_length or item.lower() in seen:
            continue
        seen.add(item.lower())
        items.append(item)

    _log_debug(f"Skills: {len(items)} items")
    return SkillSet(raw_blocks=[text], categorized=SkillCategories(other=items))


def parse_language_line(line: str) -> tuple[str, str, str] | None:
    """
    Split "English: Native" / "Português (nativo)" / "French - B2".

    Returns:
        (language, level, details) or None when the line has no separator.
        details keeps the proficiency text when it matched no known level
        (e.g. "B2").
    """
    text = strip_bullet(line)
    match = BulletPatterns.LANGUAGE_SEPARATOR.search(text)
    if match is None:
        return None

    language = text[: match.start()].strip()
    if not language:
        return None

    remainder = text[match.end() :].replace(")", "").strip()
    level = match_language_level(remainder.lower())

    details = ""
    if level == DEFAULT_LANGUAGE_LEVEL and not _mentions_intermediate(remainder):
        details = remainder

    return language, level, details


def _mentions_intermediate(text: str) -> bool:
    lowered = text.lower()
    return any(word in lowered for word in ("intermediate", "intermédio", "intermediário"))


def extract_languages(
    lines: list[str], id_generator: IdGenerator
) -> ExtractionResult[LanguageEntry]:
    """
    One language per line with a ':', '-' or '(' separator.

    Lines without a separator produce no record and are returned as orphans.
    """
    languages = []
    orphans = []

    for line in lines:
        parsed = parse_language_line(line)
        if parsed is None:
            orphans.append(line)
            continue

        language, level, details = parsed
        languages.append(
            LanguageEntry(id=id_generator.new_id(), language=language, level=level, details=details)
        )

    _log_debug(f"Languages: {len(languages)} entries, {len(orphans)} orphan lines")
    return ExtractionResult(records=languages, orphans=orphans)
