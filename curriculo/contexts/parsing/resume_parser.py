"""
Offline heuristic résumé parser.

Pipeline (strictly sequential, one linear pass per stage):
    raw text -> normalizer -> line stream -> section classifier
             -> per-section extractors -> assembler -> advisory validation

No network access and no exceptions for malformed text: whatever cannot be
placed ends up in unmappedBlocks, and schema deviations are reported on the
ParseResult instead of raised.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import Optional

from curriculo.contexts.parsing.assembler import (
    ExtractedSections,
    assemble_document,
    validate_resume_data,
)
from curriculo.contexts.parsing.logger import log_parse_result, log_parse_start
from curriculo.contexts.parsing.normalizer import (
    LANGUAGE_GUESSES,
    preprocess_resume_text,
    to_line_stream,
)
from curriculo.contexts.parsing.parser_config import ParserSettings
from curriculo.contexts.parsing.personal_info_extractor import extract_personal_info
from curriculo.contexts.parsing.record_extractors import (
    extract_certifications,
    extract_education,
    extract_experience,
    extract_projects,
)
from curriculo.contexts.parsing.resume_data_structure import DocumentMetadata, ResumeDocument
from curriculo.contexts.parsing.section_classifier import (
    SectionBlock,
    classify_sections,
    lines_by_label,
)
from curriculo.contexts.parsing.section_extractors import (
    extract_languages,
    extract_skills,
    extract_summary,
)
from curriculo.contexts.parsing.section_patterns import SectionLabel
from curriculo.utils.identifiers import IdGenerator, UUIDGenerator

# File extension -> metadata.sourceFormat
SOURCE_FORMATS = {".pdf": "pdf", ".docx": "docx"}
DEFAULT_SOURCE_FORMAT = "txt"


class ParseStatus(str, Enum):
    PARSED = "parsed"
    NOTHING_TO_PARSE = "nothing_to_parse"


@dataclass
class ParseResult:
    """
    Outcome of one parse.

    Attributes:
        document: Canonical document (all defaults when nothing was parsed)
        status: PARSED, or NOTHING_TO_PARSE for empty/whitespace-only input
        violations: Advisory schema violations (never fatal)
        blocks: Section blocks found by the classifier, for diagnostics
    """

    document: ResumeDocument
    status: ParseStatus = ParseStatus.PARSED
    violations: list[str] = field(default_factory=list)
    blocks: list[SectionBlock] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.status is ParseStatus.NOTHING_TO_PARSE

    def to_dict(self) -> dict:
        """Canonical document as a plain dict (what downstream code consumes)."""
        return self.document.to_dict()


def detect_source_format(file_name: str) -> str:
    """
    Map a file name to metadata.sourceFormat.

    Example:
        >>> detect_source_format("cv.PDF")
        'pdf'
        >>> detect_source_format("notes")
        'txt'
    """
    return SOURCE_FORMATS.get(PurePath(file_name).suffix.lower(), DEFAULT_SOURCE_FORMAT)


def parse_resume_text(
    raw_text: str,
    file_name: str = "",
    language_hint: Optional[str] = None,
    id_generator: Optional[IdGenerator] = None,
    settings: Optional[ParserSettings] = None,
) -> ParseResult:
    """
    Parse extracted résumé text into the canonical document.

    Args:
        raw_text: Text produced by a PDF/DOCX/TXT reader
        file_name: Original file name, recorded in metadata
        language_hint: "pt", "en", "mixed" or "unknown"; overrides detection
        id_generator: Identifier source (random UUIDs by default)
        settings: Thresholds (ParserSettings() by default)

    Returns:
        ParseResult (status NOTHING_TO_PARSE for empty/whitespace-only input)

    Example:
        >>> from curriculo.utils.identifiers import SequentialIdGenerator
        >>> result = parse_resume_text("Jane Doe\\nSkills\\nPython, SQL",
        ...                            id_generator=SequentialIdGenerator())
        >>> result.document.skills.categorized.other
        ['Python', 'SQL']
    """
    id_generator = id_generator or UUIDGenerator()
    settings = settings or ParserSettings()
    raw_text = raw_text if isinstance(raw_text, str) else ""

    log_parse_start(file_name, len(raw_text))

    cleaned, detected_language = preprocess_resume_text(
        raw_text, tie_margin=settings.language_tie_margin
    )
    metadata = DocumentMetadata(
        source_format=detect_source_format(file_name),
        file_name=file_name,
        language_guess=language_hint if language_hint in LANGUAGE_GUESSES else detected_language,
    )

    if not cleaned:
        result = ParseResult(
            document=ResumeDocument(metadata=metadata), status=ParseStatus.NOTHING_TO_PARSE
        )
        log_parse_result(file_name, result)
        return result

    blocks = classify_sections(to_line_stream(cleaned), header_max_length=settings.header_max_length)
    sections = extract_sections(lines_by_label(blocks), id_generator, settings)

    document = assemble_document(metadata, sections, id_generator)
    result = ParseResult(
        document=document,
        violations=validate_resume_data(document.to_dict()),
        blocks=blocks,
    )
    log_parse_result(file_name, result)
    return result


def extract_sections(
    grouped: dict[SectionLabel, list[str]], id_generator: IdGenerator, settings: ParserSettings
) -> ExtractedSections:
    """
    Run every extractor over its section's lines.

    Args:
        grouped: Output of lines_by_label()
        id_generator: Identifier source for new records
        settings: Thresholds

    Returns:
        ExtractedSections ready for assemble_document()
    """
    return ExtractedSections(
        personal_info=extract_personal_info(
            grouped[SectionLabel.PERSONAL_INFO],
            name_max_length=settings.name_max_length,
            location_max_length=settings.location_max_length,
        ),
        summary=extract_summary(grouped[SectionLabel.SUMMARY]),
        skills=extract_skills(grouped[SectionLabel.SKILLS], min_length=settings.min_skill_length),
        experience=extract_experience(
            grouped[SectionLabel.EXPERIENCE],
            id_generator,
            backfill_max_length=settings.organization_backfill_max_length,
        ),
        education=extract_education(
            grouped[SectionLabel.EDUCATION],
            id_generator,
            backfill_max_length=settings.organization_backfill_max_length,
        ),
        languages=extract_languages(grouped[SectionLabel.LANGUAGES], id_generator),
        projects=extract_projects(
            grouped[SectionLabel.PROJECTS],
            id_generator,
            title_max_length=settings.project_title_max_length,
        ),
        certifications=extract_certifications(grouped[SectionLabel.CERTIFICATIONS], id_generator),
    )
