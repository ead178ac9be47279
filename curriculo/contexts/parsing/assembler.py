"""
Document assembly, sanitizing and advisory validation.

Two ways into a canonical ResumeDocument:
- assemble_document(): typed extractor outputs from the heuristic parser
- sanitize_resume_data(): any mapping (AI parser output, persisted JSON)

validate_resume_data() reports schema deviations of a mapping as readable
strings. Nothing in this module raises on bad input.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from curriculo.contexts.parsing.logger import _log_debug
from curriculo.contexts.parsing.record_extractors import ExtractionResult
from curriculo.contexts.parsing.resume_data_structure import (
    DocumentMetadata,
    PersonalInfo,
    ResumeDocument,
    SkillSet,
    Summary,
    UnmappedBlock,
    _attribute_for,
)
from curriculo.utils.identifiers import IdGenerator

REQUIRED_TOP_LEVEL_KEYS = (
    "metadata",
    "personalInfo",
    "summary",
    "experience",
    "education",
    "skills",
    "languages",
    "projects",
    "certifications",
    "customSections",
    "unmappedBlocks",
)

REQUIRED_METADATA_KEYS = ("sourceFormat", "fileName", "languageGuess")

REQUIRED_PERSONAL_INFO_KEYS = ("fullName", "email", "phone", "location", "otherContacts")

ARRAY_KEYS = (
    "experience",
    "education",
    "languages",
    "projects",
    "certifications",
    "customSections",
    "unmappedBlocks",
)

SKILL_CATEGORY_KEYS = (
    "infrastructureAndSystems",
    "networkAndSecurity",
    "programmingAndScripting",
    "other",
)


@dataclass
class ExtractedSections:
    """
    Everything the extractors produced for one parse.

    Missing members fall back to empty defaults during assembly.
    """

    personal_info: Optional[PersonalInfo] = None
    summary: Optional[Summary] = None
    skills: Optional[SkillSet] = None
    experience: Optional[ExtractionResult] = None
    education: Optional[ExtractionResult] = None
    languages: Optional[ExtractionResult] = None
    projects: Optional[ExtractionResult] = None
    certifications: Optional[ExtractionResult] = None


def _records(result: Optional[ExtractionResult]) -> list:
    return list(result.records) if result is not None else []


def collect_unmapped_blocks(
    sections: ExtractedSections, id_generator: IdGenerator
) -> list[UnmappedBlock]:
    """
    Turn orphan lines into one UnmappedBlock per section that had any.

    Args:
        sections: Extractor outputs
        id_generator: Identifier source for the new blocks

    Returns:
        List of UnmappedBlock in section order
    """
    orphans_by_section = {
        "experience": sections.experience.orphans if sections.experience else [],
        "education": sections.education.orphans if sections.education else [],
        "languages": sections.languages.orphans if sections.languages else [],
        "projects": sections.projects.orphans if sections.projects else [],
    }

    blocks = []
    for section_key, orphans in orphans_by_section.items():
        if not orphans:
            continue
        blocks.append(
            UnmappedBlock(
                id=id_generator.new_id(),
                source_text="\n".join(orphans),
                reason=f"{section_key}: lines outside any recognizable entry",
            )
        )
    return blocks


def assemble_document(
    metadata: DocumentMetadata, sections: ExtractedSections, id_generator: IdGenerator
) -> ResumeDocument:
    """
    Merge extractor outputs into a complete ResumeDocument.

    The assembler is the only writer of the final document. Every member not
    produced by an extractor keeps its empty default, and any record that
    arrives without an identifier gets one.

    Args:
        metadata: Source format, file name and language guess
        sections: Extractor outputs
        id_generator: Identifier source for unmapped blocks and id-less records

    Returns:
        ResumeDocument
    """
    document = ResumeDocument(
        metadata=metadata,
        personal_info=sections.personal_info or PersonalInfo(),
        summary=sections.summary or Summary(),
        experience=_records(sections.experience),
        education=_records(sections.education),
        skills=sections.skills or SkillSet(),
        languages=_records(sections.languages),
        projects=_records(sections.projects),
        certifications=_records(sections.certifications),
        unmapped_blocks=collect_unmapped_blocks(sections, id_generator),
    )
    ensure_record_ids(document, id_generator)

    _log_debug(f"Assembled document with {len(document.unmapped_blocks)} unmapped blocks")
    return document


def ensure_record_ids(document: ResumeDocument, id_generator: IdGenerator) -> None:
    """Give every list record without an identifier a fresh one (in place)."""
    for key in ResumeDocument.LIST_MEMBERS:
        for record in getattr(document, _attribute_for(key)):
            if not record.id:
                record.id = id_generator.new_id()


def validate_resume_data(data: Any) -> list[str]:
    """
    Report how a document mapping deviates from the canonical shape.

    Advisory only: the result is for diagnostics and never blocks rendering.

    Args:
        data: Candidate document (e.g. ResumeDocument.to_dict() or AI output)

    Returns:
        List of violation messages (empty when the shape is valid)
    """
    if not isinstance(data, Mapping):
        return [f"Document must be an object, got {type(data).__name__}"]

    errors = []

    for key in REQUIRED_TOP_LEVEL_KEYS:
        if key not in data:
            errors.append(f"Missing required key: {key}")

    metadata = data.get("metadata")
    if isinstance(metadata, Mapping):
        for key in REQUIRED_METADATA_KEYS:
            if not metadata.get(key):
                errors.append(f"Missing metadata.{key}")
    elif metadata is not None:
        errors.append("metadata must be an object")

    personal_info = data.get("personalInfo")
    if isinstance(personal_info, Mapping):
        for key in REQUIRED_PERSONAL_INFO_KEYS:
            if key not in personal_info:
                errors.append(f"Missing personalInfo.{key}")
        if "otherContacts" in personal_info and not isinstance(
            personal_info["otherContacts"], list
        ):
            errors.append("personalInfo.otherContacts must be an array")
    elif personal_info is not None:
        errors.append("personalInfo must be an object")

    summary = data.get("summary")
    if isinstance(summary, Mapping):
        if "rawText" not in summary:
            errors.append("Missing summary.rawText")
    elif summary is not None:
        errors.append("summary must be an object")

    skills = data.get("skills")
    if isinstance(skills, Mapping):
        if not isinstance(skills.get("rawBlocks"), list):
            errors.append("skills.rawBlocks must be an array")
        categorized = skills.get("categorized")
        if not isinstance(categorized, Mapping):
            errors.append("Missing skills.categorized")
        else:
            for key in SKILL_CATEGORY_KEYS:
                if not isinstance(categorized.get(key), list):
                    errors.append(f"skills.categorized.{key} must be an array")
    elif skills is not None:
        errors.append("skills must be an object")

    for key in ARRAY_KEYS:
        if key in data and not isinstance(data[key], list):
            errors.append(f"{key} must be an array")

    return errors


def sanitize_resume_data(data: Any, id_generator: IdGenerator) -> ResumeDocument:
    """
    Coerce any mapping into a complete ResumeDocument.

    Non-list list members become [], non-object records are dropped, missing
    scalars take their defaults and records without an id get a fresh one.

    Args:
        data: Candidate document mapping (may be partial or malformed)
        id_generator: Identifier source for id-less records

    Returns:
        ResumeDocument
    """
    return ResumeDocument.from_dict(data, id_generator=id_generator)
