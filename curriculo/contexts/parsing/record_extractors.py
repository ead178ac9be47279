"""
Record extractors for dated and titled résumé sections.

Experience and education blocks are folded line by line into an
(finished records, open record) state: a line with a date token closes the
open record and starts a new one, bullet lines become highlights, anything
else is description. Projects use the same fold keyed on line shape instead
of dates. Certifications are one record per line.

Lines that arrive before any record is open are kept as orphans so the
assembler can report them as unmapped content.
"""

from dataclasses import dataclass, field, replace
from functools import reduce
from typing import Generic, Optional, TypeVar

from curriculo.contexts.parsing.date_ranges import (
    extract_date_range,
    find_date_tokens,
    is_record_boundary,
    strip_date_tokens,
)
from curriculo.contexts.parsing.extraction_patterns import (
    contains_url,
    is_bullet_line,
    split_record_header,
    strip_bullet,
)
from curriculo.contexts.parsing.logger import _log_debug
from curriculo.contexts.parsing.resume_data_structure import (
    Certification,
    DateRange,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
)
from curriculo.utils.identifiers import IdGenerator

RecordT = TypeVar("RecordT")


@dataclass
class ExtractionResult(Generic[RecordT]):
    """
    Records built from one section plus the lines that fit no record.

    Attributes:
        records: Extracted records, in input order
        orphans: Lines dropped because no record was open
    """

    records: list = field(default_factory=list)
    orphans: list[str] = field(default_factory=list)


# =============================================================================
# DATED RECORDS (experience, education)
# =============================================================================


@dataclass(frozen=True)
class RecordDraft:
    """
    An experience/education record while its lines are still arriving.

    title/organization map to position/company or degree/institution.
    """

    title: str = ""
    organization: str = ""
    date_range: DateRange = field(default_factory=DateRange)
    description_lines: tuple = ()
    highlights: tuple = ()


@dataclass(frozen=True)
class RecordFoldState:
    """Accumulator threaded through the line fold."""

    records: tuple = ()
    open_record: Optional[RecordDraft] = None
    orphans: tuple = ()


def open_record_draft(line: str) -> RecordDraft:
    """
    Start a record from a boundary line.

    A leading bullet glyph is dropped. Date tokens fill the range; what
    remains is split into title and organization (or title only).
    """
    line = strip_bullet(line)
    date_range = extract_date_range(line) or DateRange()
    parts = split_record_header(strip_date_tokens(line))

    return RecordDraft(
        title=parts[0] if parts else "",
        organization=parts[1] if len(parts) > 1 else "",
        date_range=date_range,
    )


def fold_record_line(
    state: RecordFoldState, line: str, backfill_max_length: int = 50
) -> RecordFoldState:
    """
    Advance the fold by one line.

    Args:
        state: Current accumulator
        line: Next line of the block
        backfill_max_length: Plain lines shorter than this (and without a
            period) fill an empty organization

    Returns:
        New accumulator (the input state is never modified)
    """
    if is_record_boundary(line):
        finished = state.records + ((state.open_record,) if state.open_record else ())
        return replace(state, records=finished, open_record=open_record_draft(line))

    draft = state.open_record
    if draft is None:
        return replace(state, orphans=state.orphans + (line,))

    if is_bullet_line(line):
        highlight = strip_bullet(line)
        if not highlight:
            return state
        return replace(state, open_record=replace(draft, highlights=draft.highlights + (highlight,)))

    organization = draft.organization
    if not organization and len(line) < backfill_max_length and "." not in line:
        organization = line

    updated = replace(
        draft,
        organization=organization,
        description_lines=draft.description_lines + (line,),
    )
    return replace(state, open_record=updated)


def fold_records(lines: list[str], backfill_max_length: int = 50) -> RecordFoldState:
    """
    Fold a block's lines into drafts; the open record is closed at the end.

    Returns:
        RecordFoldState with open_record None and every draft in records
    """
    state = reduce(
        lambda acc, line: fold_record_line(acc, line, backfill_max_length),
        lines,
        RecordFoldState(),
    )
    if state.open_record is not None:
        state = replace(state, records=state.records + (state.open_record,), open_record=None)
    return state


def extract_experience(
    lines: list[str], id_generator: IdGenerator, backfill_max_length: int = 50
) -> ExtractionResult[ExperienceEntry]:
    """
    Extract experience entries from an experience block.

    Args:
        lines: Lines of the experience block(s)
        id_generator: Identifier source for new entries
        backfill_max_length: See fold_record_line()

    Returns:
        ExtractionResult with ExperienceEntry records

    Example:
        "Senior Engineer - Acme Corp 01/2020 - Present" yields
        position="Senior Engineer", company="Acme Corp", start_date="01/2020",
        end_date="Present", current=True
    """
    state = fold_records(lines, backfill_max_length)
    entries = [
        ExperienceEntry(
            id=id_generator.new_id(),
            position=draft.title,
            company=draft.organization,
            start_date=draft.date_range.start,
            end_date=draft.date_range.end,
            current=draft.date_range.ongoing,
            description_raw="\n".join(draft.description_lines),
            highlights=list(draft.highlights),
        )
        for draft in state.records
    ]
    _log_debug(f"Experience: {len(entries)} entries, {len(state.orphans)} orphan lines")
    return ExtractionResult(records=entries, orphans=list(state.orphans))


def extract_education(
    lines: list[str], id_generator: IdGenerator, backfill_max_length: int = 50
) -> ExtractionResult[EducationEntry]:
    """Extract education entries; same fold as experience with degree/institution."""
    state = fold_records(lines, backfill_max_length)
    entries = [
        EducationEntry(
            id=id_generator.new_id(),
            degree=draft.title,
            institution=draft.organization,
            start_date=draft.date_range.start,
            end_date=draft.date_range.end,
            current=draft.date_range.ongoing,
            description_raw="\n".join(draft.description_lines),
            highlights=list(draft.highlights),
        )
        for draft in state.records
    ]
    _log_debug(f"Education: {len(entries)} entries, {len(state.orphans)} orphan lines")
    return ExtractionResult(records=entries, orphans=list(state.orphans))


# =============================================================================
# PROJECTS
# =============================================================================


@dataclass(frozen=True)
class ProjectDraft:
    title: str
    description_lines: tuple = ()


@dataclass(frozen=True)
class ProjectFoldState:
    records: tuple = ()
    open_record: Optional[ProjectDraft] = None
    orphans: tuple = ()


def is_project_title(line: str, title_max_length: int = 50) -> bool:
    """Short lines without a URL start a new project."""
    return len(line) < title_max_length and not contains_url(line)


def fold_project_line(
    state: ProjectFoldState, line: str, title_max_length: int = 50
) -> ProjectFoldState:
    """Advance the project fold by one line."""
    if is_project_title(line, title_max_length):
        finished = state.records + ((state.open_record,) if state.open_record else ())
        return replace(state, records=finished, open_record=ProjectDraft(title=line))

    draft = state.open_record
    if draft is None:
        return replace(state, orphans=state.orphans + (line,))

    updated = replace(draft, description_lines=draft.description_lines + (line,))
    return replace(state, open_record=updated)


def extract_projects(
    lines: list[str], id_generator: IdGenerator, title_max_length: int = 50
) -> ExtractionResult[ProjectEntry]:
    """
    Extract projects: a short URL-free line is a title, later lines its description.

    Role, client, technologies and links are left empty.
    """
    state = reduce(
        lambda acc, line: fold_project_line(acc, line, title_max_length),
        lines,
        ProjectFoldState(),
    )
    drafts = state.records + ((state.open_record,) if state.open_record else ())

    projects = [
        ProjectEntry(
            id=id_generator.new_id(),
            title=draft.title,
            description_raw="\n".join(draft.description_lines),
        )
        for draft in drafts
    ]
    _log_debug(f"Projects: {len(projects)} entries, {len(state.orphans)} orphan lines")
    return ExtractionResult(records=projects, orphans=list(state.orphans))


# =============================================================================
# CERTIFICATIONS
# =============================================================================


def extract_certifications(
    lines: list[str], id_generator: IdGenerator
) -> ExtractionResult[Certification]:
    """
    One certification per line.

    The first date token becomes the date; the rest of the line is split
    into name and issuer ("AWS Solutions Architect - Amazon 2023").
    """
    certifications = []

    for line in lines:
        text = strip_bullet(line)
        if not text:
            continue

        tokens = find_date_tokens(text)
        parts = split_record_header(strip_date_tokens(text))
        if not parts:
            parts = [text]

        certifications.append(
            Certification(
                id=id_generator.new_id(),
                name=parts[0],
                issuer=parts[1] if len(parts) > 1 else "",
                date=tokens[0] if tokens else "",
            )
        )

    _log_debug(f"Certifications: {len(certifications)} entries")
    return ExtractionResult(records=certifications)
