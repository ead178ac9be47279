"""
Section classification for the Parsing context.

Splits the normalized line stream into labeled blocks in a single forward
pass. Content before the first recognized header belongs to personalInfo.
"""

from dataclasses import dataclass, field
from typing import Optional

from curriculo.contexts.parsing.logger import _log_debug
from curriculo.contexts.parsing.section_patterns import SectionLabel, match_section_header


@dataclass
class SectionBlock:
    """
    A run of consecutive lines under one label.

    Attributes:
        label: Section kind the lines belong to
        lines: Content lines, in input order
        header: The header line that opened the block (None for the leading block)
    """

    label: SectionLabel
    lines: list[str] = field(default_factory=list)
    header: Optional[str] = None

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def _header_remainder(line: str) -> str:
    """Text after the first colon of a header line ("Skills: Python" -> "Python")."""
    if ":" not in line:
        return ""
    return line.split(":", 1)[1].strip()


def classify_sections(lines: list[str], header_max_length: int = 60) -> list[SectionBlock]:
    """
    Segment a line stream into labeled section blocks.

    Every input line ends up in exactly one block, either as its header or as
    a content line; blocks come out in input order. A header line carrying
    content after a colon ("Skills: Python, SQL") keeps that content as the
    first line of its block.

    Args:
        lines: Trimmed, non-empty lines from to_line_stream()
        header_max_length: Longer lines are never treated as headers

    Returns:
        List of SectionBlock
    """
    blocks = []
    current_label = SectionLabel.PERSONAL_INFO
    current_header = None
    buffer = []

    for line in lines:
        label = match_section_header(line, max_length=header_max_length)

        if label is None:
            buffer.append(line)
            continue

        # Flush previous block (the empty leading personalInfo block is skipped)
        if buffer or current_header is not None:
            blocks.append(SectionBlock(label=current_label, lines=buffer, header=current_header))

        current_label = label
        current_header = line
        buffer = []

        remainder = _header_remainder(line)
        if remainder:
            buffer.append(remainder)

    if buffer or current_header is not None:
        blocks.append(SectionBlock(label=current_label, lines=buffer, header=current_header))

    _log_debug(
        f"Classified {len(lines)} lines into {len(blocks)} blocks: "
        f"{', '.join(block.label.value for block in blocks)}"
    )

    return blocks


def lines_by_label(blocks: list[SectionBlock]) -> dict[SectionLabel, list[str]]:
    """
    Concatenate block lines per label, keeping input order.

    A résumé with two "Experience" headers yields one experience line list.

    Args:
        blocks: Output of classify_sections()

    Returns:
        Dict mapping every SectionLabel to its lines (empty list if absent)
    """
    grouped = {label: [] for label in SectionLabel}
    for block in blocks:
        grouped[block.label].extend(block.lines)
    return grouped
