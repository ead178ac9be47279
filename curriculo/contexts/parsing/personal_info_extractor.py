"""
Heuristic personal info extraction from the leading résumé block.

Contact details are pulled with regexes over the whole block; name and
location are guessed from line shape. This module never looks outside the
personalInfo block.
"""

from curriculo.contexts.parsing.extraction_patterns import (
    LABELLED_PERSONAL_FIELDS,
    URL_TRAILING_PUNCTUATION,
    ContactPatterns,
)
from curriculo.contexts.parsing.logger import _log_debug
from curriculo.contexts.parsing.resume_data_structure import PersonalInfo


def extract_personal_info(
    lines: list[str], name_max_length: int = 40, location_max_length: int = 50
) -> PersonalInfo:
    """
    Extract contact fields from the personalInfo block.

    Args:
        lines: Lines of the personalInfo block
        name_max_length: Name line must be shorter than this
        location_max_length: Location line must be shorter than this

    Returns:
        PersonalInfo with every field found (others left empty)
    """
    info = PersonalInfo()
    if not lines:
        return info

    text = "\n".join(lines)

    email_match = ContactPatterns.EMAIL.search(text)
    if email_match:
        info.email = email_match.group(0)

    phone_match = ContactPatterns.PHONE.search(text)
    if phone_match:
        info.phone = phone_match.group(0).strip()

    links = _extract_links(text)
    _assign_links(info, links)

    info.full_name = _find_name(lines, name_max_length)
    info.location = _find_location(lines, info.full_name, location_max_length)

    for attribute, pattern in LABELLED_PERSONAL_FIELDS:
        value = _find_labelled_value(lines, pattern)
        if value:
            setattr(info, attribute, value)

    _log_debug(
        f"Personal info: name={'yes' if info.full_name else 'no'}, "
        f"email={'yes' if info.email else 'no'}, phone={'yes' if info.phone else 'no'}, "
        f"{len(links)} links"
    )
    return info


def _extract_links(text: str) -> list[str]:
    """All URL-like matches, trailing punctuation removed."""
    links = []
    for match in ContactPatterns.URL.finditer(text):
        link = match.group(0).rstrip(URL_TRAILING_PUNCTUATION)
        if link:
            links.append(link)
    return links


def _assign_links(info: PersonalInfo, links: list[str]) -> None:
    """
    Distribute links over the link fields.

    First LinkedIn URL -> linkedin, first other URL -> website, every
    remaining URL -> other_contacts.
    """
    for link in links:
        if "linkedin" in link.lower() and not info.linkedin:
            info.linkedin = link
        elif "linkedin" not in link.lower() and not info.website:
            info.website = link
        else:
            info.other_contacts.append(link)


def _find_name(lines: list[str], max_length: int) -> str:
    """First line that is neither an email nor a phone line and is short."""
    for line in lines:
        if ContactPatterns.EMAIL.search(line) or ContactPatterns.PHONE.search(line):
            continue
        if len(line) < max_length:
            return line
    return ""


def _find_location(lines: list[str], name: str, max_length: int) -> str:
    """First short line with a comma that is not the name or an email line."""
    for line in lines:
        if line == name or "," not in line or len(line) >= max_length:
            continue
        if ContactPatterns.EMAIL.search(line):
            continue
        return line
    return ""


def _find_labelled_value(lines: list[str], pattern) -> str:
    """Value of the first "Label: value" line matching pattern."""
    for line in lines:
        match = pattern.match(line)
        if match:
            return match.group(1).strip()
    return ""
