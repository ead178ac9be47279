"""
Pattern tables for résumé section identification and language guessing.

Section headers are matched against an ORDERED table: the first category
whose pattern matches wins. Patterns overlap on purpose (e.g. "Technical
Skills & Projects"), so table order is the tie-break policy.

Pattern classes follow the convention from extraction_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SectionLabel(str, Enum):
    """Block labels; values are the canonical document keys they feed."""

    PERSONAL_INFO = "personalInfo"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    LANGUAGES = "languages"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"


# =============================================================================
# SECTION HEADER PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SectionHeaderPatterns:
    """
    Regex patterns for recognizing section header lines (EN + PT).

    Anchored at line start, ending on a word boundary, case-insensitive:
    "Work Experience" and "EXPERIÊNCIA PROFISSIONAL" match, while
    "My work experience includes" and "Experienced engineer" do not.
    """

    EXPERIENCE: re.Pattern = re.compile(
        r"^(?:work\s+experience|employment\s+history|professional\s+experience"
        r"|experiência\s+profissional|experiência|experiencia|experience"
        r"|career\s+history|work\s+history)\b",
        re.IGNORECASE,
    )

    EDUCATION: re.Pattern = re.compile(
        r"^(?:education|academic\s+background|qualifications|academic\s+history"
        r"|formação\s+académica|formação\s+acadêmica|educação|formação|academic\s+qualifications)\b",
        re.IGNORECASE,
    )

    SKILLS: re.Pattern = re.compile(
        r"^(?:skills|competencies|technologies|technical\s+skills|core\s+competencies"
        r"|competências|habilidades|tech\s+stack)\b",
        re.IGNORECASE,
    )

    PROJECTS: re.Pattern = re.compile(
        r"^(?:projects|portfolio|personal\s+projects|projetos|projectos)\b", re.IGNORECASE
    )

    LANGUAGES: re.Pattern = re.compile(
        r"^(?:languages|linguistic\s+skills|idiomas|línguas)\b", re.IGNORECASE
    )

    SUMMARY: re.Pattern = re.compile(
        r"^(?:summary|profile|professional\s+summary|about\s+me|objective"
        r"|resumo\s+profissional|resumo|sobre\s+mim|perfil)\b",
        re.IGNORECASE,
    )

    CERTIFICATIONS: re.Pattern = re.compile(
        r"^(?:certifications|certificates|courses|certificados|certificações|cursos)\b",
        re.IGNORECASE,
    )

    PERSONAL_INFO: re.Pattern = re.compile(
        r"^(?:personal\s+details|personal\s+information|contact\s+info(?:rmation)?|contact\s+details"
        r"|contactos|contatos|dados\s+pessoais)\b",
        re.IGNORECASE,
    )


# Ordered category -> pattern table; first match wins
SECTION_HEADER_TABLE: tuple = (
    (SectionLabel.EXPERIENCE, SectionHeaderPatterns.EXPERIENCE),
    (SectionLabel.EDUCATION, SectionHeaderPatterns.EDUCATION),
    (SectionLabel.SKILLS, SectionHeaderPatterns.SKILLS),
    (SectionLabel.PROJECTS, SectionHeaderPatterns.PROJECTS),
    (SectionLabel.LANGUAGES, SectionHeaderPatterns.LANGUAGES),
    (SectionLabel.SUMMARY, SectionHeaderPatterns.SUMMARY),
    (SectionLabel.CERTIFICATIONS, SectionHeaderPatterns.CERTIFICATIONS),
    (SectionLabel.PERSONAL_INFO, SectionHeaderPatterns.PERSONAL_INFO),
)


# =============================================================================
# LANGUAGE INDICATORS
# =============================================================================

# Substrings counted once each against the lowercased text
PORTUGUESE_INDICATORS = (
    "experiência profissional",
    "formação académica",
    "formação",
    "educação",
    "competências",
    "habilidades",
    "idiomas",
    "línguas",
    "projetos",
    "certificados",
    "ção",
    "ões",
)

ENGLISH_INDICATORS = (
    "work experience",
    "professional experience",
    "education",
    "academic background",
    "skills",
    "languages",
    "projects",
    "certifications",
    "responsibilities",
    "achievements",
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def match_section_header(line: str, max_length: int = 60) -> Optional[SectionLabel]:
    """
    Classify a line as a section header.

    Args:
        line: Trimmed line of résumé text
        max_length: Lines longer than this are never headers

    Returns:
        SectionLabel of the first matching category, or None
    """
    if len(line) > max_length:
        return None

    for label, pattern in SECTION_HEADER_TABLE:
        if pattern.search(line):
            return label

    return None


def score_language_indicators(text: str) -> tuple[int, int]:
    """
    Count Portuguese and English indicator substrings present in text.

    Returns:
        (portuguese_score, english_score)
    """
    lowered = text.lower()
    pt_score = sum(1 for indicator in PORTUGUESE_INDICATORS if indicator in lowered)
    en_score = sum(1 for indicator in ENGLISH_INDICATORS if indicator in lowered)
    return pt_score, en_score
