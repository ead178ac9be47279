"""
Canonical résumé document structure.

Defines the typed records the parser emits and the rest of the editor
(template renderers, prompt builders, persistence) consumes. Attributes are
snake_case; to_dict() emits the camelCase keys downstream code binds to
(position, descriptionRaw, levelEQF, ...), and from_dict() rebuilds a record
from any mapping, filling every missing value with its default.
"""

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Mapping, Optional, get_origin

from curriculo.utils.identifiers import IdGenerator

# Attribute names whose camelCase key is not the mechanical conversion
KEY_OVERRIDES = {"level_eqf": "levelEQF"}


def to_camel(name: str) -> str:
    """Convert a snake_case attribute name to its document key."""
    if name in KEY_OVERRIDES:
        return KEY_OVERRIDES[name]
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def as_str(value: Any) -> str:
    """Coerce a scalar to str; None becomes ""."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    return ""


def as_bool(value: Any) -> bool:
    """Coerce a flag; strings like "true"/"yes" count as True."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    if isinstance(value, (int, float)):
        return bool(value)
    return False


def as_str_list(value: Any) -> List[str]:
    """Coerce a list field; anything that is not a list/tuple becomes []."""
    if not isinstance(value, (list, tuple)):
        return []
    return [as_str(item) for item in value if item is not None]


@dataclass
class DateRange:
    """
    Raw date tokens of a record, never parsed into calendar values.

    Attributes:
        start: First date token (e.g., "01/2020")
        end: Second date token, or "" when only one was found
        ongoing: True when the end token reads like "Present"/"Atualmente"
    """

    start: str = ""
    end: str = ""
    ongoing: bool = False


class _FlatRecord:
    """
    Shared to_dict/from_dict for records made of str, bool and list[str] fields.

    Records with an "id" field get a fresh identifier in from_dict() when the
    source mapping lacks one and an IdGenerator is supplied.
    """

    def to_dict(self) -> Dict[str, Any]:
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[to_camel(f.name)] = list(value) if isinstance(value, list) else value
        return result

    @classmethod
    def from_dict(cls, data: Any, id_generator: Optional[IdGenerator] = None):
        if not isinstance(data, Mapping):
            data = {}

        kwargs = {}
        for f in fields(cls):
            raw = data.get(to_camel(f.name), data.get(f.name))
            if raw is None:
                # Field default applies
                continue
            if f.type is bool:
                kwargs[f.name] = as_bool(raw)
            elif get_origin(f.type) is list:
                kwargs[f.name] = as_str_list(raw)
            else:
                kwargs[f.name] = as_str(raw)

        has_id = any(f.name == "id" for f in fields(cls))
        if has_id and not kwargs.get("id") and id_generator is not None:
            kwargs["id"] = id_generator.new_id()

        return cls(**kwargs)


@dataclass
class DocumentMetadata(_FlatRecord):
    """Where the document came from and which language it appears to be in."""

    source_format: str = "manual"
    file_name: str = ""
    language_guess: str = "unknown"


@dataclass
class PersonalInfo(_FlatRecord):
    """Scalar contact fields; links without a dedicated field go to other_contacts."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    nationality: str = ""
    work_permit: str = ""
    date_of_birth: str = ""
    website: str = ""
    linkedin: str = ""
    other_contacts: List[str] = field(default_factory=list)


@dataclass
class Summary(_FlatRecord):
    raw_text: str = ""


@dataclass
class ExperienceEntry(_FlatRecord):
    id: str = ""
    position: str = ""
    company: str = ""
    city: str = ""
    country: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description_raw: str = ""
    highlights: List[str] = field(default_factory=list)


@dataclass
class EducationEntry(_FlatRecord):
    id: str = ""
    degree: str = ""
    course: str = ""
    institution: str = ""
    city: str = ""
    country: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    final_grade: str = ""
    level_eqf: str = ""
    description_raw: str = ""
    highlights: List[str] = field(default_factory=list)


@dataclass
class LanguageEntry(_FlatRecord):
    """Language with a proficiency level and optional free-text details."""

    id: str = ""
    language: str = ""
    level: str = "Intermediate"
    details: str = ""


@dataclass
class ProjectEntry(_FlatRecord):
    id: str = ""
    title: str = ""
    role: str = ""
    client_or_company: str = ""
    start_date: str = ""
    end_date: str = ""
    description_raw: str = ""
    technologies: List[str] = field(default_factory=list)
    links: List[str] = field(default_factory=list)
    highlights: List[str] = field(default_factory=list)


@dataclass
class Certification(_FlatRecord):
    id: str = ""
    name: str = ""
    issuer: str = ""
    date: str = ""
    description_raw: str = ""


@dataclass
class CustomSection(_FlatRecord):
    id: str = ""
    title: str = ""
    raw_text: str = ""


@dataclass
class UnmappedBlock(_FlatRecord):
    """Text no extractor could place, with the reason it was set aside."""

    id: str = ""
    source_text: str = ""
    reason: str = ""


@dataclass
class SkillCategories(_FlatRecord):
    """
    Skill buckets by domain.

    The heuristic parser only fills "other"; the domain buckets are filled
    manually in the editor or by the AI parser.
    """

    infrastructure_and_systems: List[str] = field(default_factory=list)
    network_and_security: List[str] = field(default_factory=list)
    programming_and_scripting: List[str] = field(default_factory=list)
    other: List[str] = field(default_factory=list)


@dataclass
class SkillSet:
    """Verbatim skill section text plus the categorized item lists."""

    raw_blocks: List[str] = field(default_factory=list)
    categorized: SkillCategories = field(default_factory=SkillCategories)

    def to_dict(self) -> Dict[str, Any]:
        return {"rawBlocks": list(self.raw_blocks), "categorized": self.categorized.to_dict()}

    @classmethod
    def from_dict(cls, data: Any) -> "SkillSet":
        if not isinstance(data, Mapping):
            data = {}
        return cls(
            raw_blocks=as_str_list(data.get("rawBlocks")),
            categorized=SkillCategories.from_dict(data.get("categorized")),
        )


@dataclass
class ResumeDocument:
    """
    Fully-defaulted résumé record.

    No field is ever None: scalars default to "", collections to [].
    """

    # Top-level key -> record type for the list-valued members
    LIST_MEMBERS: ClassVar[Dict[str, type]] = {
        "experience": ExperienceEntry,
        "education": EducationEntry,
        "languages": LanguageEntry,
        "projects": ProjectEntry,
        "certifications": Certification,
        "customSections": CustomSection,
        "unmappedBlocks": UnmappedBlock,
    }

    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: Summary = field(default_factory=Summary)
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: SkillSet = field(default_factory=SkillSet)
    languages: List[LanguageEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)
    custom_sections: List[CustomSection] = field(default_factory=list)
    unmapped_blocks: List[UnmappedBlock] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the canonical camelCase document shape."""
        result: Dict[str, Any] = {
            "metadata": self.metadata.to_dict(),
            "personalInfo": self.personal_info.to_dict(),
            "summary": self.summary.to_dict(),
            "skills": self.skills.to_dict(),
        }
        for key in self.LIST_MEMBERS:
            result[key] = [record.to_dict() for record in getattr(self, _attribute_for(key))]

        ordered_keys = (
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
        return {key: result[key] for key in ordered_keys}

    @classmethod
    def from_dict(cls, data: Any, id_generator: Optional[IdGenerator] = None) -> "ResumeDocument":
        """
        Build a document from any mapping, filling defaults and missing ids.

        Non-mapping list items are dropped; list members that are not lists
        become empty lists.
        """
        if not isinstance(data, Mapping):
            data = {}

        kwargs: Dict[str, Any] = {
            "metadata": DocumentMetadata.from_dict(data.get("metadata")),
            "personal_info": PersonalInfo.from_dict(data.get("personalInfo")),
            "summary": Summary.from_dict(data.get("summary")),
            "skills": SkillSet.from_dict(data.get("skills")),
        }
        for key, record_type in cls.LIST_MEMBERS.items():
            items = data.get(key)
            if not isinstance(items, (list, tuple)):
                items = []
            kwargs[_attribute_for(key)] = [
                record_type.from_dict(item, id_generator)
                for item in items
                if isinstance(item, Mapping)
            ]

        return cls(**kwargs)


def _attribute_for(key: str) -> str:
    """Map a top-level document key back to its ResumeDocument attribute."""
    return {"customSections": "custom_sections", "unmappedBlocks": "unmapped_blocks"}.get(key, key)
