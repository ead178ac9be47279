"""
Unit tests for document assembly, sanitizing and advisory validation.

Tests curriculo.contexts.parsing.assembler and the from_dict/to_dict
helpers of the canonical document structure.
"""

import pytest

from curriculo.contexts.parsing.assembler import (
    REQUIRED_TOP_LEVEL_KEYS,
    ExtractedSections,
    assemble_document,
    sanitize_resume_data,
    validate_resume_data,
)
from curriculo.contexts.parsing.record_extractors import ExtractionResult
from curriculo.contexts.parsing.resume_data_structure import (
    DocumentMetadata,
    ExperienceEntry,
    ResumeDocument,
)
from curriculo.utils.identifiers import SequentialIdGenerator


@pytest.mark.unit
class TestValidateResumeData:
    """Tests for advisory schema validation."""

    def test_complete_document_has_no_violations(self):
        document = ResumeDocument(metadata=DocumentMetadata(source_format="txt", file_name="cv.txt"))
        assert validate_resume_data(document.to_dict()) == []

    def test_every_missing_top_level_key_reported(self):
        violations = validate_resume_data({})
        assert violations == [f"Missing required key: {key}" for key in REQUIRED_TOP_LEVEL_KEYS]

    def test_empty_file_name_reported(self):
        violations = validate_resume_data(ResumeDocument().to_dict())
        assert violations == ["Missing metadata.fileName"]

    def test_wrong_types(self):
        data = ResumeDocument(metadata=DocumentMetadata(file_name="cv.txt")).to_dict()
        data["experience"] = "Engineer at Acme"
        data["skills"]["rawBlocks"] = "Python"
        data["personalInfo"]["otherContacts"] = None
        del data["summary"]["rawText"]

        violations = validate_resume_data(data)

        assert "experience must be an array" in violations
        assert "skills.rawBlocks must be an array" in violations
        assert "personalInfo.otherContacts must be an array" in violations
        assert "Missing summary.rawText" in violations

    def test_non_mapping(self):
        assert validate_resume_data(["not", "a", "document"]) == [
            "Document must be an object, got list"
        ]


@pytest.mark.unit
class TestSanitizeResumeData:
    """Tests for default filling and coercion of foreign documents."""

    def test_fills_defaults_and_ids(self):
        data = {
            "personalInfo": {"fullName": "Jane Doe"},
            "experience": [{"position": "Engineer"}, "junk", {"id": "keep-me", "company": "Acme"}],
            "languages": "English",
            "skills": {"rawBlocks": "Python"},
        }
        document = sanitize_resume_data(data, SequentialIdGenerator())

        assert document.personal_info.full_name == "Jane Doe"
        assert document.personal_info.other_contacts == []
        assert [entry.id for entry in document.experience] == ["id-1", "keep-me"]
        assert document.experience[0].highlights == []
        assert document.languages == []
        assert document.skills.raw_blocks == []
        assert document.metadata.source_format == "manual"
        assert document.metadata.language_guess == "unknown"

    def test_scalar_coercion(self):
        data = {"experience": [{"current": "true", "startDate": 2020, "highlights": "oops"}]}
        entry = sanitize_resume_data(data, SequentialIdGenerator()).experience[0]

        assert entry.current is True
        assert entry.start_date == "2020"
        assert entry.highlights == []

    def test_language_level_default(self):
        data = {"languages": [{"language": "English"}]}
        entry = sanitize_resume_data(data, SequentialIdGenerator()).languages[0]
        assert entry.level == "Intermediate"

    def test_never_raises_on_garbage(self):
        document = sanitize_resume_data("garbage", SequentialIdGenerator())
        assert document.to_dict() == ResumeDocument().to_dict()

    def test_sanitized_document_passes_validation(self):
        data = {"metadata": {"fileName": "cv.pdf", "sourceFormat": "pdf"}, "education": None}
        document = sanitize_resume_data(data, SequentialIdGenerator())
        assert validate_resume_data(document.to_dict()) == []


@pytest.mark.unit
class TestAssembleDocument:
    """Tests for merging extractor outputs."""

    def test_missing_sections_default_to_empty(self):
        document = assemble_document(DocumentMetadata(), ExtractedSections(), SequentialIdGenerator())
        assert document.to_dict() == ResumeDocument().to_dict()

    def test_orphans_become_unmapped_blocks(self):
        sections = ExtractedSections(
            experience=ExtractionResult(orphans=["Career highlights", "See below"]),
            languages=ExtractionResult(orphans=["Deutsch"]),
        )
        document = assemble_document(DocumentMetadata(), sections, SequentialIdGenerator())

        assert len(document.unmapped_blocks) == 2
        first, second = document.unmapped_blocks
        assert first.source_text == "Career highlights\nSee below"
        assert first.reason.startswith("experience")
        assert second.source_text == "Deutsch"
        assert second.reason.startswith("languages")
        assert first.id != second.id

    def test_records_without_id_get_one(self):
        sections = ExtractedSections(
            experience=ExtractionResult(records=[ExperienceEntry(position="Engineer")])
        )
        document = assemble_document(DocumentMetadata(), sections, SequentialIdGenerator())
        assert document.experience[0].id == "id-1"


@pytest.mark.unit
def test_to_dict_uses_canonical_keys():
    """Field names downstream code binds to are emitted verbatim."""
    data = ResumeDocument().to_dict()

    assert list(data) == list(REQUIRED_TOP_LEVEL_KEYS)
    assert list(data["metadata"]) == ["sourceFormat", "fileName", "languageGuess"]
    assert list(data["personalInfo"]) == [
        "fullName",
        "email",
        "phone",
        "location",
        "nationality",
        "workPermit",
        "dateOfBirth",
        "website",
        "linkedin",
        "otherContacts",
    ]
    assert list(data["skills"]["categorized"]) == [
        "infrastructureAndSystems",
        "networkAndSecurity",
        "programmingAndScripting",
        "other",
    ]


@pytest.mark.unit
def test_record_keys():
    sanitized = sanitize_resume_data(
        {"education": [{}], "experience": [{}], "projects": [{}]}, SequentialIdGenerator()
    ).to_dict()

    assert list(sanitized["experience"][0]) == [
        "id",
        "position",
        "company",
        "city",
        "country",
        "startDate",
        "endDate",
        "current",
        "descriptionRaw",
        "highlights",
    ]
    assert "levelEQF" in sanitized["education"][0]
    assert "finalGrade" in sanitized["education"][0]
    assert "clientOrCompany" in sanitized["projects"][0]
