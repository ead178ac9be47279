"""
Unit tests for the experience, education, project and certification extractors.

Tests the line fold in curriculo.contexts.parsing.record_extractors.
"""

import pytest

from curriculo.contexts.parsing.extraction_patterns import split_record_header
from curriculo.contexts.parsing.record_extractors import (
    RecordFoldState,
    extract_certifications,
    extract_education,
    extract_experience,
    extract_projects,
    fold_record_line,
    open_record_draft,
)
from curriculo.utils.identifiers import SequentialIdGenerator


@pytest.fixture
def ids():
    return SequentialIdGenerator()


@pytest.mark.unit
class TestExtractExperience:
    """Tests for experience record building."""

    def test_boundary_line_fields(self, ids):
        result = extract_experience(["Senior Engineer - Acme Corp 01/2020 - Present"], ids)

        assert len(result.records) == 1
        entry = result.records[0]
        assert entry.position == "Senior Engineer"
        assert entry.company == "Acme Corp"
        assert entry.start_date == "01/2020"
        assert entry.end_date == "Present"
        assert entry.current is True
        assert entry.id == "id-1"

    def test_bullet_goes_to_highlights_not_description(self, ids):
        lines = [
            "Senior Engineer - Acme Corp 01/2020 - Present",
            "• Led migration to microservices",
        ]
        entry = extract_experience(lines, ids).records[0]

        assert entry.highlights == ["Led migration to microservices"]
        assert entry.description_raw == ""

    def test_highlight_order_preserved(self, ids):
        lines = ["Engineer - Acme 2019 - 2021", "- first", "* second", "• third"]
        entry = extract_experience(lines, ids).records[0]
        assert entry.highlights == ["first", "second", "third"]

    def test_description_lines_joined(self, ids):
        lines = ["Engineer - Acme 2019", "Owned the payments API.", "Mentored two juniors."]
        entry = extract_experience(lines, ids).records[0]
        assert entry.description_raw == "Owned the payments API.\nMentored two juniors."

    def test_new_boundary_closes_open_record(self, ids):
        lines = [
            "Senior Engineer - Acme 2020 - Present",
            "• Platform work",
            "Software Engineer | Globex 2016 - 2019",
            "• Billing pipeline",
        ]
        records = extract_experience(lines, ids).records

        assert [r.company for r in records] == ["Acme", "Globex"]
        assert records[0].highlights == ["Platform work"]
        assert records[1].highlights == ["Billing pipeline"]
        assert records[1].current is False

    def test_at_separator(self, ids):
        entry = extract_experience(["Engineer at Initech 2018 - 2019"], ids).records[0]
        assert (entry.position, entry.company) == ("Engineer", "Initech")

    def test_hyphenated_title_not_split(self, ids):
        entry = extract_experience(["Full-Stack Developer 2019"], ids).records[0]
        assert entry.position == "Full-Stack Developer"
        assert entry.company == ""
        assert entry.end_date == ""

    def test_organization_backfill(self, ids):
        lines = ["Engineer 2020 - 2021", "Acme Corp", "Worked on the checkout flow."]
        entry = extract_experience(lines, ids).records[0]

        assert entry.company == "Acme Corp"
        assert entry.description_raw == "Acme Corp\nWorked on the checkout flow."

    def test_backfill_skips_lines_with_period(self, ids):
        entry = extract_experience(["Engineer 2020", "Acme Inc."], ids).records[0]
        assert entry.company == ""

    def test_backfill_length_limit(self, ids):
        lines = ["Engineer 2020", "Acme Corporation International Holdings"]
        entry = extract_experience(lines, ids, backfill_max_length=20).records[0]
        assert entry.company == ""

    def test_lines_before_first_record_are_orphans(self, ids):
        lines = ["Highlights of my career", "Engineer - Acme 2020"]
        result = extract_experience(lines, ids)

        assert result.orphans == ["Highlights of my career"]
        assert len(result.records) == 1

    def test_empty_block(self, ids):
        result = extract_experience([], ids)
        assert result.records == []
        assert result.orphans == []


@pytest.mark.unit
def test_fold_never_mutates_input_state():
    """Each fold step returns a new state."""
    state = RecordFoldState(open_record=open_record_draft("Engineer - Acme 2020"))
    new_state = fold_record_line(state, "• Shipped v2")

    assert state.open_record.highlights == ()
    assert new_state.open_record.highlights == ("Shipped v2",)


@pytest.mark.unit
def test_empty_bullet_is_skipped():
    state = RecordFoldState(open_record=open_record_draft("Engineer - Acme 2020"))
    assert fold_record_line(state, "•") == state


@pytest.mark.unit
def test_extract_education(ids):
    lines = ["MSc Physics - MIT 2010 - 2012", "Thesis on cold atoms.", "BSc Physics | Caltech 2006 - 2010"]
    records = extract_education(lines, ids).records

    assert [(r.degree, r.institution) for r in records] == [
        ("MSc Physics", "MIT"),
        ("BSc Physics", "Caltech"),
    ]
    assert records[0].start_date == "2010"
    assert records[0].end_date == "2012"
    assert records[0].description_raw == "Thesis on cold atoms."
    assert records[0].course == ""


@pytest.mark.unit
def test_education_ongoing():
    entry = extract_education(["PhD - ETH Zurich 2022 - current"], SequentialIdGenerator()).records[0]
    assert entry.current is True


@pytest.mark.unit
class TestExtractProjects:
    """Tests for the line-shape project fold."""

    def test_short_line_is_title_long_lines_description(self, ids):
        lines = [
            "Ledger",
            "A double-entry accounting library for small businesses.",
            "https://github.com/janedoe/ledger",
            "Weather CLI",
        ]
        projects = extract_projects(lines, ids).records

        assert [p.title for p in projects] == ["Ledger", "Weather CLI"]
        assert projects[0].description_raw == (
            "A double-entry accounting library for small businesses.\n"
            "https://github.com/janedoe/ledger"
        )
        assert projects[0].links == []
        assert projects[0].technologies == []

    def test_long_first_line_is_orphan(self, ids):
        lines = ["A long introduction to the projects I built over the years."]
        result = extract_projects(lines, ids)
        assert result.records == []
        assert result.orphans == lines

    def test_custom_title_limit(self, ids):
        projects = extract_projects(["Ledger", "Short note"], ids, title_max_length=8).records
        assert [p.title for p in projects] == ["Ledger"]
        assert projects[0].description_raw == "Short note"


@pytest.mark.unit
def test_extract_certifications(ids):
    lines = ["• AWS Solutions Architect - Amazon 2021", "Scrum Master", ""]
    certifications = extract_certifications(lines, ids).records

    assert len(certifications) == 2
    assert certifications[0].name == "AWS Solutions Architect"
    assert certifications[0].issuer == "Amazon"
    assert certifications[0].date == "2021"
    assert certifications[1].name == "Scrum Master"
    assert certifications[1].issuer == ""
    assert certifications[1].date == ""


@pytest.mark.unit
class TestSplitRecordHeader:
    """Tests for the ordered separator table."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Engineer - Acme", ["Engineer", "Acme"]),
            ("Engineer – Acme", ["Engineer", "Acme"]),
            ("Engineer — Acme", ["Engineer", "Acme"]),
            ("Engineer | Acme", ["Engineer", "Acme"]),
            ("Engineer at Acme", ["Engineer", "Acme"]),
            ("Engineer AT Acme", ["Engineer", "Acme"]),
            ("Engineer  Acme", ["Engineer", "Acme"]),
            ("Senior Engineer - Acme Corp  - ", ["Senior Engineer", "Acme Corp"]),
        ],
    )
    def test_separators(self, text, expected):
        assert split_record_header(text) == expected

    def test_dash_wins_over_pipe(self):
        assert split_record_header("A | B - C") == ["A | B", "C"]

    def test_pipe_wins_over_at(self):
        assert split_record_header("Engineer at Acme | Remote") == ["Engineer at Acme", "Remote"]

    def test_at_wins_over_double_space(self):
        assert split_record_header("Lead  Engineer at Acme") == ["Lead  Engineer", "Acme"]

    def test_single_part(self):
        assert split_record_header("Full-Stack Developer") == ["Full-Stack Developer"]

    def test_empty(self):
        assert split_record_header("") == []
        assert split_record_header("  -  | ") == []

    def test_closing_brackets_kept(self):
        assert split_record_header("Engineer (Contract) - Acme [EU]") == ["Engineer (Contract)", "Acme [EU]"]


@pytest.mark.unit
class TestBracketedNames:
    """Parenthesised suffixes survive header splitting."""

    def test_company_suffix(self, ids):
        entry = extract_experience(["Senior Engineer - Acme Corp (Remote) 2020 - 2022"], ids).records[0]
        assert (entry.position, entry.company) == ("Senior Engineer", "Acme Corp (Remote)")
        assert (entry.start_date, entry.end_date) == ("2020", "2022")

    def test_position_suffix(self, ids):
        entry = extract_experience(["Engineer (Contract) - Acme 2020"], ids).records[0]
        assert (entry.position, entry.company) == ("Engineer (Contract)", "Acme")

    def test_degree_suffix(self, ids):
        entry = extract_education(["MSc Physics (Honours) - MIT 2010 - 2012"], ids).records[0]
        assert (entry.degree, entry.institution) == ("MSc Physics (Honours)", "MIT")

    def test_certification_acronym(self, ids):
        (certification,) = extract_certifications(["Certified Kubernetes Administrator (CKA) 2022"], ids).records
        assert certification.name == "Certified Kubernetes Administrator (CKA)"
        assert certification.date == "2022"

    def test_bracketed_dates_still_removed(self, ids):
        entry = extract_experience(["Engineer at Acme (2019 - 2021)"], ids).records[0]
        assert (entry.position, entry.company) == ("Engineer", "Acme")


@pytest.mark.unit
@pytest.mark.parametrize("glyph", ["•", "-", "*"])
def test_bullet_glyph_on_boundary_line_is_dropped(glyph, ids):
    entry = extract_experience([f"{glyph} Engineer - Acme 2020 - 2021"], ids).records[0]
    assert (entry.position, entry.company) == ("Engineer", "Acme")
    assert (entry.start_date, entry.end_date) == ("2020", "2021")
