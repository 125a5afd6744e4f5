"""Unit tests for loading resume source records."""

import dataclasses

import pytest

from quiver.contexts.intake.resume_record import (
    ResumeRecord,
    load_resume_record,
    resume_record_from_dict,
)
from quiver.contexts.intake.exceptions import ResumeRecordError
from quiver.utils.exceptions import PreconditionError


@pytest.mark.unit
def test_load_native_yaml(sample_record):
    assert sample_record.name == "Jane Doe"
    assert sample_record.email == "jane.doe@example.com"
    assert sample_record.phone == "(555) 123-4567"
    assert sample_record.website == "https://janedoe.dev/"
    assert sample_record.section_titles == ["Work Experience", "Education", "Skills", "Projects"]

    first_job = sample_record.sections[0].entries[0]
    assert first_job.heading == "Senior Software Engineer"
    assert first_job.subheading == "Northwind Analytics"
    assert first_job.dates == "Jun 2019 - Present"
    assert len(first_job.bullets) == 5


@pytest.mark.unit
def test_record_is_immutable(sample_record):
    with pytest.raises(dataclasses.FrozenInstanceError):
        sample_record.name = "Someone Else"


@pytest.mark.unit
def test_load_json_resume(json_resume_path):
    record = load_resume_record(json_resume_path)

    assert record.name == "Richard Hendricks"
    assert record.website == "http://piedpiper.example"
    assert record.section_titles == ["Work Experience", "Education", "Skills", "Projects"]

    work = record.sections[0].entries
    assert work[0].heading == "CEO and Lead Engineer"
    assert work[0].subheading == "Pied Piper"
    assert work[0].dates == "Dec 2013 - Present"
    assert work[1].dates == "Jun 2011 - Nov 2013"
    assert work[1].text == "Worked on the Nucleus search and storage platform."

    education = record.sections[1].entries[0]
    assert education.heading == "B.S. Computer Science"
    assert education.dates == "Sep 2007 - Jun 2011"

    skills = record.sections[2].entries
    assert skills[0].text == "Middle-out, Huffman coding, LZ77"

    project = record.sections[3].entries[0]
    assert project.dates == "2016 - Present"


@pytest.mark.unit
def test_json_resume_skips_empty_sections():
    record = resume_record_from_dict(
        {"basics": {"name": "A"}, "work": [], "skills": [{"name": "Go", "keywords": []}]}
    )
    assert record.section_titles == ["Skills"]


@pytest.mark.unit
def test_json_resume_drops_blank_list_items():
    record = resume_record_from_dict(
        {
            "basics": {"name": "A"},
            "work": [{"position": "Engineer", "highlights": ["Shipped it", "", "   ", None]}],
            "education": [{"institution": "State U", "courses": ["", "Compilers"]}],
            "skills": [{"name": "Languages", "keywords": ["Go", " ", "Python"]}],
        }
    )

    work, education, skills = (section.entries[0] for section in record.sections)
    assert work.bullets == ("Shipped it",)
    assert education.bullets == ("Compilers",)
    assert skills.text == "Go, Python"


@pytest.mark.unit
def test_native_entry_drops_blank_bullets():
    record = resume_record_from_dict(
        {
            "basics": {"name": "A"},
            "sections": [{"title": "Projects", "entries": [{"heading": "x", "bullets": ["", "kept"]}]}],
        }
    )
    assert record.sections[0].entries[0].bullets == ("kept",)


@pytest.mark.unit
def test_missing_contact_fields_load_as_empty(tmp_path):
    path = tmp_path / "record.yaml"
    path.write_text("basics:\n  name: Jane Doe\nsections: []\n", encoding="utf-8")

    record = load_resume_record(path)
    assert record.email == ""
    assert record.phone == ""
    assert record.website == ""
    assert record.sections == ()


@pytest.mark.unit
def test_numeric_phone_is_coerced_to_string():
    record = resume_record_from_dict({"basics": {"name": "A", "phone": 5551234567}})
    assert record.phone == "5551234567"


@pytest.mark.unit
def test_bare_string_entries_become_text():
    record = resume_record_from_dict(
        {"basics": {"name": "A"}, "sections": [{"title": "Skills", "entries": ["Python, Go"]}]}
    )
    assert record.sections[0].entries[0].text == "Python, Go"


@pytest.mark.unit
def test_missing_file(tmp_path):
    with pytest.raises(ResumeRecordError, match="not found"):
        load_resume_record(tmp_path / "nope.yaml")


@pytest.mark.unit
def test_missing_basics(tmp_path):
    path = tmp_path / "record.yaml"
    path.write_text("sections: []\n", encoding="utf-8")

    with pytest.raises(ResumeRecordError, match="basics"):
        load_resume_record(path)


@pytest.mark.unit
def test_section_without_title():
    with pytest.raises(ResumeRecordError, match="Section 0"):
        resume_record_from_dict({"basics": {"name": "A"}, "sections": [{"entries": []}]})


@pytest.mark.unit
def test_sections_must_be_a_list():
    with pytest.raises(ResumeRecordError, match="must be a list"):
        resume_record_from_dict({"basics": {"name": "A"}, "sections": {"title": "Skills"}})


@pytest.mark.unit
def test_unparsable_file(tmp_path):
    path = tmp_path / "record.yaml"
    path.write_text("basics: [unclosed\n", encoding="utf-8")

    with pytest.raises(ResumeRecordError) as exc_info:
        load_resume_record(path)
    assert exc_info.value.original_error is not None


@pytest.mark.unit
def test_record_error_is_a_value_error_and_a_precondition():
    error = ResumeRecordError("Resume record not found")
    assert isinstance(error, ValueError)
    assert isinstance(error, PreconditionError)
    assert error.collaborator == "record"
    assert str(error).startswith("[record] Resume record not found")


@pytest.mark.unit
def test_source_path_is_not_part_of_equality(sample_record):
    assert sample_record == dataclasses.replace(sample_record, source_path=None)
    assert isinstance(sample_record, ResumeRecord)
