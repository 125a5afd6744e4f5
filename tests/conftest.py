"""Shared fixtures for unit and integration tests."""

from pathlib import Path

import pytest

from quiver.contexts.intake.resume_record import (
    ResumeEntry,
    ResumeRecord,
    ResumeSection,
    load_resume_record,
)
from quiver.contexts.verification.extractor import ExtractedDocument

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_record_path() -> Path:
    return FIXTURES_PATH / "sample_resume.yaml"


@pytest.fixture
def json_resume_path() -> Path:
    return FIXTURES_PATH / "json_resume.json"


@pytest.fixture
def sample_record(sample_record_path) -> ResumeRecord:
    return load_resume_record(sample_record_path)


@pytest.fixture
def john_doe() -> ResumeRecord:
    """Minimal in-memory record for synthetic documents."""
    return ResumeRecord(
        name="John Doe",
        email="john@example.com",
        phone="(555) 123-4567",
        website="https://example.com/",
        sections=(
            ResumeSection(
                title="Work Experience",
                entries=(ResumeEntry(heading="Engineer", dates="2014 - 2016"),),
            ),
        ),
    )


@pytest.fixture
def make_document():
    """Factory for synthetic ExtractedDocuments."""

    def _make(text: str = "", page_count: int = 1, metadata=None) -> ExtractedDocument:
        if metadata is None:
            metadata = {"Title": "John Doe Résumé"}
        return ExtractedDocument(page_count=page_count, metadata=metadata, full_text=text)

    return _make
