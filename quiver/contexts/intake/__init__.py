"""
Intake Context

Responsibilities:
- Loads the resume source record (YAML or JSON)
- Validates the record's structure
- Normalizes JSON Resume input into ordered sections

Owns: ResumeRecord, ResumeSection, ResumeEntry
Never: Reads or writes PDFs
"""

from quiver.contexts.intake.resume_record import (
    ResumeEntry,
    ResumeRecord,
    ResumeSection,
    load_resume_record,
    resume_record_from_dict,
)

__all__ = [
    "ResumeEntry",
    "ResumeRecord",
    "ResumeSection",
    "load_resume_record",
    "resume_record_from_dict",
]
