"""
Verification Pattern Constants

Closed vocabularies, regex patterns and numeric bounds used by the checklist.
Pattern classes follow the frozen-dataclass convention: class-level constants
grouped by the check that consumes them.

These sets are deliberately closed. Extending one changes checklist outcomes
and must be paired with new tests.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Section headers that must appear after the resume name, in lookup order
SECTION_HEADERS: Tuple[str, ...] = (
    "Work Experience",
    "Experience",
    "Employment",
    "Education",
    "Skills",
    "Projects",
)


@dataclass(frozen=True)
class PageBounds:
    """Inclusive page count range for a short-form resume."""

    MIN_PAGES: int = 1
    MAX_PAGES: int = 3


@dataclass(frozen=True)
class FileSizeBounds:
    """Exclusive file size range, in kilobytes (1 KB = 1024 bytes)."""

    MIN_KB: float = 10
    MAX_KB: float = 1000
    BYTES_PER_KB: int = 1024


@dataclass(frozen=True)
class TextVolumeBounds:
    """Exclusive lower bounds on extractable text."""

    MIN_CHARACTERS: int = 100
    MIN_TOKENS: int = 50


@dataclass(frozen=True)
class ContactPatterns:
    """Contact-field matching parameters."""

    # Fallback: match only the last N digits of the phone number
    PHONE_SUFFIX_LENGTH: int = 4

    # Minimal email shape: non-space @ non-space . non-space
    EMAIL_SHAPE: str = r"\S+@\S+\.\S+"


@dataclass(frozen=True)
class MetadataFields:
    """PDF info dictionary keys (leading slash stripped)."""

    TITLE: str = "Title"


class DatePattern(Enum):
    """
    Recognized date formats. Any single match satisfies the date check.

    Members are ordered most specific first, so the reported match names the
    closest format. Each member carries (example, regex, flags). "Present" is matched
    case-insensitively; the month-abbreviation form is case-sensitive so that
    arbitrary three-letter words in lowercase do not count.
    """

    MONTH_YEAR_RANGE = ("05/2014-06/2016", r"\d{1,2}/\d{4}\s*-\s*\d{1,2}/\d{4}", re.IGNORECASE)
    MONTH_YEAR_TO_PRESENT = ("05/2014-Present", r"\d{1,2}/\d{4}\s*-\s*Present", re.IGNORECASE)
    YEAR_RANGE = ("2014-2016", r"\d{4}\s*-\s*\d{4}", re.IGNORECASE)
    YEAR_TO_PRESENT = ("2014-Present", r"\d{4}\s*-\s*Present", re.IGNORECASE)
    MONTH_NAME_YEAR = ("May 2014", r"[A-Z][a-z]{2}\s+\d{4}", 0)

    def __init__(self, example: str, pattern: str, flags: int):
        self.example = example
        self.regex = re.compile(pattern, flags)

    def search(self, text: str) -> Optional[re.Match]:
        return self.regex.search(text)


EMAIL_SHAPE_REGEX = re.compile(ContactPatterns.EMAIL_SHAPE)
