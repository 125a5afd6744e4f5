"""
Resume PDF verification checklist.

Applies a fixed battery of independent checks to an extracted document, the
resume record it was generated from, and the raw file size. Every check always
runs, so a single result reports all failures for the run.

Checks (in report order):
- page_bounds: 1 <= pages <= 3
- title_metadata: non-empty Title in the PDF info dictionary
- reading_order: name appears before every recognized section header
- file_size: 10 KB < size < 1000 KB
- text_volume: > 100 characters and > 50 whitespace-delimited tokens
- contact_email / contact_phone / contact_website: contact fields present in text
- date_format: at least one recognized date pattern
- email_format: at least one email-shaped token

A check that needs a record field the record does not have reports as
inconclusive rather than passing silently.

Known limitation - phone suffix fallback:
    contact_phone passes when only the last four digits of the phone number
    appear in the text. This tolerates formatting variants (parentheses, dashes,
    country codes) but will also match any unrelated four-digit run, such as a
    year. A suffix-only match is reported with a "weak match" note so it can
    be told apart from a full-number match.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from quiver.contexts.intake.resume_record import ResumeRecord
from quiver.contexts.verification.extractor import ExtractedDocument
from quiver.contexts.verification.patterns import (
    EMAIL_SHAPE_REGEX,
    SECTION_HEADERS,
    ContactPatterns,
    DatePattern,
    FileSizeBounds,
    MetadataFields,
    PageBounds,
    TextVolumeBounds,
)
from quiver.utils.text_processing import (
    count_tokens,
    normalize_phone,
    normalize_website,
    truncate_display,
)


class CheckStatus(Enum):
    PASS = "pass"
    FAIL = "fail"
    INCONCLUSIVE = "inconclusive"


@dataclass(frozen=True)
class CheckNames:
    """Stable identifiers for each check, in report order."""

    PAGE_BOUNDS: str = "page_bounds"
    TITLE_METADATA: str = "title_metadata"
    READING_ORDER: str = "reading_order"
    FILE_SIZE: str = "file_size"
    TEXT_VOLUME: str = "text_volume"
    CONTACT_EMAIL: str = "contact_email"
    CONTACT_PHONE: str = "contact_phone"
    CONTACT_WEBSITE: str = "contact_website"
    DATE_FORMAT: str = "date_format"
    EMAIL_FORMAT: str = "email_format"


class IssueTemplates:
    """Centralized issue message templates (f-string style)."""

    CHECK_FAILED = "{name}: expected {expected}, observed {observed}"
    CHECK_INCONCLUSIVE = "{name}: inconclusive ({reason})"

    # Report lines
    REPORT_ISSUE = "issue:check_{status}::check:{name}::expected:{expected}::observed:{observed}"
    REPORT_ACTION = "action: {action}"


# Suggested follow-up per check, used in the actionable report
CHECK_ACTIONS = {
    CheckNames.PAGE_BOUNDS: "Adjust content or layout so the document renders to 1-3 pages",
    CheckNames.TITLE_METADATA: "Set the PDF Title in the generator's document metadata",
    CheckNames.READING_ORDER: "Render the name header before any section heading",
    CheckNames.FILE_SIZE: "Check for missing content (too small) or embedded assets (too large)",
    CheckNames.TEXT_VOLUME: "Ensure text is drawn as text, not images or outlined glyphs",
    CheckNames.CONTACT_EMAIL: "Render the record's email address verbatim",
    CheckNames.CONTACT_PHONE: "Render the record's phone number",
    CheckNames.CONTACT_WEBSITE: "Render the record's website, with or without scheme",
    CheckNames.DATE_FORMAT: "Use a recognized date format, e.g. '2014 - Present' or 'May 2014'",
    CheckNames.EMAIL_FORMAT: "Render at least one email address",
}

INCONCLUSIVE_ACTION = "Add the missing field to the resume record and re-run verification"


@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of a single check.

    Attributes:
        name: Check identifier (see CheckNames)
        status: pass, fail or inconclusive
        expected: Human-readable condition the check requires
        observed: Human-readable value the check saw
        note: Extra context (reason for inconclusive, weak-match marker)
    """

    name: str
    status: CheckStatus
    expected: str
    observed: str
    note: str = ""

    @property
    def passed(self) -> bool:
        return self.status is CheckStatus.PASS

    def get_issues(self) -> List[str]:
        if self.status is CheckStatus.FAIL:
            return [
                IssueTemplates.CHECK_FAILED.format(
                    name=self.name, expected=self.expected, observed=self.observed
                )
            ]
        if self.status is CheckStatus.INCONCLUSIVE:
            return [IssueTemplates.CHECK_INCONCLUSIVE.format(name=self.name, reason=self.note)]
        return []


@dataclass(frozen=True)
class ChecklistResult:
    """All check outcomes for one verification run, in report order."""

    checks: Tuple[CheckResult, ...] = field(default_factory=tuple)

    @property
    def failures(self) -> List[CheckResult]:
        return [c for c in self.checks if c.status is CheckStatus.FAIL]

    @property
    def inconclusive(self) -> List[CheckResult]:
        return [c for c in self.checks if c.status is CheckStatus.INCONCLUSIVE]

    @property
    def issues(self) -> List[str]:
        """Issue lines from every non-passing check."""
        return [issue for check in self.checks for issue in check.get_issues()]

    @property
    def is_valid(self) -> bool:
        """True only if every check passed (inconclusive is not a pass)."""
        return all(c.passed for c in self.checks)

    @property
    def names(self) -> List[str]:
        return [c.name for c in self.checks]

    def get(self, name: str) -> Optional[CheckResult]:
        """Look up a check outcome by name, or None."""
        for check in self.checks:
            if check.name == name:
                return check
        return None


def _passed(name: str, expected: str, observed: str, note: str = "") -> CheckResult:
    return CheckResult(name, CheckStatus.PASS, expected, observed, note)


def _failed(name: str, expected: str, observed: str) -> CheckResult:
    return CheckResult(name, CheckStatus.FAIL, expected, observed)


def _inconclusive(name: str, expected: str, reason: str) -> CheckResult:
    return CheckResult(name, CheckStatus.INCONCLUSIVE, expected, "n/a", note=reason)


# =============================================================================
# Structural checks
# =============================================================================


def check_page_bounds(document: ExtractedDocument) -> CheckResult:
    """Page count must fall within PageBounds (inclusive)."""
    expected = f"{PageBounds.MIN_PAGES} <= pages <= {PageBounds.MAX_PAGES}"
    observed = f"{document.page_count} page(s)"
    if PageBounds.MIN_PAGES <= document.page_count <= PageBounds.MAX_PAGES:
        return _passed(CheckNames.PAGE_BOUNDS, expected, observed)
    return _failed(CheckNames.PAGE_BOUNDS, expected, observed)


def check_title_metadata(document: ExtractedDocument) -> CheckResult:
    """PDF info dictionary must carry a non-empty Title."""
    expected = "non-empty Title in PDF metadata"
    title = (document.metadata.get(MetadataFields.TITLE) or "").strip()
    if title:
        return _passed(CheckNames.TITLE_METADATA, expected, f"Title '{truncate_display(title, 60)}'")
    observed = "Title empty" if MetadataFields.TITLE in document.metadata else "Title missing"
    return _failed(CheckNames.TITLE_METADATA, expected, observed)


def check_reading_order(document: ExtractedDocument, record: ResumeRecord) -> CheckResult:
    """
    Name must be found and must precede every recognized section header.

    Uses the first occurrence of the name and of each header (exact substring).
    At least one header from SECTION_HEADERS must be present; finding none is
    a failure, not a vacuous pass.
    """
    expected = "name present and before every section header"
    if not record.name:
        return _inconclusive(CheckNames.READING_ORDER, expected, "record has no name")
    if not record.sections:
        return _inconclusive(CheckNames.READING_ORDER, expected, "record has no sections")

    text = document.full_text
    name_pos = text.find(record.name)
    if name_pos == -1:
        return _failed(CheckNames.READING_ORDER, expected, f"name '{record.name}' not found")

    positions = {}
    for header in SECTION_HEADERS:
        pos = text.find(header)
        if pos != -1:
            positions[header] = pos

    if not positions:
        return _failed(
            CheckNames.READING_ORDER,
            expected,
            f"no section header found (looked for: {', '.join(SECTION_HEADERS)})",
        )

    misplaced = [header for header, pos in positions.items() if pos <= name_pos]
    if misplaced:
        before = ", ".join(f"'{h}' at {positions[h]}" for h in misplaced)
        return _failed(
            CheckNames.READING_ORDER, expected, f"name at {name_pos}; headers before it: {before}"
        )

    found = ", ".join(f"'{h}' at {pos}" for h, pos in positions.items())
    return _passed(CheckNames.READING_ORDER, expected, f"name at {name_pos}; {found}")


def check_file_size(file_size_bytes: int) -> CheckResult:
    """File size in KB must fall strictly between FileSizeBounds."""
    size_kb = file_size_bytes / FileSizeBounds.BYTES_PER_KB
    expected = f"{FileSizeBounds.MIN_KB:g} KB < size < {FileSizeBounds.MAX_KB:g} KB"
    observed = f"{size_kb:.2f} KB"
    if FileSizeBounds.MIN_KB < size_kb < FileSizeBounds.MAX_KB:
        return _passed(CheckNames.FILE_SIZE, expected, observed)
    return _failed(CheckNames.FILE_SIZE, expected, observed)


def check_text_volume(document: ExtractedDocument) -> CheckResult:
    """Extracted text must be long enough to rule out image-only output."""
    num_chars = len(document.full_text)
    num_tokens = count_tokens(document.full_text)
    expected = (
        f"> {TextVolumeBounds.MIN_CHARACTERS} characters and > {TextVolumeBounds.MIN_TOKENS} tokens"
    )
    observed = f"{num_chars} characters, {num_tokens} tokens"
    if num_chars > TextVolumeBounds.MIN_CHARACTERS and num_tokens > TextVolumeBounds.MIN_TOKENS:
        return _passed(CheckNames.TEXT_VOLUME, expected, observed)
    return _failed(CheckNames.TEXT_VOLUME, expected, observed)


# =============================================================================
# Contact checks
# =============================================================================


def check_contact_email(document: ExtractedDocument, record: ResumeRecord) -> CheckResult:
    expected = "record email present verbatim"
    if not record.email:
        return _inconclusive(CheckNames.CONTACT_EMAIL, expected, "record has no email")
    if record.email in document.full_text:
        return _passed(CheckNames.CONTACT_EMAIL, expected, f"found '{record.email}'")
    return _failed(CheckNames.CONTACT_EMAIL, expected, f"'{record.email}' not found")


def check_contact_phone(document: ExtractedDocument, record: ResumeRecord) -> CheckResult:
    """
    Phone digits (or their last four) must appear in the text.

    A suffix-only match passes with a "weak match" note.
    """
    expected = "phone digits, or their last 4, present"
    digits = normalize_phone(record.phone)
    if not digits:
        return _inconclusive(CheckNames.CONTACT_PHONE, expected, "record phone has no digits")

    text = document.full_text
    if digits in text:
        return _passed(CheckNames.CONTACT_PHONE, expected, f"found '{digits}'")

    suffix = digits[-ContactPatterns.PHONE_SUFFIX_LENGTH :]
    if suffix in text:
        return _passed(
            CheckNames.CONTACT_PHONE,
            expected,
            f"found suffix '{suffix}'",
            note="weak match: only the last digits were found",
        )
    return _failed(CheckNames.CONTACT_PHONE, expected, f"neither '{digits}' nor '{suffix}' found")


def check_contact_website(document: ExtractedDocument, record: ResumeRecord) -> CheckResult:
    """
    Website must appear with or without its scheme and trailing slash.

    The normalized form is a substring of the record URL, so matching it also
    covers text that carries the URL verbatim.
    """
    expected = "website present (scheme optional)"
    domain = normalize_website(record.website)
    if not domain:
        return _inconclusive(CheckNames.CONTACT_WEBSITE, expected, "record has no website")

    if domain in document.full_text:
        return _passed(CheckNames.CONTACT_WEBSITE, expected, f"found '{domain}'")
    return _failed(CheckNames.CONTACT_WEBSITE, expected, f"'{domain}' not found")


# =============================================================================
# Formatting checks
# =============================================================================


def check_date_format(document: ExtractedDocument) -> CheckResult:
    """At least one DatePattern must match; the first match is reported."""
    expected = "a date like " + " | ".join(p.example for p in DatePattern)
    for pattern in DatePattern:
        match = pattern.search(document.full_text)
        if match:
            return _passed(CheckNames.DATE_FORMAT, expected, f"{pattern.name} '{match.group(0)}'")
    return _failed(CheckNames.DATE_FORMAT, expected, "no recognized date pattern")


def check_email_format(document: ExtractedDocument) -> CheckResult:
    expected = "an email-shaped token"
    match = EMAIL_SHAPE_REGEX.search(document.full_text)
    if match:
        return _passed(CheckNames.EMAIL_FORMAT, expected, f"'{truncate_display(match.group(0), 60)}'")
    return _failed(CheckNames.EMAIL_FORMAT, expected, "no email-shaped token")


# =============================================================================
# Checklist
# =============================================================================


def run_checklist(
    document: ExtractedDocument,
    record: ResumeRecord,
    file_size_bytes: int,
) -> ChecklistResult:
    """
    Run every check against one document.

    Pure evaluation: the same inputs always produce an equal ChecklistResult.

    Args:
        document: Extracted view of the PDF
        record: Resume record the PDF was generated from
        file_size_bytes: Raw size of the PDF file

    Returns:
        ChecklistResult with one CheckResult per check, in report order
    """
    return ChecklistResult(
        checks=(
            check_page_bounds(document),
            check_title_metadata(document),
            check_reading_order(document, record),
            check_file_size(file_size_bytes),
            check_text_volume(document),
            check_contact_email(document, record),
            check_contact_phone(document, record),
            check_contact_website(document, record),
            check_date_format(document),
            check_email_format(document),
        )
    )


def format_checklist_report(result: ChecklistResult) -> str:
    """
    Generate an actionable report for every check that did not pass.

    Each entry is numbered and carries a machine-greppable issue line followed
    by a suggested action. Returns an empty string when all checks passed.
    """
    lines = []

    recommendations_counter = 0
    recommendations_counter_str = "\n#{counter}"

    for check in result.checks:
        if check.passed:
            continue

        recommendations_counter += 1
        lines.append(recommendations_counter_str.format(counter=recommendations_counter))
        lines.append(
            IssueTemplates.REPORT_ISSUE.format(
                status=check.status.value,
                name=check.name,
                expected=check.expected,
                observed=check.note if check.status is CheckStatus.INCONCLUSIVE else check.observed,
            )
        )
        action = (
            INCONCLUSIVE_ACTION
            if check.status is CheckStatus.INCONCLUSIVE
            else CHECK_ACTIONS[check.name]
        )
        lines.append(IssueTemplates.REPORT_ACTION.format(action=action))

    return "\n".join(lines)
