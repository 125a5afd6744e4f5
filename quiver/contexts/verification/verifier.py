"""
Resume verification orchestration.

Composes the collaborators into a single run:

    generate (optional) -> extract -> run_checklist -> VerificationResult

Precondition failures (generator, extractor, record) propagate as
PreconditionError subclasses. Checklist failures never raise; inspect
VerificationResult.is_valid and the checklist instead.
"""

import os
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from quiver.contexts.intake.resume_record import ResumeRecord
from quiver.contexts.rendering.generator import generate_resume_pdf
from quiver.contexts.verification.checklist import ChecklistResult, run_checklist
from quiver.contexts.verification.exceptions import ExtractionError
from quiver.utils.exceptions import PreconditionError
from quiver.contexts.verification.extractor import ExtractedDocument, extract_document
from quiver.contexts.verification.logger import (
    _log_debug,
    log_checklist_result,
    log_precondition_failure,
    log_verification_start,
)

GENERATED_PDF_PREFIX = "quiver_"


@dataclass(frozen=True)
class VerificationResult:
    """
    Result of verifying one PDF against one resume record.

    Attributes:
        pdf_path: The PDF that was verified (may no longer exist for scoped runs)
        document: Extracted view of the PDF
        checklist: Outcome of every check
        file_size_bytes: Raw size of the PDF at verification time
    """

    pdf_path: Path
    document: ExtractedDocument
    checklist: ChecklistResult
    file_size_bytes: int

    @property
    def is_valid(self) -> bool:
        """True only if every check passed."""
        return self.checklist.is_valid

    @property
    def page_count(self) -> int:
        """Actual page count from PDF."""
        return self.document.page_count


def verify_pdf(pdf_path: Union[str, Path], record: ResumeRecord) -> VerificationResult:
    """
    Verify an existing PDF against its resume record.

    Args:
        pdf_path: PDF to verify
        record: Resume record the PDF was generated from

    Returns:
        VerificationResult with the full checklist

    Raises:
        ExtractionError: If the PDF is missing or cannot be parsed

    Example:
        >>> record = load_resume_record("tests/fixtures/sample_resume.yaml")
        >>> result = verify_pdf("outs/results/2025-11-14/resume.pdf", record)
        >>> if not result.is_valid:
        ...     print(format_checklist_report(result.checklist))
    """
    pdf_path = Path(pdf_path)
    resume_name = record.name or "(unnamed)"

    try:
        if not pdf_path.exists():
            raise ExtractionError("PDF not found", path=pdf_path)
        file_size_bytes = pdf_path.stat().st_size
        log_verification_start(resume_name, pdf_path, file_size_bytes)
        document = extract_document(pdf_path)
    except PreconditionError as e:
        log_precondition_failure(resume_name, e)
        raise

    checklist = run_checklist(document, record, file_size_bytes)
    log_checklist_result(resume_name, checklist)

    return VerificationResult(
        pdf_path=pdf_path,
        document=document,
        checklist=checklist,
        file_size_bytes=file_size_bytes,
    )


@contextmanager
def generated_pdf(
    record: ResumeRecord, output_dir: Optional[Union[str, Path]] = None
) -> Iterator[Path]:
    """
    Generate a PDF to a uniquely named file and remove it on exit.

    The file is removed on every exit path: normal completion, an exception
    raised by the caller, or a generation failure. Unique names let
    independent runs share an output directory.

    Args:
        record: Resume record to render
        output_dir: Directory for the temporary file (default: system temp dir)

    Yields:
        Path to the generated PDF

    Raises:
        GenerationError: If the generator fails (no file is left behind)
    """
    if output_dir is not None:
        Path(output_dir).mkdir(parents=True, exist_ok=True)

    fd, name = tempfile.mkstemp(suffix=".pdf", prefix=GENERATED_PDF_PREFIX, dir=output_dir)
    os.close(fd)
    pdf_path = Path(name)

    try:
        generate_resume_pdf(record, pdf_path)
        yield pdf_path
    finally:
        if pdf_path.exists():
            pdf_path.unlink()
            _log_debug(f"Removed generated PDF: {pdf_path}")


def generate_and_verify(
    record: ResumeRecord, output_dir: Optional[Union[str, Path]] = None
) -> VerificationResult:
    """
    Generate a fresh PDF from the record, verify it, and remove it.

    Raises:
        GenerationError: If the generator fails
        ExtractionError: If the generated PDF cannot be parsed
    """
    with generated_pdf(record, output_dir=output_dir) as pdf_path:
        return verify_pdf(pdf_path, record)
