"""
Verification context logger.

Provides logging interface for verification context with automatic [verify] prefix.
All verification modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from quiver.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[verify]"


def setup_verification_logger(log_dir: Path, record_path: Optional[Path] = None) -> Path:
    """
    Setup logger for verification context.

    Args:
        log_dir: Directory for this verification session
        record_path: Resume record being verified against (logged as provenance)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="verify",
        log_dir=log_dir,
        extra_provenance={"Resume record": record_path} if record_path else None,
    )


# Wrapper functions with automatic [verify] prefix


def _log_info(message: str) -> None:
    """Log info message with [verify] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [verify] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [verify] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [verify] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [verify] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level verification-specific logging helpers


def log_verification_start(resume_name: str, pdf_path: Path, file_size_bytes: int) -> None:
    """Log start of verification with context."""
    _log_info(f"Verifying: {resume_name}")
    _log_debug(f"  PDF: {pdf_path}")
    _log_debug(f"  Size: {file_size_bytes} bytes")


def log_checklist_result(resume_name: str, checklist) -> None:
    """
    Log checklist outcome, one line per non-passing check.

    Args:
        resume_name: Name from the resume record
        checklist: ChecklistResult from run_checklist()
    """
    for check in checklist.checks:
        _log_debug(f"  {check.name}: {check.status.value} (observed: {check.observed})")
        if check.note:
            _log_debug(f"    note: {check.note}")

    if checklist.is_valid:
        _log_success(f"{resume_name}: all {len(checklist.checks)} checks passed")
        return

    if checklist.failures:
        _log_error(f"{resume_name}: {len(checklist.failures)} check(s) failed")
        for issue in [i for c in checklist.failures for i in c.get_issues()]:
            _log_error(f"  {issue}")

    if checklist.inconclusive:
        _log_warning(f"{resume_name}: {len(checklist.inconclusive)} check(s) inconclusive")
        for issue in [i for c in checklist.inconclusive for i in c.get_issues()]:
            _log_warning(f"  {issue}")


def log_precondition_failure(resume_name: str, error: Exception) -> None:
    """Log a collaborator failure that aborted the run."""
    _log_error(f"{resume_name}: verification aborted")
    for line in str(error).splitlines():
        _log_error(f"  {line}")
