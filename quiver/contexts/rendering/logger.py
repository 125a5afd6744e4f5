"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

import reportlab
from loguru import logger

from quiver.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"ReportLab": reportlab.Version},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_generation_start(resume_name: str, output_path: Path, num_sections: int) -> None:
    """Log start of PDF generation with context."""
    _log_info(f"Generating PDF: {resume_name}")
    _log_debug(f"  Output: {output_path}")
    _log_debug(f"  Sections: {num_sections}")


def log_generation_result(
    resume_name: str,
    output_path: Path,
    elapsed_time: float,
    num_pages: Optional[int] = None,
) -> None:
    """Log a successful generation with size and page count."""
    size_kb = output_path.stat().st_size / 1024
    _log_success(f"{resume_name}: {num_pages} page(s), {size_kb:.1f} KB ({elapsed_time:.2f}s)")
    _log_debug(f"  PDF: {output_path}")


def log_generation_failure(resume_name: str, error: Exception, elapsed_time: float) -> None:
    """Log a failed generation."""
    _log_error(f"Generation failed: {resume_name} ({elapsed_time:.2f}s)")
    for line in str(error).splitlines():
        _log_error(f"  {line}")
