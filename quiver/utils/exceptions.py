"""Precondition exceptions that abort a verification run before any check is evaluated."""

from pathlib import Path
from typing import Optional


class PreconditionError(Exception):
    """
    Exception raised when a collaborator fails before the checklist can run.

    Checklist failures are never raised; they are reported as CheckResults.
    A PreconditionError means there was nothing to check. Each context defines
    its own subclass in contexts/{context}/exceptions.py.

    Attributes:
        message: Error description
        collaborator: Which collaborator failed ("generator", "extractor", "record")
        path: File the collaborator was working on
        original_error: The underlying exception, if any
    """

    collaborator = "unknown"

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        # Build enhanced error message
        parts = [f"[{self.collaborator}] {message}"]

        if path is not None:
            parts.append(f"File: {path}")

        if original_error is not None:
            parts.append(f"Original error: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))
