"""Custom exceptions for the verification context."""

from quiver.utils.exceptions import PreconditionError


class ExtractionError(PreconditionError):
    """Raised when page count, metadata or text cannot be read from a PDF."""

    collaborator = "extractor"
