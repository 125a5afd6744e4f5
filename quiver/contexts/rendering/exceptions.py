"""Custom exceptions for the rendering context."""

from quiver.utils.exceptions import PreconditionError


class GenerationError(PreconditionError):
    """Raised when the PDF generator cannot produce a document."""

    collaborator = "generator"
