"""Custom exceptions for the intake context."""

from quiver.utils.exceptions import PreconditionError


class ResumeRecordError(PreconditionError, ValueError):
    """
    Raised when the resume source record is missing or structurally invalid.

    Missing individual contact fields are not errors; they load as empty
    strings and the affected checks report as inconclusive.
    """

    collaborator = "record"
