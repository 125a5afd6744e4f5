"""Unit tests for precondition exceptions and where each context defines them."""

import re
from pathlib import Path

import pytest

import quiver
from quiver.contexts.intake.exceptions import ResumeRecordError
from quiver.contexts.rendering.exceptions import GenerationError
from quiver.contexts.verification.exceptions import ExtractionError
from quiver.utils.exceptions import PreconditionError

PACKAGE_PATH = Path(quiver.__file__).parent


@pytest.mark.unit
@pytest.mark.parametrize(
    "error_class, collaborator",
    [
        (GenerationError, "generator"),
        (ExtractionError, "extractor"),
        (ResumeRecordError, "record"),
    ],
)
def test_each_context_error_is_a_precondition(error_class, collaborator):
    error = error_class("failed")

    assert isinstance(error, PreconditionError)
    assert error.collaborator == collaborator
    assert str(error) == f"[{collaborator}] failed"


@pytest.mark.unit
def test_enriched_message():
    cause = OSError("disk full")
    error = GenerationError("Could not render resume PDF", path=Path("out.pdf"), original_error=cause)

    assert error.message == "Could not render resume PDF"
    assert str(error).splitlines() == [
        "[generator] Could not render resume PDF",
        "File: out.pdf",
        "Original error: OSError: disk full",
    ]


@pytest.mark.unit
@pytest.mark.parametrize("context", ["intake", "rendering"])
def test_upstream_contexts_do_not_import_verification(context):
    """Intake and rendering sit upstream of verification and must not depend on it."""
    import_line = re.compile(r"^\s*(from|import)\s+quiver\.contexts\.verification", re.MULTILINE)

    for module in (PACKAGE_PATH / "contexts" / context).glob("*.py"):
        assert not import_line.search(module.read_text(encoding="utf-8")), module.name
