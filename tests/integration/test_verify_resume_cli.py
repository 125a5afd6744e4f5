"""
Integration tests for the verify_resume.py exit codes.

0: checklist passed, 1: a check failed or was inconclusive, 2: precondition failure.
"""

import importlib.util
from pathlib import Path

import pytest
from loguru import logger
from omegaconf import OmegaConf
from typer.testing import CliRunner

from quiver.contexts.rendering.generator import generate_resume_pdf

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "verify_resume.py"

runner = CliRunner()


@pytest.fixture(scope="module")
def cli():
    module_spec = importlib.util.spec_from_file_location("verify_resume", SCRIPT_PATH)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def isolated_paths(cli, tmp_path, monkeypatch):
    monkeypatch.setattr(cli, "LOGS_PATH", tmp_path / "logs")
    monkeypatch.setattr(cli, "RESULTS_PATH", tmp_path / "results")
    yield
    # Console sink points at the runner's stream, which is gone after invoke
    logger.remove()


@pytest.fixture
def sample_pdf(sample_record, tmp_path):
    return generate_resume_pdf(sample_record, tmp_path / "jane_doe.pdf")


def _edited_record(source: Path, target: Path, **basics) -> Path:
    """Copy a record file with some basics fields overridden."""
    record = OmegaConf.load(source)
    for key, value in basics.items():
        record.basics[key] = value
    OmegaConf.save(record, target)
    return target


@pytest.mark.integration
def test_check_passing_record_exits_0(cli, sample_record_path, tmp_path):
    work_dir = tmp_path / "work"
    result = runner.invoke(cli.app, ["check", str(sample_record_path), "--work-dir", str(work_dir)])

    assert result.exit_code == 0, result.output
    assert "Verification passed" in result.output
    assert list(work_dir.iterdir()) == []


@pytest.mark.integration
def test_verify_passing_pdf_exits_0(cli, sample_pdf, sample_record_path):
    result = runner.invoke(cli.app, ["verify", str(sample_pdf), str(sample_record_path)])

    assert result.exit_code == 0, result.output


@pytest.mark.integration
def test_generate_writes_pdf_and_exits_0(cli, sample_record_path, tmp_path):
    output = tmp_path / "out" / "resume.pdf"
    result = runner.invoke(cli.app, ["generate", str(sample_record_path), "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert output.exists()


@pytest.mark.integration
def test_inconclusive_check_exits_1(cli, sample_pdf, sample_record_path, tmp_path):
    record_path = _edited_record(sample_record_path, tmp_path / "no_email.yaml", email="")

    result = runner.invoke(cli.app, ["verify", str(sample_pdf), str(record_path)])

    assert result.exit_code == 1, result.output
    assert "issue:check_inconclusive::check:contact_email::" in result.output


@pytest.mark.integration
def test_failed_check_exits_1(cli, sample_pdf, sample_record_path, tmp_path):
    record_path = _edited_record(sample_record_path, tmp_path / "other.yaml", name="John Smith")

    result = runner.invoke(cli.app, ["verify", str(sample_pdf), str(record_path)])

    assert result.exit_code == 1, result.output
    assert "issue:check_fail::check:reading_order::" in result.output


@pytest.mark.integration
def test_corrupt_pdf_exits_2(cli, sample_record_path, tmp_path):
    pdf_path = tmp_path / "corrupt.pdf"
    pdf_path.write_bytes(b"%PDF-1.4\nthis is not really a pdf\n")

    result = runner.invoke(cli.app, ["verify", str(pdf_path), str(sample_record_path)])

    assert result.exit_code == 2


@pytest.mark.integration
def test_missing_record_exits_2(cli, sample_pdf, tmp_path):
    result = runner.invoke(cli.app, ["verify", str(sample_pdf), str(tmp_path / "missing.yaml")])

    assert result.exit_code == 2


@pytest.mark.integration
def test_missing_record_for_check_exits_2(cli, tmp_path):
    result = runner.invoke(cli.app, ["check", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 2
