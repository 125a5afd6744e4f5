#!/usr/bin/env python3
"""
Resume PDF Generation and Verification CLI

Generates resume PDFs from a structured record and verifies PDFs against the
resume checklist (page bounds, title metadata, reading order, file size, text
volume, contact info, date/email formatting).

Commands:
    generate - Render a resume record to PDF
    verify   - Verify an existing PDF against its resume record
    check    - Generate to a temporary file, verify, and clean up

Exit codes:
    0 - all checks passed (or generation succeeded)
    1 - one or more checks failed or were inconclusive
    2 - precondition failure (record, generator or extractor)

Examples:\n

    verify_resume.py generate tests/fixtures/sample_resume.yaml              # Write to RESULTS_PATH

    verify_resume.py verify outs/results/2025-11-14/Jane_Doe.pdf tests/fixtures/sample_resume.yaml

    verify_resume.py check tests/fixtures/sample_resume.yaml                 # Fresh, scoped run
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from quiver.contexts.intake.resume_record import ResumeRecord, load_resume_record
from quiver.contexts.rendering.generator import generate_resume_pdf
from quiver.contexts.rendering.logger import setup_rendering_logger
from quiver.contexts.verification.checklist import CheckStatus, format_checklist_report
from quiver.utils.exceptions import PreconditionError
from quiver.contexts.verification.logger import setup_verification_logger
from quiver.contexts.verification.verifier import (
    VerificationResult,
    generate_and_verify,
    verify_pdf,
)
from quiver.utils.timestamp import now, today

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", "."))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))

EXIT_PRECONDITION = 2

STATUS_STYLES = {
    CheckStatus.PASS: ("✓", typer.colors.GREEN),
    CheckStatus.FAIL: ("✗", typer.colors.RED),
    CheckStatus.INCONCLUSIVE: ("?", typer.colors.YELLOW),
}


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(path.resolve().relative_to(PROJECT_ROOT.resolve()))
    except ValueError:
        return str(path)


def _load_record(record_path: Path) -> ResumeRecord:
    try:
        return load_resume_record(record_path)
    except PreconditionError as e:
        _abort(e)


def _abort(error: PreconditionError) -> None:
    typer.secho(f"Error: {error}\n", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=EXIT_PRECONDITION)


def _display_result(result: VerificationResult, log_dir: Path) -> None:
    """Print one line per check, then the actionable report if anything failed."""
    typer.echo(f"  Pages: {result.page_count}")
    typer.echo(f"  Size: {result.file_size_bytes / 1024:.1f} KB")
    typer.echo("")

    for check in result.checklist.checks:
        symbol, color = STATUS_STYLES[check.status]
        typer.secho(f"  {symbol} {check.name}: {check.observed}", fg=color)
        if check.note:
            typer.echo(f"      {check.note}")

    if result.is_valid:
        typer.secho("\n✓ Verification passed", fg=typer.colors.GREEN, bold=True)
    else:
        typer.secho(
            f"\n✗ Verification failed: {len(result.checklist.failures)} failed, "
            f"{len(result.checklist.inconclusive)} inconclusive",
            fg=typer.colors.RED,
            bold=True,
        )
        typer.echo(format_checklist_report(result.checklist))

    typer.echo(f"\n  Log: {display_path(log_dir / 'verify.log')}")
    typer.echo("")


app = typer.Typer(
    help="Generate resume PDFs and verify them against the resume checklist",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("generate")
def generate_command(
    record_path: Annotated[
        Path,
        typer.Argument(help="Resume record (YAML or JSON)"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output PDF path (default: RESULTS_PATH/<date>/<record name>.pdf)",
        ),
    ] = None,
):
    """
    Render a resume record to PDF.

    Examples:\n

        $ verify_resume.py generate tests/fixtures/sample_resume.yaml

        $ verify_resume.py generate record.json --output resume.pdf
    """
    log_dir = LOGS_PATH / f"render_{now()}"
    setup_rendering_logger(log_dir)

    record = _load_record(record_path)
    if output is None:
        output = RESULTS_PATH / today() / f"{record_path.stem}.pdf"

    typer.secho(f"\nGenerating: {record.name}", fg=typer.colors.BLUE, bold=True)

    try:
        pdf_path = generate_resume_pdf(record, output)
    except PreconditionError as e:
        _abort(e)

    typer.secho("✓ Generation succeeded", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  PDF: {display_path(pdf_path)}")
    typer.echo(f"  Log: {display_path(log_dir / 'render.log')}")
    typer.echo("")


@app.command("verify")
def verify_command(
    pdf_path: Annotated[
        Path,
        typer.Argument(help="PDF to verify"),
    ],
    record_path: Annotated[
        Path,
        typer.Argument(help="Resume record the PDF was generated from"),
    ],
):
    """
    Verify an existing PDF against its resume record.

    Examples:\n

        $ verify_resume.py verify resume.pdf tests/fixtures/sample_resume.yaml
    """
    log_dir = LOGS_PATH / f"verify_{now()}"
    setup_verification_logger(log_dir, record_path=record_path)

    record = _load_record(record_path)
    typer.secho(f"\nVerifying: {display_path(pdf_path)}", fg=typer.colors.BLUE, bold=True)

    try:
        result = verify_pdf(pdf_path, record)
    except PreconditionError as e:
        _abort(e)

    _display_result(result, log_dir)
    raise typer.Exit(code=0 if result.is_valid else 1)


@app.command("check")
def check_command(
    record_path: Annotated[
        Path,
        typer.Argument(help="Resume record (YAML or JSON)"),
    ],
    work_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--work-dir",
            "-w",
            help="Directory for the temporary PDF (default: system temp dir)",
        ),
    ] = None,
):
    """
    Generate a fresh PDF from the record, verify it, and remove it.

    Examples:\n

        $ verify_resume.py check tests/fixtures/sample_resume.yaml

        $ verify_resume.py check record.json --work-dir /tmp/quiver
    """
    log_dir = LOGS_PATH / f"verify_{now()}"
    setup_verification_logger(log_dir, record_path=record_path)

    record = _load_record(record_path)
    typer.secho(f"\nChecking: {record.name}", fg=typer.colors.BLUE, bold=True)

    try:
        result = generate_and_verify(record, output_dir=work_dir)
    except PreconditionError as e:
        _abort(e)

    _display_result(result, log_dir)
    raise typer.Exit(code=0 if result.is_valid else 1)


if __name__ == "__main__":
    app()
