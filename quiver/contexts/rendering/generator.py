"""
Resume PDF Generator

Lays a ResumeRecord out as a single-column PDF using ReportLab platypus.

Layout, top to bottom:
    name, label, contact line (email | phone | website without scheme),
    summary, then each section title followed by its entries.

Output is deterministic for a given record (invariant mode) and written
without page compression so the content stream stays inspectable.
"""

import time
from pathlib import Path
from typing import List, Union
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer
from reportlab.platypus.flowables import Flowable, HRFlowable

from quiver.contexts.intake.resume_record import ResumeEntry, ResumeRecord
from quiver.contexts.rendering.logger import (
    log_generation_failure,
    log_generation_result,
    log_generation_start,
)
from quiver.contexts.rendering.exceptions import GenerationError
from quiver.utils.pdf_processing import page_count
from quiver.utils.text_processing import normalize_website

# Vera ships with ReportLab, so no system font lookup is needed
FONT_FAMILY = "Vera"
FONT_FILES = {
    "Vera": "Vera.ttf",
    "VeraBd": "VeraBd.ttf",
    "VeraIt": "VeraIt.ttf",
    "VeraBI": "VeraBI.ttf",
}

PAGE_MARGIN = 0.75 * inch
CONTACT_SEPARATOR = " | "
TITLE_SUFFIX = "Résumé"


def _register_fonts() -> None:
    """Register the embedded text face once per process."""
    if FONT_FAMILY in pdfmetrics.getRegisteredFontNames():
        return
    for font_name, file_name in FONT_FILES.items():
        pdfmetrics.registerFont(TTFont(font_name, file_name))
    pdfmetrics.registerFontFamily(
        FONT_FAMILY, normal="Vera", bold="VeraBd", italic="VeraIt", boldItalic="VeraBI"
    )


def _build_styles() -> dict:
    """Paragraph styles keyed by role."""
    base = getSampleStyleSheet()["Normal"]
    return {
        "name": ParagraphStyle(
            "ResumeName", parent=base, fontName="VeraBd", fontSize=20, leading=24,
            alignment=TA_CENTER, spaceAfter=4,
        ),
        "label": ParagraphStyle(
            "ResumeLabel", parent=base, fontName="VeraIt", fontSize=11, leading=14,
            alignment=TA_CENTER,
        ),
        "contact": ParagraphStyle(
            "ResumeContact", parent=base, fontName="Vera", fontSize=9.5, leading=12,
            alignment=TA_CENTER, spaceBefore=2, spaceAfter=6,
        ),
        "summary": ParagraphStyle(
            "ResumeSummary", parent=base, fontName="Vera", fontSize=10, leading=13, spaceAfter=4,
        ),
        "section": ParagraphStyle(
            "ResumeSection", parent=base, fontName="VeraBd", fontSize=13, leading=16,
            spaceBefore=10, spaceAfter=2,
        ),
        "heading": ParagraphStyle(
            "ResumeEntryHeading", parent=base, fontName="Vera", fontSize=10.5, leading=13,
            spaceBefore=5,
        ),
        "body": ParagraphStyle(
            "ResumeBody", parent=base, fontName="Vera", fontSize=10, leading=13,
        ),
        "bullet": ParagraphStyle(
            "ResumeBullet", parent=base, fontName="Vera", fontSize=10, leading=13,
            leftIndent=14, bulletIndent=4,
        ),
    }


def _entry_flowables(entry: ResumeEntry, styles: dict) -> List[Flowable]:
    """Flowables for one section entry; empty fields are skipped."""
    flowables: List[Flowable] = []

    heading_parts = []
    if entry.heading:
        heading_parts.append(f"<b>{escape(entry.heading)}</b>")
    if entry.subheading:
        heading_parts.append(escape(entry.subheading))
    if entry.dates:
        heading_parts.append(f"<i>{escape(entry.dates)}</i>")
    if heading_parts:
        flowables.append(Paragraph(CONTACT_SEPARATOR.join(heading_parts), styles["heading"]))

    if entry.text:
        flowables.append(Paragraph(escape(entry.text), styles["body"]))

    for bullet in entry.bullets:
        flowables.append(Paragraph(escape(bullet), styles["bullet"], bulletText="•"))

    return flowables


def build_story(record: ResumeRecord) -> List[Flowable]:
    """
    Convert a record into the ordered list of flowables to render.

    The name is always the first flowable so it precedes every section title
    in reading order.
    """
    styles = _build_styles()
    story: List[Flowable] = [Paragraph(escape(record.name), styles["name"])]

    if record.label:
        story.append(Paragraph(escape(record.label), styles["label"]))

    contact = [
        value
        for value in (record.email, record.phone, normalize_website(record.website))
        if value
    ]
    if contact:
        story.append(Paragraph(escape(CONTACT_SEPARATOR.join(contact)), styles["contact"]))

    story.append(HRFlowable(width="100%", thickness=0.75, spaceBefore=2, spaceAfter=4))

    if record.summary:
        story.append(Paragraph(escape(record.summary), styles["summary"]))

    for section in record.sections:
        story.append(Paragraph(escape(section.title), styles["section"]))
        story.append(HRFlowable(width="100%", thickness=0.4, spaceAfter=2))
        for entry in section.entries:
            story.extend(_entry_flowables(entry, styles))

    story.append(Spacer(1, 0.1 * inch))
    return story


def generate_resume_pdf(record: ResumeRecord, output_path: Union[str, Path]) -> Path:
    """
    Render a resume record to a PDF file.

    Sets Title ("<name> Résumé") and Author in the document info dictionary.

    Args:
        record: Resume record to render
        output_path: Destination PDF path (parent directories are created)

    Returns:
        Path to the written PDF

    Raises:
        GenerationError: If fonts cannot be loaded, the layout fails, or the
            file cannot be written
    """
    output_path = Path(output_path)
    resume_name = record.name or "(unnamed)"
    log_generation_start(resume_name, output_path, len(record.sections))

    start_time = time.time()
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        _register_fonts()

        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=letter,
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            title=f"{record.name} {TITLE_SUFFIX}".strip(),
            author=record.name,
            subject=record.label or TITLE_SUFFIX,
            creator="quiver",
            invariant=1,
            pageCompression=0,
        )
        doc.build(build_story(record))
    except Exception as e:
        error = GenerationError("Could not render resume PDF", path=output_path, original_error=e)
        log_generation_failure(resume_name, error, time.time() - start_time)
        raise error from e

    log_generation_result(
        resume_name, output_path, time.time() - start_time, num_pages=page_count(output_path)
    )
    return output_path
