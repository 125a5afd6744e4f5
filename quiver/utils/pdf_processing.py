"""
PDF processing utilities for page count, document info and text extraction.

Helper functions:
    page_count: Quick page count without text extraction.
    read_document_info: Page count plus the PDF info dictionary.
    read_page_texts: Plain text of each page, top-to-bottom.

These helpers let reader/parser exceptions propagate. Callers that need a
domain-specific error (see verification.extractor) wrap them.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import pdfplumber
from PyPDF2 import PdfReader


def page_count(pdf_path: Path) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        with open(pdf_path, "rb") as stream:
            return len(PdfReader(stream).pages)
    except Exception:
        return None


def read_document_info(pdf_path: Union[str, Path]) -> Tuple[int, Dict[str, str]]:
    """
    Read page count and info dictionary from a PDF.

    Info keys are returned without their leading slash ("/Title" -> "Title")
    and values are coerced to str.

    Returns:
        Tuple of (page_count, metadata)
    """
    with open(pdf_path, "rb") as stream:
        reader = PdfReader(stream)
        num_pages = len(reader.pages)
        info = reader.metadata or {}

        metadata: Dict[str, str] = {}
        for key, value in info.items():
            # Info values can be indirect references to string objects
            resolved = value.get_object() if hasattr(value, "get_object") else value
            metadata[str(key).lstrip("/")] = "" if resolved is None else str(resolved)

    return num_pages, metadata


def read_page_texts(pdf_path: Union[str, Path]) -> List[str]:
    """
    Extract plain text from each page, in page order.

    Pages without a text layer contribute an empty string so that page
    indices stay aligned with the PDF.
    """
    with pdfplumber.open(pdf_path) as pdf:
        return [page.extract_text() or "" for page in pdf.pages]
