"""
PDF Text/Metadata Extractor adapter.

Turns a PDF binary into the read-only ExtractedDocument view the checklist
consumes. Any failure to read the binary is a precondition failure and raises
ExtractionError, never a failed check.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Union

from quiver.contexts.verification.exceptions import ExtractionError
from quiver.contexts.verification.logger import _log_debug
from quiver.utils.pdf_processing import read_document_info, read_page_texts


@dataclass(frozen=True)
class ExtractedDocument:
    """
    Parsed view of a PDF, produced per verification run.

    Attributes:
        page_count: Number of pages (>= 1 for a well-formed document)
        metadata: PDF info dictionary, keys without leading slash (e.g. "Title")
        full_text: Text of all pages joined in page order, top-to-bottom
    """

    page_count: int
    metadata: Dict[str, str] = field(default_factory=dict)
    full_text: str = ""


def extract_document(pdf_path: Union[str, Path]) -> ExtractedDocument:
    """
    Extract page count, metadata and full text from a PDF.

    Args:
        pdf_path: Path to the PDF file

    Returns:
        ExtractedDocument for the file

    Raises:
        ExtractionError: If the file is missing or cannot be parsed
    """
    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        raise ExtractionError("PDF not found", path=pdf_path)

    try:
        num_pages, metadata = read_document_info(pdf_path)
    except Exception as e:
        raise ExtractionError("Could not read PDF info", path=pdf_path, original_error=e) from e

    try:
        page_texts = read_page_texts(pdf_path)
    except Exception as e:
        raise ExtractionError("Could not extract PDF text", path=pdf_path, original_error=e) from e

    full_text = "\n".join(page_texts)
    _log_debug(
        f"Extracted {pdf_path.name}: {num_pages} page(s), "
        f"{len(metadata)} info field(s), {len(full_text)} characters"
    )

    return ExtractedDocument(page_count=num_pages, metadata=metadata, full_text=full_text)
