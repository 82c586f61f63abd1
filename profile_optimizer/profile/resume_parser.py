"""PDF and text resume extraction.

Produces free-form resume text used as drafting context. Nothing here is
scored directly.
"""

import logging
from pathlib import Path

from profile_optimizer.utils.text_processing import clean_extracted_text

logger = logging.getLogger("profile_optimizer.profile")

DEFAULT_MAX_BYTES = 10 * 1024 * 1024


def extract_resume_text(file_path: str, max_bytes: int = DEFAULT_MAX_BYTES) -> str:
    """Extract cleaned text from a resume file (PDF, TXT, or MD)."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix not in (".pdf", ".txt", ".md", ".markdown"):
        raise ValueError(f"Unsupported resume format: {suffix} (supported: .pdf, .txt, .md)")

    size = path.stat().st_size
    if size > max_bytes:
        raise ValueError(
            f"File too large: {size} bytes (max {max_bytes // (1024 * 1024)}MB)"
        )

    if suffix == ".pdf":
        text = _extract_pdf_text(path)
    else:
        text = path.read_text(encoding="utf-8")

    text = clean_extracted_text(text)
    if not text:
        raise ValueError(f"Resume file is empty or unreadable: {file_path}")

    logger.info("Extracted %d characters of resume text from %s", len(text), path.name)
    return text


def _extract_pdf_text(path: Path) -> str:
    """Extract text from a PDF file using PyPDF2."""
    try:
        from PyPDF2 import PdfReader
    except ImportError:
        raise ImportError("PyPDF2 is required for PDF parsing. Install with: pip install PyPDF2")

    reader = PdfReader(str(path))
    pages = []
    for page in reader.pages:
        text = page.extract_text()
        if text:
            pages.append(text)
    logger.debug("Read %d page(s) from %s", len(reader.pages), path.name)
    return "\n".join(pages)
