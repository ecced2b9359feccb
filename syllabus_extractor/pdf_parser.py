"""PDF decoding boundary: raw PDF bytes or path -> plain text.

Building Block: extract_text_from_pdf
    Input Data:  Path to a PDF file, or the file's raw bytes
    Output Data: Plain text of all pages, joined with newlines
    Setup Data:  pdfplumber library
"""

import io
import logging
from pathlib import Path

import pdfplumber

logger = logging.getLogger(__name__)


class PdfDecodeError(Exception):
    """The source could not be read as a PDF."""


def _open(source: str | Path | bytes):
    if isinstance(source, (bytes, bytearray)):
        return pdfplumber.open(io.BytesIO(source))
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"PDF not found: {path}")
    return pdfplumber.open(path)


def extract_text_from_pdf(source: str | Path | bytes) -> str:
    """Extract the embedded text of every page.

    Pages without a text layer are skipped. Raises FileNotFoundError for
    a missing path and PdfDecodeError for anything pdfplumber cannot parse.
    """
    pages = []
    try:
        with _open(source) as pdf:
            for page in pdf.pages:
                text = page.extract_text()
                if text and text.strip():
                    pages.append(text)
    except FileNotFoundError:
        raise
    except Exception as exc:
        logger.error("Could not decode PDF: %s", exc)
        raise PdfDecodeError(f"Could not extract text from PDF: {exc}") from exc
    logger.debug("Decoded %d text pages", len(pages))
    return "\n".join(pages)
