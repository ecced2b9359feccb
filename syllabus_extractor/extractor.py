"""Offline syllabus extraction pipeline.

Building Block: extract_syllabus / analyze_pdf
    Input Data:  Decoded document text (or a PDF path / bytes)
    Output Data: ExtractionResult  {subjects: [{name, chapters}]}
    Setup Data:  none (pure pattern matching, no network, no models)

normalize -> classify -> build -> finalize. Every call builds its own
state, so the pipeline is deterministic and safe to run concurrently.
"""

import logging
from pathlib import Path

from syllabus_extractor.finalizer import finalize
from syllabus_extractor.line_classifier import classify
from syllabus_extractor.models import ExtractionResult
from syllabus_extractor.normalizer import normalize
from syllabus_extractor.outline_builder import build
from syllabus_extractor.pdf_parser import extract_text_from_pdf

logger = logging.getLogger(__name__)


def extract_syllabus(text: str) -> ExtractionResult:
    """Recover a {subject -> chapters} outline from raw syllabus text.

    Never fails on string input: unstructured text yields the single
    placeholder subject with no chapters.
    """
    lines = classify(normalize(text or ""))
    result = finalize(build(lines))
    logger.debug("Classified %d lines into %d subjects",
                 len(lines), len(result.subjects))
    return result


def analyze_pdf(source: str | Path | bytes) -> ExtractionResult:
    """Decode a PDF and extract its outline.

    PdfDecodeError and FileNotFoundError propagate to the caller; the
    extractor is not run on an undecodable document.
    """
    text = extract_text_from_pdf(source)
    result = extract_syllabus(text)
    logger.info("Extracted %d subjects, %d chapters",
                len(result.subjects), result.chapter_count)
    if result.nothing_detected:
        logger.warning("No syllabus structure detected; outline needs manual editing")
    return result
