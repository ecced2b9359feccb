"""Syllabus extractor: offline, heuristic PDF syllabus -> subject/chapter outline."""

__version__ = "0.1.0"

from syllabus_extractor.models import Subject, ExtractionResult
from syllabus_extractor.normalizer import normalize
from syllabus_extractor.line_classifier import ClassifiedLine, classify
from syllabus_extractor.outline_builder import OutlineBuilder, build
from syllabus_extractor.finalizer import finalize
from syllabus_extractor.pdf_parser import PdfDecodeError, extract_text_from_pdf
from syllabus_extractor.extractor import extract_syllabus, analyze_pdf
from syllabus_extractor.batch_builder import build_outlines

__all__ = [
    "Subject", "ExtractionResult", "ClassifiedLine",
    "normalize", "classify", "OutlineBuilder", "build", "finalize",
    "PdfDecodeError", "extract_text_from_pdf",
    "extract_syllabus", "analyze_pdf", "build_outlines",
]
