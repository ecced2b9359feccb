"""Post-pass cleanup: residual numbering, duplicates, and the empty case."""

import re

from syllabus_extractor.config import MIN_CHAPTER_LENGTH
from syllabus_extractor.heuristics import ROMAN_NUMERAL, collapse_spaces
from syllabus_extractor.models import ExtractionResult, Subject

# "3) ", "4 - ", "2.1 ", "IV. ", "XII " -- a lone roman letter needs
# punctuation, so "C Programming" keeps its C even though a bare numeral
# followed by whitespace would otherwise be stripped.
_NUMBERING_PREFIX_RE = re.compile(
    r'^(?:\d+(?:\.\d+)*(?:\s*[).:\-]|\s)'
    r'|' + ROMAN_NUMERAL + r'\s*[).:\-]'
    r'|' + ROMAN_NUMERAL + r'(?<=[IVXLC]{2})\s)\s*'
)


def strip_numbering(title: str) -> str:
    """Remove a leading roman/arabic numbering prefix and squeeze spaces."""
    return collapse_spaces(_NUMBERING_PREFIX_RE.sub('', title.strip(), count=1))


def _dedupe_chapters(chapters: list[str]) -> list[str]:
    seen: set[str] = set()
    kept = []
    for chapter in chapters:
        title = strip_numbering(chapter)
        key = title.lower()
        if len(title) < MIN_CHAPTER_LENGTH or key in seen:
            continue
        seen.add(key)
        kept.append(title)
    return kept


def finalize(subjects: list[Subject]) -> ExtractionResult:
    """Clean each subject's chapters and guarantee at least one subject."""
    if not subjects:
        return ExtractionResult.placeholder()
    return ExtractionResult(
        subjects=[Subject(s.name, _dedupe_chapters(s.chapters)) for s in subjects]
    )
