"""Line patterns and word-shape heuristics for syllabus headings.

Thresholds (length bounds, the 60% title-case ratio) are fixed. A short
ALL-CAPS chapter can still read as a subject and vice versa.
"""

import re

from syllabus_extractor.config import UNTITLED_CHAPTER

# ~ Title  (explicit chapter marker)
TILDE_LINE_RE = re.compile(r'^~\s*(.+)$')

# Case-sensitive, well-formed roman numeral (I..CCCXCIX); never matches empty.
ROMAN_NUMERAL = r'(?-i:(?=[IVXLC])C{0,3}(?:XC|XL|L?X{0,3})(?:IX|IV|V?I{0,3}))'

# Subject: Algebra / Course 2 - Optics / Paper II: Chemistry
SUBJECT_LINE_RE = re.compile(
    r'^(Subject|Course|Paper)(?![a-z])\s*'
    r'(?:(?:\d{1,3}|' + ROMAN_NUMERAL + r')(?![a-z0-9]))?'
    r'[:\s.\-]*([^:]{3,60})$',
    re.IGNORECASE,
)

# Chapter 3: Title / Unit IV - Title / Module 2) Title / Unit - Module 1
CHAPTER_HEADER_RE = re.compile(
    r'^(Chapter|Unit|Module)(?![a-z])\s*[-/:–—]?\s*(?:Module\s*)?'
    r'(?:(' + ROMAN_NUMERAL + r'|\d{1,3})(?![a-z0-9]))?'
    r'\s*[:.\-–—)]?\s*(.*)$',
    re.IGNORECASE,
)

_TITLE_WORD_RE = re.compile(r"^[(\"'“]?[A-Z][A-Za-z'’&\-]*[)\"'”,]?$")
_LEADING_JUNK_RE = re.compile(r'^[:\-)\s]+')
_MULTI_SPACE_RE = re.compile(r'\s{2,}')

# Lowercase words allowed inside a Title-Case chapter title.
MINOR_WORDS = frozenset({
    'a', 'an', 'and', 'as', 'at', 'by', 'for', 'from', 'in', 'into',
    'of', 'on', 'or', 'the', 'to', 'vs', 'with',
})


def collapse_spaces(text: str) -> str:
    """Trim and squeeze runs of whitespace to a single space."""
    return _MULTI_SPACE_RE.sub(' ', text).strip()


def tidy_title(text: str) -> str:
    """Strip leftover separators from a chapter title.

    Returns UNTITLED_CHAPTER when nothing is left.
    """
    title = collapse_spaces(_LEADING_JUNK_RE.sub('', text))
    return title or UNTITLED_CHAPTER


def _is_all_caps(text: str) -> bool:
    letters = [c for c in text if c.isalpha()]
    return len(letters) >= 3 and text == text.upper()


def _is_title_word(word: str) -> bool:
    return bool(_TITLE_WORD_RE.match(word))


def is_likely_subject(text: str) -> bool:
    """Heading-shaped line that could name a subject."""
    if not 3 <= len(text) <= 80:
        return False
    if text.endswith((':', ';', ',', '.')) or ':' in text:
        return False
    if _is_all_caps(text):
        return True
    words = text.split()
    title_words = sum(1 for w in words if _is_title_word(w))
    return title_words / len(words) >= 0.6


def is_likely_chapter(text: str) -> bool:
    """Short Title-Case or ALL-CAPS line that reads as a chapter title."""
    if not 4 <= len(text) <= 100:
        return False
    if _is_all_caps(text):
        return True
    words = text.split()
    if not _is_title_word(words[0]):
        return False
    for w in words:
        if len(w) > 20:
            return False
        if not _is_title_word(w) and w.lower() not in MINOR_WORDS:
            return False
    return True
