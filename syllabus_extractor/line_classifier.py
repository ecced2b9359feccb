"""Split normalized text into lines and strip bullet/numbering prefixes.

Each surviving line keeps a was_bullet flag: the outline builder treats
bulleted lines as list items (chapters) and never as headings.
"""

import re
from dataclasses import dataclass

from syllabus_extractor.config import MAX_LINE_LENGTH
from syllabus_extractor.normalizer import ARROW_GLYPHS, BULLET_GLYPHS

# Bullet glyphs, arrows, dashes, (n), n. / n), a. / A)
BULLET_PREFIX_RE = re.compile(
    rf'^(?:[{BULLET_GLYPHS}{ARROW_GLYPHS}·*\-–—]+\s*'
    r'|(?:\(\d{1,3}\)|\d{1,3}[.)]|[A-Za-z][.)])(?:\s+|$))(.*)$'
)

# Icon-font bullets land in the Private Use Area.
PUA_PREFIX_RE = re.compile(r'^[\ue000-\uf8ff\U000f0000-\U000ffffd]{1,3}\s+(.*)$')

_LINE_BREAK_RE = re.compile(r'\n+')


@dataclass(frozen=True)
class ClassifiedLine:
    text: str
    was_bullet: bool = False


def _classify_line(line: str) -> ClassifiedLine | None:
    match = BULLET_PREFIX_RE.match(line) or PUA_PREFIX_RE.match(line)
    if match:
        classified = ClassifiedLine(match.group(1).strip(), was_bullet=True)
    else:
        classified = ClassifiedLine(line)
    if not classified.text or len(classified.text) >= MAX_LINE_LENGTH:
        return None
    return classified


def classify(normalized: str) -> list[ClassifiedLine]:
    """Turn normalized text into an ordered list of ClassifiedLine.

    Empty lines, lines that are only a bullet marker, and lines of
    MAX_LINE_LENGTH characters or more are dropped.
    """
    lines = []
    for raw in _LINE_BREAK_RE.split(normalized):
        raw = raw.strip()
        if not raw:
            continue
        classified = _classify_line(raw)
        if classified is not None:
            lines.append(classified)
    return lines
