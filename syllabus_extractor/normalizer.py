"""Text cleanup before line classification.

PDF text extractors leave NULs, BOMs and non-breaking spaces behind, and
often flatten a run of bullets onto one physical line. normalize() undoes
both without touching case or punctuation.
"""

import re

# Glyphs used as list markers, shared with the line classifier.
BULLET_GLYPHS = "•◦▪▫●○■□◆◇►▶▸‣⁃❖➢➤✓✔"
ARROW_GLYPHS = "→⇒➔➜➝"

_CONTROL_RE = re.compile(r'[\x00-\x08\x0b\x0e-\x1f\x7f\ufeff]')
_SPACE_RE = re.compile(r'[\u00a0\u1680\u2000-\u200a\u202f\u205f\u3000\t]')
_NEWLINE_RE = re.compile(r'\r\n?|\f')

# Whitespace followed by a bullet-like token, mid-line.
_INLINE_BULLET_RE = re.compile(
    rf'(?<=\S)[ ]+(?=[{BULLET_GLYPHS}{ARROW_GLYPHS}]'
    r'|(?P<enum>\(\d{1,3}\)|\d{1,3}[.)]|[A-Za-z][.)])\s)'
)

# "Chapter 1. Kinematics" must not be split at "1."
_KEYWORD_TAIL_RE = re.compile(
    r'\b(?:chapter|unit|module|subject|course|paper|part|section|week|lecture)$',
    re.IGNORECASE,
)


def _break_before_bullet(match: re.Match) -> str:
    if match.group('enum'):
        head = match.string[max(0, match.start() - 12):match.start()]
        if _KEYWORD_TAIL_RE.search(head):
            return match.group(0)
    return "\n"


def normalize(raw: str) -> str:
    """Strip extraction debris and put each inline bullet on its own line."""
    if not raw:
        return ""
    text = _NEWLINE_RE.sub("\n", raw)
    text = _CONTROL_RE.sub("", text)
    text = _SPACE_RE.sub(" ", text)
    return _INLINE_BULLET_RE.sub(_break_before_bullet, text)
