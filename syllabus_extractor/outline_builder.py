"""Single forward pass turning classified lines into subjects and chapters.

Each line is offered to an ordered list of rules; the first rule whose
predicate accepts the line handles it. Explicit markers (tilde, keyword
lines) come first, heuristic guesses last:

    tilde            ~ Title                      -> chapter
    explicit_subject Subject: Name                -> new subject
    inferred_subject Heading followed by bullets  -> new subject
    chapter_header   Chapter 3: Title / Unit 1    -> chapter
    bullet           • Title                      -> chapter
    continuation     wrapped text after a chapter -> appended to it
    fallback_heading Title-Case line              -> chapter
    ignore           anything else

Usage::

    subjects = build(classify(normalize(text)))
"""

import logging
from dataclasses import dataclass
from typing import Callable

from syllabus_extractor.config import DEFAULT_SUBJECT_NAME, TITLE_LOOKAHEAD
from syllabus_extractor.heuristics import (
    CHAPTER_HEADER_RE,
    SUBJECT_LINE_RE,
    TILDE_LINE_RE,
    collapse_spaces,
    is_likely_chapter,
    is_likely_subject,
    tidy_title,
)
from syllabus_extractor.line_classifier import ClassifiedLine
from syllabus_extractor.models import Subject

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    name: str
    predicate: Callable[[int], bool]
    handler: Callable[[int], None]


class OutlineBuilder:
    """Mutable state for one build pass. Create a fresh builder per document."""

    def __init__(self, lines: list[ClassifiedLine]) -> None:
        self.lines = lines
        self.subjects: list[Subject] = []
        self.current: Subject | None = None
        self.last_added_was_chapter = False
        self._consumed: set[int] = set()
        self.rules: tuple[Rule, ...] = (
            Rule("tilde", self._is_tilde, self._add_tilde_chapter),
            Rule("explicit_subject", self._is_explicit_subject, self._add_explicit_subject),
            Rule("inferred_subject", self.is_subject_heading, self._add_inferred_subject),
            Rule("chapter_header", self._is_chapter_header, self._add_header_chapter),
            Rule("bullet", self._is_bullet_chapter, self._add_bullet_chapter),
            Rule("continuation", self._is_continuation, self._append_continuation),
            Rule("fallback_heading", self._is_fallback_heading, self._add_fallback_chapter),
            Rule("ignore", lambda i: True, self._ignore),
        )

    # ─── Pass ─────────────────────────────────────────────────────

    def build(self) -> list[Subject]:
        for i in range(len(self.lines)):
            if i in self._consumed:
                continue
            rule = self._first_rule(i)
            logger.debug("Line %d %r -> %s", i, self.lines[i].text, rule.name)
            rule.handler(i)
        return self.subjects

    def match_rule(self, i: int) -> str:
        """Name of the rule that would handle line i in the current state."""
        return self._first_rule(i).name

    def _first_rule(self, i: int) -> Rule:
        for rule in self.rules:
            if rule.predicate(i):
                return rule
        raise AssertionError("ignore rule always matches")

    # ─── State helpers ────────────────────────────────────────────

    def _text(self, i: int) -> str:
        return self.lines[i].text

    def _next(self, i: int) -> ClassifiedLine | None:
        return self.lines[i + 1] if i + 1 < len(self.lines) else None

    def _start_subject(self, name: str) -> None:
        self.current = Subject(collapse_spaces(name))
        self.subjects.append(self.current)
        self.last_added_was_chapter = False

    def _ensure_subject(self) -> Subject:
        if self.current is None:
            logger.debug("No subject heading yet, opening %r", DEFAULT_SUBJECT_NAME)
            self._start_subject(DEFAULT_SUBJECT_NAME)
        return self.current

    def _add_chapter(self, title: str) -> None:
        self._ensure_subject().chapters.append(tidy_title(title))
        self.last_added_was_chapter = True

    def _recover_title(self, i: int) -> str:
        """Find a chapter title on one of the next few lines for a bare header.

        Only the recovered line is consumed. The scan stops at bullets,
        keyword lines and subject headings, which belong to later rules.
        """
        stop = min(len(self.lines), i + 1 + TITLE_LOOKAHEAD)
        for j in range(i + 1, stop):
            if j in self._consumed:
                continue
            line = self.lines[j]
            if line.was_bullet or self.is_subject_heading(j):
                break
            if CHAPTER_HEADER_RE.match(line.text) or SUBJECT_LINE_RE.match(line.text):
                break
            if is_likely_chapter(line.text):
                self._consumed.add(j)
                return line.text
        return ""

    def _header_title(self, i: int, text: str) -> str:
        """Title for a Chapter/Unit/Module line, or '' if text is not one."""
        match = CHAPTER_HEADER_RE.match(text)
        if not match:
            return ""
        label, number, rest = match.groups()
        title = collapse_spaces(rest.lstrip(':-)– —'))
        if not title:
            title = self._recover_title(i)
        if not title:
            title = f"{label.capitalize()} {number}" if number else label.capitalize()
        return title

    # ─── Rules ────────────────────────────────────────────────────

    def _is_tilde(self, i: int) -> bool:
        return bool(TILDE_LINE_RE.match(self._text(i)))

    def _add_tilde_chapter(self, i: int) -> None:
        payload = TILDE_LINE_RE.match(self._text(i)).group(1)
        match = CHAPTER_HEADER_RE.match(payload)
        title = payload
        if match and match.group(3).strip():
            title = match.group(3)
        self._add_chapter(title)

    def _is_explicit_subject(self, i: int) -> bool:
        return bool(SUBJECT_LINE_RE.match(self._text(i)))

    def _add_explicit_subject(self, i: int) -> None:
        name = SUBJECT_LINE_RE.match(self._text(i)).group(2)
        self._start_subject(name)

    def is_subject_heading(self, i: int) -> bool:
        """Heading-shaped, non-bullet line that introduces a list of chapters."""
        line = self.lines[i]
        if line.was_bullet or CHAPTER_HEADER_RE.match(line.text):
            return False
        if not is_likely_subject(line.text):
            return False
        if i > 0 and self.lines[i - 1].was_bullet:
            return False
        if i == 0:
            return True
        nxt = self._next(i)
        return nxt is not None and (nxt.was_bullet or bool(CHAPTER_HEADER_RE.match(nxt.text)))

    def _add_inferred_subject(self, i: int) -> None:
        self._start_subject(self._text(i))

    def _is_chapter_header(self, i: int) -> bool:
        return bool(CHAPTER_HEADER_RE.match(self._text(i)))

    def _add_header_chapter(self, i: int) -> None:
        self._add_chapter(self._header_title(i, self._text(i)))

    def _is_bullet_chapter(self, i: int) -> bool:
        line = self.lines[i]
        return line.was_bullet and len(line.text) >= 3

    def _add_bullet_chapter(self, i: int) -> None:
        # payloads shaped like "Unit 3: Title" are taken by chapter_header first
        self._add_chapter(self._text(i))

    def _is_continuation(self, i: int) -> bool:
        line = self.lines[i]
        if not self.last_added_was_chapter or self.current is None or not self.current.chapters:
            return False
        if line.was_bullet:
            return False
        if CHAPTER_HEADER_RE.match(line.text) or SUBJECT_LINE_RE.match(line.text):
            return False
        return not self.is_subject_heading(i)

    def _append_continuation(self, i: int) -> None:
        chapters = self.current.chapters
        chapters[-1] = collapse_spaces(f"{chapters[-1]} {self._text(i)}")

    def _is_fallback_heading(self, i: int) -> bool:
        return is_likely_chapter(self._text(i))

    def _add_fallback_chapter(self, i: int) -> None:
        text = self._text(i)
        subject = self._ensure_subject()
        if subject.chapters and subject.chapters[-1].lower() == collapse_spaces(text).lower():
            logger.debug("Skipping repeated heading %r", text)
            return
        self._add_chapter(text)

    def _ignore(self, i: int) -> None:
        pass


def build(lines: list[ClassifiedLine]) -> list[Subject]:
    """Build the raw (not yet deduplicated) subject list for one document."""
    return OutlineBuilder(lines).build()
