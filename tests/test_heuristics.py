"""Tests for syllabus_extractor.heuristics — keyword patterns and word shapes."""

import pytest

from syllabus_extractor.heuristics import (
    CHAPTER_HEADER_RE,
    SUBJECT_LINE_RE,
    TILDE_LINE_RE,
    collapse_spaces,
    is_likely_chapter,
    is_likely_subject,
    tidy_title,
)


# ─── CHAPTER_HEADER_RE ──────────────────────────────────────────

@pytest.mark.parametrize("line, expected", [
    ("Chapter 1: Kinematics", ("Chapter", "1", "Kinematics")),
    ("UNIT IV - Optics", ("UNIT", "IV", "Optics")),
    ("Module 2) Sorting", ("Module", "2", "Sorting")),
    ("Unit - Module 3: Waves", ("Unit", "3", "Waves")),
    ("Unit 1", ("Unit", "1", "")),
    ("Chapter", ("Chapter", None, "")),
    ("Unit Civil Engineering", ("Unit", None, "Civil Engineering")),
    ("UNIT CIVIL ENGINEERING", ("UNIT", None, "CIVIL ENGINEERING")),
    ("unit iv - optics", ("unit", None, "iv - optics")),
])
def test_chapter_header_groups(line, expected):
    assert CHAPTER_HEADER_RE.match(line).groups() == expected


@pytest.mark.parametrize("line", [
    "Unity in Diversity",
    "Modules overview",
    "Chapters covered",
    "Introduction",
])
def test_chapter_header_rejects(line):
    assert CHAPTER_HEADER_RE.match(line) is None


# ─── SUBJECT_LINE_RE ────────────────────────────────────────────

@pytest.mark.parametrize("line, name", [
    ("Subject: Algebra", "Algebra"),
    ("subject - Organic Chemistry", "Organic Chemistry"),
    ("Course Introduction to CS", "Introduction to CS"),
    ("Subject 1: Physics", "Physics"),
    ("Paper II - Chemistry", "Chemistry"),
    ("Subject Civil Engineering", "Civil Engineering"),
    ("Course CIVIL ENGINEERING", "CIVIL ENGINEERING"),
])
def test_subject_line_name(line, name):
    assert SUBJECT_LINE_RE.match(line).group(2).strip() == name


@pytest.mark.parametrize("line", [
    "Coursework due Friday",
    "Course Code: CS101",
    "Subjects",
])
def test_subject_line_rejects(line):
    assert SUBJECT_LINE_RE.match(line) is None


def test_tilde_line():
    assert TILDE_LINE_RE.match("~  Waves").group(1) == "Waves"
    assert TILDE_LINE_RE.match("~") is None


# ─── Word-shape heuristics ─────────────────────────────────────

@pytest.mark.parametrize("text, expected", [
    ("DATA STRUCTURES", True),
    ("Introduction to Computer Science", True),
    ("Atomic Structure", True),
    ("Topics covered in this course", False),
    ("Physics:", False),
    ("Lab: Optics", False),
    ("Optics.", False),
    ("ab", False),
    ("X" * 81, False),
])
def test_is_likely_subject(text, expected):
    assert is_likely_subject(text) is expected


@pytest.mark.parametrize("text, expected", [
    ("Atomic Structure", True),
    ("Introduction to Algebra", True),
    ("OPTICS", True),
    ("Object-Oriented Design", True),
    ("and Heat Transfer", False),
    ("This chapter covers optics", False),
    ("Sup", False),
    ("Supercalifragilisticexpialidocious Topics", False),
    ("Waves " * 20, False),
])
def test_is_likely_chapter(text, expected):
    assert is_likely_chapter(text) is expected


# ─── Cleanup helpers ────────────────────────────────────────────

def test_collapse_spaces():
    assert collapse_spaces("  Heat   and  Work ") == "Heat and Work"


def test_tidy_title_strips_separators():
    assert tidy_title(": - ) Kinematics") == "Kinematics"


def test_tidy_title_fallback():
    assert tidy_title(" :- ") == "Untitled Chapter"
