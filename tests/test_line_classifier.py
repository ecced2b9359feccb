"""Tests for syllabus_extractor.line_classifier — prefix stripping and filtering."""

import pytest

from syllabus_extractor.line_classifier import ClassifiedLine, classify
from syllabus_extractor.normalizer import normalize


# ─── Splitting ──────────────────────────────────────────────────

def test_empty_input():
    assert classify("") == []


def test_blank_lines_collapsed():
    assert classify("Algebra\n\n\n  \nGeometry") == [
        ClassifiedLine("Algebra"), ClassifiedLine("Geometry"),
    ]


def test_lines_trimmed():
    assert classify("   Algebra   ") == [ClassifiedLine("Algebra", was_bullet=False)]


def test_crlf_via_normalize():
    assert classify(normalize("Algebra\r\nGeometry")) == [
        ClassifiedLine("Algebra"), ClassifiedLine("Geometry"),
    ]


def test_order_preserved():
    texts = [line.text for line in classify("C\nA\nB")]
    assert texts == ["C", "A", "B"]


# ─── Bullet prefixes ────────────────────────────────────────────

@pytest.mark.parametrize("line", [
    "• Recursion",
    "● Recursion",
    "▪ Recursion",
    "→ Recursion",
    "- Recursion",
    "* Recursion",
    "1. Recursion",
    "12) Recursion",
    "(3) Recursion",
    "a. Recursion",
    "B) Recursion",
    "\uf0b7 Recursion",
    "\uf0a7\uf0a7 Recursion",
])
def test_bullet_prefix_stripped(line):
    assert classify(line) == [ClassifiedLine("Recursion", was_bullet=True)]


def test_plain_line_not_bullet():
    assert classify("Recursion") == [ClassifiedLine("Recursion", was_bullet=False)]


def test_decimal_is_not_enumerator():
    assert classify("3.5 credits") == [ClassifiedLine("3.5 credits")]


def test_keyword_line_not_bullet():
    assert classify("Chapter 1: Kinematics") == [ClassifiedLine("Chapter 1: Kinematics")]


def test_pua_glyph_needs_whitespace():
    [line] = classify("\uf0b7Recursion")
    assert line.was_bullet is False


# ─── Discarded lines ────────────────────────────────────────────

def test_bare_bullet_dropped():
    assert classify("•\n1.\nAlgebra") == [ClassifiedLine("Algebra")]


def test_long_line_dropped():
    assert classify("x" * 500) == []


def test_line_below_limit_kept():
    assert len(classify("x" * 499)) == 1


def test_long_bullet_payload_dropped():
    assert classify("• " + "y" * 500) == []
