from __future__ import annotations

import pytest

from text.indent import correct_indent, smallest_indent, unindent


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("  a\n    b\n   c", 2),
        ("\t\tfoo\n\tbar", 1),
        ("top\n    nested\n  less", 2),
        ("  a\n\n     \n    b", 2),
    ],
)
def test_smallest_indent_finds_minimum_over_indented_lines(
    text: str, expected: int
) -> None:
    assert smallest_indent(text) == expected


@pytest.mark.parametrize("text", ["", "\n\n   \n", "a\nb\nc"])
def test_smallest_indent_none_without_indented_lines(text: str) -> None:
    assert smallest_indent(text) is None


def test_unindent_removes_common_indent() -> None:
    assert unindent("    foo\n      bar\n    baz") == "foo\n  bar\nbaz"


def test_unindent_strips_at_most_indent_size() -> None:
    assert unindent("      deep\n  shallow", 4) == "  deep\nshallow"


def test_unindent_zero_is_noop() -> None:
    text = "  a\n    b"
    assert unindent(text, 0) == text


def test_unindent_none_leaves_text_alone() -> None:
    assert unindent("a\n  b", None) == "a\n  b"


def test_unindent_keeps_blank_lines() -> None:
    assert unindent("  a\n\n  b") == "a\n\nb"


def test_unindent_rejects_negative_size() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        unindent("  a", -1)


def test_correct_indent_reflows_continuation_lines() -> None:
    doc = "Summary line.\n\n    Details here.\n      Nested detail."

    assert correct_indent(doc) == "Summary line.\n\nDetails here.\n  Nested detail."


def test_correct_indent_single_line_gains_trailing_newline() -> None:
    assert correct_indent("single line") == "single line\n"


@pytest.mark.parametrize("text", [None, ""])
def test_correct_indent_propagates_absence(text: str | None) -> None:
    assert correct_indent(text) == text


def test_non_breaking_space_is_not_indentation() -> None:
    assert unindent("\xa0\xa0x\n    y") == "\xa0\xa0x\ny"
    assert smallest_indent("\xa0\xa0\n  a") == 2
