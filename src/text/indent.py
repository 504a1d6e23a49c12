"""Indentation normalization for docstrings."""

from __future__ import annotations

import re

_LEADING_WS = re.compile(r"^\s+", re.ASCII)
_LINE_BREAK = re.compile(r"\r?\n")

_ASCII_WS = " \t\n\r\f\v"

_UNSET = object()


def _split_lines(text: str) -> list[str]:
    """Split on line breaks, dropping trailing empty lines.

    An empty string yields a single empty line.
    """
    lines = _LINE_BREAK.split(text)
    while len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def _is_blank(line: str) -> bool:
    return not line.strip(_ASCII_WS)


def smallest_indent(text: str) -> int | None:
    """Return the smallest leading-whitespace run among indented lines.

    Blank lines and lines without leading whitespace are ignored, so
    ``None`` is returned for empty text or text with no indented line.
    """
    indents = []
    for line in _split_lines(text):
        if _is_blank(line):
            continue
        match = _LEADING_WS.match(line)
        if match:
            indents.append(len(match.group(0)))
    return min(indents) if indents else None


def unindent(text: str, indent_size: int | None | object = _UNSET) -> str:
    """Unindent a block of text by a specific amount or the smallest common
    indentation size.

    At most ``indent_size`` whitespace characters are removed from the
    start of each line. ``None`` leaves every line untouched.
    """
    if indent_size is _UNSET:
        indent_size = smallest_indent(text)
    lines = _split_lines(text)
    if indent_size is None:
        return "\n".join(lines)
    if not isinstance(indent_size, int) or indent_size < 0:
        msg = f"indent_size must be a non-negative int, got {indent_size!r}"
        raise ValueError(msg)

    pattern = re.compile(rf"^\s{{0,{indent_size}}}", re.ASCII)
    return "\n".join(pattern.sub("", line, count=1) for line in lines)


def correct_indent(text: str | None) -> str | None:
    """Re-indent a docstring whose continuation lines are indented
    relative to its first line.

    The first line is kept as is; the rest is unindented as a block.
    """
    if not text:
        return text
    first, *rest = _split_lines(text)
    return first + "\n" + unindent("\n".join(rest))


__all__ = ["correct_indent", "smallest_indent", "unindent"]
