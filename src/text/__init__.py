"""Docstring text helpers."""

from text.indent import correct_indent, smallest_indent, unindent
from text.summary import summary

__all__ = ["correct_indent", "smallest_indent", "summary", "unindent"]
