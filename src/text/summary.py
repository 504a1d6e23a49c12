"""Docstring summary extraction."""

from __future__ import annotations

import re

# Everything up to the first page break, else the first blank line, else all.
_SUMMARY_RE = re.compile(r".*?(?=\f)|.*?(?=\n\n)|.*", re.DOTALL)


def summary(text: str | None) -> str | None:
    """Return the summary of a docstring.

    The summary is the first portion of the string, from the first
    character to the first page break (``\\f``) character OR the first two
    consecutive newlines.
    """
    if text is None:
        return None
    match = _SUMMARY_RE.match(text.strip())
    return match.group(0) if match else ""
