"""Fuzzy lookup of vars by partial name."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from namespaces.models import QualifiedSymbol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from namespaces.models import NamespaceRecord

RE_CHARS = frozenset("\\.*+|?()[]{}$^")


def public_vars(namespaces: Iterable[NamespaceRecord]) -> list[QualifiedSymbol]:
    """Return every public var, and each of its members, as a qualified
    symbol, in namespace order."""
    return [
        QualifiedSymbol(str(ns.name), str(var.name))
        for ns in namespaces
        for public in ns.publics
        for var in (public, *public.members)
    ]


def re_escape(s: str) -> str:
    """Escape a string so it can be safely placed in a regex."""
    return "".join(f"\\{ch}" if ch in RE_CHARS else ch for ch in s)


def search_vars(
    namespaces: Iterable[NamespaceRecord],
    partial_var: str,
    starting_ns: str | None = None,
) -> QualifiedSymbol | None:
    """Find the best-matching var for a partial var string.

    A query without ``/`` must match a whole var name; a query with one
    matches the tail of ``ns/name``. When ``starting_ns`` is given, a
    match in that namespace wins over earlier matches elsewhere.

    Args:
        namespaces: Namespace records to search
        partial_var: Var name, optionally with a (partial) namespace prefix
        starting_ns: Namespace to prefer when several vars match

    Returns:
        The best match, or None if nothing matches.
    """
    if partial_var is None:
        msg = "partial_var must be a string, not None"
        raise TypeError(msg)

    escaped = re_escape(partial_var)
    pattern = re.compile(escaped + "$" if "/" in partial_var else "/" + escaped + "$")
    matches = [sym for sym in public_vars(namespaces) if pattern.search(str(sym))]

    if starting_ns is not None:
        for sym in matches:
            if sym.namespace == str(starting_ns):
                return sym
    return matches[0] if matches else None


__all__ = ["RE_CHARS", "public_vars", "re_escape", "search_vars"]
