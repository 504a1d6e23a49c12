"""Symbol set coercion."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def symbol_set(x: Any) -> frozenset[str]:
    """Accepts a single item (or a collection of items), converts them to
    symbol names and returns them in set form.

    Strings count as single items. Falsy items are dropped.
    """
    items = [x] if isinstance(x, (str, bytes)) or not isinstance(x, Iterable) else x
    return frozenset(str(item) for item in items if item)


__all__ = ["symbol_set"]
