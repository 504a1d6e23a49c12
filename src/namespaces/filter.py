"""Include/exclude filtering of namespace records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from namespaces.symbols import symbol_set

if TYPE_CHECKING:
    from collections.abc import Iterable

    from namespaces.models import NamespaceRecord

logger = structlog.get_logger(__name__)


def filter_namespaces(
    namespaces: Iterable[NamespaceRecord],
    include: Any = None,
    exclude: Any = None,
) -> list[NamespaceRecord]:
    """Filter a sequence of namespaces by name.

    Args:
        namespaces: Namespace records, e.g. from ``read_namespaces``
        include: Name (or names) to keep; when empty every namespace not
            excluded is kept
        exclude: Name (or names) to drop

    Returns:
        The namespaces not in ``exclude`` and, if ``include`` names
        anything, in ``include``, in their original order.
    """
    if namespaces is None:
        msg = "namespaces must be a sequence of NamespaceRecord, not None"
        raise TypeError(msg)

    include_names = symbol_set(include)
    exclude_names = symbol_set(exclude)

    kept = [ns for ns in namespaces if ns.name not in exclude_names]
    if include_names:
        kept = [ns for ns in kept if ns.name in include_names]

    logger.debug(
        "namespaces_filtered",
        kept=len(kept),
        include=sorted(include_names),
        exclude=sorted(exclude_names),
    )
    return kept


__all__ = ["filter_namespaces"]
