"""Resolution of documented vars to source files in the repository."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from namespaces.models import NamespaceRecord

logger = structlog.get_logger(__name__)


def _unix_path(path: str) -> str:
    return path.replace("\\", "/")


def normalize_path(path: str | Path, root: str | Path) -> str:
    """Express ``path`` relative to ``root`` when it lies beneath it.

    ``path`` is made absolute (without resolving symlinks); paths outside
    the root are returned in absolute form.

    Examples:
        >>> normalize_path("/repo/src/foo.py", "/repo")
        'src/foo.py'
        >>> normalize_path("/other/foo.py", "/repo")
        '/other/foo.py'
    """
    root_prefix = _unix_path(str(root)) + "/"
    absolute = _unix_path(str(Path(path).absolute()))
    if absolute.startswith(root_prefix):
        return absolute[len(root_prefix) :]
    return absolute


def find_file_in_repo(
    file: str | None, sources: Iterable[str | Path]
) -> Path | None:
    """Locate a source-relative file under the first source dir holding it.

    Args:
        file: File path relative to a source directory (as recorded by
            the reader)
        sources: Source directories in priority order; relative entries
            are checked against the current working directory

    Returns:
        ``source / file`` for the first existing match, or None if the
        file is absent, already absolute, or found nowhere.
    """
    if not file or Path(file).is_absolute():
        return None
    for source in sources:
        candidate = Path(source) / file
        if candidate.exists():
            return candidate
    return None


def add_source_paths(
    namespaces: Iterable[NamespaceRecord],
    root: str | Path,
    sources: Sequence[str | Path],
) -> list[NamespaceRecord]:
    """Annotate each namespace's publics with their repo-relative path.

    Only top-level publics get a ``path``; nested members are returned
    as they are. ``file`` is left untouched.
    """
    if namespaces is None:
        msg = "namespaces must be a sequence of NamespaceRecord, not None"
        raise TypeError(msg)

    normalized = [normalize_path(source, root) for source in sources]

    annotated: list[NamespaceRecord] = []
    for ns in namespaces:
        publics = []
        for public in ns.publics:
            path = find_file_in_repo(public.file, normalized)
            if path is None and public.file:
                logger.debug(
                    "source_path_unresolved",
                    namespace=ns.name,
                    var=public.name,
                    file=public.file,
                )
            publics.append(public.model_copy(update={"path": path}))
        annotated.append(ns.model_copy(update={"publics": tuple(publics)}))
    return annotated


__all__ = ["add_source_paths", "find_file_in_repo", "normalize_path"]
