"""Source file discovery for namespace reading."""

from __future__ import annotations

from fnmatch import fnmatch
from typing import TYPE_CHECKING, cast

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


def _is_within_dir(path: Path, directory: Path) -> bool:
    """Return True when the resolved path stays within the resolved directory."""
    try:
        dir_resolved = directory.resolve()
        path_resolved = path.resolve()
    except OSError:
        return False

    return path_resolved.is_relative_to(dir_resolved)


def _is_source_file(
    path: Path,
    directory: Path,
    gitignore_matches: Callable[[str], bool] | None,
    include_patterns: list[str] | None,
    exclude_patterns: list[str] | None,
) -> bool:
    """Check a candidate file against symlink, gitignore and glob rules."""
    if not path.is_file() or path.is_symlink():
        return False

    if not _is_within_dir(path, directory):
        return False

    rel_path = path.relative_to(directory).as_posix()

    if gitignore_matches is not None and gitignore_matches(str(path)):
        return False

    if include_patterns and not any(fnmatch(rel_path, pat) for pat in include_patterns):
        return False

    return not (
        exclude_patterns and any(fnmatch(rel_path, pat) for pat in exclude_patterns)
    )


def _build_gitignore_matcher(
    directory: Path,
    *,
    nested_gitignore: bool,
) -> Callable[[str], bool] | None:
    if not nested_gitignore:
        gitignore_path = directory / ".gitignore"
        if gitignore_path.is_file():
            return cast("Callable[[str], bool]", parse_gitignore(gitignore_path))
        return None

    gitignore_paths = sorted(
        (
            path
            for path in directory.rglob(".gitignore")
            if path.is_file() and not path.is_symlink()
        ),
        key=lambda p: p.relative_to(directory).as_posix(),
    )
    if not gitignore_paths:
        return None

    matchers = [parse_gitignore(path) for path in gitignore_paths]

    def matches(path_str: str) -> bool:
        for matcher in matchers:
            try:
                if matcher(path_str):
                    return True
            except ValueError:
                # Path lies outside this .gitignore's base directory.
                continue
        return False

    return matches


def find_python_files(
    directory: Path,
    *,
    include_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
    nested_gitignore: bool = False,
) -> Iterator[Path]:
    """Find all Python files in a source directory, respecting .gitignore.

    Args:
        directory: Source directory to search
        include_patterns: Optional fnmatch patterns; if provided, files must
            match at least one of them (relative to ``directory``)
        exclude_patterns: Optional fnmatch patterns; matching files are skipped
        nested_gitignore: Also honour .gitignore files below ``directory``

    Yields:
        Python files sorted by relative posix path.
    """
    gitignore_matches = _build_gitignore_matcher(
        directory,
        nested_gitignore=nested_gitignore,
    )

    matched_files = [
        path
        for path in directory.rglob("*.py")
        if _is_source_file(
            path,
            directory,
            gitignore_matches,
            include_patterns,
            exclude_patterns,
        )
    ]

    matched_files.sort(key=lambda p: p.relative_to(directory).as_posix())

    yield from matched_files


__all__ = ["find_python_files"]
