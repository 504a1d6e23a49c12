"""Shared utilities for codox-core."""

from __future__ import annotations

from pathlib import Path


def path_to_namespace(file_path: str | Path) -> str:
    """Convert a source-dir-relative file path to a namespace name.

    Args:
        file_path: Path relative to a source directory (e.g. "codox/cli.py")

    Returns:
        Dotted namespace name (e.g. "codox.cli")

    Raises:
        ValueError: If the path does not name a module (e.g. a bare
            "__init__.py").

    Examples:
        >>> path_to_namespace("codox/cli.py")
        'codox.cli'
        >>> path_to_namespace("codox/__init__.py")
        'codox'
    """
    path_str = file_path.as_posix() if isinstance(file_path, Path) else str(file_path)
    parts = [part for part in path_str.replace("\\", "/").split("/") if part]

    if parts and parts[-1].endswith(".py"):
        parts[-1] = parts[-1][:-3]

    if parts and parts[-1] == "__init__":
        parts = parts[:-1]

    if not parts:
        msg = f"Cannot derive a non-empty namespace name from {path_str!r}"
        raise ValueError(msg)

    return ".".join(parts)
