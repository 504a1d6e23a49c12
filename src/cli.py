"""Command-line interface for codox-core."""

from __future__ import annotations

import argparse
import contextlib
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import orjson

from namespaces import add_source_paths, filter_namespaces, search_vars
from project.config import CodoxConfig, ConfigError, load_config, resolve_source_dirs
from project.log import setup_logging
from reader import read_namespaces
from text import correct_indent, summary

if TYPE_CHECKING:
    from namespaces.models import NamespaceRecord


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Project root (default: .)",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Log level for diagnostics on stderr (default: warning)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="codox")
    subparsers = parser.add_subparsers(dest="command", required=True)

    namespaces_parser = subparsers.add_parser(
        "namespaces", help="List documented namespaces"
    )
    _add_common_args(namespaces_parser)
    namespaces_parser.add_argument(
        "--include",
        action="append",
        default=[],
        metavar="NS",
        help="Namespace to include (repeatable; default: config include list)",
    )
    namespaces_parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="NS",
        help="Namespace to exclude (repeatable; added to config exclude list)",
    )
    namespaces_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit one JSON record per namespace",
    )

    search_parser = subparsers.add_parser("search", help="Find a var by partial name")
    search_parser.add_argument("query", help="Var name, optionally ns-qualified")
    _add_common_args(search_parser)
    search_parser.add_argument(
        "--ns",
        default=None,
        help="Namespace to prefer when several vars match",
    )

    return parser


def _load_namespaces(
    root: Path,
    config: CodoxConfig,
    include: list[str],
    exclude: list[str],
) -> list[NamespaceRecord]:
    source_dirs = resolve_source_dirs(root, config)
    namespaces = read_namespaces(
        source_dirs,
        include_patterns=config.file_include or None,
        exclude_patterns=config.file_exclude or None,
        nested_gitignore=config.nested_gitignore,
    )
    namespaces = filter_namespaces(
        namespaces,
        include=include or config.include,
        exclude=[*config.exclude, *exclude],
    )
    # Source paths resolve relative to the working directory.
    with contextlib.chdir(root):
        return add_source_paths(namespaces, root, source_dirs)


def _handle_namespaces(
    root: Path, include: list[str], exclude: list[str], as_json: bool
) -> int:
    config = load_config(root)
    namespaces = _load_namespaces(root, config, include, exclude)
    for ns in namespaces:
        if as_json:
            payload = ns.model_dump(mode="json")
            sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_SORT_KEYS).decode())
            sys.stdout.write("\n")
        else:
            # Summaries may span lines; keep one record per line.
            line = " ".join((summary(ns.doc) or "").split())
            sys.stdout.write(f"{ns.name}\t{line}\n")
    return 0


def _handle_search(root: Path, query: str, starting_ns: str | None) -> int:
    config = load_config(root)
    namespaces = _load_namespaces(root, config, [], [])
    match = search_vars(namespaces, query, starting_ns)
    if match is None:
        sys.stderr.write(f"no var matches '{query}'\n")
        return 1

    # Members carry no resolved path of their own; report their owner's.
    owner, var = next(
        (public, var)
        for ns in namespaces
        if ns.name == match.namespace
        for public in ns.publics
        for var in (public, *public.members)
        if var.name == match.name
    )
    sys.stdout.write(f"{match}\n")
    if owner.path is not None:
        line = f":{var.line}" if var.line is not None else ""
        sys.stdout.write(f"{owner.path.as_posix()}{line}\n")
    if var.doc:
        sys.stdout.write(f"\n{correct_indent(var.doc)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    root = Path(args.root).expanduser().resolve()

    try:
        if args.command == "namespaces":
            return _handle_namespaces(root, args.include, args.exclude, args.json)

        if args.command == "search":
            return _handle_search(root, args.query, args.ns)
    except ConfigError as exc:
        sys.stderr.write(f"config error: {exc}\n")
        return 2

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
