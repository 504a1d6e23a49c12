"""Tree-sitter based namespace reading for Python sources.

Each Python file under a source directory becomes one namespace whose
publics are the module's top-level functions, classes and assignments.
Class publics carry their public methods as members.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

import structlog
from tree_sitter import Language, Node, Parser
from tree_sitter_python import language as get_python_language

from namespaces.models import NamespaceRecord, PublicVarRecord, VarKind
from scan.files import find_python_files
from utils import path_to_namespace

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = structlog.get_logger(__name__)

_PARSER: Parser | None = None


def _get_parser() -> Parser:
    """Initialize and return the Tree-sitter parser with Python language."""
    global _PARSER
    if _PARSER is None:
        _PARSER = Parser(Language(get_python_language()))
    return _PARSER


def _literal(node: Node | None) -> object:
    """Evaluate a literal node, or return None if it is not a plain literal."""
    if node is None or not node.text:
        return None
    try:
        return ast.literal_eval(node.text.decode("utf8"))
    except (ValueError, SyntaxError):
        return None


def _docstring(node: Node) -> str | None:
    """Return the docstring of a module, class or function node."""
    body = node if node.type == "module" else node.child_by_field_name("body")
    if body is None:
        return None

    for child in body.children:
        if child.type == "expression_statement":
            first_expr = child.children[0] if child.child_count else None
            if first_expr is not None and first_expr.type == "string":
                value = _literal(first_expr)
                return value if isinstance(value, str) else None
            return None
        if child.is_named and child.type != "comment":
            return None
    return None


def _unwrap(node: Node) -> Node:
    """Return the definition inside a decorated definition."""
    if node.type == "decorated_definition":
        definition = node.child_by_field_name("definition")
        if definition is not None:
            return definition
    return node


def _name_of(node: Node) -> str | None:
    name_node = node.child_by_field_name("name")
    if name_node is None or not name_node.text:
        return None
    return name_node.text.decode("utf8")


def _assignment(node: Node) -> Node | None:
    """Return the assignment node of a simple top-level assignment."""
    if node.type != "expression_statement" or not node.child_count:
        return None
    child = node.children[0]
    if child.type != "assignment":
        return None
    left = child.child_by_field_name("left")
    if left is None or left.type != "identifier":
        return None
    return child


def _declared_all(root: Node) -> set[str] | None:
    """Return the names listed in a literal ``__all__``, if any."""
    for child in root.children:
        assignment = _assignment(child)
        if assignment is None:
            continue
        left = assignment.child_by_field_name("left")
        if left is None or left.text != b"__all__":
            continue
        value = _literal(assignment.child_by_field_name("right"))
        if isinstance(value, (list, tuple)):
            return {name for name in value if isinstance(name, str)}
    return None


def _is_public(name: str, declared: set[str] | None) -> bool:
    if declared is not None:
        return name in declared
    return not name.startswith("_")


def _var_record(
    node: Node,
    name: str,
    kind: VarKind,
    file: str,
    *,
    doc: str | None = None,
    members: tuple[PublicVarRecord, ...] = (),
) -> PublicVarRecord:
    return PublicVarRecord(
        name=name,
        file=file,
        doc=doc,
        members=members,
        kind=kind,
        line=node.start_point[0] + 1,
    )


def _methods(class_node: Node, file: str) -> tuple[PublicVarRecord, ...]:
    body = class_node.child_by_field_name("body")
    if body is None:
        return ()

    methods: list[PublicVarRecord] = []
    for child in body.children:
        definition = _unwrap(child)
        if definition.type != "function_definition":
            continue
        name = _name_of(definition)
        if name is None or name.startswith("_"):
            continue
        methods.append(
            _var_record(
                definition, name, "method", file, doc=_docstring(definition)
            )
        )
    return tuple(methods)


def _publics(root: Node, file: str) -> list[PublicVarRecord]:
    declared = _declared_all(root)
    publics: list[PublicVarRecord] = []

    for child in root.children:
        definition = _unwrap(child)

        if definition.type in ("function_definition", "class_definition"):
            name = _name_of(definition)
            if name is None or not _is_public(name, declared):
                continue
            if definition.type == "class_definition":
                publics.append(
                    _var_record(
                        definition,
                        name,
                        "class",
                        file,
                        doc=_docstring(definition),
                        members=_methods(definition, file),
                    )
                )
            else:
                publics.append(
                    _var_record(
                        definition, name, "function", file, doc=_docstring(definition)
                    )
                )
            continue

        assignment = _assignment(child)
        if assignment is None:
            continue
        left = assignment.child_by_field_name("left")
        name = left.text.decode("utf8") if left is not None and left.text else None
        if name is None or name == "__all__" or not _is_public(name, declared):
            continue
        publics.append(_var_record(assignment, name, "variable", file))

    return publics


def read_namespace(file_path: Path, relative_path: str) -> NamespaceRecord | None:
    """Read a single Python file into a namespace record.

    Args:
        file_path: Path to the Python file
        relative_path: Path relative to its source directory; recorded as
            each public's ``file`` and used to derive the namespace name

    Returns:
        The namespace record, or None if the file cannot be read.
    """
    try:
        source_bytes = file_path.read_bytes()
    except OSError as exc:
        logger.warning("source_read_failed", path=str(file_path), error=str(exc))
        return None

    root_node = _get_parser().parse(source_bytes).root_node

    return NamespaceRecord(
        name=path_to_namespace(relative_path),
        publics=tuple(_publics(root_node, relative_path)),
        doc=_docstring(root_node),
    )


def read_namespaces(
    source_dirs: Iterable[Path],
    *,
    include_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
    nested_gitignore: bool = False,
) -> list[NamespaceRecord]:
    """Read every Python file under the source directories.

    Args:
        source_dirs: Source directories, in priority order
        include_patterns: Optional fnmatch patterns files must match
        exclude_patterns: Optional fnmatch patterns of files to skip
        nested_gitignore: Honour nested .gitignore files

    Returns:
        Namespace records sorted by namespace name.
    """
    namespaces: list[NamespaceRecord] = []
    for source_dir in source_dirs:
        if not source_dir.is_dir():
            logger.warning("source_dir_missing", path=str(source_dir))
            continue
        for file_path in find_python_files(
            source_dir,
            include_patterns=include_patterns,
            exclude_patterns=exclude_patterns,
            nested_gitignore=nested_gitignore,
        ):
            relative_path = file_path.relative_to(source_dir).as_posix()
            if relative_path == "__init__.py":
                continue
            ns = read_namespace(file_path, relative_path)
            if ns is not None:
                namespaces.append(ns)

    namespaces.sort(key=lambda ns: ns.name)
    logger.debug("namespaces_read", count=len(namespaces))
    return namespaces


__all__ = ["read_namespace", "read_namespaces"]
