"""Namespace records and the utilities that filter, annotate and search
them."""

from namespaces.filter import filter_namespaces
from namespaces.models import NamespaceRecord, PublicVarRecord, QualifiedSymbol
from namespaces.paths import add_source_paths, find_file_in_repo, normalize_path
from namespaces.search import public_vars, re_escape, search_vars
from namespaces.symbols import symbol_set

__all__ = [
    "NamespaceRecord",
    "PublicVarRecord",
    "QualifiedSymbol",
    "add_source_paths",
    "filter_namespaces",
    "find_file_in_repo",
    "normalize_path",
    "public_vars",
    "re_escape",
    "search_vars",
    "symbol_set",
]
