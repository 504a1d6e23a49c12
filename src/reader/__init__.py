"""Source readers producing namespace records."""

from reader.treesitter_namespaces import read_namespace, read_namespaces

__all__ = ["read_namespace", "read_namespaces"]
