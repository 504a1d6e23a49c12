"""Namespace metadata records.

Records describe documented namespaces (Python modules) and their public
vars as produced by the source reader. They are immutable; transformations
return updated copies.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

VarKind = Literal["function", "class", "method", "variable"]


class PublicVarRecord(BaseModel):
    """A documented, externally visible symbol within a namespace."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    file: str | None = Field(
        default=None, description="Source file relative to its source directory"
    )
    doc: str | None = None
    members: tuple[PublicVarRecord, ...] = ()
    path: Path | None = Field(
        default=None, description="Source file resolved from the project root"
    )
    kind: VarKind | None = None
    line: int | None = None


class NamespaceRecord(BaseModel):
    """A named grouping of documented public vars."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    publics: tuple[PublicVarRecord, ...] = ()
    doc: str | None = None


@dataclass(frozen=True)
class QualifiedSymbol:
    """A var name qualified by its owning namespace, rendered ``ns/name``."""

    namespace: str | None
    name: str

    def __str__(self) -> str:
        if self.namespace is None:
            return self.name
        return f"{self.namespace}/{self.name}"


__all__ = ["NamespaceRecord", "PublicVarRecord", "QualifiedSymbol", "VarKind"]
