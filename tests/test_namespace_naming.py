from __future__ import annotations

from pathlib import Path

import pytest

from utils import path_to_namespace


def test_path_to_namespace_dotted_rules() -> None:
    assert path_to_namespace("codox/__init__.py") == "codox"
    assert path_to_namespace("codox/cli.py") == "codox.cli"
    assert path_to_namespace(Path("nested/feature/tool.py")) == "nested.feature.tool"


def test_path_to_namespace_normalizes_separators() -> None:
    assert path_to_namespace("pkg\\sub\\mod.py") == "pkg.sub.mod"


def test_path_to_namespace_rejects_empty_names() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        path_to_namespace("__init__.py")

    with pytest.raises(ValueError, match="non-empty"):
        path_to_namespace("")
