from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from cli import main


def _copy_mini_repo_fixture(root: Path) -> None:
    fixture_repo = Path(__file__).parent / "fixtures" / "mini_repo"
    shutil.copytree(fixture_repo, root)


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    _copy_mini_repo_fixture(root)
    return root


def test_cli_namespaces_lists_summaries(
    repo_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["namespaces", str(repo_root)])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == [
        "pkg_a\tMini fixture package.",
        "pkg_a.core\tCore symbols for the mini fixture package.",
        "pkg_a.use_core\tUse core module from another namespace.",
    ]


def test_cli_namespaces_filters(
    repo_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(
        ["namespaces", str(repo_root), "--include", "pkg_a.core", "--include", "pkg_a"]
    )
    assert exit_code == 0
    assert [line.split("\t")[0] for line in capsys.readouterr().out.splitlines()] == [
        "pkg_a",
        "pkg_a.core",
    ]

    (repo_root / "codox.toml").write_text('exclude = ["pkg_a"]\n', encoding="utf-8")
    exit_code = main(["namespaces", str(repo_root), "--exclude", "pkg_a.core"])
    assert exit_code == 0
    assert [line.split("\t")[0] for line in capsys.readouterr().out.splitlines()] == [
        "pkg_a.use_core",
    ]


def test_cli_namespaces_json_has_source_paths(
    repo_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["namespaces", str(repo_root), "--json"])

    assert exit_code == 0
    records = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    core = next(record for record in records if record["name"] == "pkg_a.core")
    greeter = next(var for var in core["publics"] if var["name"] == "Greeter")
    assert greeter["file"] == "pkg_a/core.py"
    assert greeter["path"] == "src/pkg_a/core.py"
    assert greeter["members"][0]["path"] is None


def test_cli_search_prints_match_and_doc(
    repo_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["search", "greet", str(repo_root)])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out.startswith("pkg_a.core/greet\nsrc/pkg_a/core.py:14\n")
    assert (
        "Return a deterministic greeting.\n\nThe greeting never varies between calls."
        in out
    )


def test_cli_search_prefers_namespace(
    repo_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["search", "greet", str(repo_root), "--ns", "pkg_a.use_core"])

    assert exit_code == 0
    assert capsys.readouterr().out.startswith(
        "pkg_a.use_core/greet\nsrc/pkg_a/use_core.py:12\n"
    )


def test_cli_search_no_match(
    repo_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["search", "nonexistent", str(repo_root)])

    assert exit_code == 1
    assert "nonexistent" in capsys.readouterr().err


def test_cli_reports_config_errors(
    repo_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (repo_root / "codox.toml").write_text("bogus_key = true\n", encoding="utf-8")

    exit_code = main(["namespaces", str(repo_root)])

    assert exit_code == 2
    assert "config error" in capsys.readouterr().err


def test_cli_namespaces_multiline_summary_stays_on_one_line(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    src = tmp_path / "repo" / "src"
    src.mkdir(parents=True)
    (src / "mod.py").write_text(
        '"""First line\ncontinues here.\n\nBody."""\n', encoding="utf-8"
    )
    (src / "other.py").write_text('"""Other."""\n', encoding="utf-8")

    exit_code = main(["namespaces", str(tmp_path / "repo")])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == [
        "mod\tFirst line continues here.",
        "other\tOther.",
    ]
