from __future__ import annotations

from typing import TYPE_CHECKING

from cops.align_parameters import COP_NAME, MSG
from cops.runner import inspect_file, run
from rules.config import ParamAlignConfig

if TYPE_CHECKING:
    from pathlib import Path


def _write_ruby_file(repo_root: Path, relative_path: str, source: str) -> Path:
    path = repo_root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding="utf-8")
    return path


def _make_repo(repo_root: Path) -> None:
    _write_ruby_file(repo_root, "lib/good.rb", "call(a,\n     b)\n")
    _write_ruby_file(repo_root, "lib/bad.rb", "call(a,\n  b)\nother(x,\n y)\n")
    _write_ruby_file(repo_root, "lib/broken.rb", "def oops(\n")


def test_inspect_file_attaches_path_and_cop_name(tmp_path: Path) -> None:
    path = _write_ruby_file(tmp_path, "bad.rb", "call(a,\n  b)\n")

    report = inspect_file(path, "bad.rb")

    assert report.error is None
    assert len(report.offenses) == 1
    offense = report.offenses[0]
    assert offense.path == "bad.rb"
    assert offense.cop_name == COP_NAME
    assert (offense.line, offense.column) == (2, 2)
    assert offense.message == MSG


def test_inspect_file_skips_unparsable_source(tmp_path: Path) -> None:
    path = _write_ruby_file(tmp_path, "broken.rb", "def oops(\n")

    report = inspect_file(path, "broken.rb")

    assert report.error is not None
    assert report.offenses == ()


def test_inspect_file_reports_unreadable_file(tmp_path: Path) -> None:
    report = inspect_file(tmp_path / "missing.rb", "missing.rb")

    assert report.error is not None


def test_run_collects_offenses_in_order(tmp_path: Path) -> None:
    _make_repo(tmp_path)

    result = run(tmp_path)

    assert result.inspected == ("lib/bad.rb", "lib/good.rb")
    assert result.skipped == ("lib/broken.rb",)
    assert [(o.path, o.line, o.column) for o in result.offenses] == [
        ("lib/bad.rb", 2, 2),
        ("lib/bad.rb", 4, 1),
    ]
    assert result.ok is False


def test_run_on_single_file(tmp_path: Path) -> None:
    path = _write_ruby_file(tmp_path, "only.rb", "call(a,\n  b)\n")

    result = run(path)

    assert result.inspected == ("only.rb",)
    assert len(result.offenses) == 1


def test_run_honors_disabled_config(tmp_path: Path) -> None:
    _make_repo(tmp_path)

    result = run(tmp_path, config=ParamAlignConfig(enabled=False))

    assert result.ok is True
    assert result.inspected == ()


def test_run_honors_exclude(tmp_path: Path) -> None:
    _make_repo(tmp_path)

    result = run(tmp_path, config=ParamAlignConfig(exclude=["lib/bad.rb"]))

    assert result.ok is True
    assert "lib/bad.rb" not in result.inspected


def test_parallel_run_matches_serial_run(tmp_path: Path) -> None:
    _make_repo(tmp_path)
    for index in range(5):
        _write_ruby_file(tmp_path, f"extra/file_{index}.rb", "go(a,\n   b)\n")

    serial = run(tmp_path, jobs=1)
    parallel = run(tmp_path, jobs=2)

    assert parallel == serial
