"""Runs the cop over files and collects offenses in a deterministic order."""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from cops.align_parameters import COP_NAME, AlignParameters
from cops.models import FileOffense
from parse.treesitter_ruby import ParseError, parse_ruby
from rules.config import load_config
from scan.files import find_ruby_files

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rules.config import ParamAlignConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileReport:
    path: str
    offenses: tuple[FileOffense, ...] = field(default_factory=tuple)
    error: str | None = None


@dataclass(frozen=True)
class RunResult:
    offenses: tuple[FileOffense, ...] = field(default_factory=tuple)
    inspected: tuple[str, ...] = field(default_factory=tuple)
    skipped: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.offenses


def inspect_file(file_path: Path, relative_path: str) -> FileReport:
    """Inspect one Ruby file.

    Files that cannot be read or do not parse cleanly are reported with an
    error and no offenses; the cop is not run on them.
    """
    try:
        source_bytes = file_path.read_bytes()
    except OSError as exc:
        logger.warning("Cannot read %s: %s", relative_path, exc)
        return FileReport(path=relative_path, error=str(exc))

    try:
        parsed = parse_ruby(source_bytes, strict=True)
    except ParseError as exc:
        logger.warning("Skipping %s: %s", relative_path, exc)
        return FileReport(path=relative_path, error=str(exc))

    offenses = AlignParameters().inspect(parsed.root, parsed.lines)
    logger.debug("Inspected %s: %d offense(s)", relative_path, len(offenses))
    return FileReport(
        path=relative_path,
        offenses=tuple(
            FileOffense.from_offense(offense, path=relative_path, cop_name=COP_NAME)
            for offense in offenses
        ),
    )


def _inspect_task(task: tuple[Path, str]) -> FileReport:
    return inspect_file(*task)


def _collect_targets(root: Path, config: ParamAlignConfig) -> list[tuple[Path, str]]:
    if root.is_file():
        return [(root, root.name)]

    return [
        (path, path.relative_to(root).as_posix())
        for path in find_ruby_files(root, config)
    ]


def _map_reports(tasks: list[tuple[Path, str]], jobs: int) -> Iterable[FileReport]:
    if jobs <= 1 or len(tasks) <= 1:
        return [_inspect_task(task) for task in tasks]
    with ProcessPoolExecutor(max_workers=jobs) as executor:
        # map preserves input order, so output stays deterministic
        return list(executor.map(_inspect_task, tasks, chunksize=8))


def run(
    root: Path,
    *,
    config: ParamAlignConfig | None = None,
    jobs: int | None = None,
) -> RunResult:
    """Inspect every Ruby file under ``root`` (or ``root`` itself if a file).

    Args:
        root: Directory to scan, or a single Ruby file.
        config: Optional configuration; loaded from paramalign.toml if omitted.
        jobs: Worker process count; overrides ``config.jobs``.

    Returns:
        RunResult with offenses sorted by path, line and column.
    """
    if config is None:
        config = load_config(root)

    if not config.enabled:
        logger.info("Parameter alignment cop disabled by configuration")
        return RunResult()

    tasks = _collect_targets(root, config)
    reports = _map_reports(tasks, jobs if jobs is not None else config.jobs)

    offenses: list[FileOffense] = []
    inspected: list[str] = []
    skipped: list[str] = []
    for report in reports:
        if report.error is not None:
            skipped.append(report.path)
            continue
        inspected.append(report.path)
        offenses.extend(report.offenses)

    offenses.sort(key=FileOffense.sort_key)
    return RunResult(
        offenses=tuple(offenses),
        inspected=tuple(inspected),
        skipped=tuple(skipped),
    )


__all__ = ["FileReport", "RunResult", "inspect_file", "run"]
