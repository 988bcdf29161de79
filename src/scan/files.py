"""Ruby source discovery."""

from __future__ import annotations

import os
from fnmatch import fnmatch
from pathlib import Path
from typing import TYPE_CHECKING

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from rules.config import ParamAlignConfig

GITIGNORE = ".gitignore"


def _load_matcher(directory: Path) -> Callable[[str], bool] | None:
    gitignore_path = directory / GITIGNORE
    if not gitignore_path.is_file():
        return None
    return parse_gitignore(gitignore_path)


def _is_ignored(path: Path, matchers: list[Callable[[str], bool]]) -> bool:
    return any(matcher(str(path)) for matcher in matchers)


def _matches_patterns(rel_path: str, config: ParamAlignConfig) -> bool:
    if not any(fnmatch(rel_path, pat) for pat in config.include):
        return False
    return not any(fnmatch(rel_path, pat) for pat in config.exclude)


def find_ruby_files(root: Path, config: ParamAlignConfig) -> Iterator[Path]:
    """Yield the Ruby files under ``root`` selected by ``config``.

    Dot directories and directories ignored by ``.gitignore`` are pruned
    during the walk. Only the root ``.gitignore`` applies unless
    ``config.nested_gitignore`` is set, in which case each directory's
    ``.gitignore`` applies to its own subtree. Symlinks are neither
    followed nor yielded.

    Yields:
        Paths sorted by their posix path relative to ``root``.
    """
    root_matcher = _load_matcher(root)
    matchers_by_dir: dict[str, list[Callable[[str], bool]]] = {
        os.fspath(root): [root_matcher] if root_matcher is not None else []
    }
    found: list[tuple[str, Path]] = []

    for dirpath, dirnames, filenames in os.walk(root):
        directory = Path(dirpath)
        matchers = matchers_by_dir.pop(dirpath)
        if config.nested_gitignore and dirpath != os.fspath(root):
            nested = _load_matcher(directory)
            if nested is not None:
                matchers = [*matchers, nested]

        kept_dirs = []
        for name in sorted(dirnames):
            child = directory / name
            if name.startswith(".") or child.is_symlink():
                continue
            if _is_ignored(child, matchers):
                continue
            kept_dirs.append(name)
            matchers_by_dir[os.path.join(dirpath, name)] = matchers
        dirnames[:] = kept_dirs

        for name in filenames:
            path = directory / name
            if path.is_symlink() or _is_ignored(path, matchers):
                continue
            rel_path = path.relative_to(root).as_posix()
            if _matches_patterns(rel_path, config):
                found.append((rel_path, path))

    found.sort()
    for _, path in found:
        yield path


__all__ = ["find_ruby_files"]
