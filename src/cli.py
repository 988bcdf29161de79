"""Command-line interface for paramalign."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cops.runner import run
from parse.call_sites import extract_call_sites
from parse.treesitter_ruby import parse_ruby
from report.formatters import format_calls, format_json, format_text
from rules.config import ConfigError, load_config


def _add_common_paths(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Directory or Ruby file to inspect (default: .)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="paramalign")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check", help="Check alignment of multi-line call parameters"
    )
    _add_common_paths(check_parser)
    check_parser.add_argument(
        "--format",
        choices=("text", "json"),
        default=None,
        help="Report format (default: config format)",
    )
    check_parser.add_argument(
        "--jobs",
        type=int,
        default=None,
        help="Worker processes (default: config jobs)",
    )

    calls_parser = subparsers.add_parser(
        "calls", help="Print the call sites extracted from a Ruby file"
    )
    calls_parser.add_argument("file", help="Ruby source file")

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _handle_check(root: Path, output_format: str | None, jobs: int | None) -> int:
    if not root.exists():
        sys.stderr.write(f"error: no such file or directory: {root}\n")
        return 2

    try:
        config = load_config(root)
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    if jobs is not None and jobs < 1:
        sys.stderr.write("error: --jobs must be at least 1\n")
        return 2

    result = run(root, config=config, jobs=jobs)
    if (output_format or config.format) == "json":
        sys.stdout.write(format_json(result))
    else:
        sys.stdout.write(format_text(result))
    return 0 if result.ok else 1


def _handle_calls(file_path: Path) -> int:
    try:
        source_bytes = file_path.read_bytes()
    except OSError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    parsed = parse_ruby(source_bytes)
    if parsed.has_error:
        sys.stderr.write(f"warning: {file_path} contains syntax errors\n")
    sys.stdout.write(format_calls(extract_call_sites(parsed.root)))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "check":
        root = Path(args.root).expanduser().resolve()
        return _handle_check(root, args.format, args.jobs)

    if args.command == "calls":
        return _handle_calls(Path(args.file).expanduser().resolve())

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
