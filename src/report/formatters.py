"""Output formatting for lint results."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from typing import TYPE_CHECKING

import orjson

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cops.models import FileOffense
    from cops.runner import RunResult
    from parse.call_sites import CallNode


def _to_dict(obj: object) -> object:
    """Convert object to dict for JSON serialization."""
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    return obj


def dumps_jsonl(records: Iterable[object]) -> str:
    """Serialize records as JSON lines with sorted keys."""
    lines = [
        orjson.dumps(_to_dict(record), option=orjson.OPT_SORT_KEYS)
        for record in records
    ]
    return b"".join(line + b"\n" for line in lines).decode("utf8")


def format_offense(offense: FileOffense) -> str:
    """``path:line:col: C: message``, with a 1-based column."""
    return (
        f"{offense.path}:{offense.line}:{offense.column + 1}: "
        f"{offense.severity_code}: {offense.message}"
    )


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def format_text(result: RunResult) -> str:
    lines = [format_offense(offense) for offense in result.offenses]
    for path in result.skipped:
        lines.append(f"{path}: skipped (unreadable or syntax error)")
    lines.append(
        f"{_plural(len(result.inspected), 'file')} inspected, "
        f"{_plural(len(result.offenses), 'offense')} detected"
    )
    return "\n".join(lines) + "\n"


def format_json(result: RunResult) -> str:
    return dumps_jsonl(result.offenses)


def format_calls(calls: Iterable[CallNode]) -> str:
    """JSON lines describing extracted call sites."""
    return dumps_jsonl(
        {
            "method": call.method_name,
            "line": call.callee_start.line,
            "column": call.callee_start.column,
            "parens": call.uses_explicit_parens,
            "arguments": [
                {
                    "kind": argument.kind.value,
                    "line": argument.start.line,
                    "column": argument.start.column,
                    "end_line": argument.end.line,
                    "end_column": argument.end.column,
                }
                for argument in call.arguments
            ],
        }
        for call in calls
    )


__all__ = ["dumps_jsonl", "format_calls", "format_json", "format_offense", "format_text"]
