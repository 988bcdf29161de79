"""Alignment of the parameters of multi-line method calls."""

from __future__ import annotations

import logging
from itertools import pairwise
from typing import TYPE_CHECKING

from cops.models import Offense
from parse.call_sites import ArgumentKind, extract_call_sites
from parse.treesitter_ruby import parse_ruby

if TYPE_CHECKING:
    from parse.call_sites import ArgumentNode, CallNode
    from parse.source import SourceLines
    from parse.syntax import SyntaxNode

logger = logging.getLogger(__name__)

COP_NAME = "Layout/AlignParameters"
MSG = "Align the parameters of a method call if they span more than one line."


def _starts_new_line(previous: ArgumentNode, argument: ArgumentNode) -> bool:
    """Whether ``argument`` is the first thing on its line in the argument list.

    An argument that begins on the line where the previous argument's value
    ends (e.g. after a multi-line hash) shares that line. Consecutive pairs
    form one braceless hash, whose key layout is not this cop's concern.
    """
    if argument.start.line <= previous.end.line:
        return False
    return not (
        previous.kind is ArgumentKind.PAIR and argument.kind is ArgumentKind.PAIR
    )


def check_call(call: CallNode, lines: SourceLines) -> Offense | None:
    """Return the offense for ``call``, or None when it is aligned or exempt."""
    arguments = call.arguments
    if not call.is_multiline:
        return None

    first = arguments[0]
    if first.start.line != call.callee_start.line:
        return None

    continuations = [
        argument
        for previous, argument in pairwise(arguments)
        if _starts_new_line(previous, argument)
    ]

    # only call-level lines count; lines inside an argument's value do not
    if lines.any_tab_indented(call.callee_start.line, first.start.line) or any(
        lines.is_tab_indented(argument.start.line) for argument in continuations
    ):
        logger.debug(
            "Skipping %s at %s: tab indentation", call.method_name, call.callee_start
        )
        return None

    column = first.start.column
    mismatch = next(
        (argument for argument in continuations if argument.start.column != column),
        None,
    )
    if mismatch is None:
        return None
    return Offense(message=MSG, line=mismatch.start.line, column=mismatch.start.column)


class AlignParameters:
    """Checks that multi-line call arguments line up with the first one.

    Each call is checked on its own; an inner call's layout never affects
    the enclosing call's result.
    """

    name = COP_NAME

    def inspect(self, root: SyntaxNode, lines: SourceLines) -> list[Offense]:
        offenses: list[Offense] = []
        for call in extract_call_sites(root):
            offense = check_call(call, lines)
            if offense is not None:
                offenses.append(offense)
        offenses.sort(key=lambda offense: (offense.line, offense.column))
        return offenses

    def inspect_source(self, source: str | list[str]) -> list[Offense]:
        """Parse Ruby source (text or a list of lines) and inspect it."""
        if not isinstance(source, str):
            source = "\n".join(source)
        parsed = parse_ruby(source)
        return self.inspect(parsed.root, parsed.lines)


__all__ = ["COP_NAME", "MSG", "AlignParameters", "check_call"]
