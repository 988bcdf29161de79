"""Call-site extraction over a Ruby syntax tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from parse.syntax import Position, Span, walk

if TYPE_CHECKING:
    from collections.abc import Iterator

    from parse.syntax import SyntaxNode

CALL_KINDS = frozenset({"call"})

# Heredoc text is never code; its interpolations are not visited either.
OPAQUE_KINDS = frozenset({"heredoc_body"})

_NON_ARGUMENT_KINDS = frozenset({"(", ")", ",", "comment", "heredoc_body"})


class ArgumentKind(str, Enum):
    """Shape of a single entry in a call's argument list."""

    VALUE = "value"
    PAIR = "pair"
    SPLAT = "splat"
    DOUBLE_SPLAT = "double_splat"
    BLOCK_PASS = "block_pass"


_KIND_BY_NODE = {
    "pair": ArgumentKind.PAIR,
    "splat_argument": ArgumentKind.SPLAT,
    "hash_splat_argument": ArgumentKind.DOUBLE_SPLAT,
    "block_argument": ArgumentKind.BLOCK_PASS,
}


@dataclass(frozen=True)
class ArgumentNode:
    kind: ArgumentKind
    start: Position
    end: Position


@dataclass(frozen=True)
class CallNode:
    """One call expression and its ordered arguments.

    ``callee_start`` is where the call's own text begins, receiver
    included. ``open_paren`` is only set when the arguments are
    parenthesized.
    """

    method_name: str
    callee_start: Position
    span: Span
    uses_explicit_parens: bool
    open_paren: Position | None
    arguments: tuple[ArgumentNode, ...]

    @property
    def is_multiline(self) -> bool:
        if not self.arguments:
            return False
        first_line = self.arguments[0].start.line
        return any(arg.start.line != first_line for arg in self.arguments)


def _argument_from_node(node: SyntaxNode) -> ArgumentNode:
    return ArgumentNode(
        kind=_KIND_BY_NODE.get(node.kind, ArgumentKind.VALUE),
        start=node.span.start,
        end=node.span.end,
    )


def build_call_node(node: SyntaxNode) -> CallNode:
    """Build a ``CallNode`` from a node of one of ``CALL_KINDS``."""
    method = node.field("method")
    callee_start = node.span.start
    method_name = method.text if method is not None else "call"

    args_node = node.field("arguments")
    if args_node is None:
        return CallNode(
            method_name=method_name,
            callee_start=callee_start,
            span=node.span,
            uses_explicit_parens=False,
            open_paren=None,
            arguments=(),
        )

    children = list(args_node.children)
    uses_parens = bool(children) and children[0].kind == "("
    arguments = tuple(
        _argument_from_node(child)
        for child in children
        if child.kind not in _NON_ARGUMENT_KINDS
    )
    return CallNode(
        method_name=method_name,
        callee_start=callee_start,
        span=node.span,
        uses_explicit_parens=uses_parens,
        open_paren=children[0].span.start if uses_parens else None,
        arguments=arguments,
    )


def extract_call_sites(root: SyntaxNode) -> Iterator[CallNode]:
    """Lazily yield every call expression in the tree, depth-first.

    Calls nested in arguments, attached blocks and string, symbol or regex
    interpolation are yielded as independent records. Heredoc bodies are
    skipped entirely.
    """
    for node in walk(root, skip=OPAQUE_KINDS):
        if node.kind in CALL_KINDS:
            yield build_call_node(node)


__all__ = [
    "ArgumentKind",
    "ArgumentNode",
    "CALL_KINDS",
    "CallNode",
    "build_call_node",
    "extract_call_sites",
]
