"""Parser-independent syntax tree abstraction consumed by the cops."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@dataclass(frozen=True, order=True)
class Position:
    """A source position: 1-based line, 0-based character column."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Span:
    """Exact source extent of a node."""

    start: Position
    end: Position


class SyntaxNode(Protocol):
    """Minimal view of a syntax tree node.

    Any parser can supply a tree as long as its nodes expose a kind name,
    their ordered children, named field lookup and an exact span.
    """

    @property
    def kind(self) -> str: ...

    @property
    def children(self) -> Sequence[SyntaxNode]: ...

    @property
    def span(self) -> Span: ...

    @property
    def text(self) -> str: ...

    def field(self, name: str) -> SyntaxNode | None: ...


def walk(node: SyntaxNode, *, skip: frozenset[str] = frozenset()) -> Iterator[SyntaxNode]:
    """Yield ``node`` and its descendants depth-first, pre-order.

    Subtrees rooted at a node whose kind is in ``skip`` are not entered.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if current.kind in skip:
            continue
        yield current
        stack.extend(reversed(current.children))


__all__ = ["Position", "Span", "SyntaxNode", "walk"]
