"""Tree-sitter based Ruby parsing behind the ``SyntaxNode`` protocol."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING

from tree_sitter import Language, Node, Parser
from tree_sitter_ruby import language as get_ruby_language

from parse.source import SourceLines
from parse.syntax import Position, Span

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

_PARSER: Parser | None = None


class ParseError(Exception):
    """Raised when Ruby source does not parse cleanly."""


def _get_parser() -> Parser:
    """Initialize and return the Tree-sitter parser with the Ruby language."""
    global _PARSER
    if _PARSER is None:
        lang = Language(get_ruby_language())
        _PARSER = Parser(lang)

    return _PARSER


class _ColumnMap:
    """Converts tree-sitter byte columns into character columns."""

    def __init__(self, source_bytes: bytes) -> None:
        self._rows = source_bytes.split(b"\n")
        self._ascii = source_bytes.isascii()

    def position(self, point: tuple[int, int]) -> Position:
        row, byte_col = point[0], point[1]
        if self._ascii or row >= len(self._rows):
            return Position(row + 1, byte_col)
        prefix = self._rows[row][:byte_col]
        return Position(row + 1, len(prefix.decode("utf8", errors="replace")))


class TreeSitterNode:
    """Adapter exposing a tree-sitter ``Node`` as a ``SyntaxNode``."""

    def __init__(self, node: Node, columns: _ColumnMap) -> None:
        self._node = node
        self._columns = columns

    def __repr__(self) -> str:
        return f"TreeSitterNode({self.kind!r}, {self.span.start})"

    @property
    def kind(self) -> str:
        return self._node.type

    @cached_property
    def children(self) -> Sequence[TreeSitterNode]:
        return tuple(TreeSitterNode(child, self._columns) for child in self._node.children)

    @cached_property
    def span(self) -> Span:
        return Span(
            start=self._columns.position(self._node.start_point),
            end=self._columns.position(self._node.end_point),
        )

    def field(self, name: str) -> TreeSitterNode | None:
        child = self._node.child_by_field_name(name)
        if child is None:
            return None
        return TreeSitterNode(child, self._columns)

    @property
    def text(self) -> str:
        raw = self._node.text
        return raw.decode("utf8", errors="replace") if raw else ""


@dataclass(frozen=True)
class ParsedSource:
    """A parsed Ruby file: its tree root plus the raw lines."""

    root: TreeSitterNode
    lines: SourceLines
    has_error: bool


def parse_ruby(source: str | bytes, *, strict: bool = False) -> ParsedSource:
    """Parse Ruby source text.

    Args:
        source: Ruby source as text or UTF-8 bytes.
        strict: Raise ``ParseError`` instead of returning a tree that
            contains syntax errors.

    Returns:
        ParsedSource with the adapted root node and source lines.
    """
    if isinstance(source, str):
        source_bytes = source.encode("utf8")
        text = source
    else:
        source_bytes = source
        text = source.decode("utf8", errors="replace")

    tree = _get_parser().parse(source_bytes)
    has_error = tree.root_node.has_error
    if has_error:
        if strict:
            msg = "Ruby source contains syntax errors"
            raise ParseError(msg)
        logger.debug("Parsed Ruby source with syntax errors")

    return ParsedSource(
        root=TreeSitterNode(tree.root_node, _ColumnMap(source_bytes)),
        lines=SourceLines(text),
        has_error=has_error,
    )


__all__ = ["ParseError", "ParsedSource", "TreeSitterNode", "parse_ruby"]
