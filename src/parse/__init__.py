"""Parsing utilities for Ruby sources."""

from parse.call_sites import (
    ArgumentKind,
    ArgumentNode,
    CallNode,
    extract_call_sites,
)
from parse.source import SourceLines
from parse.syntax import Position, Span, SyntaxNode
from parse.treesitter_ruby import ParseError, ParsedSource, parse_ruby

__all__ = [
    "ArgumentKind",
    "ArgumentNode",
    "CallNode",
    "ParseError",
    "ParsedSource",
    "Position",
    "SourceLines",
    "Span",
    "SyntaxNode",
    "extract_call_sites",
    "parse_ruby",
]
