from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from cops.align_parameters import AlignParameters
from parse.call_sites import extract_call_sites
from parse.source import SourceLines
from parse.syntax import Position, Span


@dataclass(frozen=True)
class FakeNode:
    """Hand-built node satisfying the ``SyntaxNode`` protocol."""

    kind: str
    span: Span
    children: tuple[FakeNode, ...] = ()
    text: str = ""
    fields: dict[str, FakeNode] = dataclasses.field(default_factory=dict)

    def field(self, name: str) -> FakeNode | None:
        return self.fields.get(name)


def _span(line: int, col: int, end_line: int, end_col: int) -> Span:
    return Span(Position(line, col), Position(end_line, end_col))


def _leaf(kind: str, line: int, col: int, text: str = "") -> FakeNode:
    return FakeNode(kind=kind, span=_span(line, col, line, col + max(len(text), 1)), text=text)


def _call(second_arg_col: int) -> FakeNode:
    method = _leaf("identifier", 1, 0, "go")
    arguments = FakeNode(
        kind="argument_list",
        span=_span(1, 2, 2, second_arg_col + 2),
        children=(
            _leaf("(", 1, 2, "("),
            _leaf("identifier", 1, 3, "a"),
            _leaf(",", 1, 4, ","),
            _leaf("identifier", 2, second_arg_col, "b"),
            _leaf(")", 2, second_arg_col + 1, ")"),
        ),
    )
    call = FakeNode(
        kind="call",
        span=_span(1, 0, 2, second_arg_col + 2),
        children=(method, arguments),
        fields={"method": method, "arguments": arguments},
    )
    return FakeNode(kind="program", span=call.span, children=(call,))


def test_extractor_works_on_any_tree_implementation() -> None:
    (call,) = list(extract_call_sites(_call(3)))

    assert call.method_name == "go"
    assert call.uses_explicit_parens is True
    assert [argument.start for argument in call.arguments] == [
        Position(1, 3),
        Position(2, 3),
    ]


def test_cop_runs_on_injected_tree() -> None:
    cop = AlignParameters()

    aligned = cop.inspect(_call(3), SourceLines("go(a,\n   b)\n"))
    misaligned = cop.inspect(_call(1), SourceLines("go(a,\n b)\n"))

    assert aligned == []
    assert [(offense.line, offense.column) for offense in misaligned] == [(2, 1)]


def test_unknown_node_kinds_are_traversed() -> None:
    inner = _call(3)
    wrapper = FakeNode(kind="mystery_node", span=inner.span, children=(inner,))

    assert len(list(extract_call_sites(wrapper))) == 1
