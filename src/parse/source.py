"""Raw source lines with per-file memoized line predicates."""

from __future__ import annotations

from functools import cached_property


class SourceLines:
    """The raw text of one file, split into 1-based lines."""

    def __init__(self, text: str) -> None:
        # rows split on "\n" only, matching the parser's line numbering
        self._lines = [line.removesuffix("\r") for line in text.split("\n")]

    def __len__(self) -> int:
        return len(self._lines)

    def line(self, number: int) -> str:
        """Return line ``number`` (1-based), or an empty string past the end."""
        if 1 <= number <= len(self._lines):
            return self._lines[number - 1]
        return ""

    @cached_property
    def _tab_indented(self) -> frozenset[int]:
        indented: set[int] = set()
        for number, text in enumerate(self._lines, start=1):
            stripped = text.lstrip(" \t")
            if "\t" in text[: len(text) - len(stripped)]:
                indented.add(number)
        return frozenset(indented)

    def is_tab_indented(self, number: int) -> bool:
        """True when the leading whitespace of line ``number`` holds a tab."""
        return number in self._tab_indented

    def any_tab_indented(self, first: int, last: int) -> bool:
        return any(self.is_tab_indented(n) for n in range(first, last + 1))


__all__ = ["SourceLines"]
