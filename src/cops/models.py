"""Offense models produced by cops."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["refactor", "convention", "warning", "error", "fatal"]

_SEVERITY_CODES: dict[str, str] = {
    "refactor": "R",
    "convention": "C",
    "warning": "W",
    "error": "E",
    "fatal": "F",
}


class Offense(BaseModel):
    """A single rule violation, anchored at a source position."""

    model_config = ConfigDict(frozen=True)

    severity: Severity = "convention"
    message: str
    line: int = Field(description="1-based line")
    column: int = Field(description="0-based character column")

    @property
    def severity_code(self) -> str:
        return _SEVERITY_CODES[self.severity]

    def __str__(self) -> str:
        return f"{self.severity_code}:{self.line:3d}: {self.message}"


class FileOffense(BaseModel):
    """An offense with the caller-attached file and cop identifiers."""

    model_config = ConfigDict(frozen=True)

    path: str
    cop_name: str
    severity: Severity
    line: int
    column: int
    message: str

    @classmethod
    def from_offense(cls, offense: Offense, *, path: str, cop_name: str) -> FileOffense:
        return cls(
            path=path,
            cop_name=cop_name,
            severity=offense.severity,
            line=offense.line,
            column=offense.column,
            message=offense.message,
        )

    @property
    def severity_code(self) -> str:
        return _SEVERITY_CODES[self.severity]

    def sort_key(self) -> tuple[str, int, int, str]:
        return (self.path, self.line, self.column, self.cop_name)


__all__ = ["FileOffense", "Offense", "Severity"]
