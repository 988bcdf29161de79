from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILENAME = "paramalign.toml"

DEFAULT_INCLUDE = [
    "*.rb",
    "*.rake",
    "*.gemspec",
    "*.ru",
    "Rakefile",
    "*/Rakefile",
    "Gemfile",
    "*/Gemfile",
]

OutputFormat = Literal["text", "json"]


class ParamAlignConfig(BaseModel):
    """Configuration for a paramalign run."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(
        default=True,
        description="Run the parameter alignment cop",
    )
    include: list[str] = Field(
        default_factory=lambda: list(DEFAULT_INCLUDE),
        description="Glob patterns for files to inspect",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to skip",
    )
    nested_gitignore: bool = Field(
        default=False,
        description=(
            "Enable nested .gitignore composition (default: false for root-only)"
        ),
    )
    format: OutputFormat = Field(
        default="text",
        description="Report format",
    )
    jobs: int = Field(
        default=1,
        ge=1,
        description="Number of worker processes",
    )

    @field_validator("include", "exclude", mode="before")
    @classmethod
    def validate_patterns(cls, v: Any) -> Any:
        """Reject non-list values and empty glob patterns."""
        if v is None:
            return []

        if not isinstance(v, list):
            msg = "patterns must be a list of glob strings"
            raise TypeError(msg)

        for pattern in v:
            if not isinstance(pattern, str) or not pattern.strip():
                msg = f"Invalid glob pattern: {pattern!r}"
                raise ValueError(msg)

        return v


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def config_root(path: Path) -> Path:
    """Directory that holds the config for ``path`` (a file or directory)."""
    return path.parent if path.is_file() else path


def load_config(root: Path) -> ParamAlignConfig:
    """Load configuration from paramalign.toml if it exists."""
    config_path = config_root(Path(root)) / CONFIG_FILENAME

    if not config_path.is_file():
        return ParamAlignConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return ParamAlignConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
