from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from contract.models import ErrorHandling, OutputFormat

CONFIG_FILENAME = "classdeps.toml"


class ExplorerConfig(BaseModel):
    """Configuration for class dependency analysis."""

    model_config = ConfigDict(extra="forbid")

    error_handling: ErrorHandling = Field(
        default="graceful",
        description="'graceful' reports failures in the result, 'strict' raises",
    )
    include_metadata: bool = Field(
        default=True,
        description="Attach analyzer metadata to analysis reports",
    )
    namespace_separator: str = Field(
        default=".",
        description="Separator between namespace and class name (e.g. '.' or '::')",
    )
    output_format: OutputFormat = Field(
        default="console",
        description="Default report format when --format is not given",
    )
    include: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to include (empty = all Python files)",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to exclude",
    )
    nested_gitignore: bool = Field(
        default=False,
        description=(
            "Enable nested .gitignore composition (default: false for root-only)"
        ),
    )

    @field_validator("namespace_separator")
    @classmethod
    def validate_namespace_separator(cls, v: str) -> str:
        if not v:
            msg = "namespace_separator must be a non-empty string"
            raise ValueError(msg)
        return v

    @field_validator("include", "exclude", mode="before")
    @classmethod
    def validate_patterns(cls, v: Any) -> Any:
        """Accept a single glob string as a one-element list."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def config_root(path: Path) -> Path:
    """Return the directory a config file is looked up in for ``path``."""
    return path if path.is_dir() else path.parent


def load_config(root: Path) -> ExplorerConfig:
    """Load configuration from classdeps.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return ExplorerConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return ExplorerConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ExplorerConfig",
    "config_root",
    "load_config",
]
