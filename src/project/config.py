"""Loading and validation of codox.toml project configuration."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILENAME = "codox.toml"

logger = structlog.get_logger(__name__)


class CodoxConfig(BaseModel):
    """Configuration for reading and resolving documented namespaces."""

    model_config = ConfigDict(extra="forbid")

    source_paths: list[str] = Field(
        default_factory=lambda: ["src"],
        description="Source directories relative to the project root, in priority order",
    )
    include: list[str] = Field(
        default_factory=list,
        description="Namespaces to document (empty = all namespaces)",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Namespaces to leave out",
    )
    file_include: list[str] = Field(
        default_factory=list,
        description="Glob patterns for source files to read (empty = all)",
    )
    file_exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns for source files to skip",
    )
    nested_gitignore: bool = Field(
        default=False,
        description="Enable nested .gitignore composition (default: root-only)",
    )

    @field_validator("source_paths")
    @classmethod
    def validate_source_paths(cls, v: list[str]) -> list[str]:
        """Require at least one non-empty, relative source path."""
        if not v:
            msg = "source_paths must list at least one directory"
            raise ValueError(msg)
        for source in v:
            if not source or source.startswith("~") or Path(source).is_absolute():
                msg = f"source path '{source}' must be a non-empty relative path"
                raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def resolve_source_dirs(root: Path, config: CodoxConfig) -> list[Path]:
    """Resolve configured source paths to directories within the root.

    Raises:
        ConfigError: If a source path escapes the project root.
    """
    try:
        resolved_root = root.resolve()
    except OSError as exc:
        msg = f"Failed to resolve project root '{root}': {exc}"
        raise ConfigError(msg) from exc

    source_dirs: list[Path] = []
    for source in config.source_paths:
        resolved = (resolved_root / source).resolve()
        if not resolved.is_relative_to(resolved_root):
            msg = f"source path '{source}' escapes the project root"
            raise ConfigError(msg)
        source_dirs.append(resolved)
    return source_dirs


def load_config(root: Path) -> CodoxConfig:
    """Load configuration from codox.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        logger.debug("config_using_defaults", root=str(root))
        return CodoxConfig()

    try:
        with config_path.open("rb") as f:
            data: dict[str, Any] = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        config = CodoxConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e

    logger.debug("config_loaded_from_file", path=str(config_path))
    return config
