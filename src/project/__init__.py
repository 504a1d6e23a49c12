"""Project configuration and logging setup."""

from project.config import (
    CONFIG_FILENAME,
    CodoxConfig,
    ConfigError,
    load_config,
    resolve_source_dirs,
)
from project.log import setup_logging

__all__ = [
    "CONFIG_FILENAME",
    "CodoxConfig",
    "ConfigError",
    "load_config",
    "resolve_source_dirs",
    "setup_logging",
]
