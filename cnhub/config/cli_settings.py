# cnhub/config/cli_settings.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _get(environ: Mapping[str, str], key: str) -> Optional[str]:
    value = environ.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass
class CliSettings:
    """Defaults for CLI flags, read from the environment (and .env)."""

    owner: Optional[str] = None
    workspace_root: Optional[str] = None
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "CliSettings":
        if environ is None:
            environ = os.environ

        log_level = (_get(environ, "CNHUB_LOG_LEVEL") or "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"CNHUB_LOG_LEVEL has unknown level '{log_level}'.")

        log_to_file = (_get(environ, "CNHUB_LOG_TO_FILE") or "").lower() in _TRUE_VALUES

        return CliSettings(
            owner=_get(environ, "CNHUB_OWNER"),
            workspace_root=_get(environ, "CNHUB_WORKSPACE_ROOT"),
            log_level=log_level,
            log_to_file=log_to_file,
            log_dir=_get(environ, "CNHUB_LOG_DIR") or "logs",
        )
