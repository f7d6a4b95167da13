#!/usr/bin/env python3
"""Helpers for loading readability CLI settings from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Collection

from dotenv import load_dotenv

__all__ = ["ConfigError", "Settings", "load_settings"]

LOG_LEVEL_ENV = "READABILITY_LOG_LEVEL"
DEFAULT_COMMAND_ENV = "READABILITY_DEFAULT_COMMAND"


class ConfigError(RuntimeError):
    """Raised when the CLI cannot be configured from the environment."""


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    default_command: str | None = None


def _resolve_log_level() -> int:
    name = os.getenv(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level

    raise ConfigError(
        f"{LOG_LEVEL_ENV}={name!r} is not a logging level. Use DEBUG, INFO, WARNING or ERROR."
    )


def _resolve_default_command(allowed_commands: Collection[str] | None) -> str | None:
    command = os.getenv(DEFAULT_COMMAND_ENV)
    if not command:
        return None

    command = command.strip()
    if allowed_commands is None or command in allowed_commands:
        return command

    raise ConfigError(
        f"{DEFAULT_COMMAND_ENV}={command!r} is not one of {', '.join(allowed_commands)}."
    )


def load_settings(
    dotenv_path: Path | None = None,
    *,
    allowed_commands: Collection[str] | None = None,
) -> Settings:
    """
    Read settings from the environment, after loading a .env file if present.

    Variables already set in the environment take precedence over the file.
    When allowed_commands is given, the default command must be one of them.

    Raises:
        ConfigError: If a variable holds a value the CLI cannot use
    """
    load_dotenv(dotenv_path)

    return Settings(
        log_level=_resolve_log_level(),
        default_command=_resolve_default_command(allowed_commands),
    )
