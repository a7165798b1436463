"""Error handling framework for rice-cli."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ExitCode(IntEnum):
    """rice-cli exit codes."""

    CONFIG_ERROR = 1  # Bad tool configuration (user fixable)
    FATAL_ERROR = 3  # Filesystem failure or unexpected crash
    INTERRUPTED = 130  # KeyboardInterrupt reaching main()


class RiceError(Exception):
    """Base exception for rice-cli errors."""

    exit_code: ExitCode = ExitCode.FATAL_ERROR

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context


class ConfigError(RiceError):
    """Tool configuration errors."""

    exit_code = ExitCode.CONFIG_ERROR


class PersistenceError(RiceError):
    """Reading or writing one of the project files failed."""

    exit_code = ExitCode.FATAL_ERROR

    def __init__(self, message: str, path: str, **context: Any) -> None:
        super().__init__(message, path=path, **context)
        self.path = path


__all__ = ["ExitCode", "RiceError", "ConfigError", "PersistenceError"]
