from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    ERROR = 1
    USAGE = 2


class IniParserError(Exception):
    """Base error for the CLI and config layers. The parser itself never raises."""

    exit_code: ExitCode = ExitCode.ERROR


class FileAccessError(IniParserError):
    def __init__(self, message: str, path: object = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(IniParserError):
    pass
