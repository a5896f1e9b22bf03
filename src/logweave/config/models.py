"""Typed logging configuration.

These are only ever built from entries that already passed validation, so
the assembler can use them without further checks.
"""

from typing import ClassVar

from msgspec import Struct

from logweave.levels import LogLevel


class ConsoleHandlerConfig(Struct, frozen=True, kw_only=True):
    """A validated console handler entry."""

    type: ClassVar[str] = "Console"

    name: str
    log_level: LogLevel
    use_colors: bool = False


class FileHandlerConfig(Struct, frozen=True, kw_only=True):
    """A validated file handler entry."""

    type: ClassVar[str] = "File"

    name: str
    log_level: LogLevel
    log_file: str


HandlerConfig = ConsoleHandlerConfig | FileHandlerConfig


class LoggerConfig(Struct, frozen=True):
    """A validated logger entry.

    Handlers are referenced by name; every name here is guaranteed to match
    a HandlerConfig of the same LoggingConfiguration.
    """

    name: str
    handlers: tuple[str, ...] = ()


class LoggingConfiguration(Struct, frozen=True):
    """Result of one configuration load."""

    loggers: tuple[LoggerConfig, ...] = ()
    handlers: tuple[HandlerConfig, ...] = ()
    has_errors: bool = False

    def get_logger_config(self, name: str) -> LoggerConfig | None:
        """Get a logger entry by name, or None."""
        for logger in self.loggers:
            if logger.name == name:
                return logger
        return None

    def get_handler_config(self, name: str) -> HandlerConfig | None:
        """Get a handler entry by name, or None."""
        for handler in self.handlers:
            if handler.name == name:
                return handler
        return None
