"""Schema of the JSON configuration file.

Handler entries are a tagged union on their "type" field; an unknown type
fails the entry before any type-specific field is looked at. Keys are
camelCase on the wire (logLevel, useColors, logFile).

| field     | type | Console  | File     |
|-----------|------|----------|----------|
| type      | str  | required | required |
| logLevel  | str  | required | required |
| name      | str  | optional | optional |
| useColors | bool | optional | -        |
| logFile   | str  | -        | required |
"""

from typing import Annotated, Literal

import msgspec
from msgspec import Meta, Struct

from logweave.config.models import (
    ConsoleHandlerConfig,
    FileHandlerConfig,
    HandlerConfig,
    LoggerConfig,
)
from logweave.levels import LogLevel

LogLevelName = Literal["TRACE", "DEBUG", "INFO", "WARN", "ERROR", "FATAL"]


class _HandlerEntry(Struct, rename="camel", tag_field="type", kw_only=True):
    log_level: LogLevelName
    name: str | None = None


class ConsoleHandlerEntry(_HandlerEntry, tag="Console"):
    use_colors: bool = False

    def to_config(self, key: str) -> HandlerConfig:
        return ConsoleHandlerConfig(
            name=key,
            log_level=LogLevel.from_name(self.log_level),
            use_colors=self.use_colors,
        )


class FileHandlerEntry(_HandlerEntry, tag="File"):
    log_file: Annotated[str, Meta(min_length=1)]

    def to_config(self, key: str) -> HandlerConfig:
        return FileHandlerConfig(
            name=key,
            log_level=LogLevel.from_name(self.log_level),
            log_file=self.log_file,
        )


HandlerEntry = ConsoleHandlerEntry | FileHandlerEntry


class LoggerEntry(Struct):
    handlers: list[str] = msgspec.field(default_factory=list)

    def to_config(self, key: str, handlers: list[str]) -> LoggerConfig:
        return LoggerConfig(name=key, handlers=tuple(handlers))


def parse_handler_entry(key: str, raw: object) -> HandlerConfig | None:
    """Validate one raw handler entry.

    Args:
        key (str): The entry's key in the "handlers" object, which becomes
            the handler's name.
        raw (object): The untyped entry as decoded from JSON.

    Returns:
        HandlerConfig | None: The typed config, or None if the entry is invalid.

    """
    try:
        entry = msgspec.convert(raw, HandlerEntry, strict=True)
    except msgspec.ValidationError:
        return None
    return entry.to_config(key)


def parse_logger_entry(raw: object) -> LoggerEntry | None:
    """Validate the shape of one raw logger entry, or return None."""
    try:
        return msgspec.convert(raw, LoggerEntry, strict=True)
    except msgspec.ValidationError:
        return None
