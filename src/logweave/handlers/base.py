import os
from abc import ABC, abstractmethod

import msgspec

from logweave.event import LogEvent
from logweave.levels import LogLevel


class BaseLogHandler(ABC):
    """
    Abstract base class for log handlers.

    A handler is identified by its name, which must be unique within a
    Logger, and receives every event at or above its log level. All
    handlers must implement `.log(event)`, which is called synchronously
    by the logger and must never raise into the caller.

    Validation for any params/args should be done in '__init__'
    to catch config errors early.
    """

    def __init__(self, name: str, log_level: LogLevel = LogLevel.INFO):
        if not isinstance(log_level, LogLevel):
            log_level = LogLevel.from_severity(log_level)
        self._name = name
        self._log_level = log_level
        self._encode_json = None

    @property
    def name(self) -> str:
        """Name of the handler, unique within a logger."""
        return self._name

    @property
    def log_level(self) -> LogLevel:
        """Lowest level this handler receives."""
        return self._log_level

    @property
    def encode_json(self):
        """Lazily initialize the JSON encoder."""
        if self._encode_json is None:
            self._encode_json = msgspec.json.Encoder().encode
        return self._encode_json

    def format_event(self, event: LogEvent, level_name: str | None = None) -> str:
        """Render an event as a single log line.

        Args:
            event (LogEvent): The event to render.
            level_name (str, optional): Replacement for the plain level name,
                eg a colored version of it.

        Returns:
            str: '{timestamp} - {LEVEL} - {pid} - {logger} - {message}', with
                ' - {data as JSON}' appended when the event carries data.

        """
        line = (
            f"{event.iso_timestamp} - {level_name or event.level.name} - "
            f"{os.getpid()} - {event.logger_name} - {event.message}"
        )
        if event.data is not None:
            line += " - " + self.encode_json(event.data).decode()
        return line

    def close(self) -> None:
        """Release any resources held by the handler."""

    @abstractmethod
    def log(self, event: LogEvent) -> None:
        """
        Process a single log event.

        Args:
            event (LogEvent): The event to log.
        """
        pass

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self._name!r}, "
            f"log_level={self._log_level.name})"
        )
