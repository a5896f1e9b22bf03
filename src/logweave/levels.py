"""Log level enumeration for the dispatch engine."""

from enum import IntEnum
from typing import Self

from logweave.exceptions import UnknownLevelError


class LogLevel(IntEnum):
    """Ordered log severity.

    Each level owns one dispatch channel on a Logger; a handler subscribes to
    every channel at or above its own threshold.
    """

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    def __str__(self) -> str:
        return self.name

    @property
    def channel(self) -> str:
        """Identifier of the dispatch channel for this level."""
        return f"log_{self.name.lower()}"

    def is_lower(self, other: Self) -> bool:
        """Check if this log level is lower than another log level."""
        return self.value < other.value

    def is_higher(self, other: Self) -> bool:
        """Check if this log level is higher than another log level."""
        return self.value > other.value

    @classmethod
    def from_name(cls, name: str) -> Self:
        """Look up a level by its canonical name.

        Args:
            name (str): One of TRACE, DEBUG, INFO, WARN, ERROR or FATAL.

        Raises:
            UnknownLevelError: If the name is not one of the six levels.

        """
        try:
            return cls[name]
        except (KeyError, TypeError):
            raise UnknownLevelError(name) from None

    @classmethod
    def from_severity(cls, severity: int) -> Self:
        """Look up a level by its integer severity."""
        try:
            return cls(severity)
        except ValueError:
            raise UnknownLevelError(severity) from None


ALL_LOG_LEVELS: tuple[LogLevel, ...] = tuple(LogLevel)
LOG_LEVEL_NAMES: tuple[str, ...] = tuple(level.name for level in LogLevel)
