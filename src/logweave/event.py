"""Immutable log event passed from a Logger to its handlers."""

from typing import Self

from msgspec import Struct

from logweave.levels import LogLevel
from logweave.time import time_iso8601, time_s


class LogEvent(Struct, frozen=True):
    """One emitted occurrence.

    Created fresh by the Logger at emit time and handed, unchanged, to every
    handler subscribed to its level.
    """

    level: LogLevel
    message: str
    timestamp: float
    logger_name: str
    data: dict[str, str] | None = None

    @classmethod
    def now(
        cls,
        level: LogLevel,
        message: str,
        logger_name: str,
        data: dict[str, str] | None = None,
    ) -> Self:
        """Build an event stamped with the current time."""
        return cls(
            level=level,
            message=message,
            timestamp=time_s(),
            logger_name=logger_name,
            data=dict(data) if data is not None else None,
        )

    @property
    def iso_timestamp(self) -> str:
        """The timestamp rendered as ISO 8601 UTC."""
        return time_iso8601(self.timestamp)
