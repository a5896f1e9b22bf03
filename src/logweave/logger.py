"""Level-gated logger with per-level handler subscriptions."""

import sys
import traceback

from logweave.event import LogEvent
from logweave.exceptions import UnknownHandlerError
from logweave.handlers.base import BaseLogHandler
from logweave.levels import ALL_LOG_LEVELS, LogLevel


class Logger:
    """A named logger that fans events out to its handlers.

    Every level owns a subscriber list. Attaching a handler subscribes it to
    each level at or above its threshold, so emitting at a level only touches
    the handlers that want it and per-level counts are available in O(1).

    Dispatch is synchronous and follows subscription order. A handler raising
    from `log()` is reported on stderr and skipped; the remaining handlers
    still receive the event.

    The logger does no locking; callers sharing one across threads must
    serialize handler changes and emits themselves.
    """

    def __init__(self, name: str = "") -> None:
        """Initializes an empty Logger.

        Args:
            name (str): Name of the logger, stamped on every event it emits.
                Defaults to an empty string.

        """
        self._name = name
        self._handlers: dict[str, BaseLogHandler] = {}
        self._subscribers: list[list[BaseLogHandler]] = [[] for _ in ALL_LOG_LEVELS]
        self._level_counts: list[int] = [0] * len(ALL_LOG_LEVELS)
        self._handler_count = 0
        self._warning_self = False

    def get_name(self) -> str:
        """Get the name of the logger."""
        return self._name

    def set_name(self, name: str) -> None:
        """Rename the logger.

        Only affects the name stamped on new events; a registry that already
        holds this logger keeps it under the old name.
        """
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_handler_count(self) -> int:
        """Number of handlers attached to this logger."""
        return self._handler_count

    def get_handler_count_for_level(self, level: LogLevel) -> int:
        """Number of handlers that receive events at the given level."""
        return self._level_counts[level]

    def get_handler(self, name: str) -> BaseLogHandler | None:
        """Get an attached handler by name, or None."""
        return self._handlers.get(name)

    def has_handler(self, name: str) -> bool:
        """Check if a handler with this name is attached."""
        return name in self._handlers

    def get_handlers(self) -> list[BaseLogHandler]:
        """Attached handlers in the order they were added."""
        return list(self._handlers.values())

    def add_handler(self, handler: BaseLogHandler) -> None:
        """Attach a handler to every level at or above its log level.

        A handler whose name is already attached is rejected; the logger then
        warns about it through the handlers it already has.

        Args:
            handler (BaseLogHandler): The handler to attach.

        """
        if handler.name in self._handlers:
            self._warn_self(f"Already added the {handler.name} handler")
            return

        self._handlers[handler.name] = handler
        for level in ALL_LOG_LEVELS:
            if level >= handler.log_level:
                self._subscribers[level].append(handler)
                self._level_counts[level] += 1
        self._handler_count += 1

    def remove_handler(self, handler: BaseLogHandler | str) -> None:
        """Detach a handler, given either the handler or its name.

        Raises:
            UnknownHandlerError: If the handler is not attached to this logger.

        """
        name = handler if isinstance(handler, str) else handler.name
        stored = self._handlers.get(name)
        if stored is None or (not isinstance(handler, str) and stored is not handler):
            raise UnknownHandlerError(name, self._name)

        self._handler_count -= 1
        for level in ALL_LOG_LEVELS:
            if level >= stored.log_level:
                self._level_counts[level] -= 1
                self._subscribers[level] = [
                    h for h in self._subscribers[level] if h is not stored
                ]
        del self._handlers[name]

    def remove_all_handlers(self) -> None:
        """Detach every handler."""
        for handler in list(self._handlers.values()):
            self.remove_handler(handler)

    def _warn_self(self, msg: str) -> None:
        # A handler reacting to the warning with another duplicate add
        # must not recurse into a second warning.
        if self._warning_self:
            return
        self._warning_self = True
        try:
            self.warn(msg)
        finally:
            self._warning_self = False

    def log(
        self, level: LogLevel, msg: str, data: dict[str, str] | None = None
    ) -> None:
        """Emit an event to every handler subscribed to the level.

        Args:
            level (LogLevel): The severity of the event.
            msg (str): The log message text.
            data (dict[str, str], optional): Extra key/value pairs rendered
                after the message.

        """
        subscribers = self._subscribers[level]
        if not subscribers:
            return

        event = LogEvent.now(level, msg, self._name, data)
        for handler in tuple(subscribers):
            try:
                handler.log(event)
            except Exception:
                print(
                    f"Handler '{handler.name}' failed on logger '{self._name}':",
                    file=sys.stderr,
                )
                traceback.print_exc(file=sys.stderr)

    def trace(self, msg: str, data: dict[str, str] | None = None) -> None:
        """Send a trace-level log message."""
        self.log(LogLevel.TRACE, msg, data)

    def debug(self, msg: str, data: dict[str, str] | None = None) -> None:
        """Send a debug-level log message."""
        self.log(LogLevel.DEBUG, msg, data)

    def info(self, msg: str, data: dict[str, str] | None = None) -> None:
        """Send an info-level log message."""
        self.log(LogLevel.INFO, msg, data)

    def warn(self, msg: str, data: dict[str, str] | None = None) -> None:
        """Send a warn-level log message."""
        self.log(LogLevel.WARN, msg, data)

    def error(self, msg: str, data: dict[str, str] | None = None) -> None:
        """Send an error-level log message."""
        self.log(LogLevel.ERROR, msg, data)

    def fatal(self, msg: str, data: dict[str, str] | None = None) -> None:
        """Send a fatal-level log message."""
        self.log(LogLevel.FATAL, msg, data)

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, handlers={list(self._handlers)})"
