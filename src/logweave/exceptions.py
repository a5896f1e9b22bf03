"""Exceptions raised by logweave.

Only caller misuse (unknown level names, removing a handler that was never
attached) escapes the public API. Configuration problems are raised
internally by the loader and reduced to a flag plus one diagnostic line.
"""


class LogweaveError(Exception):
    """Base class for all logweave errors."""


class UnknownLevelError(LogweaveError, ValueError):
    """Raised when a log level name or severity does not exist."""

    def __init__(self, level: object) -> None:
        super().__init__(
            f"Invalid log level; expected one of TRACE, DEBUG, INFO, WARN, "
            f"ERROR, FATAL but got {level!r}"
        )
        self.level = level


class UnknownHandlerError(LogweaveError, KeyError):
    """Raised when removing a handler that is not attached to the logger."""

    def __init__(self, handler_name: str, logger_name: str) -> None:
        super().__init__(handler_name, logger_name)
        self.handler_name = handler_name
        self.logger_name = logger_name

    def __str__(self) -> str:
        return (
            f"Handler '{self.handler_name}' is not attached to logger "
            f"'{self.logger_name}'"
        )


class ConfigError(LogweaveError):
    """Base class for configuration loading failures."""


class ConfigParseError(ConfigError):
    """The configuration file could not be read or is not a JSON object."""


class ConfigValidationError(ConfigError):
    """One or more sections or entries failed validation.

    `invalid_sections` names top-level sections that were present but not
    JSON objects; they are only mentioned in the message when non-empty.
    """

    def __init__(
        self,
        invalid_handlers: list[str],
        invalid_loggers: list[str],
        invalid_sections: list[str] | None = None,
    ) -> None:
        self.invalid_handlers = list(invalid_handlers)
        self.invalid_loggers = list(invalid_loggers)
        self.invalid_sections = list(invalid_sections or ())
        message = (
            f"Invalid config for handlers: [{','.join(self.invalid_handlers)}], "
            f"invalid config for loggers: [{','.join(self.invalid_loggers)}]"
        )
        if self.invalid_sections:
            message += (
                f", sections that are not objects: [{','.join(self.invalid_sections)}]"
            )
        super().__init__(message)
