"""Level-gated logging with JSON-configured loggers and handlers."""

from .config import (
    LoggingConfiguration as LoggingConfiguration,
)
from .config import (
    load_loggers_and_handlers as load_loggers_and_handlers,
)
from .config import (
    load_logging_configuration as load_logging_configuration,
)
from .event import (
    LogEvent as LogEvent,
)
from .exceptions import (
    LogweaveError as LogweaveError,
)
from .exceptions import (
    UnknownHandlerError as UnknownHandlerError,
)
from .exceptions import (
    UnknownLevelError as UnknownLevelError,
)
from .handlers import (
    BaseLogHandler as BaseLogHandler,
)
from .handlers import (
    ConsoleLogHandler as ConsoleLogHandler,
)
from .handlers import (
    FileLogHandler as FileLogHandler,
)
from .levels import (
    LogLevel as LogLevel,
)
from .logger import (
    Logger as Logger,
)
from .registry import (
    LoggerRegistry as LoggerRegistry,
)
from .registry import (
    add_logger as add_logger,
)
from .registry import (
    get_logger as get_logger,
)

__all__ = [
    # Core
    "LogLevel",
    "LogEvent",
    "Logger",
    "LoggerRegistry",
    "add_logger",
    "get_logger",
    # Handlers
    "BaseLogHandler",
    "ConsoleLogHandler",
    "FileLogHandler",
    # Configuration
    "LoggingConfiguration",
    "load_logging_configuration",
    "load_loggers_and_handlers",
    # Errors
    "LogweaveError",
    "UnknownHandlerError",
    "UnknownLevelError",
]
