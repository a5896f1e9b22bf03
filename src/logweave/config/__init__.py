"""Logging configuration: loading, validation and assembly."""

from .assembler import (
    build_loggers as build_loggers,
)
from .assembler import (
    create_handler as create_handler,
)
from .assembler import (
    load_loggers_and_handlers as load_loggers_and_handlers,
)
from .loader import (
    LOGGING_CONFIG_VAR as LOGGING_CONFIG_VAR,
)
from .loader import (
    load_logging_configuration as load_logging_configuration,
)
from .models import (
    ConsoleHandlerConfig as ConsoleHandlerConfig,
)
from .models import (
    FileHandlerConfig as FileHandlerConfig,
)
from .models import (
    HandlerConfig as HandlerConfig,
)
from .models import (
    LoggerConfig as LoggerConfig,
)
from .models import (
    LoggingConfiguration as LoggingConfiguration,
)

__all__ = [
    "build_loggers",
    "create_handler",
    "load_loggers_and_handlers",
    "load_logging_configuration",
    "LOGGING_CONFIG_VAR",
    "ConsoleHandlerConfig",
    "FileHandlerConfig",
    "HandlerConfig",
    "LoggerConfig",
    "LoggingConfiguration",
]
