"""Build handlers and loggers from a validated configuration."""

import os
from collections.abc import Callable

from logweave.config.loader import load_logging_configuration
from logweave.config.models import (
    ConsoleHandlerConfig,
    FileHandlerConfig,
    HandlerConfig,
    LoggingConfiguration,
)
from logweave.handlers import BaseLogHandler, ConsoleLogHandler, FileLogHandler
from logweave.logger import Logger
from logweave.registry import LoggerRegistry, get_registry


def _console_handler(config: ConsoleHandlerConfig) -> BaseLogHandler:
    return ConsoleLogHandler(
        log_level=config.log_level,
        use_colors=config.use_colors,
        name=config.name,
    )


def _file_handler(config: FileHandlerConfig) -> BaseLogHandler:
    return FileLogHandler(
        log_file=config.log_file,
        log_level=config.log_level,
        name=config.name,
    )


HANDLER_FACTORIES: dict[str, Callable[[HandlerConfig], BaseLogHandler]] = {
    ConsoleHandlerConfig.type: _console_handler,
    FileHandlerConfig.type: _file_handler,
}


def create_handler(config: HandlerConfig) -> BaseLogHandler:
    """Instantiate the handler matching a config's type."""
    return HANDLER_FACTORIES[config.type](config)


def build_loggers(
    config: LoggingConfiguration, registry: LoggerRegistry | None = None
) -> None:
    """Create every configured handler and logger and register the loggers.

    Args:
        config (LoggingConfiguration): A configuration returned by the loader.
        registry (LoggerRegistry, optional): Where loggers are registered.
            Defaults to the process-wide registry.

    """
    if registry is None:
        registry = get_registry()

    handlers = {cfg.name: create_handler(cfg) for cfg in config.handlers}

    for logger_config in config.loggers:
        logger = Logger(logger_config.name)
        for handler_name in logger_config.handlers:
            logger.add_handler(handlers[handler_name])
        registry.add_logger(logger)


def load_loggers_and_handlers(
    path: str | os.PathLike | None = None, registry: LoggerRegistry | None = None
) -> LoggingConfiguration:
    """Load a configuration file and build everything it describes.

    Runs synchronously, so all loggers are registered by the time this
    returns.
    """
    config = load_logging_configuration(path)
    build_loggers(config, registry)
    return config
