"""Process-wide registry of named loggers."""

from logweave.logger import Logger

ROOT_LOGGER_NAME = "root"


class LoggerRegistry:
    """Maps logger names to Logger instances.

    A fresh registry holds a bootstrap "root" logger with no handlers. The
    first root logger added replaces it; after that, adding a logger under a
    name that is already taken keeps the existing instance and warns through
    it instead.
    """

    def __init__(self) -> None:
        self._loggers: dict[str, Logger] = {ROOT_LOGGER_NAME: Logger(ROOT_LOGGER_NAME)}
        self._root_replaced = False
        self._warning = False

    def add_logger(self, logger: Logger) -> None:
        """Register a logger under its current name.

        Args:
            logger (Logger): The logger to register.

        """
        name = logger.get_name()
        if name == ROOT_LOGGER_NAME and not self._root_replaced:
            self._loggers[ROOT_LOGGER_NAME] = logger
            self._root_replaced = True
            return

        existing = self._loggers.get(name)
        if existing is not None:
            # Never fail the caller; warn on the instance that stays.
            if not self._warning:
                self._warning = True
                try:
                    existing.warn(f"Trying to add the same logger with name {name}")
                finally:
                    self._warning = False
            return

        self._loggers[name] = logger

    def get_logger(self, name: str | None = None) -> Logger:
        """Get a registered logger, falling back to root when unknown."""
        if not name or name not in self._loggers:
            name = ROOT_LOGGER_NAME
        return self._loggers[name]

    def has_logger(self, name: str) -> bool:
        """Check if a logger is registered under this name."""
        return name in self._loggers

    def logger_names(self) -> list[str]:
        """Registered logger names in insertion order."""
        return list(self._loggers)


_registry = LoggerRegistry()


def get_registry() -> LoggerRegistry:
    """Get the process-wide default registry."""
    return _registry


def add_logger(logger: Logger) -> None:
    """Register a logger with the default registry."""
    _registry.add_logger(logger)


def get_logger(name: str | None = None) -> Logger:
    """Get a logger from the default registry, or root when unknown."""
    return _registry.get_logger(name)
