"""Load a logging configuration from a JSON file.

The loader never raises. A missing path yields an empty configuration, and
anything wrong with the file itself or with individual entries is reduced to
`has_errors=True` plus a single line on stderr. Valid entries still load when
other entries in the same file are broken.
"""

import errno
import os
import stat
import sys

import msgspec

from logweave.config.models import HandlerConfig, LoggerConfig, LoggingConfiguration
from logweave.config.schema import parse_handler_entry, parse_logger_entry
from logweave.exceptions import ConfigParseError, ConfigValidationError

# Environment variable holding the default configuration path.
LOGGING_CONFIG_VAR = "LOGGING_CONFIGURATION_PATH"


def load_logging_configuration(
    path: str | os.PathLike | None = None,
) -> LoggingConfiguration:
    """Read, validate and type a logging configuration file.

    Args:
        path (str | PathLike, optional): Configuration file. Defaults to the
            value of the LOGGING_CONFIGURATION_PATH environment variable.

    Returns:
        LoggingConfiguration: Every valid handler and logger entry, in file
            order. `has_errors` is set if anything could not be loaded.

    """
    if not path:
        path = os.environ.get(LOGGING_CONFIG_VAR)
    if not path:
        return LoggingConfiguration()

    handlers: list[HandlerConfig] = []
    loggers: list[LoggerConfig] = []
    has_errors = False

    try:
        _load_into(os.fspath(path), handlers, loggers)
    except Exception as exc:
        print(
            f"Could not parse entire configuration: Error: {_describe_error(exc)}",
            file=sys.stderr,
        )
        has_errors = True

    return LoggingConfiguration(
        loggers=tuple(loggers),
        handlers=tuple(handlers),
        has_errors=has_errors,
    )


def _load_into(
    path: str, handlers: list[HandlerConfig], loggers: list[LoggerConfig]
) -> None:
    if not stat.S_ISREG(os.stat(path).st_mode):
        return

    with open(path, "rb") as file:
        raw = msgspec.json.decode(file.read())

    if not isinstance(raw, dict):
        raise ConfigParseError(
            f"Expected a JSON object at the top level but got {_json_type(raw)}"
        )

    # A broken section is reported but does not stop the other from loading.
    invalid_sections: list[str] = []
    raw_handlers = _section(raw, "handlers", invalid_sections)
    raw_loggers = _section(raw, "loggers", invalid_sections)

    # Dicts are used as ordered sets of names.
    valid_handlers: dict[str, None] = {}
    invalid_handlers: dict[str, None] = {}
    invalid_loggers: dict[str, None] = {}

    for key, entry in raw_handlers.items():
        config = parse_handler_entry(key, entry)
        if config is None:
            invalid_handlers[key] = None
            continue
        handlers.append(config)
        valid_handlers[key] = None

    for key, entry in raw_loggers.items():
        logger_entry = parse_logger_entry(entry)
        if logger_entry is None:
            invalid_loggers[key] = None
            continue

        references: list[str] = []
        for handler_name in logger_entry.handlers:
            if handler_name in valid_handlers:
                references.append(handler_name)
            else:
                invalid_handlers[handler_name] = None
        loggers.append(logger_entry.to_config(key, references))

    if invalid_handlers or invalid_loggers or invalid_sections:
        raise ConfigValidationError(
            list(invalid_handlers), list(invalid_loggers), invalid_sections
        )


def _section(raw: dict, key: str, invalid_sections: list[str]) -> dict:
    # Absent and null sections are empty.
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        invalid_sections.append(f"{key} ({_json_type(value)})")
        return {}
    return value


def _describe_error(exc: Exception) -> str:
    if isinstance(exc, OSError) and exc.errno is not None:
        code = errno.errorcode.get(exc.errno, "EIO")
        return f"{code}: {exc.strerror}: '{exc.filename}'"
    return str(exc)


def _json_type(value: object) -> str:
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if value is None:
        return "null"
    return type(value).__name__
