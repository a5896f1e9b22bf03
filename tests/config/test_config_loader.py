"""Tests for loading and validating logging configuration files."""

from collections.abc import Callable
from pathlib import Path

import pytest

from logweave import LogLevel, load_logging_configuration
from logweave.config import (
    LOGGING_CONFIG_VAR,
    ConsoleHandlerConfig,
    FileHandlerConfig,
    LoggerConfig,
    LoggingConfiguration,
)

WriteConfig = Callable[..., Path]


def expected_error(handlers: list[str], loggers: list[str]) -> str:
    return (
        "Could not parse entire configuration: Error: Invalid config for "
        f"handlers: [{','.join(handlers)}], invalid config for "
        f"loggers: [{','.join(loggers)}]\n"
    )


def names(items) -> list[str]:
    return [item.name for item in items]


class TestLoadValidConfig:
    """Configurations that load completely."""

    def test_complete_config(
        self, write_config: WriteConfig, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_config(
            {
                "handlers": {
                    "h1": {"type": "Console", "logLevel": "INFO"},
                    "h2": {
                        "type": "File",
                        "logLevel": "WARN",
                        "logFile": "/var/log/x.log",
                    },
                },
                "loggers": {"root": {"handlers": ["h1", "h2"]}},
            }
        )

        config = load_logging_configuration(path)

        assert config.has_errors is False
        assert names(config.handlers) == ["h1", "h2"]
        assert names(config.loggers) == ["root"]
        assert config.get_logger_config("root").handlers == ("h1", "h2")
        assert capsys.readouterr().err == ""

    def test_typed_handler_fields(self, write_config: WriteConfig) -> None:
        path = write_config(
            {
                "handlers": {
                    "handler1": {
                        "type": "Console",
                        "logLevel": "TRACE",
                        "useColors": True,
                    },
                    "handler2": {
                        "type": "File",
                        "logLevel": "WARN",
                        "logFile": "/var/log/some-file.log",
                    },
                },
                "loggers": {
                    "root": {"handlers": ["handler1", "handler2"]},
                    "app": {"handlers": ["handler2"]},
                },
            }
        )

        config = load_logging_configuration(path)

        console = config.get_handler_config("handler1")
        assert isinstance(console, ConsoleHandlerConfig)
        assert console.log_level is LogLevel.TRACE
        assert console.use_colors is True
        assert console.type == "Console"

        file = config.get_handler_config("handler2")
        assert isinstance(file, FileHandlerConfig)
        assert file.log_level is LogLevel.WARN
        assert file.log_file == "/var/log/some-file.log"

        assert config.get_logger_config("app").handlers == ("handler2",)

    def test_console_without_optionals(self, write_config: WriteConfig) -> None:
        path = write_config(
            {"handlers": {"consoleHandler": {"type": "Console", "logLevel": "INFO"}}}
        )

        config = load_logging_configuration(path)

        handler = config.get_handler_config("consoleHandler")
        assert handler.use_colors is False
        assert config.has_errors is False

    @pytest.mark.parametrize("level", ["TRACE", "DEBUG", "INFO", "WARN", "ERROR", "FATAL"])
    def test_every_level_name(self, level: str, write_config: WriteConfig) -> None:
        handler_name = f"{level.lower()}Handler"
        path = write_config(
            {
                "handlers": {handler_name: {"type": "Console", "logLevel": level}},
                "loggers": {"root": {"handlers": [handler_name]}},
            }
        )

        config = load_logging_configuration(path)

        assert config.get_handler_config(handler_name).log_level is LogLevel.from_name(level)
        assert config.get_logger_config("root").handlers == (handler_name,)

    def test_entry_key_is_the_handler_name(self, write_config: WriteConfig) -> None:
        path = write_config(
            {
                "handlers": {
                    "byKey": {"type": "Console", "logLevel": "INFO", "name": "other"}
                },
                "loggers": {"root": {"handlers": ["byKey"]}},
            }
        )

        config = load_logging_configuration(path)

        assert names(config.handlers) == ["byKey"]
        assert config.has_errors is False

    def test_logger_without_handlers_field(self, write_config: WriteConfig) -> None:
        path = write_config({"loggers": {"root": {}, "app": {}}})

        config = load_logging_configuration(path)

        assert names(config.loggers) == ["root", "app"]
        assert config.get_logger_config("app").handlers == ()
        assert config.has_errors is False

    def test_empty_object(
        self, write_config: WriteConfig, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = load_logging_configuration(write_config({}))

        assert config == LoggingConfiguration()
        assert capsys.readouterr().err == ""


class TestLoadAbsentConfig:
    """No configuration is not an error; a missing file is."""

    def test_no_path_and_no_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.delenv(LOGGING_CONFIG_VAR, raising=False)

        config = load_logging_configuration()

        assert config == LoggingConfiguration(loggers=(), handlers=(), has_errors=False)
        assert capsys.readouterr().err == ""

    def test_path_from_environment(
        self, write_config: WriteConfig, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = write_config({"handlers": {"h": {"type": "Console", "logLevel": "INFO"}}})
        monkeypatch.setenv(LOGGING_CONFIG_VAR, str(path))

        config = load_logging_configuration()

        assert names(config.handlers) == ["h"]

    def test_directory_is_ignored(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = load_logging_configuration(tmp_path)

        assert config.has_errors is False
        assert capsys.readouterr().err == ""

    def test_missing_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = load_logging_configuration(tmp_path / "does-not-exist.json")

        assert config.loggers == ()
        assert config.handlers == ()
        assert config.has_errors is True
        err_lines = capsys.readouterr().err.splitlines()
        assert len(err_lines) == 1
        assert err_lines[0].startswith("Could not parse entire configuration: Error: ")
        assert "ENOENT" in err_lines[0]


class TestLoadMalformedConfig:
    """Unreadable files load nothing; a broken section only loses itself."""

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            "[]",
            '"a string"',
        ],
    )
    def test_parse_failure(
        self,
        content: str,
        write_config: WriteConfig,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        config = load_logging_configuration(write_config(content))

        assert config.has_errors is True
        assert config.handlers == ()
        assert config.loggers == ()
        err_lines = capsys.readouterr().err.splitlines()
        assert len(err_lines) == 1
        assert err_lines[0].startswith("Could not parse entire configuration: Error: ")

    def test_section_error_keeps_other_section(
        self, write_config: WriteConfig, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_config(
            {
                "handlers": {"h": {"type": "Console", "logLevel": "INFO"}},
                "loggers": ["root"],
            }
        )

        config = load_logging_configuration(path)

        assert config.has_errors is True
        assert [h.name for h in config.handlers] == ["h"]
        assert config.loggers == ()
        err_lines = capsys.readouterr().err.splitlines()
        assert err_lines == [
            "Could not parse entire configuration: Error: "
            "Invalid config for handlers: [], invalid config for loggers: [], "
            "sections that are not objects: [loggers (array)]"
        ]

    def test_non_object_handlers_section_still_loads_loggers(
        self, write_config: WriteConfig, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = load_logging_configuration(
            write_config('{"handlers": [], "loggers": {"root": {}}}')
        )

        assert config.has_errors is True
        assert config.handlers == ()
        assert config.loggers == (LoggerConfig(name="root"),)
        err_lines = capsys.readouterr().err.splitlines()
        assert len(err_lines) == 1
        assert "handlers (array)" in err_lines[0]

    def test_null_section_is_empty(
        self, write_config: WriteConfig, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = load_logging_configuration(
            write_config('{"handlers": null, "loggers": {"root": {}}}')
        )

        assert config.has_errors is False
        assert config.loggers == (LoggerConfig(name="root"),)
        assert capsys.readouterr().err == ""


class TestLoadPartiallyInvalidConfig:
    """Invalid entries are reported together; valid ones still load."""

    def test_invalid_handler_and_logger_load_partially(
        self, write_config: WriteConfig, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_config(
            {
                "handlers": {
                    "validHandler": {"type": "Console", "logLevel": "INFO"},
                    "invalidHandler": {"type": "File", "logLevel": "INFO"},
                },
                "loggers": {
                    "root": {"handlers": ["validHandler"]},
                    "invalidLogger": {"handlers": "validHandler"},
                },
            }
        )

        config = load_logging_configuration(path)

        assert names(config.handlers) == ["validHandler"]
        assert names(config.loggers) == ["root"]
        assert config.has_errors is True
        assert capsys.readouterr().err == expected_error(
            ["invalidHandler"], ["invalidLogger"]
        )

    @pytest.mark.parametrize(
        "entry",
        [
            pytest.param({"type": "Console", "logLevel": "INFO", "useColors": "yes"}, id="useColors-string"),
            pytest.param({"type": "File", "logLevel": "INFO"}, id="file-missing-logFile"),
            pytest.param({"type": "File", "logLevel": "INFO", "logFile": 3}, id="file-logFile-number"),
            pytest.param({"type": "Console", "logLevel": "WARNING"}, id="unknown-level"),
            pytest.param({"type": "Console", "logLevel": 2}, id="numeric-level"),
            pytest.param({"type": "Console"}, id="missing-level"),
            pytest.param({"logLevel": "INFO"}, id="missing-type"),
            pytest.param({"type": "Syslog", "logLevel": "INFO"}, id="unknown-type"),
            pytest.param({"type": "Console", "logLevel": "INFO", "name": 5}, id="name-number"),
            pytest.param("Console", id="not-an-object"),
        ],
    )
    def test_invalid_handler_entry(
        self,
        entry: object,
        write_config: WriteConfig,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        config = load_logging_configuration(write_config({"handlers": {"bad": entry}}))

        assert config.handlers == ()
        assert config.has_errors is True
        assert capsys.readouterr().err == expected_error(["bad"], [])

    @pytest.mark.parametrize(
        "entry",
        [
            pytest.param({"handlers": "h"}, id="handlers-string"),
            pytest.param({"handlers": ["h", 1]}, id="non-string-reference"),
            pytest.param(["h"], id="not-an-object"),
        ],
    )
    def test_invalid_logger_entry(
        self,
        entry: object,
        write_config: WriteConfig,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = write_config(
            {
                "handlers": {"h": {"type": "Console", "logLevel": "INFO"}},
                "loggers": {"broken": entry},
            }
        )

        config = load_logging_configuration(path)

        assert names(config.handlers) == ["h"]
        assert config.loggers == ()
        assert capsys.readouterr().err == expected_error([], ["broken"])

    def test_unknown_handler_reference(
        self, write_config: WriteConfig, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_config({"loggers": {"root": {"handlers": ["unknownHandler"]}}})

        config = load_logging_configuration(path)

        assert names(config.loggers) == ["root"]
        assert config.get_logger_config("root").handlers == ()
        assert config.has_errors is True
        assert capsys.readouterr().err == expected_error(["unknownHandler"], [])

    def test_reference_to_invalid_handler_is_dropped_and_reported_once(
        self, write_config: WriteConfig, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = write_config(
            {
                "handlers": {
                    "good": {"type": "Console", "logLevel": "DEBUG"},
                    "broken": {"type": "Console", "logLevel": "LOUD"},
                },
                "loggers": {
                    "root": {"handlers": ["good", "broken"]},
                    "app": {"handlers": ["broken", "ghost"]},
                },
            }
        )

        config = load_logging_configuration(path)

        assert config.get_logger_config("root").handlers == ("good",)
        assert config.get_logger_config("app").handlers == ()
        assert capsys.readouterr().err == expected_error(["broken", "ghost"], [])
