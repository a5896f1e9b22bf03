import time
from collections.abc import Callable
from pathlib import Path

import msgspec
import pytest

from logweave import registry
from logweave.registry import LoggerRegistry

WAIT_TIMEOUT_S = 1.0


@pytest.fixture
def wait_for() -> Callable[[Callable[[], bool], float, float], bool]:
    """Return a helper to poll for a condition instead of sleeping a fixed amount."""

    def _wait_for(
        predicate: Callable[[], bool],
        timeout_s: float = WAIT_TIMEOUT_S,
        interval_s: float = 0.01,
    ) -> bool:
        deadline = time.monotonic() + timeout_s
        while time.monotonic() < deadline:
            if predicate():
                return True
            time.sleep(interval_s)
        return predicate()

    return _wait_for


@pytest.fixture
def fresh_registry(monkeypatch: pytest.MonkeyPatch) -> LoggerRegistry:
    """Swap the process-wide registry for an empty one for the test."""
    new_registry = LoggerRegistry()
    monkeypatch.setattr(registry, "_registry", new_registry)
    return new_registry


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[object], Path]:
    """Return a helper that writes a config object to a JSON file."""

    def _write_config(content: object, name: str = "logging.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(msgspec.json.encode(content))
        return path

    return _write_config
