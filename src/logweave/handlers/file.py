import os
import sys
from concurrent.futures import ThreadPoolExecutor

from logweave.event import LogEvent
from logweave.handlers.base import BaseLogHandler
from logweave.levels import LogLevel


class FileLogHandler(BaseLogHandler):
    """
    A log handler that appends log lines to a text file.

    Writes are fire-and-forget: `log()` hands the rendered line to a
    single background worker and returns immediately, so lines land in
    emit order but a failed write is only reported on stderr.
    """

    def __init__(
        self,
        log_file: str,
        log_level: LogLevel = LogLevel.INFO,
        name: str = "FileHandler",
    ) -> None:
        """
        Initialize the FileLogHandler with a target file path.

        Args:
            log_file (str): Path to the file logs are appended to. Parent
                directories are created on the first write.
            log_level (LogLevel): Lowest level written. Defaults to INFO.
            name (str): Handler name. Defaults to "FileHandler".

        Raises:
            ValueError: If log_file is empty.
        """
        super().__init__(name, log_level)
        if not log_file:
            raise ValueError(
                f"Invalid log_file; expected a non-empty path but got {log_file!r}"
            )
        self.log_file = log_file
        self._executor = None

    @property
    def executor(self) -> ThreadPoolExecutor:
        """Lazily initialize the single write worker."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix=f"logweave-file-{self.name}"
            )
        return self._executor

    def _append(self, line: str) -> None:
        try:
            directory = os.path.dirname(self.log_file)
            if directory and not os.path.isdir(directory):
                os.makedirs(directory, exist_ok=True)
            with open(self.log_file, "a", encoding="utf-8") as file:
                file.write(line + "\n")
        except Exception as e:
            print(f"Failed to write logs to file; {e}", file=sys.stderr)

    def log(self, event: LogEvent) -> None:
        try:
            self.executor.submit(self._append, self.format_event(event))
        except Exception as e:
            print(f"Failed to queue log for file; {e}", file=sys.stderr)

    def close(self) -> None:
        """Wait for pending writes and stop the worker."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
