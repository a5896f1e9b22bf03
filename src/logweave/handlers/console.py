import sys
import traceback

from logweave.event import LogEvent
from logweave.handlers.base import BaseLogHandler
from logweave.levels import LogLevel

ANSI_FG_RED = "\x1b[31m"
ANSI_FG_GREEN = "\x1b[32m"
ANSI_FG_YELLOW = "\x1b[33m"
ANSI_FG_BLUE = "\x1b[34m"
ANSI_FG_MAGENTA = "\x1b[35m"
ANSI_FG_WHITE = "\x1b[37m"
ANSI_RESET = "\x1b[0m"

LEVEL_COLORS: dict[LogLevel, str] = {
    LogLevel.TRACE: ANSI_FG_WHITE,
    LogLevel.DEBUG: ANSI_FG_GREEN,
    LogLevel.INFO: ANSI_FG_BLUE,
    LogLevel.WARN: ANSI_FG_YELLOW,
    LogLevel.ERROR: ANSI_FG_RED,
    LogLevel.FATAL: ANSI_FG_MAGENTA,
}


class ConsoleLogHandler(BaseLogHandler):
    """
    A log handler that prints log lines to the process's standard streams.

    Events below ERROR go to stdout, ERROR and FATAL go to stderr.
    """

    def __init__(
        self,
        log_level: LogLevel = LogLevel.INFO,
        use_colors: bool = False,
        name: str = "ConsoleHandler",
    ) -> None:
        """
        Initialize the ConsoleLogHandler.

        Args:
            log_level (LogLevel): Lowest level printed. Defaults to INFO.
            use_colors (bool): If True, wrap the level name in an ANSI color
                escape. Defaults to False.
            name (str): Handler name. Defaults to "ConsoleHandler".
        """
        super().__init__(name, log_level)
        self.use_colors = bool(use_colors)

    def _level_name(self, level: LogLevel) -> str:
        if not self.use_colors:
            return level.name
        return f"{LEVEL_COLORS.get(level, ANSI_FG_WHITE)}{level.name}{ANSI_RESET}"

    def log(self, event: LogEvent) -> None:
        try:
            line = self.format_event(event, self._level_name(event.level))
            # Streams are looked up per call so redirection is honoured.
            stream = sys.stderr if event.level >= LogLevel.ERROR else sys.stdout
            print(line, file=stream, flush=True)
        except Exception:
            traceback.print_exc(file=sys.stderr)
