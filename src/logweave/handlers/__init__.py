from .base import BaseLogHandler as BaseLogHandler
from .console import ConsoleLogHandler as ConsoleLogHandler
from .file import FileLogHandler as FileLogHandler

__all__ = [
    "BaseLogHandler",
    "ConsoleLogHandler",
    "FileLogHandler",
]
