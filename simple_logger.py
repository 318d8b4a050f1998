import os
import traceback
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


_SEVERITY = {
    LogLevel.DEBUG: 10,
    LogLevel.INFO: 20,
    LogLevel.WARNING: 30,
    LogLevel.ERROR: 40,
}


class Slogger:
    log_path = "logs/record_pager.log"
    min_level = LogLevel.INFO

    @classmethod
    def configure(cls, log_path: Optional[str] = None, level: Optional[str] = None):
        """
        Point the logger at a different file and/or minimum level.

        Args:
            log_path: File to append log lines to
            level: One of DEBUG, INFO, WARNING, ERROR (case-insensitive)
        """
        if log_path:
            cls.log_path = log_path
        if level:
            try:
                cls.min_level = LogLevel(level.upper())
            except ValueError:
                cls.min_level = LogLevel.INFO

    @classmethod
    def _ensure_log_directory(cls):
        """Ensure that the logs directory exists."""
        log_dir = os.path.dirname(cls.log_path)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

    @classmethod
    def _enabled(cls, level: LogLevel) -> bool:
        return _SEVERITY[level] >= _SEVERITY[cls.min_level]

    @classmethod
    def log(cls, message: str, level: LogLevel = LogLevel.INFO, context: Optional[Dict[str, Any]] = None):
        """
        Log a message with an optional level and context.

        Args:
            message: The message to log
            level: The log level (DEBUG, INFO, WARNING, ERROR)
            context: Optional dictionary of contextual information
        """
        if not cls._enabled(level):
            return

        cls._ensure_log_directory()
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        log_message = f"{timestamp} - {level.value} - {message}"

        if context:
            context_str = " | ".join([f"{k}={v}" for k, v in context.items()])
            log_message += f" | {context_str}"

        log_message += "\n"

        with open(cls.log_path, "a", encoding="utf-8") as f:
            f.write(log_message)

    @classmethod
    def debug(cls, message: str, context: Optional[Dict[str, Any]] = None):
        """Log a debug message."""
        cls.log(message, LogLevel.DEBUG, context)

    @classmethod
    def info(cls, message: str, context: Optional[Dict[str, Any]] = None):
        """Log an info message."""
        cls.log(message, LogLevel.INFO, context)

    @classmethod
    def warning(cls, message: str, context: Optional[Dict[str, Any]] = None):
        """Log a warning message."""
        cls.log(message, LogLevel.WARNING, context)

    @classmethod
    def error(cls, message: str, context: Optional[Dict[str, Any]] = None):
        """Log an error message."""
        cls.log(message, LogLevel.ERROR, context)

    @classmethod
    def exception(cls, e: Exception, message: str = "Exception occurred", context: Optional[Dict[str, Any]] = None):
        """
        Log an exception with traceback.

        Args:
            e: The exception to log
            message: An optional message describing the context of the exception
            context: Optional dictionary of contextual information
        """
        error_context = dict(context or {})
        error_context.update({
            "exception_type": type(e).__name__,
            "exception_message": str(e),
        })

        cls.error(f"{message}: {type(e).__name__} - {e}", error_context)

        cls._ensure_log_directory()
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        exc_traceback = "".join(traceback.format_exception(type(e), e, e.__traceback__))

        with open(cls.log_path, "a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {LogLevel.ERROR.value} - TRACEBACK:\n{exc_traceback}\n")
