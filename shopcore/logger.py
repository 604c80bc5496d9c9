"""Thread-safe file logger with a process-wide default instance."""

import functools
import os
import threading
from datetime import datetime
from enum import Enum
from pathlib import Path

from .version import BUILD_TIMESTAMP, PROJECT_NAME, VERSION

DEFAULT_LOG_PATH = "data/system.log"


class LogLevel(Enum):
    """Severity of a log entry; the value is its fixed-width label."""

    INFO = "INFO   "
    WARNING = "WARNING"
    ERROR = "ERROR  "
    DEBUG = "DEBUG  "


def _timestamp():
    now = datetime.now()
    return f"{now:%Y-%m-%d %H:%M:%S}.{now.microsecond // 1000:03d}"


class Logger:
    """Appends timestamped entries to a log file.

    If the file cannot be opened, logging is silently disabled.
    """

    def __init__(self, path=DEFAULT_LOG_PATH):
        self.path = Path(path).resolve()
        self._lock = threading.Lock()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            pass
        self._file = self._open("a")
        if self._file is not None:
            self._restrict_permissions()
            self._file.write(
                "=" * 60 + "\n"
                f"  {PROJECT_NAME} v{VERSION}\n"
                f"  Built: {BUILD_TIMESTAMP}\n"
                f"  Log started: {_timestamp()}\n"
                + "=" * 60 + "\n"
            )
            self._file.flush()

    def _open(self, mode):
        try:
            return open(self.path, mode, encoding="utf-8")
        except OSError:
            return None

    def _restrict_permissions(self):
        if os.name == "nt":
            return
        try:
            os.chmod(self.path, 0o600)
        except OSError:
            pass

    def write(self, level, component, message):
        """Write one entry at the given level."""
        entry = f"[{_timestamp()}] [{LogLevel(level).value}] [{component}] {message}"
        with self._lock:
            if self._file is not None:
                self._file.write(entry + "\n")
                self._file.flush()

    def info(self, component, message):
        self.write(LogLevel.INFO, component, message)

    def warning(self, component, message):
        self.write(LogLevel.WARNING, component, message)

    def error(self, component, message):
        self.write(LogLevel.ERROR, component, message)

    def debug(self, component, message):
        self.write(LogLevel.DEBUG, component, message)

    def exception(self, component, exc):
        self.write(LogLevel.ERROR, component, f"Exception: {exc}")

    def clear(self):
        """Truncate the log file and keep appending to it."""
        with self._lock:
            if self._file is not None:
                self._file.close()
            truncated = self._open("w")
            if truncated is not None:
                truncated.close()
            self._file = self._open("a")

    def close(self):
        """Stop logging and release the file."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


@functools.lru_cache(maxsize=None)
def get_logger():
    """Return the shared logger writing to the default log file."""
    return Logger(DEFAULT_LOG_PATH)


def log_info(component, message):
    get_logger().info(component, message)


def log_warning(component, message):
    get_logger().warning(component, message)


def log_error(component, message):
    get_logger().error(component, message)


def log_debug(component, message):
    get_logger().debug(component, message)


def log_exception(component, exc):
    get_logger().exception(component, exc)