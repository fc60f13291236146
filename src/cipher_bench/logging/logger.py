"""Synchronous buffered logger implementation."""

import sys
import time

from cipher_bench.logging.config import LoggerConfig, LogLevel
from cipher_bench.logging.handlers import BaseLogHandler, FileLogHandler


def _time_iso8601() -> str:
    now = time.time()
    millis = int((now % 1.0) * 1_000)
    return time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(now)) + f".{millis:03d}Z"


class Logger:
    """A simple logger that buffers messages and pushes them to configured
    handlers once the buffer fills, the flush interval elapses or an error
    is logged.

    Measurements run on the calling thread, so nothing here spawns tasks or
    threads; formatting and flushing happen inline.
    """

    def __init__(
        self,
        name: str = "",
        config: LoggerConfig | None = None,
        handlers: list[BaseLogHandler] | None = None,
    ):
        """Initializes a Logger with specified configuration and handlers.

        Args:
            name (str): Name of the logger. Defaults to an empty string.
            config (LoggerConfig): Level, stderr output and buffering settings.
            handlers (list[BaseLogHandler], optional): Extra destinations for
                flushed lines. A FileLogHandler for ``config.log_file`` is added
                after them when that is set.

        Raises:
            TypeError: If one of the provided handlers does not inherit from BaseLogHandler.

        """
        self._name = name

        self._config = config
        if self._config is None:
            self._config = LoggerConfig()

        self._handlers = list(handlers) if handlers is not None else []

        for handler in self._handlers:
            if not isinstance(handler, BaseLogHandler):
                raise TypeError(
                    f"Invalid handler type; expected BaseLogHandler but got {type(handler)}"
                )
        if self._config.log_file:
            self._handlers.append(FileLogHandler(self._config.log_file))

        self._buffer: list[str] = []
        self._buffer_start_time_s = time.monotonic()
        self._is_running = True

    def _flush_buffer(self) -> None:
        """Flushes the log message buffer to stderr and all handlers."""
        if not self._buffer:
            return

        if self._config.to_stderr:
            sys.stderr.write("\n".join(self._buffer) + "\n")
            sys.stderr.flush()

        for handler in self._handlers:
            handler.push(list(self._buffer))

        self._buffer.clear()
        self._buffer_start_time_s = time.monotonic()

    def _process_log(self, level: LogLevel, msg: str) -> None:
        """Formats a log message and flushes the buffer when due.

        Args:
            level (LogLevel): The severity level of the message.
            msg (str): The actual log message.

        """
        log_msg = self._config.line_format.format(
            asctime=_time_iso8601(),
            name=self._name,
            levelname=level.name,
            message=msg,
        )
        self._buffer.append(log_msg)

        buffer_full = len(self._buffer) >= self._config.buffer_size
        buffer_stale = (
            time.monotonic() - self._buffer_start_time_s
        ) >= self._config.flush_interval_s
        if level >= LogLevel.ERROR or buffer_full or buffer_stale:
            self._flush_buffer()

    def set_log_level(self, level: LogLevel) -> None:
        """Modify the logger's base log level at runtime.

        Args:
            level (LogLevel): The new base log level.

        """
        self.debug(f"Changing base log level from {self._config.base_level} to {level}")
        self._config.base_level = level

    def trace(self, msg: str) -> None:
        """Send a trace-level log message."""
        valid_level = self._config.base_level == LogLevel.TRACE
        if self._is_running and valid_level:
            self._process_log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        """Send a debug-level log message."""
        valid_level = self._config.base_level <= LogLevel.DEBUG
        if self._is_running and valid_level:
            self._process_log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        """Send an info-level log message."""
        valid_level = self._config.base_level <= LogLevel.INFO
        if self._is_running and valid_level:
            self._process_log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        """Send a warning-level log message."""
        valid_level = self._config.base_level <= LogLevel.WARNING
        if self._is_running and valid_level:
            self._process_log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        """Send an error-level log message."""
        valid_level = self._config.base_level <= LogLevel.ERROR
        if self._is_running and valid_level:
            self._process_log(LogLevel.ERROR, msg)

    def close(self) -> None:
        """Flushes anything still buffered and closes all handlers."""
        self._is_running = False
        self._flush_buffer()
        for handler in self._handlers:
            handler.close()

    def is_running(self) -> bool:
        """Check if the logger is running."""
        return self._is_running

    def get_name(self) -> str:
        """Get the name of the logger."""
        return self._name

    def get_config(self) -> LoggerConfig:
        """Get the configuration of the logger."""
        return self._config
