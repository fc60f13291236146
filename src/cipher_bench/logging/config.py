"""Log levels and logger settings for benchmark runs."""

from __future__ import annotations

from enum import IntEnum

from msgspec import Struct


class LogLevel(IntEnum):
    """Log level enumeration."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4

    @classmethod
    def from_verbosity(cls, verbosity: int) -> LogLevel:
        """Map a ``-v`` count to a level: none is WARNING, ``-v`` is DEBUG and
        ``-vv`` or more is TRACE (per-size measurements)."""
        if verbosity <= 0:
            return cls.WARNING
        if verbosity == 1:
            return cls.DEBUG
        return cls.TRACE


class LoggerConfig(Struct, kw_only=True):
    """Settings for :class:`~cipher_bench.logging.Logger`.

    Stdout is reserved for the result table, so log lines go to stderr and,
    when ``log_file`` is set, are appended to that file as well.

    Args:
        base_level: Minimum level that is logged.
        to_stderr: Write flushed lines to stderr.
        log_file: Optional file the CLI attaches a :class:`FileLogHandler` for.
        line_format: ``str.format`` template; may use ``{asctime}``,
            ``{levelname}``, ``{name}`` and must use ``{message}``.
        flush_interval_s: Maximum age of buffered lines before a flush.
        buffer_size: Number of buffered lines that forces a flush.

    Raises:
        ValueError: If ``line_format`` lacks ``{message}``, or the flush
            interval or buffer size is not positive.
    """

    base_level: LogLevel = LogLevel.WARNING
    to_stderr: bool = True
    log_file: str | None = None
    line_format: str = "{asctime} [{levelname}] {name} - {message}"
    flush_interval_s: float = 1.0
    buffer_size: int = 64

    def __post_init__(self):
        if "{message}" not in self.line_format:
            raise ValueError("Line format must contain the '{message}' field")
        if self.flush_interval_s <= 0.0:
            raise ValueError(
                f"Invalid flush interval; expected >0 but got {self.flush_interval_s}"
            )
        if self.buffer_size <= 0:
            raise ValueError(
                f"Invalid buffer size; expected >0 but got {self.buffer_size}"
            )
