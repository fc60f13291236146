"""Run configuration and its resolution from parsed command-line options."""

from __future__ import annotations

from argparse import Namespace
from enum import StrEnum

from msgspec import Struct

from cipher_bench.exceptions import ConfigurationError
from cipher_bench.logging import LogLevel
from cipher_bench.modes import ALL_MODES, Mode

DEFAULT_SIZES: tuple[int, ...] = (16, 32, 128, 512, 1024, 4096, 16384)
DEFAULT_MODES: tuple[Mode, ...] = ALL_MODES
DEFAULT_ITERATIONS = 100


class DisplayMode(StrEnum):
    """What each table cell shows."""

    TIME = "time"
    SPEED = "speed"


class BenchmarkConfig(Struct, frozen=True):
    """Resolved, immutable configuration for one run.

    Args:
        sizes: Input sizes in bytes, in column order.
        modes: Requested modes, in catalog order.
        iterations: Calls averaged per measurement.
        display_mode: Show mean time or normalized throughput.
        ciphers: Cipher names given with ``--cipher``; recorded only.
        log_level: Minimum level written to the log.
    """

    sizes: tuple[int, ...] = DEFAULT_SIZES
    modes: tuple[Mode, ...] = DEFAULT_MODES
    iterations: int = DEFAULT_ITERATIONS
    display_mode: DisplayMode = DisplayMode.SPEED
    ciphers: tuple[str, ...] = ()
    log_level: LogLevel = LogLevel.WARNING

    def __post_init__(self):
        """Validate sizes and iteration count."""
        if not self.sizes:
            raise ConfigurationError("At least one size is required")
        for size in self.sizes:
            if size <= 0:
                raise ConfigurationError(f"Invalid size; expected >0 but got {size}")
        if self.iterations <= 0:
            raise ConfigurationError(
                f"Invalid iterations; expected >0 but got {self.iterations}"
            )


def split_csv(text: str) -> list[str]:
    """Split on commas, dropping empty fields (``"a,,b,"`` -> ``["a", "b"]``)."""
    return [part.strip() for part in text.split(",") if part.strip()]


def parse_sizes(text: str) -> tuple[int, ...]:
    """Parse a comma-separated size list.

    Raises:
        ConfigurationError: If a field is not an integer or the list is empty.
    """
    fields = split_csv(text)
    if not fields:
        raise ConfigurationError(f"No sizes given in {text!r}")
    try:
        return tuple(int(field) for field in fields)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid size list {text!r}: {exc}") from exc


def resolve_config(options: Namespace) -> BenchmarkConfig:
    """Build the run configuration from parsed options.

    Options left unset fall back to the module defaults. ``sizes`` and
    ``modes`` hold the value of the last ``--size``/``--mode`` given; a mode
    filter always selects from the full catalog.
    """
    sizes = getattr(options, "sizes", None)
    modes = getattr(options, "modes", None)
    ciphers = getattr(options, "ciphers", None)
    iterations = getattr(options, "iterations", None)
    return BenchmarkConfig(
        sizes=tuple(sizes) if sizes is not None else DEFAULT_SIZES,
        modes=tuple(modes) if modes is not None else DEFAULT_MODES,
        iterations=iterations if iterations is not None else DEFAULT_ITERATIONS,
        display_mode=DisplayMode.TIME if getattr(options, "time", False) else DisplayMode.SPEED,
        ciphers=tuple(ciphers) if ciphers else (),
        log_level=LogLevel.from_verbosity(getattr(options, "verbose", 0) or 0),
    )
