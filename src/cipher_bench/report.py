"""Per-size report entries: throughput normalization and formatting."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

REFERENCE_SIZE = 1024
MEGA_THRESHOLD = 10 * 1024

_TIME_UNITS: tuple[tuple[float, float, str], ...] = (
    (1.0, 1.0, "s"),
    (1e-3, 1e3, "ms"),
    (1e-6, 1e6, "μs"),
    (1e-9, 1e9, "ns"),
    (1e-12, 1e12, "ps"),
)


@dataclass(frozen=True)
class ReportEntry:
    """Result for one input size.

    Args:
        size: Input size in bytes.
        mean_time_s: Mean seconds per call.
        formatted_time: Human-readable ``mean_time_s``.
        normalized_speed: Throughput in KiB/s.
        formatted_speed: Human-readable ``normalized_speed``.
    """

    size: int
    mean_time_s: float
    formatted_time: str
    normalized_speed: float
    formatted_speed: str


@dataclass(frozen=True)
class Report:
    """One table row: a (cipher, mode) label and its entries in size order."""

    label: str
    entries: tuple[ReportEntry, ...]


def normalize(size: int, mean_time_s: float) -> float:
    """Throughput in units of 1024 bytes per second.

    Equivalent to ``size / (1024 * mean_time_s)``, computed relative to the
    1024-byte reference so that ``normalize(1024, t) == 1 / t`` exactly.
    """
    if size < REFERENCE_SIZE:
        return 1.0 / (mean_time_s * (REFERENCE_SIZE / size))
    if size == REFERENCE_SIZE:
        return 1.0 / mean_time_s
    return 1.0 / (mean_time_s / (size / REFERENCE_SIZE))


def format_speed(speed: float) -> str:
    if speed >= MEGA_THRESHOLD:
        return f"{speed / 1024:.1f} M/s"
    return f"{speed:.1f} K/s"


def _with_unit(value: float, unit: str) -> str:
    if value >= 1e9:
        return f"{value:.4g} {unit}"
    if value >= 1e3:
        return f"{value:.0f} {unit}"
    if value >= 1e2:
        return f"{value:.1f} {unit}"
    if value >= 1e1:
        return f"{value:.2f} {unit}"
    return f"{value:.3f} {unit}"


def format_time(seconds: float) -> str:
    """Render seconds with the largest unit (s down to ps) not above the value."""
    if seconds < 0:
        return "-" + format_time(-seconds)
    for threshold, scale, unit in _TIME_UNITS:
        if seconds >= threshold:
            return _with_unit(seconds * scale, unit)
    return f"{seconds:g} s"


def build_entry(size: int, mean_time_s: float) -> ReportEntry:
    speed = normalize(size, mean_time_s)
    return ReportEntry(
        size=size,
        mean_time_s=mean_time_s,
        formatted_time=format_time(mean_time_s),
        normalized_speed=speed,
        formatted_speed=format_speed(speed),
    )


def build_report(label: str, measurements: Iterable[tuple[int, float]]) -> Report:
    """Build a row from ``(size, mean_time_s)`` pairs, keeping their order."""
    return Report(
        label=label,
        entries=tuple(build_entry(size, mean) for size, mean in measurements),
    )
