"""Timing engine: mean execution time of an encryption closure.

The runner only depends on the :class:`MeasurementEngine` protocol; the
default :class:`TimingEngine` times individual calls with
``time.perf_counter_ns`` after a warmup phase and subtracts the timer
overhead, which it calibrates once and reuses for every measurement.
"""

from __future__ import annotations

import time
from typing import Callable, Protocol

import numpy as np
from msgspec import Struct


class MeasurementEngine(Protocol):
    def measure(
        self, fn: Callable[[bytes], bytes], data: bytes, iterations: int
    ) -> float:
        """Return the mean time in seconds of ``fn(data)`` over ``iterations`` calls.

        The result must be strictly positive; the runner rejects anything else.
        """
        ...


class EngineConfig(Struct, frozen=True):
    """Timing engine settings.

    Args:
        warmup_iterations: Untimed calls before sampling.
        calibration_rounds: Empty timer reads used to estimate overhead.
        min_time_s: Floor for the returned mean, keeps it strictly positive.
    """

    warmup_iterations: int = 10
    calibration_rounds: int = 1_000
    min_time_s: float = 1e-12

    def __post_init__(self):
        if self.warmup_iterations < 0:
            raise ValueError(
                f"Invalid warmup_iterations; expected >=0 but got {self.warmup_iterations}"
            )
        if self.calibration_rounds <= 0:
            raise ValueError(
                f"Invalid calibration_rounds; expected >0 but got {self.calibration_rounds}"
            )
        if self.min_time_s <= 0.0:
            raise ValueError(f"Invalid min_time_s; expected >0 but got {self.min_time_s}")


def _noop(data: bytes) -> bytes:
    return data


class TimingEngine:
    """Per-call wall-clock sampling with one-off overhead calibration.

    Args:
        config: Engine settings; defaults to :class:`EngineConfig`.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config if config is not None else EngineConfig()
        self._overhead_ns: float | None = None

    @property
    def overhead_ns(self) -> float:
        """Timer plus call overhead in nanoseconds, calibrated on first use."""
        if self._overhead_ns is None:
            self._overhead_ns = self._calibrate()
        return self._overhead_ns

    def _calibrate(self) -> float:
        samples = self._sample(_noop, b"", self.config.calibration_rounds)
        return float(np.median(samples))

    @staticmethod
    def _sample(fn: Callable[[bytes], bytes], data: bytes, count: int) -> np.ndarray:
        samples = np.empty(count, dtype=np.float64)
        for i in range(count):
            start = time.perf_counter_ns()
            fn(data)
            samples[i] = time.perf_counter_ns() - start
        return samples

    def measure(
        self, fn: Callable[[bytes], bytes], data: bytes, iterations: int
    ) -> float:
        if iterations <= 0:
            raise ValueError(f"Invalid iterations; expected >0 but got {iterations}")
        overhead_ns = self.overhead_ns

        for _ in range(self.config.warmup_iterations):
            fn(data)

        samples = self._sample(fn, data, iterations)
        mean_ns = float(np.mean(samples)) - overhead_ns
        return max(mean_ns / 1e9, self.config.min_time_s)
