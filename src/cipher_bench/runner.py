"""Benchmark orchestration across the {cipher, mode, size} matrix.

Measurements are taken strictly one after another on the calling thread:
all sizes of a (cipher, mode) pair, then the next mode, then the next
cipher. That order is also the row order of the resulting table.
"""

from __future__ import annotations

import time
from collections.abc import Sequence

from cipher_bench.cipher.base import BlockCipher
from cipher_bench.config import BenchmarkConfig
from cipher_bench.exceptions import MeasurementError
from cipher_bench.logging import Logger
from cipher_bench.measurement import MeasurementEngine
from cipher_bench.modes import EncryptFn, ModeCatalog
from cipher_bench.report import Report, build_report


class BenchmarkRunner:
    """Drives a measurement engine over every applicable (cipher, mode, size).

    Args:
        config: Resolved run configuration.
        engine: Measurement engine returning mean seconds per call.
        logger: Optional logger for progress and skipped modes.
        mode_catalog: Mode dispatcher; defaults to one sharing ``logger``.
    """

    def __init__(
        self,
        config: BenchmarkConfig,
        engine: MeasurementEngine,
        logger: Logger | None = None,
        mode_catalog: ModeCatalog | None = None,
    ) -> None:
        self.config = config
        self.engine = engine
        self.logger = logger
        self.mode_catalog = mode_catalog if mode_catalog is not None else ModeCatalog(logger)

    def _log(self, level: str, msg: str) -> None:
        if self.logger is not None:
            getattr(self.logger, level)(msg)

    def measure_sizes(self, label: str, fn: EncryptFn) -> Report:
        """Measure ``fn`` once per configured size on a zero-filled buffer.

        Raises:
            MeasurementError: If the engine fails or reports a mean that is not
                strictly positive; nothing is retried.
        """
        measurements: list[tuple[int, float]] = []
        for size in self.config.sizes:
            data = bytes(size)
            try:
                mean = self.engine.measure(fn, data, self.config.iterations)
            except Exception as exc:
                raise MeasurementError(label, size, repr(exc)) from exc
            if not mean > 0.0:
                raise MeasurementError(
                    label, size, f"expected a positive mean time but got {mean!r}"
                )
            self._log("trace", f"{label} size={size} mean={mean:.3e}s")
            measurements.append((size, mean))
        return build_report(label, measurements)

    def run(self, ciphers: Sequence[BlockCipher]) -> list[Report]:
        """Benchmark every cipher in order and return one report per
        constructible (cipher, mode) pair."""
        if self.config.ciphers:
            self._log(
                "warning",
                "--cipher is parsed but not applied; benchmarking all "
                f"{len(ciphers)} ciphers (requested: {','.join(self.config.ciphers)})",
            )

        start = time.perf_counter()
        reports: list[Report] = []
        for cipher in ciphers:
            benches = self.mode_catalog.applicable(cipher, self.config.modes)
            self._log(
                "info",
                f"{cipher.name()}: {len(benches)} applicable mode(s): "
                f"{','.join(mode.value for mode, _ in benches) or '-'}",
            )
            for mode, fn in benches:
                label = f"{cipher.name()}-{mode.value}"
                self._log("debug", f"Measuring {label}")
                reports.append(self.measure_sizes(label, fn))

        self._log(
            "info",
            f"Finished {len(reports)} report(s) in {time.perf_counter() - start:.3f}s",
        )
        return reports
