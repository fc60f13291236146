"""Command-line entry point.

Usage:
    cipher-bench [-n ITER] [--size CSV] [--mode CSV] [--cipher CSV] [-t]
    python -m cipher_bench --mode gcm,ecb --size 1024,4096

Prints a table with one row per (cipher, mode) pair and one column per
input size.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from cipher_bench.cipher.base import BlockCipher
from cipher_bench.cipher.catalog import CipherCatalog
from cipher_bench.cipher.openssl import available_ciphers
from cipher_bench.config import (
    DEFAULT_ITERATIONS,
    DEFAULT_SIZES,
    BenchmarkConfig,
    parse_sizes,
    resolve_config,
    split_csv,
)
from cipher_bench.exceptions import ConfigurationError
from cipher_bench.logging import Logger, LoggerConfig
from cipher_bench.measurement import MeasurementEngine, TimingEngine
from cipher_bench.modes import parse_modes
from cipher_bench.runner import BenchmarkRunner
from cipher_bench.table import render_table

PROG = "cipher-bench"


def _sizes_arg(text: str) -> tuple[int, ...]:
    try:
        return parse_sizes(text)
    except ConfigurationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _positive_int_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer but got {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected >0 but got {value}")
    return value


class BenchmarkCLI:
    """Builder for the benchmark command-line interface.

    ``-h``/``--help`` is a plain flag so the caller decides the exit status.

    Args:
        description: Benchmark description for the usage text.
    """

    def __init__(self, description: str) -> None:
        self.parser = argparse.ArgumentParser(
            prog=PROG, description=description, add_help=False
        )
        self._add_common_args()

    def _add_common_args(self) -> None:
        """Add the matrix selection and display arguments."""
        self.parser.add_argument(
            "-n",
            "--iter",
            dest="iterations",
            type=_positive_int_arg,
            default=None,
            help=f"Number of iterations per benchmark (default: {DEFAULT_ITERATIONS})",
        )
        self.parser.add_argument(
            "--size",
            dest="sizes",
            type=_sizes_arg,
            default=None,
            help="Sizes to run, comma separated (default: "
            f"{','.join(str(size) for size in DEFAULT_SIZES)})",
        )
        self.parser.add_argument(
            "--cipher",
            dest="ciphers",
            type=split_csv,
            default=None,
            help="Ciphers to run, comma separated (parsed but not applied)",
        )
        self.parser.add_argument(
            "--mode",
            dest="modes",
            type=parse_modes,
            default=None,
            help="Modes to run, comma separated, case-insensitive (default: all)",
        )
        self.parser.add_argument(
            "-t",
            "--time",
            action="store_true",
            help="Show average time instead of average speed",
        )
        self.parser.add_argument(
            "-h",
            "--help",
            action="store_true",
            help="Show this help and exit",
        )

    def add_logging_args(self) -> BenchmarkCLI:
        """Add -v/--verbose (repeatable) and --log-file.

        Returns:
            Self for method chaining.
        """
        self.parser.add_argument(
            "-v",
            "--verbose",
            action="count",
            default=0,
            help="Log progress on stderr; -v for debug, -vv adds per-size timings",
        )
        self.parser.add_argument(
            "--log-file",
            default=None,
            help="Also append log lines to this file",
        )
        return self

    def usage(self) -> str:
        """Return the formatted help text."""
        return self.parser.format_help()

    def parse(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        """Parse command-line arguments.

        Returns:
            Parsed arguments namespace.
        """
        return self.parser.parse_args(argv)


def build_logger(config: BenchmarkConfig, log_file: str | None = None) -> Logger:
    """Logger writing to stderr at the run's level, plus ``log_file`` if given."""
    return Logger(
        name=PROG,
        config=LoggerConfig(base_level=config.log_level, log_file=log_file),
    )


def main(
    ciphers: Sequence[type[BlockCipher]] | None = None,
    argv: Sequence[str] | None = None,
    engine: MeasurementEngine | None = None,
) -> int:
    """Parse ``argv``, benchmark ``ciphers`` and print the table.

    Args:
        ciphers: Cipher classes to benchmark; defaults to the built-in ones
            the linked OpenSSL supports.
        argv: Arguments without the program name; defaults to ``sys.argv[1:]``.
        engine: Measurement engine; defaults to a fresh :class:`TimingEngine`.

    Returns:
        Process exit status: 0 after printing the table, 1 after printing help.
    """
    cli = BenchmarkCLI("Benchmark symmetric block ciphers across modes and sizes")
    cli.add_logging_args()
    options = cli.parse(argv)
    if options.help:
        print(cli.usage())
        return 1

    try:
        config = resolve_config(options)
        logger = build_logger(config, options.log_file)
    except (ValueError, OSError) as exc:
        cli.parser.error(str(exc))

    try:
        catalog = CipherCatalog(ciphers if ciphers is not None else available_ciphers())
        handles = catalog.instantiate()
        logger.debug(f"Ciphers: {','.join(catalog.names())}")
        runner = BenchmarkRunner(
            config, engine if engine is not None else TimingEngine(), logger
        )
        reports = runner.run(handles)
    except Exception as exc:
        logger.error(f"Benchmark aborted: {exc}")
        raise
    finally:
        logger.close()

    print(render_table(config.sizes, reports, config.display_mode))
    return 0


def default_main(ciphers: Sequence[type[BlockCipher]] | None = None) -> None:
    """Run :func:`main` on ``sys.argv`` and exit with its status."""
    sys.exit(main(ciphers))
