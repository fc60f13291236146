"""Tests for configuration defaults, validation and resolution."""

from argparse import Namespace

import pytest

from cipher_bench.config import (
    DEFAULT_ITERATIONS,
    DEFAULT_MODES,
    DEFAULT_SIZES,
    BenchmarkConfig,
    DisplayMode,
    parse_sizes,
    resolve_config,
    split_csv,
)
from cipher_bench.exceptions import ConfigurationError
from cipher_bench.logging import LogLevel
from cipher_bench.modes import ALL_MODES, Mode


class TestBenchmarkConfig:
    """Defaults and validation."""

    def test_default_values(self) -> None:
        cfg = BenchmarkConfig()
        assert cfg.sizes == (16, 32, 128, 512, 1024, 4096, 16384)
        assert cfg.modes == ALL_MODES
        assert cfg.iterations == 100
        assert cfg.display_mode is DisplayMode.SPEED
        assert cfg.ciphers == ()
        assert cfg.log_level is LogLevel.WARNING

    def test_frozen(self) -> None:
        cfg = BenchmarkConfig()
        with pytest.raises(AttributeError):
            cfg.iterations = 5

    def test_invalid_iterations(self) -> None:
        with pytest.raises(ConfigurationError):
            BenchmarkConfig(iterations=0)

    def test_invalid_size(self) -> None:
        with pytest.raises(ConfigurationError):
            BenchmarkConfig(sizes=(16, 0))

    def test_empty_sizes(self) -> None:
        with pytest.raises(ConfigurationError):
            BenchmarkConfig(sizes=())

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            BenchmarkConfig(iterations=-1)


class TestParsing:
    """CSV helpers."""

    def test_split_csv_drops_empty_fields(self) -> None:
        assert split_csv("a,,b,") == ["a", "b"]
        assert split_csv("") == []

    def test_parse_sizes(self) -> None:
        assert parse_sizes("1024,16, 32") == (1024, 16, 32)

    def test_parse_sizes_non_numeric(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_sizes("16,abc")

    def test_parse_sizes_empty(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_sizes(",")


class TestResolveConfig:
    """Pure resolution from parsed options."""

    def test_all_unset_gives_defaults(self) -> None:
        options = Namespace(
            iterations=None, sizes=None, modes=None, ciphers=None, time=False, verbose=0
        )
        assert resolve_config(options) == BenchmarkConfig()

    def test_missing_attributes_give_defaults(self) -> None:
        cfg = resolve_config(Namespace())
        assert cfg.sizes == DEFAULT_SIZES
        assert cfg.modes == DEFAULT_MODES
        assert cfg.iterations == DEFAULT_ITERATIONS

    def test_overrides(self) -> None:
        options = Namespace(
            iterations=7,
            sizes=(64, 16),
            modes=(Mode.CBC,),
            ciphers=["AES128"],
            time=True,
            verbose=1,
        )
        cfg = resolve_config(options)
        assert cfg.iterations == 7
        assert cfg.sizes == (64, 16)
        assert cfg.modes == (Mode.CBC,)
        assert cfg.ciphers == ("AES128",)
        assert cfg.display_mode is DisplayMode.TIME
        assert cfg.log_level is LogLevel.DEBUG

    def test_double_verbose_selects_trace(self) -> None:
        assert resolve_config(Namespace(verbose=2)).log_level is LogLevel.TRACE

    def test_empty_mode_selection_is_kept(self) -> None:
        assert resolve_config(Namespace(modes=())).modes == ()

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            resolve_config(Namespace(iterations=0))

    def test_is_pure(self) -> None:
        options = Namespace(sizes=(16,), modes=(Mode.ECB,))
        assert resolve_config(options) == resolve_config(options)
        assert options.sizes == (16,)
