"""Benchmark-matrix runner for symmetric block ciphers."""

from .cipher import (
    AEADContext as AEADContext,
)
from .cipher import (
    AEADMode as AEADMode,
)
from .cipher import (
    BlockCipher as BlockCipher,
)
from .cipher import (
    CipherCatalog as CipherCatalog,
)
from .cipher import (
    KeySize as KeySize,
)
from .cli import (
    default_main as default_main,
)
from .cli import (
    main as main,
)
from .config import (
    BenchmarkConfig as BenchmarkConfig,
)
from .config import (
    DisplayMode as DisplayMode,
)
from .config import (
    resolve_config as resolve_config,
)
from .exceptions import (
    CipherBenchError as CipherBenchError,
)
from .exceptions import (
    ConfigurationError as ConfigurationError,
)
from .exceptions import (
    InvalidKeyError as InvalidKeyError,
)
from .exceptions import (
    MeasurementError as MeasurementError,
)
from .measurement import (
    EngineConfig as EngineConfig,
)
from .measurement import (
    MeasurementEngine as MeasurementEngine,
)
from .measurement import (
    TimingEngine as TimingEngine,
)
from .modes import (
    Mode as Mode,
)
from .modes import (
    ModeCatalog as ModeCatalog,
)
from .report import (
    Report as Report,
)
from .report import (
    ReportEntry as ReportEntry,
)
from .runner import (
    BenchmarkRunner as BenchmarkRunner,
)
from .table import (
    render_table as render_table,
)

__all__ = [
    # Ciphers
    "AEADContext",
    "AEADMode",
    "BlockCipher",
    "CipherCatalog",
    "KeySize",
    # Configuration
    "BenchmarkConfig",
    "DisplayMode",
    "resolve_config",
    # Errors
    "CipherBenchError",
    "ConfigurationError",
    "InvalidKeyError",
    "MeasurementError",
    # Measurement
    "EngineConfig",
    "MeasurementEngine",
    "TimingEngine",
    # Benchmarking
    "Mode",
    "ModeCatalog",
    "BenchmarkRunner",
    "Report",
    "ReportEntry",
    "render_table",
    # Entry points
    "main",
    "default_main",
]
