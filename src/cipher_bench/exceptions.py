"""Exception types raised by the benchmark runner."""


class CipherBenchError(Exception):
    """Base class for all benchmark errors."""


class ConfigurationError(CipherBenchError, ValueError):
    """Malformed run configuration; raised before any measurement."""


class InvalidKeyError(CipherBenchError, ValueError):
    """A cipher rejected the key synthesized for it."""


class MeasurementError(CipherBenchError, RuntimeError):
    """The measurement engine failed while timing a closure."""

    def __init__(self, label: str, size: int, reason: str) -> None:
        self.label = label
        self.size = size
        super().__init__(f"Measurement failed for {label} at size={size}: {reason}")
