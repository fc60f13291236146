from collections.abc import Callable

import pytest
from cryptography.exceptions import UnsupportedAlgorithm

from cipher_bench.cipher.base import AEADContext, AEADMode, BlockCipher, KeySize
from cipher_bench.cipher.generic import xor_bytes


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add shared options available across the full test suite."""
    try:
        parser.addoption(
            "--run-slow",
            action="store_true",
            default=False,
            help="Run slow tests that time real cipher calls",
        )
    except ValueError:
        # Option may already be registered by a nested conftest.
        pass


def pytest_configure(config: pytest.Config) -> None:
    """Register shared markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip slow tests unless explicitly enabled."""
    if config.getoption("--run-slow"):
        return

    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


class XorBlockCipher(BlockCipher):
    """Toy 16-byte block cipher: XOR with the key. No AEAD support."""

    cipher_name = "XOR128"
    block_size = 16

    @classmethod
    def key_size(cls) -> KeySize:
        return KeySize.fixed(16)

    def block_encrypt(self, block: bytes) -> bytes:
        if len(block) != self.block_size:
            raise ValueError("bad block length")
        return xor_bytes(block, self._key)


class RecordingAEADContext(AEADContext):
    """Returns a recognizable tag so tests can check it is discarded."""

    def __init__(self) -> None:
        self.calls: list[tuple[bytes, bytes, int]] = []

    def seal(self, associated_data, plaintext, tag_length):
        self.calls.append((associated_data, plaintext, tag_length))
        return b"T" * tag_length, bytes(b ^ 0xFF for b in plaintext)


class GcmOnlyCipher(XorBlockCipher):
    """Supports GCM through a recording context; all other AEAD modes refused."""

    cipher_name = "GCMONLY"

    def __init__(self, key: bytes) -> None:
        super().__init__(key)
        self.contexts: dict[AEADMode, RecordingAEADContext] = {}
        self.nonces: list[bytes] = []

    def aead_init(self, mode, nonce):
        self.nonces.append(nonce)
        if mode is not AEADMode.GCM:
            return None
        context = RecordingAEADContext()
        self.contexts[mode] = context
        return context


class RefusingAEADCipher(XorBlockCipher):
    """AEAD initialization always fails, as for an unsupported block size."""

    cipher_name = "REFUSE"

    def aead_init(self, mode, nonce):
        raise ValueError(f"{mode} not supported")


class BackendRefusingCipher(XorBlockCipher):
    """AEAD initialization fails the way a backend lacking the mode does."""

    cipher_name = "BACKEND"

    def aead_init(self, mode, nonce):
        raise UnsupportedAlgorithm(f"no {mode} in backend")


class NarrowBlockCipher(BlockCipher):
    """8-byte block toy cipher with a variable-length key."""

    cipher_name = "NARROW64"
    block_size = 8

    @classmethod
    def key_size(cls) -> KeySize:
        return KeySize.variable()

    def block_encrypt(self, block: bytes) -> bytes:
        return block[::-1]


class FixedTimeEngine:
    """Measurement engine returning a fixed mean and recording every call."""

    def __init__(self, mean_s: float = 1e-6) -> None:
        self.mean_s = mean_s
        self.calls: list[tuple[Callable[[bytes], bytes], bytes, int]] = []

    def measure(self, fn, data, iterations):
        fn(data)
        self.calls.append((fn, data, iterations))
        return self.mean_s


class FailingEngine:
    """Measurement engine that fails on the given size."""

    def __init__(self, fail_size: int) -> None:
        self.fail_size = fail_size
        self.calls = 0

    def measure(self, fn, data, iterations):
        self.calls += 1
        if len(data) == self.fail_size:
            raise MemoryError("cannot allocate buffer")
        return 1e-6


@pytest.fixture
def xor_cipher() -> XorBlockCipher:
    return XorBlockCipher.from_key(b"\x01" * 16)


@pytest.fixture
def gcm_only_cipher() -> GcmOnlyCipher:
    return GcmOnlyCipher.from_key(b"\x01" * 16)


@pytest.fixture
def refusing_cipher() -> RefusingAEADCipher:
    return RefusingAEADCipher.from_key(b"\x01" * 16)


@pytest.fixture
def backend_refusing_cipher() -> BackendRefusingCipher:
    return BackendRefusingCipher.from_key(b"\x01" * 16)


@pytest.fixture
def narrow_cipher() -> NarrowBlockCipher:
    return NarrowBlockCipher.from_key(b"\x00")


@pytest.fixture
def cipher_classes() -> dict[str, type[BlockCipher]]:
    """Toy cipher classes keyed by display name."""
    return {
        cls.cipher_name: cls
        for cls in (
            XorBlockCipher,
            GcmOnlyCipher,
            RefusingAEADCipher,
            BackendRefusingCipher,
            NarrowBlockCipher,
        )
    }


@pytest.fixture
def fixed_engine() -> FixedTimeEngine:
    return FixedTimeEngine()


@pytest.fixture
def failing_engine_factory() -> Callable[[int], FailingEngine]:
    return FailingEngine


@pytest.fixture
def fixed_engine_factory() -> Callable[[float], FixedTimeEngine]:
    return FixedTimeEngine
