"""Capability interface shared by every benchmarked cipher.

The runner only ever talks to ciphers through :class:`BlockCipher`. A concrete
cipher supplies its name, key size, block size and a single-block encryption
primitive; the chained, counter and tweakable modes fall back to the generic
constructions in :mod:`cipher_bench.cipher.generic` unless the cipher has a
faster native path. AEAD support is optional and reported by
:meth:`BlockCipher.aead_init` returning ``None``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import ClassVar, Self

from msgspec import Struct

from cipher_bench.cipher import generic
from cipher_bench.exceptions import InvalidKeyError


class KeySize(Struct, frozen=True):
    """Key length requirement of a cipher: fixed length, or any length."""

    length: int | None = None

    @classmethod
    def fixed(cls, length: int) -> Self:
        """Return a requirement for keys of exactly ``length`` bytes."""
        if length <= 0:
            raise ValueError(f"Invalid key length; expected >0 but got {length}")
        return cls(length=length)

    @classmethod
    def variable(cls) -> Self:
        """Return a requirement accepting keys of any length."""
        return cls(length=None)

    @property
    def is_variable(self) -> bool:
        return self.length is None

    def accepts(self, key: bytes) -> bool:
        return self.is_variable or len(key) == self.length


class AEADMode(StrEnum):
    """Authenticated modes a cipher may be asked to initialize."""

    OCB = "OCB"
    CCM = "CCM"
    EAX = "EAX"
    CWC = "CWC"
    GCM = "GCM"


class AEADContext(ABC):
    """An initialized AEAD state bound to a key and nonce."""

    @abstractmethod
    def seal(
        self, associated_data: bytes, plaintext: bytes, tag_length: int
    ) -> tuple[bytes, bytes]:
        """Encrypt and authenticate ``plaintext``.

        Args:
            associated_data: Data authenticated but not encrypted.
            plaintext: Data to encrypt.
            tag_length: Length of the returned tag in bytes.

        Returns:
            ``(tag, ciphertext)``.
        """


class BlockCipher(ABC):
    """A keyed block cipher exposing the capabilities the runner benchmarks.

    Subclasses set ``cipher_name`` and ``block_size``, implement
    :meth:`key_size` and :meth:`block_encrypt`, and may override any mode
    method with a native implementation. Instances are never mutated after
    construction.

    Args:
        key: Key bytes, already validated against :meth:`key_size`.
    """

    cipher_name: ClassVar[str]
    block_size: ClassVar[int]

    def __init__(self, key: bytes) -> None:
        self._key = bytes(key)

    @classmethod
    def name(cls) -> str:
        """Display name used as the prefix of every report label."""
        return cls.cipher_name

    @classmethod
    @abstractmethod
    def key_size(cls) -> KeySize:
        """Key length this cipher requires."""

    @classmethod
    def from_key(cls, key: bytes) -> Self:
        """Build a ready-to-use instance keyed with ``key``.

        Raises:
            InvalidKeyError: If the key length is not accepted, or the
                underlying primitive rejects the key.
        """
        if not cls.key_size().accepts(key):
            raise InvalidKeyError(
                f"Invalid key for {cls.name()}; expected {cls.key_size().length} "
                f"bytes but got {len(key)}"
            )
        try:
            return cls(key)
        except ValueError as exc:
            raise InvalidKeyError(f"Invalid key for {cls.name()}: {exc}") from exc

    @abstractmethod
    def block_encrypt(self, block: bytes) -> bytes:
        """Encrypt exactly one block."""

    def ecb_encrypt(self, data: bytes) -> bytes:
        return generic.ecb_encrypt(self.block_encrypt, self.block_size, data)

    def cbc_encrypt(self, iv: bytes, data: bytes) -> bytes:
        return generic.cbc_encrypt(self.block_encrypt, self.block_size, iv, data)

    def ctr_combine(self, iv: bytes, data: bytes) -> bytes:
        return generic.ctr_combine(self.ecb_encrypt, self.block_size, iv, data)

    def xts_encrypt(
        self, tweak_cipher: BlockCipher, iv: bytes, sector: int, data: bytes
    ) -> bytes:
        """XTS encryption with ``self`` on data units and ``tweak_cipher`` on the IV.

        Only defined for 16-byte blocks.
        """
        return generic.xts_encrypt(
            self.ecb_encrypt, tweak_cipher.ecb_encrypt, iv, sector, data
        )

    def supports_xts(self) -> bool:
        return self.block_size == generic.XTS_BLOCK_SIZE

    def aead_init(self, mode: AEADMode, nonce: bytes) -> AEADContext | None:
        """Initialize an AEAD context, or return ``None`` if unsupported."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name()!r}, block_size={self.block_size})"
