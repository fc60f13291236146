"""Cipher catalog: the list of ciphers a run benchmarks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cipher_bench.cipher.base import BlockCipher, KeySize

VARIABLE_KEY = b"\x00"
FIXED_KEY_BYTE = b"\x01"


def synthesize_key(key_size: KeySize) -> bytes:
    """Deterministic benchmark key: all 0x01 bytes, or one zero byte when
    the cipher accepts keys of any length."""
    if key_size.is_variable:
        return VARIABLE_KEY
    return FIXED_KEY_BYTE * key_size.length


class CipherCatalog:
    """Ordered collection of cipher classes to benchmark.

    Args:
        ciphers: Cipher classes in the order their rows should appear.
    """

    def __init__(self, ciphers: Iterable[type[BlockCipher]]) -> None:
        self._ciphers: tuple[type[BlockCipher], ...] = tuple(ciphers)

    def __len__(self) -> int:
        return len(self._ciphers)

    def __iter__(self):
        return iter(self._ciphers)

    def names(self) -> list[str]:
        return [cipher.name() for cipher in self._ciphers]

    def select(self, names: Sequence[str]) -> CipherCatalog:
        """Return a catalog restricted to ``names`` (case-insensitive), keeping
        catalog order. An empty ``names`` selects everything."""
        if not names:
            return self
        wanted = {name.upper() for name in names}
        return CipherCatalog(c for c in self._ciphers if c.name().upper() in wanted)

    def instantiate(self) -> list[BlockCipher]:
        """Key every cipher with its synthesized key.

        Raises:
            InvalidKeyError: If a cipher rejects its key.
        """
        return [
            cipher.from_key(synthesize_key(cipher.key_size())) for cipher in self._ciphers
        ]
