"""Modes of operation and their dispatch onto cipher capabilities.

A (cipher, mode) pair either yields a one-argument encryption closure or is
not applicable, in which case it is skipped without error.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from functools import partial
from typing import Callable

from cryptography.exceptions import UnsupportedAlgorithm

from cipher_bench.cipher.base import AEADContext, AEADMode, BlockCipher
from cipher_bench.logging import Logger

EncryptFn = Callable[[bytes], bytes]


class Mode(StrEnum):
    """Supported modes, in catalog (and output) order."""

    ECB = "ECB"
    CBC = "CBC"
    CTR = "CTR"
    XTS = "XTS"
    OCB = "OCB"
    CCM = "CCM"
    EAX = "EAX"
    CWC = "CWC"
    GCM = "GCM"


ALL_MODES: tuple[Mode, ...] = tuple(Mode)

AEAD_MODES: frozenset[Mode] = frozenset(
    {Mode.OCB, Mode.CCM, Mode.EAX, Mode.CWC, Mode.GCM}
)


def parse_modes(text: str) -> tuple[Mode, ...]:
    """Select modes named in a comma-separated list.

    Matching is case-insensitive, unknown names are ignored and the result
    follows catalog order rather than input order: ``"gcm,ecb"`` gives
    ``(Mode.ECB, Mode.GCM)``.
    """
    requested = {part.strip().upper() for part in text.split(",") if part.strip()}
    return tuple(mode for mode in ALL_MODES if mode.value in requested)


def _whole_blocks(encrypt: EncryptFn, block_size: int, data: bytes) -> bytes:
    # Zero-pad a trailing partial block.
    tail = len(data) % block_size
    if tail:
        data = data + bytes(block_size - tail)
    return encrypt(data)


def _at_least_one_block(encrypt: EncryptFn, block_size: int, data: bytes) -> bytes:
    # Longer inputs keep their length through ciphertext stealing.
    if len(data) < block_size:
        data = data + bytes(block_size - len(data))
    return encrypt(data)


def _aead_encrypt(context: AEADContext, tag_length: int, data: bytes) -> bytes:
    # Only the ciphertext is kept; the tag is computed but discarded.
    _tag, ciphertext = context.seal(b"", data, tag_length)
    return ciphertext


class ModeCatalog:
    """Turns a keyed cipher and a mode into a runnable encryption closure.

    IVs and nonces are all-zero and one cipher block long; XTS uses the same
    cipher for data units and tweaks, starting at sector 0. Every closure
    accepts any input length: ECB and CBC zero-pad a trailing partial block,
    and XTS zero-pads inputs shorter than one block.

    Args:
        logger: Optional logger for skipped modes.
    """

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger

    def _skip(self, cipher: BlockCipher, mode: Mode, reason: str) -> None:
        if self._logger is not None:
            self._logger.debug(f"Skipping {cipher.name()}-{mode}: {reason}")

    def build(self, cipher: BlockCipher, mode: Mode) -> EncryptFn | None:
        """Build the encryption closure for ``mode``, or ``None`` if the mode
        does not apply to ``cipher``."""
        zero_iv = bytes(cipher.block_size)

        if mode is Mode.ECB:
            return partial(_whole_blocks, cipher.ecb_encrypt, cipher.block_size)
        if mode is Mode.CBC:
            return partial(
                _whole_blocks, partial(cipher.cbc_encrypt, zero_iv), cipher.block_size
            )
        if mode is Mode.CTR:
            return partial(cipher.ctr_combine, zero_iv)
        if mode is Mode.XTS:
            if not cipher.supports_xts():
                self._skip(cipher, mode, f"no XTS for {cipher.block_size}-byte blocks")
                return None
            return partial(
                _at_least_one_block,
                partial(cipher.xts_encrypt, cipher, zero_iv, 0),
                cipher.block_size,
            )

        try:
            context = cipher.aead_init(AEADMode(mode.value), zero_iv)
        except (ValueError, UnsupportedAlgorithm) as exc:
            self._skip(cipher, mode, f"AEAD init refused ({exc})")
            return None
        if context is None:
            self._skip(cipher, mode, "AEAD mode unsupported")
            return None
        return partial(_aead_encrypt, context, cipher.block_size)

    def applicable(
        self, cipher: BlockCipher, modes: Iterable[Mode]
    ) -> list[tuple[Mode, EncryptFn]]:
        """All constructible (mode, closure) pairs among ``modes``, in catalog order."""
        wanted = set(modes)
        pairs = []
        for mode in ALL_MODES:
            if mode not in wanted:
                continue
            closure = self.build(cipher, mode)
            if closure is not None:
                pairs.append((mode, closure))
        return pairs
