"""Generic modes of operation built on top of a raw block primitive.

All functions take the primitive as a callable so they can be reused by any
cipher: ``encrypt_block`` encrypts exactly one block, ``encrypt_blocks``
encrypts any whole number of blocks (ECB).
"""

from __future__ import annotations

from typing import Callable

XTS_BLOCK_SIZE = 16
_XTS_REDUCTION = 0x87
_MASK_128 = (1 << 128) - 1


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XOR two equal-length byte strings."""
    return (int.from_bytes(a, "big") ^ int.from_bytes(b, "big")).to_bytes(
        len(a), "big"
    )


def _check_whole_blocks(data: bytes, block_size: int, mode: str) -> None:
    if len(data) % block_size != 0:
        raise ValueError(
            f"{mode} input must be a multiple of {block_size} bytes; got {len(data)}"
        )


def _check_iv(iv: bytes, block_size: int) -> None:
    if len(iv) != block_size:
        raise ValueError(f"Invalid IV length; expected {block_size} but got {len(iv)}")


def ecb_encrypt(
    encrypt_block: Callable[[bytes], bytes], block_size: int, data: bytes
) -> bytes:
    _check_whole_blocks(data, block_size, "ECB")
    return b"".join(
        encrypt_block(data[i : i + block_size]) for i in range(0, len(data), block_size)
    )


def cbc_encrypt(
    encrypt_block: Callable[[bytes], bytes], block_size: int, iv: bytes, data: bytes
) -> bytes:
    _check_iv(iv, block_size)
    _check_whole_blocks(data, block_size, "CBC")
    previous = iv
    out = []
    for i in range(0, len(data), block_size):
        previous = encrypt_block(xor_bytes(previous, data[i : i + block_size]))
        out.append(previous)
    return b"".join(out)


def ctr_combine(
    encrypt_blocks: Callable[[bytes], bytes], block_size: int, iv: bytes, data: bytes
) -> bytes:
    """Counter mode keystream XORed with ``data``; any input length.

    The counter is the whole IV read as a big-endian integer, wrapping at the
    block width.
    """
    _check_iv(iv, block_size)
    if not data:
        return b""
    num_blocks = -(-len(data) // block_size)
    modulus = 1 << (8 * block_size)
    start = int.from_bytes(iv, "big")
    counters = b"".join(
        ((start + i) % modulus).to_bytes(block_size, "big") for i in range(num_blocks)
    )
    keystream = encrypt_blocks(counters)[: len(data)]
    return xor_bytes(keystream, data)


def _xts_next_tweak(tweak: int) -> int:
    # Multiply by alpha in GF(2^128), little-endian bit order (IEEE 1619).
    tweak <<= 1
    if tweak >> 128:
        tweak = (tweak & _MASK_128) ^ _XTS_REDUCTION
    return tweak


def _xts_tweaks(first: int, count: int) -> bytes:
    tweaks = []
    tweak = first
    for _ in range(count):
        tweaks.append(tweak.to_bytes(XTS_BLOCK_SIZE, "little"))
        tweak = _xts_next_tweak(tweak)
    return b"".join(tweaks)


def xts_encrypt(
    encrypt_blocks: Callable[[bytes], bytes],
    tweak_encrypt_blocks: Callable[[bytes], bytes],
    iv: bytes,
    sector: int,
    data: bytes,
) -> bytes:
    """XTS encryption with ciphertext stealing for a trailing partial block.

    Args:
        encrypt_blocks: ECB encryption under the data-unit key.
        tweak_encrypt_blocks: ECB encryption under the tweak key.
        iv: 16-byte tweak value encrypted to form the initial tweak.
        sector: Number of blocks already consumed in this data unit; the
            initial tweak is advanced that many times.
        data: At least one full block of plaintext.
    """
    _check_iv(iv, XTS_BLOCK_SIZE)
    if len(data) < XTS_BLOCK_SIZE:
        raise ValueError(
            f"XTS input must be at least {XTS_BLOCK_SIZE} bytes; got {len(data)}"
        )
    if sector < 0:
        raise ValueError(f"Invalid sector; expected >=0 but got {sector}")

    tweak = int.from_bytes(tweak_encrypt_blocks(iv), "little")
    for _ in range(sector):
        tweak = _xts_next_tweak(tweak)

    full_blocks, tail = divmod(len(data), XTS_BLOCK_SIZE)
    tweaks = _xts_tweaks(tweak, full_blocks + (1 if tail else 0))
    whole = full_blocks * XTS_BLOCK_SIZE
    masks = tweaks[:whole]
    ciphertext = xor_bytes(encrypt_blocks(xor_bytes(data[:whole], masks)), masks)
    if not tail:
        return ciphertext

    # Ciphertext stealing: the last full ciphertext block donates its tail.
    last_full = ciphertext[-XTS_BLOCK_SIZE:]
    stolen = data[whole:] + last_full[tail:]
    final_mask = tweaks[whole:]
    final_block = xor_bytes(encrypt_blocks(xor_bytes(stolen, final_mask)), final_mask)
    return ciphertext[:-XTS_BLOCK_SIZE] + final_block + last_full[:tail]
