"""Built-in ciphers backed by the ``cryptography`` package (OpenSSL).

ECB, CBC and CTR run natively in OpenSSL where the backend supports the
algorithm/mode pair; otherwise they fall back to the generic constructions
over native ECB. XTS always uses the generic construction, because OpenSSL
rejects XTS keys whose two halves are identical and the benchmark pairs a
cipher with itself.
"""

from __future__ import annotations

from typing import ClassVar

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESCCM, AESGCM, AESOCB3

from cipher_bench.cipher import generic
from cipher_bench.cipher.base import AEADContext, AEADMode, BlockCipher, KeySize


def _run(cipher: Cipher, data: bytes) -> bytes:
    encryptor = cipher.encryptor()
    return encryptor.update(data) + encryptor.finalize()


class _ModeGCMContext(AEADContext):
    """GCM through the streaming ``modes.GCM`` interface."""

    def __init__(self, algorithm, nonce: bytes) -> None:
        self._algorithm = algorithm
        self._nonce = nonce
        # Raises UnsupportedAlgorithm when the backend lacks GCM for this cipher.
        Cipher(self._algorithm, modes.GCM(self._nonce)).encryptor()

    def seal(
        self, associated_data: bytes, plaintext: bytes, tag_length: int
    ) -> tuple[bytes, bytes]:
        encryptor = Cipher(self._algorithm, modes.GCM(self._nonce)).encryptor()
        if associated_data:
            encryptor.authenticate_additional_data(associated_data)
        ciphertext = encryptor.update(plaintext) + encryptor.finalize()
        return encryptor.tag[:tag_length], ciphertext


class _OneShotAEADContext(AEADContext):
    """Wraps the one-shot AEAD classes (AESGCM, AESCCM, AESOCB3).

    These append a fixed-length tag to the ciphertext.
    """

    def __init__(self, aead, nonce: bytes, tag_length: int) -> None:
        self._aead = aead
        self._nonce = nonce
        self._tag_length = tag_length

    def seal(
        self, associated_data: bytes, plaintext: bytes, tag_length: int
    ) -> tuple[bytes, bytes]:
        if tag_length != self._tag_length:
            raise ValueError(
                f"Invalid tag length; expected {self._tag_length} but got {tag_length}"
            )
        sealed = self._aead.encrypt(self._nonce, plaintext, associated_data or None)
        return sealed[-tag_length:], sealed[:-tag_length]


class OpenSSLBlockCipher(BlockCipher):
    """A block cipher whose primitive is an OpenSSL algorithm.

    Subclasses set ``algorithm`` (a ``cryptography`` algorithm class) and
    ``key_length``.
    """

    algorithm: ClassVar[type]
    key_length: ClassVar[int]

    def __init__(self, key: bytes) -> None:
        super().__init__(key)
        self._algorithm = self.algorithm(self._key)
        self._ecb = Cipher(self._algorithm, modes.ECB())
        zero_iv = bytes(self.block_size)
        self._native_cbc = self._probe(modes.CBC(zero_iv))
        self._native_ctr = self._probe(modes.CTR(zero_iv))

    def _probe(self, mode) -> bool:
        try:
            Cipher(self._algorithm, mode).encryptor()
        except UnsupportedAlgorithm:
            return False
        return True

    @classmethod
    def key_size(cls) -> KeySize:
        return KeySize.fixed(cls.key_length)

    @classmethod
    def is_available(cls) -> bool:
        """Whether the linked OpenSSL provides this algorithm at all."""
        try:
            Cipher(cls.algorithm(bytes(cls.key_length)), modes.ECB()).encryptor()
        except UnsupportedAlgorithm:
            return False
        return True

    def block_encrypt(self, block: bytes) -> bytes:
        if len(block) != self.block_size:
            raise ValueError(
                f"Invalid block length; expected {self.block_size} but got {len(block)}"
            )
        return _run(self._ecb, block)

    def ecb_encrypt(self, data: bytes) -> bytes:
        return _run(self._ecb, data)

    def cbc_encrypt(self, iv: bytes, data: bytes) -> bytes:
        if not self._native_cbc:
            return super().cbc_encrypt(iv, data)
        return _run(Cipher(self._algorithm, modes.CBC(iv)), data)

    def ctr_combine(self, iv: bytes, data: bytes) -> bytes:
        if not self._native_ctr:
            return generic.ctr_combine(self.ecb_encrypt, self.block_size, iv, data)
        return _run(Cipher(self._algorithm, modes.CTR(iv)), data)

    def aead_init(self, mode: AEADMode, nonce: bytes) -> AEADContext | None:
        try:
            return self._aead_context(mode, nonce)
        except UnsupportedAlgorithm:
            return None

    def _aead_context(self, mode: AEADMode, nonce: bytes) -> AEADContext | None:
        if mode is AEADMode.GCM and self.block_size == 16:
            return _ModeGCMContext(self._algorithm, nonce)
        return None


class _AES(OpenSSLBlockCipher):
    algorithm = algorithms.AES
    block_size = 16

    # Nonce lengths accepted by each one-shot AEAD class.
    _AEAD_NONCE_LENGTHS: ClassVar[dict[AEADMode, range]] = {
        AEADMode.GCM: range(8, 129),
        AEADMode.CCM: range(7, 14),
        AEADMode.OCB: range(12, 16),
    }

    def _aead_context(self, mode: AEADMode, nonce: bytes) -> AEADContext | None:
        lengths = self._AEAD_NONCE_LENGTHS.get(mode)
        if lengths is None or len(nonce) not in lengths:
            return None
        if mode is AEADMode.GCM:
            return _OneShotAEADContext(AESGCM(self._key), nonce, 16)
        if mode is AEADMode.CCM:
            return _OneShotAEADContext(
                AESCCM(self._key, tag_length=self.block_size), nonce, self.block_size
            )
        return _OneShotAEADContext(AESOCB3(self._key), nonce, 16)


class AES128(_AES):
    cipher_name = "AES128"
    key_length = 16


class AES192(_AES):
    cipher_name = "AES192"
    key_length = 24


class AES256(_AES):
    cipher_name = "AES256"
    key_length = 32


class _Camellia(OpenSSLBlockCipher):
    algorithm = algorithms.Camellia
    block_size = 16


class Camellia128(_Camellia):
    cipher_name = "Camellia128"
    key_length = 16


class Camellia192(_Camellia):
    cipher_name = "Camellia192"
    key_length = 24


class Camellia256(_Camellia):
    cipher_name = "Camellia256"
    key_length = 32


class SM4(OpenSSLBlockCipher):
    cipher_name = "SM4"
    algorithm = algorithms.SM4
    block_size = 16
    key_length = 16


BUILTIN_CIPHERS: tuple[type[OpenSSLBlockCipher], ...] = (
    AES128,
    AES192,
    AES256,
    Camellia128,
    Camellia192,
    Camellia256,
    SM4,
)


def available_ciphers() -> tuple[type[OpenSSLBlockCipher], ...]:
    """Built-in ciphers supported by the linked OpenSSL, in catalog order."""
    return tuple(cipher for cipher in BUILTIN_CIPHERS if cipher.is_available())
