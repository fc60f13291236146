"""Tests for key synthesis and catalog instantiation."""

import pytest

from cipher_bench.cipher.base import BlockCipher, KeySize
from cipher_bench.cipher.catalog import CipherCatalog, synthesize_key
from cipher_bench.exceptions import InvalidKeyError


class RecordingKeyCipher(BlockCipher):
    cipher_name = "REC"
    block_size = 16
    keys: list[bytes] = []

    @classmethod
    def key_size(cls) -> KeySize:
        return KeySize.fixed(24)

    def __init__(self, key: bytes) -> None:
        super().__init__(key)
        type(self).keys.append(key)

    def block_encrypt(self, block: bytes) -> bytes:
        return block


class PickyCipher(RecordingKeyCipher):
    cipher_name = "PICKY"

    def __init__(self, key: bytes) -> None:
        raise ValueError("weak key")


class TestKeySize:
    """Fixed and variable key requirements."""

    def test_fixed(self) -> None:
        size = KeySize.fixed(16)
        assert size.length == 16
        assert not size.is_variable
        assert size.accepts(bytes(16))
        assert not size.accepts(bytes(15))

    def test_variable(self) -> None:
        size = KeySize.variable()
        assert size.is_variable
        assert size.accepts(b"") and size.accepts(bytes(99))

    def test_invalid_fixed(self) -> None:
        with pytest.raises(ValueError):
            KeySize.fixed(0)


class TestSynthesizeKey:
    def test_fixed_is_all_ones(self) -> None:
        assert synthesize_key(KeySize.fixed(4)) == b"\x01\x01\x01\x01"

    def test_variable_is_single_zero(self) -> None:
        assert synthesize_key(KeySize.variable()) == b"\x00"


class TestCipherCatalog:
    """Ordering, selection and instantiation."""

    def test_names_keep_order(self, cipher_classes) -> None:
        catalog = CipherCatalog([cipher_classes["NARROW64"], cipher_classes["XOR128"]])
        assert catalog.names() == ["NARROW64", "XOR128"]
        assert len(catalog) == 2

    def test_instantiate_uses_synthesized_keys(self) -> None:
        RecordingKeyCipher.keys.clear()
        (handle,) = CipherCatalog([RecordingKeyCipher]).instantiate()
        assert isinstance(handle, RecordingKeyCipher)
        assert RecordingKeyCipher.keys == [b"\x01" * 24]

    def test_instantiate_variable_key(self, cipher_classes) -> None:
        (handle,) = CipherCatalog([cipher_classes["NARROW64"]]).instantiate()
        assert handle.name() == "NARROW64"

    def test_rejected_key_is_fatal(self) -> None:
        with pytest.raises(InvalidKeyError):
            CipherCatalog([PickyCipher]).instantiate()

    def test_wrong_key_length(self) -> None:
        with pytest.raises(InvalidKeyError):
            RecordingKeyCipher.from_key(bytes(16))

    def test_select_is_case_insensitive_and_ordered(self, cipher_classes) -> None:
        catalog = CipherCatalog(cipher_classes.values())
        selected = catalog.select(["narrow64", "xor128"])
        assert selected.names() == ["XOR128", "NARROW64"]

    def test_select_nothing_keeps_all(self, cipher_classes) -> None:
        catalog = CipherCatalog(cipher_classes.values())
        assert catalog.select([]) is catalog
