"""Tests for agile key derivation and package decryption."""

from __future__ import annotations

import os

import pytest

from builders import EncryptedDocument, hash_password, make_package
from ooxml_decrypt import (
    AgileCipher,
    CipherError,
    PasswordVerificationError,
    UnsupportedAlgorithm,
    hashCalc,
)

PASSWORD = "Password1234_"


@pytest.fixture(scope="module")
def document() -> EncryptedDocument:
    return EncryptedDocument(make_package(), PASSWORD, spin_count=50)


@pytest.fixture
def cipher() -> AgileCipher:
    return AgileCipher()


def _derive(cipher: AgileCipher, document: EncryptedDocument, password: str, verify: bool = True) -> bytes:
    verifier = {}
    if verify:
        verifier = {
            "encrypted_verifier_hash_input": document.encrypted_verifier_hash_input,
            "encrypted_verifier_hash_value": document.encrypted_verifier_hash_value,
        }
    return cipher.derive_key(
        password,
        document.password_salt,
        "SHA512",
        document.encrypted_key_value,
        document.spin_count,
        document.key_bits,
        **verifier,
    )


def test_hash_password_matches_reference(cipher: AgileCipher, document: EncryptedDocument) -> None:
    expected = hash_password(PASSWORD, document.password_salt, document.spin_count)

    assert cipher.hash_password(PASSWORD, document.password_salt, "SHA512", document.spin_count) == expected


def test_derive_key(cipher: AgileCipher, document: EncryptedDocument) -> None:
    assert _derive(cipher, document, PASSWORD) == document.secret_key


def test_derive_key_wrong_password_fails_verification(cipher: AgileCipher, document: EncryptedDocument) -> None:
    with pytest.raises(PasswordVerificationError):
        _derive(cipher, document, "wrong password")


def test_derive_key_without_verifier_returns_wrong_key(cipher: AgileCipher, document: EncryptedDocument) -> None:
    assert _derive(cipher, document, "wrong password", verify=False) != document.secret_key


def test_password_is_case_sensitive(cipher: AgileCipher, document: EncryptedDocument) -> None:
    with pytest.raises(PasswordVerificationError):
        _derive(cipher, document, PASSWORD.lower())


def test_block_key_is_truncated_to_key_size(cipher: AgileCipher) -> None:
    key = cipher.block_key(b"h" * 64, b"\x00" * 8, "SHA512", 128)

    assert len(key) == 16


def test_block_key_is_padded_when_hash_is_short(cipher: AgileCipher) -> None:
    key = cipher.block_key(b"h" * 20, b"\x00" * 8, "SHA-1", 256)

    assert len(key) == 32
    assert key.endswith(b"\x36" * 12)


def test_decrypt(cipher: AgileCipher, document: EncryptedDocument) -> None:
    decrypted = cipher.decrypt(document.secret_key, document.key_data_salt, "SHA512", document.encrypted_package)

    assert decrypted == document.package


def test_decrypt_multiple_segments(cipher: AgileCipher) -> None:
    package = make_package({"big.bin": os.urandom(10000)}, comment=b"x")
    document = EncryptedDocument(package, PASSWORD, spin_count=1)
    assert len(document.encrypted_package) > 8 + 4096

    decrypted = cipher.decrypt(document.secret_key, document.key_data_salt, "SHA512", document.encrypted_package)

    assert decrypted == package


def test_decrypt_rejects_short_payload(cipher: AgileCipher, document: EncryptedDocument) -> None:
    with pytest.raises(CipherError, match="too short"):
        cipher.decrypt(document.secret_key, document.key_data_salt, "SHA512", b"\x00" * 7)


def test_decrypt_rejects_unaligned_ciphertext(cipher: AgileCipher, document: EncryptedDocument) -> None:
    with pytest.raises(CipherError):
        cipher.decrypt(document.secret_key, document.key_data_salt, "SHA512", document.encrypted_package[:-3])


def test_decrypt_rejects_oversized_declaration(cipher: AgileCipher, document: EncryptedDocument) -> None:
    payload = (1 << 40).to_bytes(8, "little") + document.encrypted_package[8:]

    with pytest.raises(CipherError, match="exceeds"):
        cipher.decrypt(document.secret_key, document.key_data_salt, "SHA512", payload)


def test_decrypt_with_wrong_key_gives_garbage(cipher: AgileCipher, document: EncryptedDocument) -> None:
    decrypted = cipher.decrypt(bytes(32), document.key_data_salt, "SHA512", document.encrypted_package)

    assert decrypted != document.package


def test_unknown_hash_algorithm() -> None:
    with pytest.raises(UnsupportedAlgorithm):
        hashCalc(b"data", "WHIRLPOOL")

    assert issubclass(UnsupportedAlgorithm, CipherError)
