"""Password-based symmetric encryption for the settings file.

Key and IV are derived from the password with OpenSSL's `EVP_BytesToKey`
(MD5, one round, no salt), and data is encrypted in CBC mode with PKCS7
padding. The same password always yields the same IV, and the ciphertext
is not authenticated. Treat this as obfuscation of the file at rest, not as
confidentiality.
"""

from __future__ import annotations

from dataclasses import dataclass
import hashlib

from cryptography.hazmat.decrepit.ciphers.algorithms import CAST5
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from core.errors import CodecError


@dataclass(frozen=True)
class CipherSpec:
    """Block cipher parameters for a named algorithm."""

    name: str
    algorithm: type
    key_size: int
    block_size: int = 16


CIPHERS: dict[str, CipherSpec] = {
    spec.name: spec
    for spec in (
        CipherSpec("aes-128-cbc", algorithms.AES, 16),
        CipherSpec("aes-192-cbc", algorithms.AES, 24),
        CipherSpec("aes-256-cbc", algorithms.AES, 32),
        CipherSpec("camellia-128-cbc", algorithms.Camellia, 16),
        CipherSpec("camellia-192-cbc", algorithms.Camellia, 24),
        CipherSpec("camellia-256-cbc", algorithms.Camellia, 32),
        CipherSpec("cast5-cbc", CAST5, 16, block_size=8),
    )
}


def get_cipher_spec(name: str) -> CipherSpec:
    """Return the `CipherSpec` for `name` (case-insensitive)."""
    spec = CIPHERS.get(name.lower())
    if spec is None:
        supported = ", ".join(sorted(CIPHERS))
        raise CodecError(f"Unsupported encryption algorithm {name!r} (supported: {supported})")
    return spec


def derive_key_and_iv(password: bytes, key_size: int, iv_size: int) -> tuple[bytes, bytes]:
    """Derive a key and IV from `password` like OpenSSL `EVP_BytesToKey` with MD5."""
    derived = b""
    block = b""
    while len(derived) < key_size + iv_size:
        block = hashlib.md5(block + password).digest()
        derived += block
    return derived[:key_size], derived[key_size : key_size + iv_size]


def _to_bytes(password: str | bytes) -> bytes:
    return password.encode("utf-8") if isinstance(password, str) else bytes(password)


def _build_cipher(algorithm: str, password: str | bytes) -> tuple[Cipher, CipherSpec]:
    spec = get_cipher_spec(algorithm)
    key, iv = derive_key_and_iv(_to_bytes(password), spec.key_size, spec.block_size)
    return Cipher(spec.algorithm(key), modes.CBC(iv)), spec


def encrypt(data: bytes, algorithm: str, password: str | bytes) -> bytes:
    """Encrypt `data` with the named CBC cipher keyed by `password`."""
    cipher, spec = _build_cipher(algorithm, password)
    padder = padding.PKCS7(spec.block_size * 8).padder()
    padded = padder.update(data) + padder.finalize()
    encryptor = cipher.encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def decrypt(data: bytes, algorithm: str, password: str | bytes) -> bytes:
    """Decrypt `data` produced by `encrypt`.

    Raises:
        CodecError: If the ciphertext is truncated or the padding is invalid,
            which is what a wrong password usually produces.
    """
    cipher, spec = _build_cipher(algorithm, password)
    try:
        decryptor = cipher.decryptor()
        padded = decryptor.update(data) + decryptor.finalize()
        unpadder = padding.PKCS7(spec.block_size * 8).unpadder()
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as ex:
        raise CodecError(f"Failed to decrypt settings data: {ex}") from ex
