"""Tests for infrastructure.cipher."""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
import pytest

from core.errors import CodecError
from infrastructure.cipher import CIPHERS, decrypt, derive_key_and_iv, encrypt, get_cipher_spec

MD5_PASSWORD = bytes.fromhex("5f4dcc3b5aa765d61d8327deb882cf99")


class TestDeriveKeyAndIv:
    def test_first_block_is_md5_of_password(self):
        key, iv = derive_key_and_iv(b"password", 16, 0)
        assert key == MD5_PASSWORD
        assert iv == b""

    def test_splits_key_and_iv(self):
        key, iv = derive_key_and_iv(b"password", 8, 8)
        assert key == MD5_PASSWORD[:8]
        assert iv == MD5_PASSWORD[8:]

    def test_sizes(self):
        key, iv = derive_key_and_iv(b"secret", 32, 16)
        assert len(key) == 32
        assert len(iv) == 16
        assert key[:16] != iv

    def test_deterministic(self):
        assert derive_key_and_iv(b"secret", 32, 16) == derive_key_and_iv(b"secret", 32, 16)


class TestCipherSpec:
    def test_lookup_is_case_insensitive(self):
        assert get_cipher_spec("AES-256-CBC").key_size == 32

    def test_unknown(self):
        with pytest.raises(CodecError, match="Unsupported encryption algorithm"):
            get_cipher_spec("rot13")


class TestEncryptDecrypt:
    @pytest.mark.parametrize("name", sorted(CIPHERS))
    def test_round_trip(self, name):
        data = '{"foo":"bär"}'.encode("utf-8")
        encrypted = encrypt(data, name, "secret")
        assert encrypted != data
        assert len(encrypted) % get_cipher_spec(name).block_size == 0
        assert decrypt(encrypted, name, "secret") == data

    def test_cast5_uses_eight_byte_blocks(self):
        spec = get_cipher_spec("cast5-cbc")
        assert (spec.key_size, spec.block_size) == (16, 8)
        encrypted = encrypt(b'{"foo":"bar"}', "cast5-cbc", "secret")
        assert len(encrypted) == 16
        assert decrypt(encrypted, "cast5-cbc", "secret") == b'{"foo":"bar"}'

    def test_same_key_same_ciphertext(self):
        assert encrypt(b"{}", "aes-256-cbc", "k") == encrypt(b"{}", "aes-256-cbc", "k")

    def test_str_and_bytes_keys_match(self):
        assert encrypt(b"{}", "aes-256-cbc", "k") == encrypt(b"{}", "aes-256-cbc", b"k")

    def test_matches_openssl_construction(self):
        encrypted = encrypt(b'{"foo":"bar"}', "aes-256-cbc", "secret")
        key, iv = derive_key_and_iv(b"secret", 32, 16)
        decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(encrypted) + decryptor.finalize()
        assert padded == b'{"foo":"bar"}' + bytes([3]) * 3

    def test_truncated_ciphertext(self):
        encrypted = encrypt(b'{"foo":"bar"}', "aes-256-cbc", "secret")
        with pytest.raises(CodecError):
            decrypt(encrypted[:-1], "aes-256-cbc", "secret")
