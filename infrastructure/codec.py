"""JSON serialization of the settings document with optional encryption."""

from __future__ import annotations

import json
from typing import Any

from core.errors import CodecError
from core.models import StoreConfig
from core.services.interfaces import ISettingsCodec
from infrastructure.cipher import decrypt, encrypt, get_cipher_spec

_COMPACT_SEPARATORS = (",", ":")


class SettingsCodec(ISettingsCodec):
    """Encode/decode settings documents according to a `StoreConfig`.

    Output is compact JSON unless `prettify` is set with a positive
    `num_spaces`. When `encryption_key` is set the UTF-8 JSON bytes are
    encrypted with `encryption_algorithm`.
    """

    def __init__(self, config: StoreConfig) -> None:
        self._config = config
        if config.encryption_key:
            # Reject unknown algorithms up front.
            get_cipher_spec(config.encryption_algorithm)

    @property
    def encrypted(self) -> bool:
        return bool(self._config.encryption_key)

    def encode(self, document: Any) -> bytes:
        """Serialize `document` to JSON bytes, encrypting them if configured."""
        cfg = self._config
        indent = cfg.num_spaces if cfg.prettify and cfg.num_spaces > 0 else None
        try:
            text = json.dumps(
                document,
                indent=indent,
                separators=None if indent else _COMPACT_SEPARATORS,
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError) as ex:
            raise CodecError(f"Settings document is not JSON serializable: {ex}") from ex
        data = text.encode("utf-8")
        if self.encrypted:
            data = encrypt(data, cfg.encryption_algorithm, cfg.encryption_key)
        return data

    def decode(self, data: bytes) -> Any:
        """Parse bytes read from disk, decrypting them first if configured."""
        cfg = self._config
        if self.encrypted:
            data = decrypt(data, cfg.encryption_algorithm, cfg.encryption_key)
        try:
            return json.loads(data.decode("utf-8"))
        except ValueError as ex:
            raise CodecError(f"Settings data is not valid JSON: {ex}") from ex
