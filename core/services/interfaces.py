"""Core service interfaces shared by the infrastructure layer."""

from __future__ import annotations

from typing import Any


class ISettingsCodec:
    """Interface for converting a settings document to and from stored bytes."""

    def encode(self, document: Any) -> bytes:
        """Serialize `document` into the bytes written to the settings file."""
        raise NotImplementedError

    def decode(self, data: bytes) -> Any:
        """Parse bytes read from the settings file back into a document."""
        raise NotImplementedError
