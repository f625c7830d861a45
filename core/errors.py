"""Exception taxonomy for settings storage.

Callers can catch `SettingsError` for everything raised by this project, or
one of the subclasses to react to a specific failure. Each subclass also
derives from the closest builtin so generic handlers keep working.
"""

from __future__ import annotations


class SettingsError(Exception):
    """Base class for all settings-store exceptions."""


class InvalidKeyPathError(SettingsError, TypeError):
    """A key path argument is missing or malformed."""


class StorageError(SettingsError, OSError):
    """The settings directory or file cannot be created, read, or written."""


class CodecError(SettingsError, ValueError):
    """Serialized settings data cannot be encoded, decrypted, or parsed."""


__all__ = [
    "SettingsError",
    "InvalidKeyPathError",
    "StorageError",
    "CodecError",
]
