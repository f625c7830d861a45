"""Core domain models for settings store configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable


DEFAULT_FILE_NAME = "settings.json"
DEFAULT_ENCRYPTION_ALGORITHM = "aes-256-cbc"
DEFAULT_APP_NAME = "keypath-settings"

# Option names accepted by `StoreConfig.from_options` besides the field names.
_OPTION_ALIASES = {
    "fileName": "file_name",
    "atomicSave": "atomic_save",
    "numSpaces": "num_spaces",
    "encryptionAlgorithm": "encryption_algorithm",
    "encryptionKey": "encryption_key",
    "appName": "app_name",
    "userDataDir": "user_data_dir",
}


@dataclass(frozen=True)
class StoreConfig:
    """Immutable options of a single settings store.

    Attributes:
        dir: Storage directory; `None` resolves to the user data directory.
        file_name: Name of the settings file inside `dir`.
        atomic_save: Write through a temporary file and rename it into place.
        prettify: Indent the JSON output by `num_spaces`.
        num_spaces: Indent width used when `prettify` is set.
        encryption_algorithm: Cipher name used when `encryption_key` is set.
        encryption_key: Password enabling at-rest encryption.
        app_name: Application name passed to the user data directory lookup.
        user_data_dir: Callable `(app_name) -> path` overriding the platform lookup.
    """

    dir: str | Path | None = None
    file_name: str = DEFAULT_FILE_NAME
    atomic_save: bool = True
    prettify: bool = False
    num_spaces: int = 2
    encryption_algorithm: str = DEFAULT_ENCRYPTION_ALGORITHM
    encryption_key: str | bytes | None = None
    app_name: str = DEFAULT_APP_NAME
    user_data_dir: Callable[[str], str | Path] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.file_name:
            raise ValueError("file_name must not be empty")
        if self.num_spaces < 0:
            raise ValueError(f"num_spaces must be >= 0, got {self.num_spaces}")

    @classmethod
    def from_options(cls, **options: Any) -> StoreConfig:
        """Build a config from keyword options, accepting camelCase aliases."""
        kwargs: dict[str, Any] = {}
        for name, value in options.items():
            kwargs[_OPTION_ALIASES.get(name, name)] = value
        return cls(**kwargs)
