"""JSON settings file with key-path access.

`SettingsStore` owns one settings file. Every operation is a full
load -> (mutate -> save) cycle: the directory and file are (re)checked and
the document is re-read on each call, nothing is cached between calls.

Each operation comes in two flavours with identical results and errors:

    store = SettingsStore(dir="/tmp/demo", prettify=True)
    store.set_sync("window.size", {"width": 800})
    store.get_sync("window.size.width")      # 800

    await store.set("window.size.height", 600)
    await store.has("window.maximized")      # False

There is no locking. Concurrent mutations of the same file, from this or
another process, race and the last save wins.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from loguru import logger

from core.keypath import KeyPath, normalize_key_path
from core.models import StoreConfig
from core.services.interfaces import ISettingsCodec
from core.services.key_path_service import (
    delete_value_at_key_path,
    get_value_at_key_path,
    has_key_path,
    set_value_at_key_path,
)
from infrastructure.codec import SettingsCodec
from infrastructure.paths import default_user_data_dir
from infrastructure.utils import (
    atomic_write_bytes,
    ensure_directory,
    file_exists,
    read_bytes,
    write_bytes,
)


def _optional_key_path(key_path: Any) -> str | None:
    return None if key_path is None else normalize_key_path(key_path)


class SettingsStore:
    """Persistent JSON document addressed by key paths."""

    def __init__(
        self,
        config: StoreConfig | None = None,
        codec: ISettingsCodec | None = None,
        **options: Any,
    ) -> None:
        """Create a store.

        Args:
            config: Store options; built from `options` when omitted.
            codec: Document codec (defaults to `SettingsCodec(config)`).
            **options: `StoreConfig` fields (or their camelCase aliases),
                only allowed when `config` is not given.
        """
        if config is not None and options:
            raise TypeError("Pass either a StoreConfig or keyword options, not both")
        self._config = config or StoreConfig.from_options(**options)
        self._codec = codec or SettingsCodec(self._config)

    @property
    def config(self) -> StoreConfig:
        return self._config

    # ── Paths ───────────────────────────────────────────────────────

    def _dir_path(self) -> Path:
        cfg = self._config
        if cfg.dir is not None:
            return Path(cfg.dir)
        lookup = cfg.user_data_dir or default_user_data_dir
        return Path(lookup(cfg.app_name))

    def file(self) -> Path:
        """Return the absolute path of the settings file."""
        return (self._dir_path() / self._config.file_name).absolute()

    # ── Load / save cycle ───────────────────────────────────────────

    def _ensure_file(self) -> None:
        if not file_exists(self.file()):
            logger.debug("Initializing settings file: {}", self.file())
            self._save({})

    def _load(self) -> Any:
        self._ensure_file()
        return self._codec.decode(read_bytes(self.file()))

    def _save(self, document: Any) -> None:
        data = self._codec.encode(document)
        ensure_directory(self._dir_path())
        path = self.file()
        if self._config.atomic_save:
            atomic_write_bytes(path, data)
        else:
            write_bytes(path, data)
        logger.debug("Saved settings ({} bytes) to {}", len(data), path)

    # ── Operations on canonical paths ───────────────────────────────

    def _get(self, path: str | None, default: Any) -> Any:
        document = self._load()
        if path is None:
            return document
        return get_value_at_key_path(document, path, default)

    def _has(self, path: str) -> bool:
        return has_key_path(self._load(), path)

    def _set(self, path: str | None, value: Any) -> None:
        if path is None:
            self._save(value)
            return
        document = set_value_at_key_path(self._load(), path, value)
        self._save(document)

    def _delete(self, path: str) -> None:
        document = self._load()
        delete_value_at_key_path(document, path)
        self._save(document)

    # ── Blocking API ────────────────────────────────────────────────

    def get_sync(self, key_path: KeyPath | None = None, default: Any = None) -> Any:
        """Return the value at `key_path`, the whole document if omitted.

        Missing paths return `default`.
        """
        return self._get(_optional_key_path(key_path), default)

    def has_sync(self, key_path: KeyPath) -> bool:
        """Return True if a value (possibly None) is stored at `key_path`."""
        return self._has(normalize_key_path(key_path))

    def set_sync(self, key_path: KeyPath | None, value: Any) -> None:
        """Store `value` at `key_path`; `None` replaces the whole document."""
        self._set(_optional_key_path(key_path), value)

    def delete_sync(self, key_path: KeyPath) -> None:
        """Remove the value at `key_path`; missing paths are ignored."""
        self._delete(normalize_key_path(key_path))

    # ── Non-blocking API ────────────────────────────────────────────
    # Key paths are validated before any file work is scheduled.

    async def get(self, key_path: KeyPath | None = None, default: Any = None) -> Any:
        """Async counterpart of `get_sync`."""
        path = _optional_key_path(key_path)
        return await asyncio.to_thread(self._get, path, default)

    async def has(self, key_path: KeyPath) -> bool:
        """Async counterpart of `has_sync`."""
        path = normalize_key_path(key_path)
        return await asyncio.to_thread(self._has, path)

    async def set(self, key_path: KeyPath | None, value: Any) -> None:
        """Async counterpart of `set_sync`."""
        path = _optional_key_path(key_path)
        await asyncio.to_thread(self._set, path, value)

    async def delete(self, key_path: KeyPath) -> None:
        """Async counterpart of `delete_sync`."""
        path = normalize_key_path(key_path)
        await asyncio.to_thread(self._delete, path)
