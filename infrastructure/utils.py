"""Filesystem helpers for the settings file.

Directory bootstrap and whole-file writes live here so the store only deals
with documents. Failures are wrapped in `StorageError` with the offending
path in the message; the original `OSError` is kept as `__cause__`.
"""

from __future__ import annotations

import os
from pathlib import Path
import stat
import uuid

from loguru import logger

from core.errors import StorageError

_NEW_FILE_MODE = 0o666


def ensure_directory(dir_path: str | Path) -> None:
    """Create `dir_path` and missing ancestors if it does not exist yet."""
    path = Path(dir_path)
    try:
        path.stat()
        return
    except FileNotFoundError:
        pass
    except OSError as ex:
        raise StorageError(f"Cannot access settings directory {path}: {ex}") from ex

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as ex:
        raise StorageError(f"Cannot create settings directory {path}: {ex}") from ex
    logger.debug("Created settings directory: {}", path)


def file_exists(file_path: str | Path) -> bool:
    """Return True if `file_path` exists; other stat failures raise `StorageError`."""
    path = Path(file_path)
    try:
        path.stat()
    except FileNotFoundError:
        return False
    except OSError as ex:
        raise StorageError(f"Cannot access settings file {path}: {ex}") from ex
    return True


def read_bytes(file_path: str | Path) -> bytes:
    """Read the whole file at `file_path`."""
    path = Path(file_path)
    try:
        return path.read_bytes()
    except OSError as ex:
        raise StorageError(f"Cannot read settings file {path}: {ex}") from ex


def write_bytes(file_path: str | Path, data: bytes) -> None:
    """Overwrite `file_path` in place with `data`."""
    path = Path(file_path)
    try:
        path.write_bytes(data)
    except OSError as ex:
        raise StorageError(f"Cannot write settings file {path}: {ex}") from ex


def atomic_write_bytes(file_path: str | Path, data: bytes) -> None:
    """Write `data` to a temp file next to `file_path`, then rename it into place.

    Readers see either the previous file or the complete new one. The mode of
    an existing target is carried over to the replacement; a new file gets
    `0o666` minus the umask, like a plain write.
    """
    path = Path(file_path)
    tmp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")
    try:
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, _NEW_FILE_MODE)
    except OSError as ex:
        raise StorageError(f"Cannot create temporary file for {path}: {ex}") from ex

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        try:
            os.chmod(tmp_path, stat.S_IMODE(path.stat().st_mode))
        except FileNotFoundError:
            pass
        os.replace(tmp_path, path)
    except OSError as ex:
        try:
            tmp_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as cleanup_ex:
            logger.warning("Failed to remove temporary file {}: {}", tmp_path, cleanup_ex)
        raise StorageError(f"Cannot write settings file {path}: {ex}") from ex
