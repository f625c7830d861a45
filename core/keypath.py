"""Key path parsing helpers.

A key path addresses a location inside the settings document using dot
notation, e.g. ``"window.size.width"``. A literal dot inside a key is
escaped with a backslash (``"hosts.example\\.com"``). Key paths may also be
given as lists or tuples whose elements are key paths themselves; they are
flattened left to right into one dotted string:

    flatten_key_path(["window", ["size", "width"]])  # "window.size.width"

Strings are treated as already escaped and are never modified here; the
escapes are interpreted by `split_key_path` when the path is walked.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Union

from core.errors import InvalidKeyPathError

KeyPath = Union[str, Sequence["KeyPath"]]

_DELIMITER = "."
_ESCAPE = "\\"


def is_key_path(value: Any) -> bool:
    """Return True if `value` is a string or a non-empty nested list of key paths."""
    if isinstance(value, str):
        return True
    if isinstance(value, (list, tuple)):
        return len(value) > 0 and all(is_key_path(item) for item in value)
    return False


def flatten_key_path(key_path: KeyPath) -> str:
    """Flatten a (possibly nested) key path into a single dotted string."""
    if isinstance(key_path, str):
        return key_path
    return _DELIMITER.join(flatten_key_path(item) for item in key_path)


def normalize_key_path(key_path: Any) -> str:
    """Validate `key_path` and return its canonical dotted form.

    Raises:
        InvalidKeyPathError: If `key_path` is not a string or a non-empty
            list/tuple made only of key paths.
    """
    if not is_key_path(key_path):
        raise InvalidKeyPathError(f"A valid key path must be provided, got {key_path!r}")
    return flatten_key_path(key_path)


def split_key_path(path: str) -> list[str]:
    """Split a canonical path on unescaped dots, unescaping ``\\.`` in segments.

    A backslash that does not precede a dot is kept as a literal character.
    """
    segments: list[str] = []
    buf: list[str] = []
    i = 0
    while i < len(path):
        ch = path[i]
        if ch == _ESCAPE and i + 1 < len(path) and path[i + 1] == _DELIMITER:
            buf.append(_DELIMITER)
            i += 2
            continue
        if ch == _DELIMITER:
            segments.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
        i += 1
    segments.append("".join(buf))
    return segments


def escape_key(key: str) -> str:
    """Escape literal dots so `key` addresses a single segment."""
    return key.replace(_DELIMITER, _ESCAPE + _DELIMITER)
