"""Read and mutate values inside a JSON document by key path.

The document is a tree of dicts, lists and scalars as produced by
`json.loads`. Dict keys are addressed by name; list items are addressed by
a canonical non-negative integer segment (``"0"``, ``"12"``, not ``"01"``).
Missing paths are never an error when reading or deleting.
"""

from __future__ import annotations

from typing import Any

from core.keypath import split_key_path

_MISSING = object()


def _is_index(segment: str) -> bool:
    return segment.isascii() and segment.isdigit() and segment == str(int(segment))


def _list_index(node: list[Any], segment: str) -> int | None:
    """Return the existing list index named by `segment`, or None."""
    if not _is_index(segment):
        return None
    index = int(segment)
    return index if index < len(node) else None


def _can_hold(node: Any, segment: str) -> bool:
    """Return True if `segment` can be assigned into `node` without replacing it."""
    if isinstance(node, dict):
        return True
    return isinstance(node, list) and _is_index(segment)


def _child(node: Any, segment: str) -> Any:
    if isinstance(node, dict):
        return node.get(segment, _MISSING)
    if isinstance(node, list):
        index = _list_index(node, segment)
        return _MISSING if index is None else node[index]
    return _MISSING


def _assign(node: dict[str, Any] | list[Any], segment: str, value: Any) -> None:
    if isinstance(node, dict):
        node[segment] = value
        return
    index = int(segment)
    if index >= len(node):
        # Gaps become nulls, as holes in a JSON array do.
        node.extend([None] * (index + 1 - len(node)))
    node[index] = value


def _walk(root: Any, segments: list[str]) -> Any:
    node = root
    for segment in segments:
        node = _child(node, segment)
        if node is _MISSING:
            break
    return node


def get_value_at_key_path(root: Any, path: str, default: Any = None) -> Any:
    """Return the value at `path`, or `default` when any segment is missing."""
    value = _walk(root, split_key_path(path))
    return default if value is _MISSING else value


def has_key_path(root: Any, path: str) -> bool:
    """Return True if `path` resolves to a value, including None and falsy values."""
    return _walk(root, split_key_path(path)) is not _MISSING


def set_value_at_key_path(root: Any, path: str, value: Any) -> Any:
    """Assign `value` at `path`, creating intermediate dicts as needed.

    Intermediate segments that are missing or hold a scalar are replaced by an
    empty dict, and so is a list addressed by a non-index segment. Index
    segments past the end of a list pad it with None. The root is replaced
    the same way, so callers must use the returned root.

    Returns:
        The root of the updated document (the same object unless it had to
        be replaced).
    """
    segments = split_key_path(path)
    if not _can_hold(root, segments[0]):
        root = {}
    node = root
    for segment, next_segment in zip(segments, segments[1:]):
        child = _child(node, segment)
        if not _can_hold(child, next_segment):
            child = {}
            _assign(node, segment, child)
        node = child
    _assign(node, segments[-1], value)
    return root


def delete_value_at_key_path(root: Any, path: str) -> None:
    """Remove the value at `path`; a no-op when the path does not exist."""
    segments = split_key_path(path)
    parent = _walk(root, segments[:-1])
    leaf = segments[-1]
    if isinstance(parent, dict):
        parent.pop(leaf, None)
    elif isinstance(parent, list):
        index = _list_index(parent, leaf)
        if index is not None:
            del parent[index]
