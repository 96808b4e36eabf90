"""Read single values out of a JSON document as text."""

from __future__ import annotations

import json
from typing import Any, Union

_Key = Union[str, int]


def _index(node: Any, key: _Key) -> Any:
    """Step into node by key; a missing member or element reads as null."""
    if node is None:
        return None
    if isinstance(key, str):
        if not isinstance(node, dict):
            raise TypeError(f"cannot use key {key!r} on {type(node).__name__}")
        return node.get(key)
    if not isinstance(node, list):
        raise TypeError(f"cannot use index {key} on {type(node).__name__}")
    if key < 0:
        raise IndexError(f"negative index {key}")
    return node[key] if key < len(node) else None


def _as_text(node: Any) -> str:
    """Return a string value as is and any other value as compact JSON."""
    if isinstance(node, str):
        return node
    return json.dumps(node, separators=(",", ":"), ensure_ascii=False)


class JsonDocument:
    """A parsed JSON document with lookups that return text."""

    def __init__(self, text: str) -> None:
        self._root = json.loads(text)

    def _lookup(self, *path: _Key) -> str:
        node = self._root
        for key in path:
            node = _index(node, key)
        return _as_text(node)

    def value_for(self, key: str) -> str:
        """Value of a top-level key: { "key": value }."""
        return self._lookup(key)

    def value_in(self, key: str, subkey: str) -> str:
        """Value of a nested key: { "key": { "subkey": value } }."""
        return self._lookup(key, subkey)

    def subvalue_for(self, key: str, pos: int) -> str:
        """Element of an array: { "key": [ value, ... ] }."""
        return self._lookup(key, pos)

    def subarray_value_in(self, key: str, pos: int, subkey: str) -> str:
        """Member of an object in an array: { "key": [ { "subkey": value } ] }."""
        return self._lookup(key, pos, subkey)


def make_json_string(text: str) -> JsonDocument:
    """Parse text into a JsonDocument."""
    return JsonDocument(text)