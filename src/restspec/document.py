# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Read-only document access.

The request parser only talks to ``DocumentNode``; ``JsonDocument`` adapts values
produced by ``json.loads`` (dicts, lists, strings, numbers, booleans, None). Other
tree implementations can be plugged in by providing the protocol methods. The
module-level helpers (``is_number``, ``is_boolean``, ``is_empty``, ``to_json``)
use a node's own method when it has one and derive the answer otherwise.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any, Protocol

_JSON_SCALARS = (str, int, float, bool)
_MISSING = object()


class DocumentNode(Protocol):
    """Minimal tree-access capability used by the request parser."""

    def get(self, key: str) -> DocumentNode | None: ...

    def is_null(self) -> bool: ...

    def is_object(self) -> bool: ...

    def is_array(self) -> bool: ...

    def as_text(self) -> str: ...

    def as_number(self, default: Any = None) -> Any: ...

    def as_boolean(self, default: Any = False) -> Any: ...

    def items(self) -> Iterator[tuple[str, DocumentNode]]: ...


class JsonDocument:
    """``DocumentNode`` over decoded JSON values."""

    __slots__ = ("_value",)

    def __init__(self, value: Any):
        self._value = value

    @classmethod
    def loads(cls, text: str | bytes) -> JsonDocument:
        return cls(json.loads(text))

    @property
    def value(self) -> Any:
        return self._value

    def get(self, key: str) -> JsonDocument | None:
        if not isinstance(self._value, dict) or key not in self._value:
            return None
        return JsonDocument(self._value[key])

    def is_null(self) -> bool:
        return self._value is None

    def is_object(self) -> bool:
        return isinstance(self._value, dict)

    def is_array(self) -> bool:
        return isinstance(self._value, (list, tuple))

    def is_number(self) -> bool:
        # bool is an int subclass but a distinct JSON type
        return isinstance(self._value, (int, float)) and not isinstance(self._value, bool)

    def is_boolean(self) -> bool:
        return isinstance(self._value, bool)

    def is_empty(self) -> bool:
        """True when the node has no child entries (always true for scalars)."""
        if isinstance(self._value, (dict, list, tuple)):
            return len(self._value) == 0
        return True

    def as_text(self) -> str:
        """
        Textual form of a scalar.

        Booleans and null use their JSON spelling; containers have no textual
        form and yield an empty string.
        """
        value = self._value
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)):
            return str(value)
        return ""

    def as_number(self, default: Any = None) -> Any:
        if self.is_number():
            return self._value
        return default

    def as_boolean(self, default: Any = False) -> Any:
        if isinstance(self._value, bool):
            return self._value
        return default

    def items(self) -> Iterator[tuple[str, JsonDocument]]:
        if not isinstance(self._value, dict):
            return iter(())
        return ((str(key), JsonDocument(value)) for key, value in self._value.items())

    def __iter__(self) -> Iterator[JsonDocument]:
        if not isinstance(self._value, (list, tuple)):
            return iter(())
        return (JsonDocument(value) for value in self._value)

    def to_json(self) -> str:
        return json.dumps(self._value, separators=(",", ":"), ensure_ascii=False)

    def __repr__(self) -> str:
        return f"JsonDocument({self._value!r})"


def as_document(value: Any) -> DocumentNode | None:
    """Wrap plain JSON values in ``JsonDocument``; anything else is used as a node."""
    if value is None:
        return None
    if isinstance(value, (dict, list, tuple) + _JSON_SCALARS):
        return JsonDocument(value)
    return value


def _own_method(node: Any, name: str) -> Any:
    method = getattr(node, name, None)
    return method if callable(method) else None


def is_boolean(node: DocumentNode) -> bool:
    own = _own_method(node, "is_boolean")
    if own is not None:
        return bool(own())
    return node.as_boolean(_MISSING) is not _MISSING


def is_number(node: DocumentNode) -> bool:
    own = _own_method(node, "is_number")
    if own is not None:
        return bool(own())
    if is_boolean(node):
        return False
    return node.as_number(_MISSING) is not _MISSING


def is_empty(node: DocumentNode) -> bool:
    own = _own_method(node, "is_empty")
    if own is not None:
        return bool(own())
    if node.is_object():
        return next(iter(node.items()), None) is None
    return True


def to_plain(node: DocumentNode) -> Any:
    """Rebuild the plain Python value a node stands for."""
    if node.is_null():
        return None
    if node.is_object():
        return {key: to_plain(child) for key, child in node.items()}
    if node.is_array():
        try:
            return [to_plain(child) for child in node]  # type: ignore[attr-defined]
        except TypeError:
            return []
    if is_boolean(node):
        return node.as_boolean(False)
    if is_number(node):
        return node.as_number()
    return node.as_text()


def to_json(node: DocumentNode) -> str:
    """Compact JSON text of a node."""
    own = _own_method(node, "to_json")
    if own is not None:
        return own()
    return json.dumps(to_plain(node), separators=(",", ":"), ensure_ascii=False)


__all__ = [
    "DocumentNode",
    "JsonDocument",
    "as_document",
    "is_boolean",
    "is_empty",
    "is_number",
    "to_json",
    "to_plain",
]
