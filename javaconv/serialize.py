"""JSON interchange for syntax trees.

The external front-end hands trees over as JSON documents. Each node is an
object with a "kind" discriminant (the node class name) and its fields by
name; "pos" is an optional [line, col] pair, "modifiers" a list of keywords.
Fields left out take their defaults. Every value is checked against the
annotation of its field, so a malformed document fails here rather than
during rendering.
"""

from __future__ import annotations

from dataclasses import fields
from types import NoneType, UnionType
from typing import Union, get_args, get_origin, get_type_hints

from .ast import NODE_KINDS, Node, Pos


class SerializeError(ValueError):
    """Malformed tree document, with the JSON path of the offending value."""

    def __init__(self, msg: str, path: str):
        self.msg: str = msg
        self.path: str = path
        super().__init__(f"{path}: {msg}")


# --- Node -> dict ---


def to_dict(node: Node) -> dict[str, object]:
    """Convert a node and its subtree to JSON-compatible dicts."""
    d: dict[str, object] = {"kind": type(node).__name__}
    if node.pos is not None:
        d["pos"] = [node.pos.line, node.pos.col]
    for f in fields(node):
        if f.name == "pos":
            continue
        value = getattr(node, f.name)
        if f.name == "comment" and value is None:
            continue
        if f.name in ("orphan_comments", "annotations", "modifiers") and not value:
            continue
        d[f.name] = _value_to_json(value)
    return d


def _value_to_json(value: object) -> object:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, list):
        return [_value_to_json(v) for v in value]
    if isinstance(value, frozenset):
        return sorted(value)
    return value


# --- dict -> Node ---


_HINTS: dict[type, dict[str, object]] = {}


def _field_hints(cls: type[Node]) -> dict[str, object]:
    hints = _HINTS.get(cls)
    if hints is None:
        hints = get_type_hints(cls)
        _HINTS[cls] = hints
    return hints


def from_dict(data: object, path: str = "$") -> Node:
    """Build a node from its JSON-decoded form. Raises SerializeError."""
    if not isinstance(data, dict):
        raise SerializeError(f"expected a node object, got {_json_name(data)}", path)
    kind = data.get("kind")
    cls = NODE_KINDS.get(kind) if isinstance(kind, str) else None
    if cls is None:
        raise SerializeError(f"unknown node kind {kind!r}", path)
    hints = _field_hints(cls)
    known = {f.name for f in fields(cls)}
    kwargs: dict[str, object] = {}
    for key, value in data.items():
        if key == "kind":
            continue
        if key not in known:
            raise SerializeError(f"unknown field {key!r} for {kind}", path)
        kwargs[key] = _value_from_json(key, value, hints[key], path + "." + key)
    try:
        return cls(**kwargs)
    except TypeError as e:
        raise SerializeError(f"{kind}: {e}", path) from None


def _value_from_json(key: str, value: object, hint: object, path: str) -> object:
    """Check `value` against the field annotation `hint` and convert it."""
    origin = get_origin(hint)
    if origin is Union or origin is UnionType:
        options = [a for a in get_args(hint) if a is not NoneType]
        if value is None:
            if len(options) < len(get_args(hint)):
                return None
            raise SerializeError(f"expected {_describe(hint)}, got null", path)
        if len(options) == 1:
            return _value_from_json(key, value, options[0], path)
        node = from_dict(value, path)
        if not isinstance(node, tuple(options)):
            raise SerializeError(
                f"expected {_describe(hint)}, got {type(node).__name__}", path
            )
        return node
    if key == "pos":
        if (
            not isinstance(value, list)
            or len(value) != 2
            or not all(_is_int(v) for v in value)
        ):
            raise SerializeError("pos must be [line, col]", path)
        return Pos(value[0], value[1])
    if key == "modifiers":
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise SerializeError("modifiers must be a list of keywords", path)
        return frozenset(value)
    if origin is list:
        if not isinstance(value, list):
            raise SerializeError(f"expected a list, got {_json_name(value)}", path)
        (item,) = get_args(hint)
        return [
            _value_from_json(key, v, item, f"{path}[{i}]") for i, v in enumerate(value)
        ]
    if isinstance(hint, type) and issubclass(hint, Node):
        node = from_dict(value, path)
        if not isinstance(node, hint):
            raise SerializeError(
                f"expected {hint.__name__}, got {type(node).__name__}", path
            )
        return node
    if hint is bool:
        ok = isinstance(value, bool)
    elif hint is int:
        ok = _is_int(value)
    elif hint is str:
        ok = isinstance(value, str)
    else:
        raise SerializeError(f"unsupported field type {_describe(hint)}", path)
    if not ok:
        raise SerializeError(
            f"expected {_describe(hint)}, got {_json_name(value)}", path
        )
    return value


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _describe(hint: object) -> str:
    if get_origin(hint) is Union or get_origin(hint) is UnionType:
        return " or ".join(_describe(a) for a in get_args(hint) if a is not NoneType)
    if get_origin(hint) is list:
        return "a list"
    return getattr(hint, "__name__", str(hint))


def _json_name(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "list"
    return "object"
