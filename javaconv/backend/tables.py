"""Fixed Java -> Rust mappings: primitive types, operators, literal forms.

All tables are read-only for the life of the process.
"""

from __future__ import annotations

from types import MappingProxyType

from javaconv.backend.util import RenderError

PRIMITIVE_TYPES: MappingProxyType[str, str] = MappingProxyType(
    {
        "boolean": "bool",
        "byte": "i8",
        "char": "char",
        "double": "f64",
        "float": "f32",
        "int": "i32",
        "long": "i64",
        "short": "i16",
    }
)

# Rust has no unsigned right shift on signed integers: keep the signed spelling
# and leave the original operator in a comment.
BINARY_OPS: MappingProxyType[str, str] = MappingProxyType(
    {
        "||": "||",
        "&&": "&&",
        "|": "|",
        "&": "&",
        "^": "^",
        "==": "==",
        "!=": "!=",
        "<": "<",
        ">": ">",
        "<=": "<=",
        ">=": ">=",
        "<<": "<<",
        ">>": ">>",
        ">>>": ">> /* >>> */",
        "+": "+",
        "-": "-",
        "*": "*",
        "/": "/",
        "%": "%",
    }
)

ASSIGN_OPS: MappingProxyType[str, str] = MappingProxyType(
    {
        "=": "=",
        "&=": "&=",
        "|=": "|=",
        "^=": "^=",
        "+=": "+=",
        "-=": "-=",
        "%=": "%=",
        "/=": "/=",
        "*=": "*=",
        "<<=": "<<=",
        ">>=": ">>=",
        ">>>=": ">>= /* >>>= */",
    }
)

PREFIX_OPS: MappingProxyType[str, str] = MappingProxyType(
    {"+": "+", "-": "-", "~": "~", "!": "!", "++": "++", "--": "--"}
)

POSTFIX_OPS: MappingProxyType[str, str] = MappingProxyType({"++": "++", "--": "--"})

TEST_MARKER = "#[test]"
RESULT_TEMPLATE = "Result<{}>"

_LONG_SUFFIXES = ("l", "L")
_FLOAT_MARKERS = frozenset(".eExX")


def _lookup(table: MappingProxyType[str, str], key: str, what: str) -> str:
    try:
        return table[key]
    except KeyError:
        raise RenderError(f"unknown {what}: {key!r}") from None


def primitive_type(name: str) -> str:
    return _lookup(PRIMITIVE_TYPES, name, "primitive type")


def binary_op(op: str) -> str:
    return _lookup(BINARY_OPS, op, "binary operator")


def assign_op(op: str) -> str:
    return _lookup(ASSIGN_OPS, op, "assignment operator")


def unary_op(op: str, prefix: bool) -> str:
    if prefix:
        return _lookup(PREFIX_OPS, op, "prefix operator")
    return _lookup(POSTFIX_OPS, op, "postfix operator")


def _strip_plus_and_suffix(value: str) -> str:
    if value.startswith("+"):
        value = value[1:]
    if value.endswith(_LONG_SUFFIXES):
        value = value[:-1]
    return value


def integer_literal(value: str) -> str:
    """Integer and long literals: "+5L" -> "5"."""
    return _strip_plus_and_suffix(value)


def double_literal(value: str) -> str:
    """Floating literals, forced to floating form: "5" -> "5.0", "5L" -> "5.0"."""
    value = _strip_plus_and_suffix(value)
    if not any(c in _FLOAT_MARKERS for c in value):
        value += ".0"
    return value


def char_literal(value: str) -> str:
    return "'" + value + "'"


def string_literal(value: str) -> str:
    return '"' + value + '"'
