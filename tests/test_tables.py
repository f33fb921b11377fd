"""Type, operator and literal mapping tests."""

import pytest

from javaconv.backend.tables import (
    ASSIGN_OPS,
    BINARY_OPS,
    PRIMITIVE_TYPES,
    assign_op,
    binary_op,
    char_literal,
    double_literal,
    integer_literal,
    primitive_type,
    string_literal,
    unary_op,
)
from javaconv.backend.util import RenderError


def test_primitive_types():
    assert dict(PRIMITIVE_TYPES) == {
        "boolean": "bool",
        "byte": "i8",
        "char": "char",
        "double": "f64",
        "float": "f32",
        "int": "i32",
        "long": "i64",
        "short": "i16",
    }


def test_unknown_primitive_is_fatal():
    with pytest.raises(RenderError):
        primitive_type("integer")


@pytest.mark.parametrize(
    "value,expected",
    [("+5L", "5"), ("+5", "5"), ("42", "42"), ("7l", "7"), ("0x1F", "0x1F")],
)
def test_integer_literal(value: str, expected: str):
    assert integer_literal(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("5", "5.0"),
        ("5L", "5.0"),
        ("+3", "3.0"),
        ("1.5", "1.5"),
        ("1e10", "1e10"),
        ("2E-3", "2E-3"),
        ("0x1p3", "0x1p3"),
    ],
)
def test_double_literal(value: str, expected: str):
    assert double_literal(value) == expected


def test_char_and_string_literals_keep_content():
    assert char_literal("a") == "'a'"
    assert char_literal("\\n") == "'\\n'"
    assert string_literal('say \\"hi\\"') == '"say \\"hi\\""'


def test_unsigned_shift_is_annotated():
    assert binary_op(">>>") == ">> /* >>> */"
    assert assign_op(">>>=") == ">>= /* >>>= */"


def test_operator_tables_cover_java_operators():
    assert len(BINARY_OPS) == 19
    assert len(ASSIGN_OPS) == 12
    assert binary_op("&&") == "&&"
    assert assign_op("%=") == "%="


def test_unary_ops():
    assert unary_op("!", True) == "!"
    assert unary_op("~", True) == "~"
    assert unary_op("++", False) == "++"
    with pytest.raises(RenderError):
        unary_op("!", False)


def test_unknown_operator_is_fatal():
    with pytest.raises(RenderError):
        binary_op("**")
    with pytest.raises(RenderError):
        assign_op("**=")
