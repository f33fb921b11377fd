"""Identifier rewriting tests."""

import pytest

from javaconv.backend.util import NAME_MAP, to_snake


@pytest.mark.parametrize(
    "name,expected",
    [
        ("camelCaseName", "camel_case_name"),
        ("value", "value"),
        ("getURL", "get_u_r_l"),
        ("x1Y2", "x1_y2"),
        ("AlreadyCapitalized", "AlreadyCapitalized"),
        ("CONSTANT_NAME", "CONSTANT_NAME"),
        ("_private", "_private"),
        ("", ""),
    ],
)
def test_to_snake(name: str, expected: str):
    assert to_snake(name) == expected


@pytest.mark.parametrize(
    "name,expected",
    [
        ("NaN", "NAN"),
        ("NEGATIVE_INFINITY", "NEG_INFINITY"),
        ("POSITIVE_INFINITY", "INFINITY"),
        ("MIN_VALUE", "MIN"),
        ("MAX_VALUE", "MAX"),
    ],
)
def test_special_names_win(name: str, expected: str):
    assert to_snake(name) == expected


def test_name_table_is_read_only():
    assert len(NAME_MAP) == 5
    with pytest.raises(TypeError):
        NAME_MAP["Foo"] = "Bar"  # type: ignore[index]
