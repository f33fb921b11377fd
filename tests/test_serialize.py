"""JSON tree interchange tests."""

import pytest

from javaconv import convert
from javaconv.ast import (
    ClassOrInterfaceDeclaration,
    FieldDeclaration,
    LineComment,
    Pos,
    PrimitiveType,
    VariableDeclarator,
    VariableDeclaratorId,
)
from javaconv.serialize import SerializeError, from_dict, to_dict

FIELD_JSON = {
    "kind": "FieldDeclaration",
    "modifiers": ["static", "private"],
    "typ": {"kind": "PrimitiveType", "name": "int"},
    "variables": [
        {
            "kind": "VariableDeclarator",
            "id": {"kind": "VariableDeclaratorId", "name": "x"},
            "init": {"kind": "IntegerLiteralExpr", "value": "5"},
        }
    ],
}


def test_from_dict_builds_nodes():
    node = from_dict(FIELD_JSON)
    assert isinstance(node, FieldDeclaration)
    assert node.modifiers == frozenset({"private", "static"})
    assert isinstance(node.typ, PrimitiveType)
    assert node.variables[0].id.name == "x"


def test_convert_renders_json():
    assert convert(FIELD_JSON) == "private static i32 x = 5;"


def test_to_dict_omits_empty_metadata():
    node = FieldDeclaration(PrimitiveType("int"), [VariableDeclarator(VariableDeclaratorId("x"))])
    assert to_dict(node) == {
        "kind": "FieldDeclaration",
        "typ": {"kind": "PrimitiveType", "name": "int"},
        "variables": [
            {
                "kind": "VariableDeclarator",
                "id": {"kind": "VariableDeclaratorId", "name": "x"},
                "init": None,
            }
        ],
    }


def test_dict_form_preserves_tree():
    node = ClassOrInterfaceDeclaration(
        name="A",
        pos=Pos(1, 1),
        modifiers=frozenset({"public", "final"}),
        orphan_comments=[LineComment(" x", pos=Pos(2, 5))],
        comment=LineComment(" doc"),
    )
    data = to_dict(node)
    assert data["pos"] == [1, 1]
    assert data["modifiers"] == ["final", "public"]
    assert from_dict(data) == node


def test_unknown_kind():
    with pytest.raises(SerializeError, match=r"\$: unknown node kind 'Frob'"):
        from_dict({"kind": "Frob"})


def test_missing_kind():
    with pytest.raises(SerializeError, match="unknown node kind None"):
        from_dict({"name": "x"})


def test_abstract_kind_rejected():
    with pytest.raises(SerializeError):
        from_dict({"kind": "Expression"})


def test_unknown_field_reports_path():
    data = {
        "kind": "ReturnStmt",
        "expr": {"kind": "NameExpr", "name": "x", "colour": "red"},
    }
    with pytest.raises(SerializeError) as exc:
        from_dict(data)
    assert exc.value.path == "$.expr"
    assert "colour" in exc.value.msg


def test_missing_required_field():
    with pytest.raises(SerializeError, match="NameExpr"):
        from_dict({"kind": "NameExpr"})


def test_bad_position():
    with pytest.raises(SerializeError, match="pos must be"):
        from_dict({"kind": "EmptyStmt", "pos": [1]})


def test_bad_modifiers():
    with pytest.raises(SerializeError, match="modifiers"):
        from_dict({**FIELD_JSON, "modifiers": "static"})


def test_list_item_path():
    data = {"kind": "BlockStmt", "stmts": [{"kind": "EmptyStmt"}, {"kind": "Nope"}]}
    with pytest.raises(SerializeError) as exc:
        from_dict(data)
    assert exc.value.path == "$.stmts[1]"


def test_root_must_be_object():
    with pytest.raises(SerializeError, match="expected a node object, got list"):
        from_dict([])


def test_scalar_type_is_checked():
    with pytest.raises(SerializeError) as exc:
        from_dict({"kind": "NameExpr", "name": 5})
    assert exc.value.path == "$.name"
    assert exc.value.msg == "expected str, got number"


def test_boolean_literal_needs_a_boolean():
    with pytest.raises(SerializeError, match=r"\$\.value: expected bool, got string"):
        from_dict({"kind": "BooleanLiteralExpr", "value": "false"})
    assert from_dict({"kind": "BooleanLiteralExpr", "value": False}).value is False


def test_node_kind_is_checked_against_field():
    with pytest.raises(SerializeError) as exc:
        from_dict({"kind": "ReturnStmt", "expr": {"kind": "BlockStmt"}})
    assert exc.value.path == "$.expr"
    assert exc.value.msg == "expected Expression, got BlockStmt"


def test_list_items_are_checked():
    data = {"kind": "BlockStmt", "stmts": [{"kind": "NameExpr", "name": "x"}]}
    with pytest.raises(SerializeError) as exc:
        from_dict(data)
    assert exc.value.path == "$.stmts[0]"
    assert exc.value.msg == "expected Statement, got NameExpr"


def test_list_field_needs_a_list():
    with pytest.raises(SerializeError, match=r"\$\.stmts: expected a list, got object"):
        from_dict({"kind": "BlockStmt", "stmts": {"kind": "EmptyStmt"}})


def test_null_only_where_optional():
    assert from_dict({"kind": "ReturnStmt", "expr": None}).expr is None
    with pytest.raises(SerializeError, match=r"\$\.name: expected str, got null"):
        from_dict({"kind": "NameExpr", "name": None})


def test_union_field_names_every_option():
    data = {
        "kind": "CatchClause",
        "param": {"kind": "NameExpr", "name": "e"},
        "body": {"kind": "BlockStmt"},
    }
    with pytest.raises(SerializeError) as exc:
        from_dict(data)
    assert exc.value.path == "$.param"
    assert exc.value.msg == "expected Parameter or MultiTypeParameter, got NameExpr"


def test_position_rejects_booleans():
    with pytest.raises(SerializeError, match="pos must be"):
        from_dict({"kind": "EmptyStmt", "pos": [True, 1]})
