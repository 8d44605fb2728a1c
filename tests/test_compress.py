from tailcall.blueprint import (
    Blueprint,
    EnumTypeDefinition,
    EnumValueDefinition,
    FieldDefinition,
    InputFieldDefinition,
    InputObjectTypeDefinition,
    InterfaceTypeDefinition,
    ListType,
    NamedType,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    SchemaDefinition,
    UnionTypeDefinition,
)
from tailcall.compress import compress


def _blueprint(definitions):
    return Blueprint(definitions=definitions, schema=SchemaDefinition(query="Query"))


def _names(blueprint):
    return [d.name for d in blueprint.definitions]


def test_unreferenced_types_are_dropped():
    blueprint = _blueprint(
        [
            ObjectTypeDefinition("Query", fields=[FieldDefinition("user", NamedType("User"))]),
            ObjectTypeDefinition("User", fields=[FieldDefinition("id", NamedType("Int"))]),
            ObjectTypeDefinition("Orphan", fields=[FieldDefinition("id", NamedType("Int"))]),
        ]
    )
    assert _names(compress(blueprint)) == ["Query", "User"]


def test_order_is_preserved_and_input_untouched():
    definitions = [
        ObjectTypeDefinition("User"),
        ObjectTypeDefinition("Unused"),
        ObjectTypeDefinition("Query", fields=[FieldDefinition("users", ListType(NamedType("User")))]),
    ]
    blueprint = _blueprint(definitions)
    result = compress(blueprint)
    assert _names(result) == ["User", "Query"]
    assert len(blueprint.definitions) == 3


def test_arguments_interfaces_unions_enums_and_scalars_followed():
    query = ObjectTypeDefinition(
        "Query",
        fields=[
            FieldDefinition(
                "search",
                NamedType("Result"),
                args=[InputFieldDefinition("filter", NamedType("Filter"))],
            ),
            FieldDefinition("color", NamedType("Color")),
        ],
        implements={"Node"},
    )
    blueprint = _blueprint(
        [
            query,
            InterfaceTypeDefinition("Node", fields=[FieldDefinition("id", NamedType("Date"))]),
            InputObjectTypeDefinition("Filter"),
            UnionTypeDefinition("Result", types={"Post"}),
            ObjectTypeDefinition("Post"),
            EnumTypeDefinition("Color", enum_values=[EnumValueDefinition("RED")]),
            ScalarTypeDefinition("Date"),
            ScalarTypeDefinition("Unused"),
        ]
    )
    names = _names(compress(blueprint))
    assert "Unused" not in names
    assert set(names) == {"Query", "Node", "Filter", "Result", "Post", "Color", "Date"}


def test_root_types_always_kept():
    blueprint = _blueprint(
        [
            ObjectTypeDefinition("Mutation"),
            ObjectTypeDefinition("Subscription"),
            ObjectTypeDefinition("__Schema"),
            ObjectTypeDefinition("Other"),
        ]
    )
    assert _names(compress(blueprint)) == ["Mutation", "Subscription", "__Schema"]


def test_cycles_terminate():
    blueprint = _blueprint(
        [
            ObjectTypeDefinition("Query", fields=[FieldDefinition("a", NamedType("A"))]),
            ObjectTypeDefinition("A", fields=[FieldDefinition("b", NamedType("B"))]),
            ObjectTypeDefinition("B", fields=[FieldDefinition("a", NamedType("A"))]),
        ]
    )
    assert _names(compress(blueprint)) == ["Query", "A", "B"]


def test_compress_is_idempotent():
    blueprint = _blueprint(
        [
            ObjectTypeDefinition("Query", fields=[FieldDefinition("a", NamedType("A"))]),
            ObjectTypeDefinition("A"),
            ObjectTypeDefinition("Z"),
        ]
    )
    once = compress(blueprint)
    assert _names(compress(once)) == _names(once)