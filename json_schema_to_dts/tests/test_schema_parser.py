from json_schema_to_dts.pipeline.schema_ast import (
    ArrayNode,
    ComposedNode,
    EnumeratedStringNode,
    ObjectNode,
    PrimitiveNode,
    PrimitiveUnionNode,
    RefNode,
    SchemaParser,
    StringEnumNode,
    UnknownNode,
)

SCHEMA = {
    "definitions": {
        "_comment": "not a definition",
        "Base": {"type": "object", "properties": {"id": {"type": "integer"}}, "required": ["id"]},
        "Kind": {"type": "string", "enum": ["a", "b"], "description": "Kinds."},
        "Derived": {
            "allOf": [
                {"type": "object", "properties": {"first": {"type": "string"}}},
                {"$ref": "#/definitions/Base"},
                {"$ref": "#/definitions/Other"},
                {"type": "object", "properties": {"second": {"type": "string"}}, "required": ["second"]},
            ]
        },
        "Everything": {
            "type": "object",
            "properties": {
                "ref": {"$ref": "#/definitions/Kind"},
                "list": {"type": "array", "items": {"type": "string"}},
                "obj": {"type": "object", "properties": {}},
                "lit": {"type": "string", "enum": ["x"]},
                "union": {"type": ["string", "null"]},
                "prim": {"type": "boolean", "description": "A flag."},
                "unknown": {"oneOf": [{"type": "string"}]},
            },
        },
    }
}


class TestSchemaParser:
    def setup_method(self):
        self.document = SchemaParser().parse(SCHEMA)

    def test_definitions_in_declared_order(self):
        assert [d.name for d in self.document.definitions] == ["Base", "Kind", "Derived", "Everything"]

    def test_definition_classification(self):
        assert isinstance(self.document.get("Base").body, ObjectNode)
        assert isinstance(self.document.get("Kind").body, EnumeratedStringNode)
        assert isinstance(self.document.get("Derived").body, ComposedNode)

    def test_enum_definition(self):
        kind = self.document.get("Kind")
        assert kind.body.values == ["a", "b"]
        assert kind.body.description == "Kinds."

    def test_composed_first_reference_wins(self):
        derived = self.document.get("Derived").body
        assert derived.base_ref.ref_path == "#/definitions/Base"
        assert [r.ref_path for r in derived.base_refs] == ["#/definitions/Base", "#/definitions/Other"]
        assert [[p.name for p in body.properties] for body in derived.bodies] == [["first"], ["second"]]

    def test_required_is_relative_to_owning_body(self):
        first, second = self.document.get("Derived").body.bodies
        assert not first.properties[0].is_required
        assert second.properties[0].is_required

    def test_property_classification(self):
        props = {p.name: p for p in self.document.get("Everything").body.properties}
        assert isinstance(props["ref"].type_node, RefNode)
        assert isinstance(props["list"].type_node, ArrayNode)
        assert isinstance(props["list"].type_node.items, PrimitiveNode)
        assert isinstance(props["obj"].type_node, ObjectNode)
        assert isinstance(props["lit"].type_node, StringEnumNode)
        assert isinstance(props["union"].type_node, PrimitiveUnionNode)
        assert props["union"].type_node.type_names == ["string", "null"]
        assert isinstance(props["prim"].type_node, PrimitiveNode)
        assert isinstance(props["unknown"].type_node, UnknownNode)

    def test_property_description(self):
        props = {p.name: p for p in self.document.get("Everything").body.properties}
        assert props["prim"].description == "A flag."
        assert props["ref"].description is None

    def test_defs_section_fallback(self):
        document = SchemaParser().parse({"$defs": {"A": {"type": "object"}}})
        assert [d.name for d in document.definitions] == ["A"]

    def test_no_definitions(self):
        assert SchemaParser().parse({}).definitions == []
