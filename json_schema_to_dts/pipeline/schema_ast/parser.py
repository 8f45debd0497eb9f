"""
Schema parser that builds the AST.

Classifies every definition and property node once, without resolving
references or doing any TypeScript-specific processing.
"""

from __future__ import annotations

import logging
from typing import Any

from .nodes import (
    ArrayNode,
    ComposedNode,
    DefinitionNode,
    EnumeratedStringNode,
    ObjectNode,
    PrimitiveNode,
    PrimitiveUnionNode,
    PropertyDef,
    RefNode,
    SchemaDocument,
    SchemaNode,
    StringEnumNode,
    UnknownNode,
)

logger = logging.getLogger(__name__)


class SchemaParser:
    """Parses a schema dictionary into a SchemaDocument."""

    def parse(self, schema: dict[str, Any]) -> SchemaDocument:
        """
        Parse a schema into its definitions.

        Args:
            schema: The JSON Schema dictionary

        Returns:
            SchemaDocument with definitions in declared order
        """
        document = SchemaDocument(raw_schema=schema)

        definitions = schema.get("definitions") or schema.get("$defs") or {}
        for name, def_schema in definitions.items():
            # Skip comment fields (strings) and _comment prefixed keys
            if not isinstance(def_schema, dict) or name.startswith("_comment"):
                logger.debug("Skipping non-definition entry %r", name)
                continue

            path = f"#/definitions/{name}"
            document.definitions.append(
                DefinitionNode(
                    name=name,
                    body=self._parse_definition_body(def_schema, path),
                    source_path=path,
                    description=def_schema.get("description"),
                )
            )

        return document

    def _parse_definition_body(self, schema: dict[str, Any], path: str) -> ComposedNode | EnumeratedStringNode | ObjectNode:
        """Classify a definition as composed, enumerated string or plain object."""
        if "allOf" in schema:
            return self._parse_allof_node(schema, path)

        if "enum" in schema:
            return EnumeratedStringNode(
                values=list(schema["enum"]),
                source_path=path,
                description=schema.get("description"),
            )

        return self._parse_object_node(schema, path)

    def _parse_allof_node(self, schema: dict[str, Any], path: str) -> ComposedNode:
        """Parse an allOf node (inheritance plus merged bodies)."""
        node = ComposedNode(source_path=path, description=schema.get("description"))

        for i, part in enumerate(schema["allOf"]):
            part_path = f"{path}/allOf/{i}"
            if not isinstance(part, dict):
                logger.debug("Ignoring non-object allOf entry at %s", part_path)
                continue
            if "$ref" in part:
                node.base_refs.append(RefNode(ref_path=part["$ref"], source_path=part_path))
            else:
                node.bodies.append(self._parse_object_node(part, part_path))

        if len(node.base_refs) > 1:
            logger.debug(
                "%s has %d supertype references, using %s",
                path,
                len(node.base_refs),
                node.base_refs[0].ref_path,
            )

        return node

    def _parse_object_node(self, schema: dict[str, Any], path: str) -> ObjectNode:
        """Parse an object body."""
        properties = []
        required_fields = schema.get("required") or []

        for prop_name, prop_schema in (schema.get("properties") or {}).items():
            prop_path = f"{path}/properties/{prop_name}"
            prop_node = self._parse_property_node(prop_schema, prop_path)
            properties.append(
                PropertyDef(
                    name=prop_name,
                    type_node=prop_node,
                    is_required=prop_name in required_fields,
                    source_path=prop_path,
                    description=prop_node.description,
                )
            )

        return ObjectNode(
            properties=properties,
            required=list(required_fields),
            source_path=path,
            description=schema.get("description"),
        )

    def _parse_property_node(self, schema: Any, path: str) -> SchemaNode:
        """
        Parse a property schema recursively.

        Args:
            schema: The property schema
            path: Current path in schema (for diagnostics)

        Returns:
            Appropriate SchemaNode subclass
        """
        if not isinstance(schema, dict):
            return UnknownNode(source_path=path)

        description = schema.get("description")

        if "$ref" in schema:
            return RefNode(ref_path=schema["$ref"], source_path=path, description=description)

        type_value = schema.get("type")

        # Handle array of types (union)
        if isinstance(type_value, list):
            if not type_value:
                return UnknownNode(raw=schema, source_path=path, description=description)
            # Single-element type array is not a union
            if len(type_value) == 1:
                type_value = type_value[0]
            else:
                return PrimitiveUnionNode(type_names=list(type_value), source_path=path, description=description)

        if type_value == "array":
            items_schema = schema.get("items")
            items = self._parse_property_node(items_schema, f"{path}/items") if items_schema is not None else None
            return ArrayNode(items=items, source_path=path, description=description)

        if type_value == "object":
            return self._parse_object_node(schema, path)

        if type_value == "string" and "enum" in schema:
            return StringEnumNode(values=list(schema["enum"]), source_path=path, description=description)

        if isinstance(type_value, str):
            return PrimitiveNode(type_name=type_value, source_path=path, description=description)

        return UnknownNode(raw=schema, source_path=path, description=description)
