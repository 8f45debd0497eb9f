"""
AST node definitions for the schema document.

Each node kind is a closed variant built once by the parser, so renderers
dispatch on the node class instead of re-inspecting schema fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SchemaNode:
    """Base class for all AST nodes."""

    # Original source location in schema (for diagnostics)
    source_path: str = ""

    # Documentation attached to the node, if any
    description: str | None = None


@dataclass
class RefNode(SchemaNode):
    """Represents a $ref pointer (unresolved)."""

    ref_path: str = ""  # e.g., "#/definitions/Request"


@dataclass
class PrimitiveNode(SchemaNode):
    """Represents a single primitive type name."""

    type_name: str = ""  # "string", "integer", "boolean", "number", ...


@dataclass
class StringEnumNode(SchemaNode):
    """Represents an inline string enum (type string plus enum values)."""

    values: list[Any] = field(default_factory=list)


@dataclass
class ArrayNode(SchemaNode):
    """Represents an array type."""

    items: SchemaNode | None = None


@dataclass
class PrimitiveUnionNode(SchemaNode):
    """Represents a type array such as ["string", "integer"]."""

    type_names: list[str] = field(default_factory=list)


@dataclass
class UnknownNode(SchemaNode):
    """A property shape outside the supported subset; rendered as pass-through."""

    raw: dict[str, Any] = field(default_factory=dict)


@dataclass
class PropertyDef(SchemaNode):
    """Represents a property in an object."""

    name: str = ""
    type_node: SchemaNode | None = None
    is_required: bool = False


@dataclass
class ObjectNode(SchemaNode):
    """An object body: a top-level definition or an anonymous inline object."""

    properties: list[PropertyDef] = field(default_factory=list)
    required: list[str] = field(default_factory=list)


@dataclass
class EnumeratedStringNode(SchemaNode):
    """A definition that is a union of string literals."""

    values: list[Any] = field(default_factory=list)


@dataclass
class ComposedNode(SchemaNode):
    """A definition built with allOf: supertype reference(s) plus object bodies."""

    base_refs: list[RefNode] = field(default_factory=list)
    bodies: list[ObjectNode] = field(default_factory=list)

    @property
    def base_ref(self) -> RefNode | None:
        """The supertype reference; the first one wins."""
        return self.base_refs[0] if self.base_refs else None


@dataclass
class DefinitionNode(SchemaNode):
    """Represents a named entry in the definitions section."""

    name: str = ""
    body: ComposedNode | EnumeratedStringNode | ObjectNode | None = None


@dataclass
class SchemaDocument:
    """Root of the parsed schema: the definitions in declared order."""

    definitions: list[DefinitionNode] = field(default_factory=list)

    # Raw schema for reference
    raw_schema: dict[str, Any] = field(default_factory=dict)

    def get(self, name: str) -> DefinitionNode | None:
        for definition in self.definitions:
            if definition.name == name:
                return definition
        return None
