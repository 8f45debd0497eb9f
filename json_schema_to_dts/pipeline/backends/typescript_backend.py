"""
TypeScript declaration backend.

Renders definitions as `export interface` blocks and `export type`
literal unions, and maps property nodes to TypeScript type expressions.
"""

from __future__ import annotations

import logging
from typing import Any

from ..analyzer.reference_resolver import ReferenceResolver
from ..config import GeneratorConfig
from ..schema_ast.nodes import (
    ArrayNode,
    ComposedNode,
    DefinitionNode,
    EnumeratedStringNode,
    ObjectNode,
    PrimitiveNode,
    PrimitiveUnionNode,
    PropertyDef,
    RefNode,
    SchemaNode,
    StringEnumNode,
)
from .base import DeclarationBackend
from .block_writer import BlockWriter
from .comment_formatter import format_comment

logger = logging.getLogger(__name__)


def literal_union(values: list[Any]) -> str:
    """Join quoted literals with " | " in order, keeping duplicates."""
    if not values:
        return "never"
    return " | ".join(f"'{v}'" for v in values)


class TypeScriptBackend(DeclarationBackend):
    """Backend producing TypeScript declaration files."""

    # integer and number both become number
    TYPE_MAP = {
        "integer": "number",
        "string": "string",
    }

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "d.ts"

    # Rendered for shapes outside the supported subset
    FALLBACK_TYPE = "any"

    def __init__(self, config: GeneratorConfig):
        super().__init__(config)
        self.resolver = ReferenceResolver()

    def module_header(self, module_name: str) -> str:
        return f"export {self.config.module_keyword} {module_name}"

    def render_definition(self, writer: BlockWriter, definition: DefinitionNode) -> None:
        match definition.body:
            case ComposedNode() as composed:
                self._render_composed(writer, definition.name, composed)
            case EnumeratedStringNode() as enum_node:
                self._render_enum(writer, definition.name, enum_node)
            case ObjectNode() as obj:
                self._render_interface(writer, definition.name, obj.properties, obj.description)
            case _:
                logger.debug("Definition %r has no body, rendering an empty interface", definition.name)
                self._render_interface(writer, definition.name, [], definition.description)

    def _render_composed(self, writer: BlockWriter, name: str, node: ComposedNode) -> None:
        supertype = self.resolver.resolve(node.base_ref) if node.base_ref else None

        description = node.description
        if not description:
            description = next((body.description for body in node.bodies if body.description), None)

        properties = [prop for body in node.bodies for prop in body.properties]
        self._render_interface(writer, name, properties, description, supertype)

    def _render_interface(
        self,
        writer: BlockWriter,
        name: str,
        properties: list[PropertyDef],
        description: str | None,
        supertype: str | None = None,
    ) -> None:
        writer.emit_line()
        writer.write(format_comment(writer, description))

        header = f"export interface {name}"
        if supertype:
            header += f" extends {supertype}"

        with writer.block(header):
            for prop in properties:
                self._emit_property(writer, prop)

    def _render_enum(self, writer: BlockWriter, name: str, node: EnumeratedStringNode) -> None:
        writer.emit_line()
        writer.write(format_comment(writer, node.description))
        writer.emit_line(f"export type {name} = {literal_union(node.values)};")

    def _emit_property(self, writer: BlockWriter, prop: PropertyDef) -> None:
        """Emit a field line, preceded by its description comment."""
        writer.write(format_comment(writer, prop.description))
        optional = "" if prop.is_required else "?"
        writer.emit_line(f"{prop.name}{optional}: {self.translate_type(prop.type_node, writer)};")

    def translate_type(self, node: SchemaNode | None, writer: BlockWriter) -> str:
        match node:
            case RefNode():
                return self.resolver.resolve(node)
            case ArrayNode(items=None):
                return f"{self.FALLBACK_TYPE}[]"
            case ArrayNode():
                return f"{self.translate_type(node.items, writer)}[]"
            case ObjectNode():
                return self._inline_object(writer, node)
            case StringEnumNode():
                return literal_union(node.values)
            case PrimitiveUnionNode():
                return " | ".join(self.map_primitive(t) for t in node.type_names)
            case PrimitiveNode():
                return self.map_primitive(node.type_name)
            case _:
                return self.FALLBACK_TYPE

    def _inline_object(self, writer: BlockWriter, node: ObjectNode) -> str:
        """Render an anonymous object type as an expression at the writer's depth."""
        if not node.properties:
            return "{}"

        inline = writer.fork()
        with inline.block("", "{", with_indent=False, newline=False):
            for prop in node.properties:
                self._emit_property(inline, prop)
        return inline.getvalue()
