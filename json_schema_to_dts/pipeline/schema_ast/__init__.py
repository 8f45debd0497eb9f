"""
Schema AST (Abstract Syntax Tree) module.

Contains the AST node definitions and parser for the schema document.
"""

from __future__ import annotations

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
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "SchemaDocument",
    "DefinitionNode",
    "ComposedNode",
    "EnumeratedStringNode",
    "ObjectNode",
    "PropertyDef",
    "RefNode",
    "PrimitiveNode",
    "StringEnumNode",
    "ArrayNode",
    "PrimitiveUnionNode",
    "UnknownNode",
    "SchemaParser",
]
