"""
Reference resolver for $ref pointers.

Turns a local pointer such as "#/definitions/Request" into the type name
"Request". The target is not looked up: a dangling reference is rendered
as written and left for the TypeScript compiler to report.
"""

from __future__ import annotations

import logging
import re

from ..schema_ast.nodes import RefNode

logger = logging.getLogger(__name__)

# "#/<section>/<name>": exactly two segments after the root marker
REF_PATTERN = re.compile(r"^#/([^/]+)/([^/]+)$")


def resolve(pointer: str) -> str:
    """
    Resolve a pointer to the identifier it designates.

    Args:
        pointer: A pointer of the form "#/<section>/<name>"

    Returns:
        The <name> segment, or the pointer itself when it does not match
    """
    if not isinstance(pointer, str):
        logger.warning("Malformed reference %r, using it verbatim as the type name", pointer)
        return str(pointer)

    match = REF_PATTERN.match(pointer)
    if match:
        return match.group(2)

    logger.warning("Malformed reference %r, using it verbatim as the type name", pointer)
    return pointer


class ReferenceResolver:
    """Resolves RefNode pointers to type names."""

    def resolve(self, ref_node: RefNode) -> str:
        """Resolve a RefNode to the name of its target type."""
        return resolve(ref_node.ref_path)
