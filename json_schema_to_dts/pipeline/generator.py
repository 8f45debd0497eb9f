"""
Module driver: walks the definitions and assembles the declaration file.
"""

from __future__ import annotations

import logging
from typing import Any

from .. import __version__
from ..cli_utils import reconstruct_command_line
from .backends.block_writer import BlockWriter
from .backends.comment_formatter import format_comment
from .backends.typescript_backend import TypeScriptBackend
from .config import GeneratorConfig
from .errors import UnbalancedBlockError
from .schema_ast.nodes import SchemaDocument
from .schema_ast.parser import SchemaParser

logger = logging.getLogger(__name__)


def _generation_comment() -> str:
    # Imported here: the CLI module imports this package
    try:
        from ..json_schema_to_dts import json_schema_to_dts as click_command  # noqa

        command_line = reconstruct_command_line(click_command)
    except (ImportError, AttributeError):
        command_line = "json_schema_to_dts"
    return f"Generated by json_schema_to_dts v{__version__} : {command_line}"


def generate_module(module_name: str, document: SchemaDocument, config: GeneratorConfig | None = None) -> str:
    """
    Render a whole schema document as a TypeScript declaration module.

    Args:
        module_name: Name of the wrapping module block
        document: The parsed schema
        config: Generation options (defaults when omitted)

    Returns:
        The complete declaration text

    Raises:
        UnbalancedBlockError: If the renderers left a block open
    """
    config = config or GeneratorConfig()
    backend = TypeScriptBackend(config)
    writer = BlockWriter(config.indent)

    description = config.module_description
    if config.add_generation_comment:
        description = f"{description}\n{_generation_comment()}" if description else _generation_comment()
    writer.write(backend.render_prefix(format_comment(writer, description)))

    with writer.block(backend.module_header(module_name)):
        for definition in document.definitions:
            if definition.name in config.ignore_definitions:
                logger.debug("Ignoring definition %r", definition.name)
                continue
            backend.render_definition(writer, definition)

    writer.emit_line()

    if writer.depth != 0:
        raise UnbalancedBlockError(f"Generation finished at depth {writer.depth}, expected 0")

    return writer.getvalue()


class PipelineGenerator:
    """Parses a schema dictionary and renders its declaration module."""

    def __init__(self, name: str, schema: dict[str, Any], config: GeneratorConfig | None = None):
        self.name = name
        self.schema = schema
        self.config = config or GeneratorConfig()
        self.parser = SchemaParser()

    def parse(self) -> SchemaDocument:
        return self.parser.parse(self.schema)

    def generate(self) -> str:
        return generate_module(self.name, self.parse(), self.config)
