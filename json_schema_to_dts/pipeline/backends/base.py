"""
Base class for declaration backends.

Defines the interface that a target-language backend must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ..config import GeneratorConfig
from ..schema_ast.nodes import DefinitionNode, SchemaNode
from .block_writer import BlockWriter


class DeclarationBackend(ABC):
    """Abstract base class for declaration backends."""

    # Type mapping from schema primitive names to language types
    TYPE_MAP: dict[str, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            autoescape=False,
        )
        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")

    def render_prefix(self, description_comment: str) -> str:
        """Render the file banner followed by the already formatted module comment."""
        return self.prefix_template.render(
            license_header=self.config.license_header,
            description_comment=description_comment,
        )

    def map_primitive(self, type_name: str) -> str:
        """Map a schema primitive name; names not in TYPE_MAP pass through."""
        return self.TYPE_MAP.get(type_name, str(type_name))

    @abstractmethod
    def module_header(self, module_name: str) -> str:
        """Header line of the block wrapping all declarations."""

    @abstractmethod
    def render_definition(self, writer: BlockWriter, definition: DefinitionNode) -> None:
        """
        Render one named declaration into the writer.

        Args:
            writer: Shared writer positioned inside the module block
            definition: The definition to render
        """

    @abstractmethod
    def translate_type(self, node: SchemaNode | None, writer: BlockWriter) -> str:
        """
        Translate a property node to a type expression.

        Args:
            node: The property's type node
            writer: Writer giving the depth for inline object types

        Returns:
            Language-specific type expression
        """
