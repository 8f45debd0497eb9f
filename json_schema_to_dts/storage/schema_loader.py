"""
Input provider: reads the schema document from disk.
"""

from __future__ import annotations

import json
from pathlib import Path

from ..pipeline.errors import SchemaLoadError
from ..pipeline.schema_ast.nodes import SchemaDocument
from ..pipeline.schema_ast.parser import SchemaParser

DEFAULT_SCHEMA_PATH = Path("debugProtocol.json")


def read_schema(path: Path | str = DEFAULT_SCHEMA_PATH) -> dict:
    """Read and decode the raw schema dictionary.

    Raises:
        SchemaLoadError: If the file is not a JSON object with definitions
        OSError: If the file cannot be read
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            schema = json.load(f)
        except json.JSONDecodeError as e:
            raise SchemaLoadError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(schema, dict):
        raise SchemaLoadError(f"{path} must contain a JSON object, got {type(schema).__name__}")
    if "definitions" not in schema and "$defs" not in schema:
        raise SchemaLoadError(f"{path} has no 'definitions' section")

    return schema


def load_schema(path: Path | str = DEFAULT_SCHEMA_PATH) -> SchemaDocument:
    """Read the schema at path and parse it into a SchemaDocument."""
    return SchemaParser().parse(read_schema(path))
