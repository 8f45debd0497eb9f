"""
Reading schema documents and writing generated declarations.
"""

from __future__ import annotations

from .atomic_writer import DEFAULT_OUTPUT_PATH, AtomicWriter, write_output
from .schema_loader import DEFAULT_SCHEMA_PATH, load_schema, read_schema

__all__ = [
    "AtomicWriter",
    "DEFAULT_OUTPUT_PATH",
    "DEFAULT_SCHEMA_PATH",
    "load_schema",
    "read_schema",
    "write_output",
]
