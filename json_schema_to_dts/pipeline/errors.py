"""
Exceptions raised by the declaration generator.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for failures that stop a generation run."""


class UnbalancedBlockError(GenerationError):
    """Raised when a block is closed without being opened, or left open at the end of a run."""


class SchemaLoadError(GenerationError):
    """Raised when the schema document cannot be decoded.

    This can happen when:
    - The file is not valid JSON
    - The top-level value is not an object
    - The document has no definitions section
    """


class OutputValidationError(GenerationError):
    """Raised when generated declarations fail validation before being written."""
