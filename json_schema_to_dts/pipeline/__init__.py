"""
Pipeline - schema document to TypeScript declarations.

1. Parser: classify the schema into a SchemaDocument of tagged nodes
2. Analyzer: resolve $ref pointers to type names
3. Backend: render declarations through a shared BlockWriter
4. Generator: wrap the declarations in the banner and module block
"""

from __future__ import annotations

from .config import GeneratorConfig
from .errors import GenerationError, OutputValidationError, SchemaLoadError, UnbalancedBlockError
from .generator import PipelineGenerator, generate_module

__all__ = [
    "PipelineGenerator",
    "generate_module",
    "GeneratorConfig",
    "GenerationError",
    "OutputValidationError",
    "SchemaLoadError",
    "UnbalancedBlockError",
]
