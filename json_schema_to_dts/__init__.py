"""JSON Schema to TypeScript declarations

Translates the definitions of a protocol's JSON schema into a TypeScript
declaration module, keeping hand-authored protocol descriptions and their
generated types in sync.
"""

__version__ = "1.0.0"

from .pipeline import (
    GenerationError,
    GeneratorConfig,
    OutputValidationError,
    PipelineGenerator,
    SchemaLoadError,
    UnbalancedBlockError,
    generate_module,
)

__all__ = [
    "PipelineGenerator",
    "generate_module",
    "GeneratorConfig",
    "GenerationError",
    "OutputValidationError",
    "SchemaLoadError",
    "UnbalancedBlockError",
]
