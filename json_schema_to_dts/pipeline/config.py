"""
Configuration for the declaration generator.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

# Four lines: two text lines framed by the opening and closing rules of the protocol banner
DEFAULT_LICENSE_HEADER = [
    "/*---------------------------------------------------------------------------------------------",
    " *  Copyright (c) Microsoft Corporation. All rights reserved.",
    " *  Licensed under the MIT License. See License.txt in the project root for license information.",
    " *--------------------------------------------------------------------------------------------*/",
]

DEFAULT_MODULE_DESCRIPTION = "Declaration module describing the VS Code debug protocol.\nAuto-generated from json schema. Do not edit manually."


@dataclass
class GeneratorConfig:
    """Configuration options for declaration generation."""

    # Indentation unit, repeated once per nesting level
    indent: str = "\t"

    # Keyword of the wrapping block: "module" or "namespace"
    module_keyword: str = "module"

    # Banner lines written verbatim at the top of the file
    license_header: list[str] = field(default_factory=lambda: list(DEFAULT_LICENSE_HEADER))

    # Documentation comment placed above the module block
    module_description: str = DEFAULT_MODULE_DESCRIPTION

    # Append a "Generated by" line with the command line to the module comment
    add_generation_comment: bool = False

    # Definitions to leave out of the output
    ignore_definitions: list[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return asdict(self)
