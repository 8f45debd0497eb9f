"""
Declaration backends for the generator pipeline.
"""

from __future__ import annotations

from .base import DeclarationBackend
from .block_writer import BlockWriter
from .comment_formatter import format_comment
from .typescript_backend import TypeScriptBackend, literal_union

__all__ = [
    "BlockWriter",
    "DeclarationBackend",
    "TypeScriptBackend",
    "format_comment",
    "literal_union",
]
