"""
Analyzer module: reference resolution for parsed schemas.
"""

from __future__ import annotations

from .reference_resolver import ReferenceResolver, resolve

__all__ = [
    "ReferenceResolver",
    "resolve",
]
