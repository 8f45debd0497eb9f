"""
Output sink: atomic file writes for generated declarations.

Ensures that an interrupted write never leaves a half-written
declaration file behind.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..pipeline.errors import OutputValidationError

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_PATH = Path("protocol/src/debugProtocol.d.ts")

COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)

# Single-quoted literals such as enum values in a literal union
LITERAL_PATTERN = re.compile(r"'[^'\n]*'")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_declarations: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_declarations: Optional validation function for declaration text
        """
        self._validate_declarations = validate_declarations or self._default_validate_declarations

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically, replacing any previous content.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputValidationError: If validation fails
            OSError: If file operations fail
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)

            if validate:
                self._validate_declarations(content)

            temp_path.replace(path)
        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    logger.warning("Could not remove temporary file %s", temp_path)
            raise

        logger.info("Wrote %d bytes to %s", len(content), path)

    def _default_validate_declarations(self, content: str) -> None:
        """Structural checks on generated declarations.

        Raises:
            OutputValidationError: If validation fails
        """
        if "export " not in content:
            raise OutputValidationError("Generated declarations contain no exported module")

        # Balanced braces outside comments and string literals (simple heuristic)
        code = LITERAL_PATTERN.sub("", COMMENT_PATTERN.sub("", content))
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise OutputValidationError(f"Generated declarations have unbalanced braces: {open_braces} open, {close_braces} close")


def write_output(text: str, path: Path | str = DEFAULT_OUTPUT_PATH, validate: bool = True) -> None:
    """Write the assembled declaration text to path, overwriting prior content."""
    AtomicWriter().write(Path(path), text, validate=validate)
