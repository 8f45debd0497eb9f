"""
Indentation-aware text accumulator shared by the declaration renderers.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from ..errors import UnbalancedBlockError


class BlockWriter:
    """Accumulates rendered text and tracks the current nesting depth.

    One instance serves one generation run. Every open_block must be paired
    with a close_block; the block() context manager does the pairing.
    """

    def __init__(self, indent_unit: str = "\t", depth: int = 0):
        self.indent_unit = indent_unit
        self.depth = depth
        self._parts: list[str] = []

    def indent(self, depth: int | None = None) -> str:
        """Indentation for the given depth (current depth by default)."""
        return self.indent_unit * (self.depth if depth is None else depth)

    def line(self, text: str = "", newline: bool = True, with_indent: bool = True) -> str:
        """Format a line without writing it.

        Empty text never gets indentation, so blank lines carry no trailing tabs.
        """
        s = ""
        if text:
            if with_indent:
                s += self.indent()
            s += text
        if newline:
            s += "\n"
        return s

    def write(self, text: str) -> None:
        """Append already formatted text."""
        if text:
            self._parts.append(text)

    def emit_line(self, text: str = "", newline: bool = True, with_indent: bool = True) -> None:
        self.write(self.line(text, newline, with_indent))

    def open_block(self, header: str, open_delimiter: str = " {", with_indent: bool = True) -> None:
        self.emit_line(f"{header}{open_delimiter}", True, with_indent)
        self.depth += 1

    def close_block(self, close_delimiter: str = "}", newline: bool = True) -> None:
        if self.depth == 0:
            raise UnbalancedBlockError(f"close_block({close_delimiter!r}) without a matching open_block")
        self.depth -= 1
        self.emit_line(close_delimiter, newline)

    @contextmanager
    def block(
        self,
        header: str,
        open_delimiter: str = " {",
        with_indent: bool = True,
        close_delimiter: str = "}",
        newline: bool = True,
    ) -> Iterator[BlockWriter]:
        """Open a block, yield, and close it again on every exit path."""
        self.open_block(header, open_delimiter, with_indent)
        try:
            yield self
        finally:
            self.close_block(close_delimiter, newline)

    def fork(self) -> BlockWriter:
        """A writer at the same depth with an empty buffer, for rendering sub-expressions."""
        return BlockWriter(self.indent_unit, self.depth)

    def getvalue(self) -> str:
        return "".join(self._parts)
