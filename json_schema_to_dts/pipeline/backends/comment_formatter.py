"""
Documentation comment rendering.
"""

from __future__ import annotations

import re

from .block_writer import BlockWriter

# <code>X</code> becomes 'X'; non-greedy so each pair on a line is rewritten
CODE_MARKUP = re.compile(r"<code>(.*?)</code>")


def format_comment(writer: BlockWriter, description: str | None) -> str:
    """
    Render a description as a /** ... */ comment at the writer's current depth.

    Continuation lines are indented one level below the comment opener, and
    the closing marker of a multi-line comment sits on its own line at the
    opener's depth.

    Args:
        writer: Writer whose depth positions the comment
        description: The description text, possibly None

    Returns:
        The formatted comment including its trailing newline, or "" without a description
    """
    if not description:
        return ""

    text = CODE_MARKUP.sub(r"'\1'", description)
    text = text.replace("\n", "\n" + writer.indent(writer.depth + 1))

    if "\n" in text:
        return writer.line(f"/** {text}\n{writer.indent()}*/")
    return writer.line(f"/** {text} */")
