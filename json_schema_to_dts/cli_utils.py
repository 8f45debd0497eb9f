"""
CLI helpers: rebuilding the invoking command line for the generation comment.
"""

from pathlib import Path

import click

PROGRAM_NAME = "json_schema_to_dts"


def _display_value(value) -> str:
    """Show paths by file name only so the generated file does not leak local directories."""
    if isinstance(value, (str, Path)):
        path_obj = Path(str(value))
        return path_obj.name if path_obj.is_absolute() or path_obj.exists() else str(value)
    return str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Rebuild the command line of the running Click command.

    Options left at their default are omitted; boolean flags appear by name only.

    Args:
        click_command: Click command whose parameters are inspected

    Returns:
        The reconstructed command line, or the bare program name outside a Click context
    """
    ctx = click.get_current_context(silent=True)
    if ctx is None or not ctx.params:
        return PROGRAM_NAME

    arguments = []
    options = []

    for param in click_command.params:
        if param.name not in ctx.params:
            continue
        value = ctx.params[param.name]

        if isinstance(param, click.Argument):
            if value is not None:
                arguments.append(_display_value(value))
            continue

        if value is None or value == param.default:
            continue

        flag = param.opts[0] if param.opts else f"--{param.name}"
        if isinstance(param, click.Option) and param.is_flag:
            options.append(flag if value else (param.secondary_opts or [flag])[0])
        else:
            options.extend([flag, _display_value(value)])

    return " ".join([PROGRAM_NAME, *arguments, *options])
