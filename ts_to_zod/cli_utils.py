"""
Command line reconstruction for the generation comment.
"""

from pathlib import Path

import click

COMMAND_NAME = "ts_to_zod"


def _format_value(param: click.Parameter, value) -> str:
    """Paths are shown by file name so that generated files do not leak local directories."""
    if isinstance(param.type, click.Path) or isinstance(value, Path):
        return Path(str(value)).name
    return str(value)


def _option_tokens(option: click.Option, value) -> list[str]:
    if value == option.default:
        return []
    flag = option.opts[0] if option.opts else f"--{option.name}"
    if option.is_flag:
        return [flag]
    return [flag, _format_value(option, value)]


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Rebuild the invocation of the running command from its Click context.

    Positional arguments come first, then every option whose value
    differs from its default. Unset and falsy values are left out.

    Args:
        click_command: Command whose parameters are introspected

    Returns:
        Command line string, or the bare command name outside a Click context
    """
    ctx = click.get_current_context(silent=True)
    if ctx is None or not ctx.params:
        return COMMAND_NAME

    arguments: list[str] = []
    options: list[str] = []
    for param in click_command.params:
        value = ctx.params.get(param.name)
        if not value:
            continue
        if isinstance(param, click.Argument):
            arguments.append(_format_value(param, value))
        elif isinstance(param, click.Option):
            options.extend(_option_tokens(param, value))

    return " ".join([COMMAND_NAME, *arguments, *options])
