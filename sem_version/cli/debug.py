import click

from .utils.logging import configure_logging


def add_debug_option(cmd: click.Command) -> click.Command:
    """Decorator to add the --debug/--no-debug and --verbose options to a command"""
    names = {param.name for param in cmd.params}

    if "verbose" not in names:
        cmd.params.insert(
            0,
            click.Option(
                ["--verbose", "-v"],
                is_flag=True,
                is_eager=True,
                expose_value=False,
                callback=lambda ctx, param, value: _set_debug(ctx, value),
                help="Show verbose output on stderr.",
            ),
        )
    if "debug" not in names:
        cmd.params.insert(
            0,
            click.Option(
                ["--debug/--no-debug"],
                is_eager=True,
                expose_value=False,
                callback=lambda ctx, param, value: _set_debug(ctx, value),
                help="Enable debug mode",
            ),
        )
    return cmd


def _set_debug(ctx, value: bool):
    """Callback function for the debug and verbose flags"""
    ctx.ensure_object(dict)

    # Either flag may switch debug on; neither switches the other off
    ctx.obj["DEBUG"] = ctx.obj.get("DEBUG", False) or bool(value)

    configure_logging(ctx.obj["DEBUG"])
    return ctx.obj["DEBUG"]
