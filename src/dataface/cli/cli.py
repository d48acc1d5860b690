import logging
import os

import click

from dataface.cli.commands.add import add_cmd
from dataface.cli.commands.init import init_cmd
from dataface.cli.commands.list_cmd import list_cmd
from dataface.cli.commands.update import update_cmd
from dataface.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "DATAFACE_DEBUG"


def configure_logging(debug: bool) -> None:
    """Send debug logs to stderr with --debug; otherwise only warnings."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[DEBUG %(name)s:%(lineno)d] %(message)s",
        )
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="dataface")
@click.option("--debug", is_flag=True, help="Show debug logging and full tracebacks.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Add dataface components to your project."""
    debug = debug or bool(os.environ.get(DEBUG_ENV_VAR))
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)


cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(list_cmd)
cli.add_command(update_cmd)


def main() -> None:
    """CLI entry point used by the `dataface` console script."""
    cli()
