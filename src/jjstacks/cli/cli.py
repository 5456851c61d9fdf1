import logging
import os

import click

from jjstacks.cli.commands.config import config_group
from jjstacks.cli.commands.groups import groups_cmd
from jjstacks.cli.commands.json_cmd import json_cmd
from jjstacks.cli.commands.show import show_cmd
from jjstacks.cli.output import user_output
from jjstacks.core.context import create_context, resolve_commits_path

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "JJSTACKS_DEBUG"


def configure_logging(debug: bool) -> None:
    if debug or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="jj-stacks")
@click.option(
    "--commits",
    default=None,
    metavar="PATH",
    help="JSON commit export to read ('-' for stdin). Defaults to $JJSTACKS_COMMITS.",
)
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, commits: str | None, debug: bool) -> None:
    """Decompose a Jujutsu commit graph into stacks and parallel groups."""
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(commits_path=resolve_commits_path(commits))
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e


cli.add_command(config_group)
cli.add_command(groups_cmd)
cli.add_command(json_cmd)
cli.add_command(show_cmd)


def main() -> None:
    """CLI entry point used by the `jjstacks` console script."""
    cli()
