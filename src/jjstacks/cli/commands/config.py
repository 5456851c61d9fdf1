"""Config commands."""

from dataclasses import replace

import click

from jjstacks.cli.output import machine_output, user_output
from jjstacks.core.config_store import CONFIG_KEYS, parse_config_value
from jjstacks.core.context import JjStacksContext


@click.group("config")
def config_group() -> None:
    """Show or change jjstacks configuration."""


@config_group.command("show")
@click.pass_obj
def config_show(ctx: JjStacksContext) -> None:
    """Print the effective configuration."""
    config = ctx.global_config
    user_output(click.style(f"Config file: {ctx.config_store.path()}", dim=True))
    for key in CONFIG_KEYS:
        value = getattr(config, key)
        if isinstance(value, bool):
            rendered = str(value).lower()
        elif value is None:
            rendered = "(unset)"
        else:
            rendered = str(value)
        machine_output(f"{key} = {rendered}")


@config_group.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
def config_set(ctx: JjStacksContext, key: str, value: str) -> None:
    """Set KEY to VALUE in the global config file."""
    try:
        parsed = parse_config_value(key, value)
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e

    updated = replace(ctx.global_config, **{key: parsed})
    ctx.config_store.save(updated)
    user_output(f"Set {key} = {value}")
