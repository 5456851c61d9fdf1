"""Parallel group listing."""

import click
from rich.console import Console
from rich.table import Table

from jjstacks.cli.core import load_stack_graph
from jjstacks.cli.json_output import emit_json, json_error_boundary
from jjstacks.cli.output import user_output
from jjstacks.core.context import JjStacksContext
from jjstacks.core.serialization import parallel_group_to_dict


@click.command("groups")
@click.option("--revset", "-r", default=None, help="Revset to analyze (defaults to config).")
@click.option(
    "--format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.pass_obj
@json_error_boundary
def groups_cmd(ctx: JjStacksContext, revset: str | None, format: str) -> None:
    """List groups of stacks that share the same parent and child stacks."""
    json_mode = format == "json"
    loaded = load_stack_graph(ctx, revset, json_mode=json_mode)
    groups = loaded.graph.parallel_groups

    if json_mode:
        emit_json({"parallelGroups": [parallel_group_to_dict(g) for g in groups]})
        return

    if not groups:
        user_output("No parallel groups found")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("group", style="cyan", no_wrap=True)
    table.add_column("stacks", no_wrap=True)
    table.add_column("parents", no_wrap=True)
    table.add_column("children", no_wrap=True)
    table.add_column("diamond", no_wrap=True)

    for group in groups:
        table.add_row(
            group.id,
            ", ".join(group.stack_ids),
            ", ".join(group.parent_stacks) or "[dim]-[/dim]",
            ", ".join(group.child_stacks) or "[dim]-[/dim]",
            "[green]complete[/green]" if group.is_complete else "[yellow]open[/yellow]",
        )

    # Output table to stderr (consistent with user_output convention)
    console = Console(stderr=True, width=200)
    console.print(table)
