"""Tree view of the stack graph."""

import click

from jjstacks.cli.core import load_stack_graph
from jjstacks.cli.output import user_output
from jjstacks.core.context import JjStacksContext
from jjstacks.core.ids import StackId
from jjstacks.core.stack_tree_utils import format_parallel_group_line, format_stack_graph_as_tree


@click.command("show")
@click.option("--revset", "-r", default=None, help="Revset to display (defaults to config).")
@click.option("--root", "root_stack", default=None, help="Only show this stack and its descendants.")
@click.option("--no-groups", is_flag=True, help="Do not annotate parallel groups.")
@click.pass_obj
def show_cmd(ctx: JjStacksContext, revset: str | None, root_stack: str | None, no_groups: bool) -> None:
    """Display stacks as a tree, following connections from root stacks.

    Example:
        $ jjstacks --commits log.json show
        stack-0 (4 commits) 1a2b3c4d "Base work"
        ├─ [branch] stack-1 (1 commit) 5e6f7a8b "Feature A" <parallel-group-0, diamond>
        │  └─ [merge] stack-3 (1 commit) 9c0d1e2f "Merge features"
        └─ [branch] stack-2 (1 commit) 3a4b5c6d "Feature B" <parallel-group-0, diamond>
           └─ [merge] stack-3 (1 commit) 9c0d1e2f "Merge features" (see above)
    """
    loaded = load_stack_graph(ctx, revset)
    graph = loaded.graph

    if not graph.stacks:
        user_output("No commits found")
        return

    show_groups = ctx.global_config.show_parallel_groups and not no_groups
    tree_output = format_stack_graph_as_tree(
        graph,
        loaded.commits_by_id,
        short_id_length=ctx.global_config.short_id_length,
        root_stack=StackId(root_stack) if root_stack is not None else None,
        show_parallel_groups=show_groups,
    )
    if tree_output.startswith("Error: "):
        user_output(click.style("Error: ", fg="red") + tree_output.removeprefix("Error: "))
        raise SystemExit(1)
    user_output(tree_output)

    if show_groups and graph.parallel_groups:
        user_output()
        user_output(click.style("Parallel groups:", bold=True))
        for group in graph.parallel_groups:
            user_output(f"  {format_parallel_group_line(group)}")
