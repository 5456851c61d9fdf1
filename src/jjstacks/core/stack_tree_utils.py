"""Tree visualization utilities for stack graphs.

This module contains pure business logic for rendering a stack graph as a
tree. These functions are used by the `jjstacks show` command.
"""

from jjstacks.core.commit_types import Commit
from jjstacks.core.ids import CommitId, StackId
from jjstacks.core.parallel_groups import get_parallel_group_for_stack
from jjstacks.core.stack_types import LayoutStackGraph, ParallelGroup


def format_stack_graph_as_tree(
    graph: LayoutStackGraph,
    commits_by_id: dict[CommitId, Commit],
    *,
    short_id_length: int,
    root_stack: StackId | None,
    show_parallel_groups: bool = True,
) -> str:
    """Format stacks as a hierarchical tree with commit info.

    A stack reachable from several parents (a merge target) is printed in
    full under the first parent that reaches it and as a reference elsewhere.

    Args:
        graph: Stack graph with parallel groups
        commits_by_id: Commit lookup for descriptions
        short_id_length: Number of commit id characters to show
        root_stack: Optional stack to use as root (shows only it and descendants)
        show_parallel_groups: Annotate stacks that belong to a parallel group

    Returns:
        Multi-line string with tree visualization
    """
    if root_stack is not None:
        if root_stack not in graph.stacks:
            return f"Error: Stack '{root_stack}' not found"
        roots = [root_stack]
    else:
        roots = graph.root_stacks

    if not roots:
        return "No stacks found"

    lines: list[str] = []
    printed: set[StackId] = set()
    for root in roots:
        format_stack_recursive(
            stack_id=root,
            graph=graph,
            commits_by_id=commits_by_id,
            lines=lines,
            printed=printed,
            prefix="",
            is_last=True,
            is_root=True,
            incoming=None,
            short_id_length=short_id_length,
            show_parallel_groups=show_parallel_groups,
        )

    return "\n".join(lines)


def format_stack_recursive(
    stack_id: StackId,
    graph: LayoutStackGraph,
    commits_by_id: dict[CommitId, Commit],
    lines: list[str],
    printed: set[StackId],
    prefix: str,
    is_last: bool,
    is_root: bool,
    incoming: str | None,
    short_id_length: int,
    show_parallel_groups: bool,
) -> None:
    """Recursively format a stack and its child stacks.

    Args:
        stack_id: Stack to format
        graph: Whole stack graph
        commits_by_id: Commit lookup for descriptions
        lines: List to append formatted lines to
        printed: Stacks already printed in full
        prefix: Prefix string for indentation
        is_last: True if this is the last child of its parent
        is_root: True if this is a root node
        incoming: Type of the connection leading here (None for roots)
        short_id_length: Number of commit id characters to show
        show_parallel_groups: Annotate parallel group membership
    """
    stack = graph.stacks[stack_id]
    connector = "└─" if is_last else "├─"
    label = format_stack_label(
        stack_id=stack_id,
        commit_count=len(stack.commits),
        top_commit=commits_by_id.get(stack.top_commit),
        top_commit_id=stack.top_commit,
        short_id_length=short_id_length,
    )
    if incoming is not None:
        label = f"[{incoming}] {label}"

    if stack_id in printed:
        lines.append(f"{prefix}{connector} {label} (see above)")
        return
    printed.add(stack_id)

    if show_parallel_groups:
        group = get_parallel_group_for_stack(stack_id, graph.parallel_groups)
        if group is not None:
            label = f"{label} {format_parallel_group_marker(group)}"

    if is_root:
        lines.append(label)
    else:
        lines.append(f"{prefix}{connector} {label}")

    if is_root:
        child_prefix = ""
    else:
        child_prefix = prefix + ("   " if is_last else "│  ")

    children = stack.child_stacks
    for i, child in enumerate(children):
        connection = graph.connection_between(stack_id, child)
        format_stack_recursive(
            stack_id=child,
            graph=graph,
            commits_by_id=commits_by_id,
            lines=lines,
            printed=printed,
            prefix=child_prefix,
            is_last=i == len(children) - 1,
            is_root=False,
            incoming=connection.type if connection is not None else None,
            short_id_length=short_id_length,
            show_parallel_groups=show_parallel_groups,
        )


def format_stack_label(
    *,
    stack_id: StackId,
    commit_count: int,
    top_commit: Commit | None,
    top_commit_id: CommitId,
    short_id_length: int,
) -> str:
    noun = "commit" if commit_count == 1 else "commits"
    short_id = top_commit_id[:short_id_length]
    description = top_commit.description if top_commit is not None else "No description"
    conflict = " (conflict)" if top_commit is not None and top_commit.has_conflicts else ""
    return f'{stack_id} ({commit_count} {noun}) {short_id} "{description}"{conflict}'


def format_parallel_group_marker(group: ParallelGroup) -> str:
    state = "diamond" if group.is_complete else "open"
    return f"<{group.id}, {state}>"


def format_parallel_group_line(group: ParallelGroup) -> str:
    """One-line summary of a parallel group for plain-text listings."""
    parents = ", ".join(group.parent_stacks) or "-"
    children = ", ".join(group.child_stacks) or "-"
    state = "complete" if group.is_complete else "incomplete"
    return (
        f"{group.id}: {', '.join(group.stack_ids)} "
        f"(parents: {parents}; children: {children}; {state})"
    )
