"""Parallel-group (diamond) detection for layout hints.

Stacks that share exactly the same parent stacks and child stacks are
treated as lines of work that ran side by side. This is a structural proxy,
not a subgraph isomorphism check, and keeps detection linear in the number
of stacks. Nothing in this module modifies the StackGraph it reads.
"""

from collections.abc import Iterable

from jjstacks.core.commit_types import Commit
from jjstacks.core.ids import StackId, create_parallel_group_id
from jjstacks.core.stack_connector import build_stack_graph
from jjstacks.core.stack_types import LayoutStackGraph, ParallelGroup, StackGraph

Signature = tuple[tuple[StackId, ...], tuple[StackId, ...]]


def detect_parallel_groups(stack_graph: StackGraph) -> list[ParallelGroup]:
    """Find groups of two or more stacks with identical parent/child sets.

    Groups are numbered in discovery order, which follows the key order of
    stack_graph.stacks.
    """
    stacks_by_signature: dict[Signature, list[StackId]] = {}
    for stack_id, stack in stack_graph.stacks.items():
        signature = (tuple(sorted(stack.parent_stacks)), tuple(sorted(stack.child_stacks)))
        stacks_by_signature.setdefault(signature, []).append(stack_id)

    merge_pairs = {
        (connection.from_stack, connection.to_stack)
        for connection in stack_graph.connections
        if connection.type == "merge"
    }

    groups: list[ParallelGroup] = []
    for (parent_sig, child_sig), members in stacks_by_signature.items():
        if len(members) < 2:
            continue

        is_complete = bool(child_sig) and all(
            (member, child) in merge_pairs for member in members for child in child_sig
        )
        groups.append(
            ParallelGroup(
                id=create_parallel_group_id(len(groups)),
                stack_ids=list(members),
                parent_stacks=list(parent_sig),
                child_stacks=list(child_sig),
                is_complete=is_complete,
            )
        )

    return groups


def enhance_stack_graph_for_layout(stack_graph: StackGraph) -> LayoutStackGraph:
    """Return a new graph with parallel groups attached.

    The stack map, connection list and root/leaf lists are shared with the
    input rather than copied; both objects are treated as read-only.
    """
    return LayoutStackGraph(
        stacks=stack_graph.stacks,
        connections=stack_graph.connections,
        root_stacks=stack_graph.root_stacks,
        leaf_stacks=stack_graph.leaf_stacks,
        parallel_groups=detect_parallel_groups(stack_graph),
    )


def build_layout_stack_graph(commits: Iterable[Commit]) -> LayoutStackGraph:
    return enhance_stack_graph_for_layout(build_stack_graph(commits))


def get_parallel_group_for_stack(
    stack_id: StackId, parallel_groups: list[ParallelGroup]
) -> ParallelGroup | None:
    for group in parallel_groups:
        if stack_id in group.stack_ids:
            return group
    return None


def get_sibling_stacks(stack_id: StackId, parallel_groups: list[ParallelGroup]) -> list[StackId]:
    """Other members of the parallel group containing stack_id."""
    group = get_parallel_group_for_stack(stack_id, parallel_groups)
    if group is None:
        return []
    return [sid for sid in group.stack_ids if sid != stack_id]
