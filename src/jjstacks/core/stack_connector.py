"""Derive typed connections between stacks."""

import logging
from collections.abc import Iterable

from jjstacks.core.commit_graph import CommitGraph, build_commit_graph
from jjstacks.core.commit_types import Commit
from jjstacks.core.ids import StackId
from jjstacks.core.stack_partitioner import StackPartition, partition_stacks
from jjstacks.core.stack_types import ConnectionType, Stack, StackConnection, StackGraph

logger = logging.getLogger(__name__)


def connect_stacks(partition: StackPartition, commit_graph: CommitGraph) -> StackGraph:
    """Connect stacks through the children of each stack's newest commit.

    Only the newest commit of a stack can have children in another stack.
    At most one connection is created per ordered pair of stacks; when
    several child commits lead to the same stack the first one decides the
    connection type.

    Args:
        partition: Chains produced by partition_stacks
        commit_graph: The commit graph the partition was built from

    Returns:
        Immutable StackGraph with stacks in creation order
    """
    parent_stacks: dict[StackId, list[StackId]] = {sid: [] for sid in partition.chains}
    child_stacks: dict[StackId, list[StackId]] = {sid: [] for sid in partition.chains}
    connections: list[StackConnection] = []
    seen_pairs: set[tuple[StackId, StackId]] = set()

    for stack_id, chain in partition.chains.items():
        top_node = commit_graph[chain[-1]]
        for child_id in top_node.children:
            child_stack_id = partition.commit_to_stack[child_id]
            if child_stack_id == stack_id:
                continue
            pair = (stack_id, child_stack_id)
            if pair in seen_pairs:
                continue
            seen_pairs.add(pair)

            connection_type = _classify(
                child_is_merge=commit_graph[child_id].commit.is_merge,
                sibling_count=len(top_node.children),
            )
            logger.debug("Connection %s -> %s (%s)", stack_id, child_stack_id, connection_type)
            connections.append(
                StackConnection(from_stack=stack_id, to_stack=child_stack_id, type=connection_type)
            )
            if child_stack_id not in child_stacks[stack_id]:
                child_stacks[stack_id].append(child_stack_id)
            if stack_id not in parent_stacks[child_stack_id]:
                parent_stacks[child_stack_id].append(stack_id)

    stacks = {
        stack_id: Stack(
            id=stack_id,
            commits=list(chain),
            parent_stacks=parent_stacks[stack_id],
            child_stacks=child_stacks[stack_id],
        )
        for stack_id, chain in partition.chains.items()
    }

    return StackGraph(
        stacks=stacks,
        connections=connections,
        root_stacks=[sid for sid, stack in stacks.items() if not stack.parent_stacks],
        leaf_stacks=[sid for sid, stack in stacks.items() if not stack.child_stacks],
    )


def _classify(*, child_is_merge: bool, sibling_count: int) -> ConnectionType:
    if child_is_merge:
        return "merge"
    if sibling_count > 1:
        return "branch"
    return "linear"


def build_stack_graph(commits: Iterable[Commit]) -> StackGraph:
    """Run graph building, partitioning and connecting on a commit list."""
    commit_graph = build_commit_graph(commits)
    partition = partition_stacks(commit_graph)
    return connect_stacks(partition, commit_graph)
