"""Partition a commit graph into stacks (maximal linear chains)."""

import logging
from dataclasses import dataclass

from jjstacks.core.commit_graph import CommitGraph
from jjstacks.core.errors import InvariantViolation
from jjstacks.core.ids import CommitId, StackId, create_stack_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StackPartition:
    """Result of partitioning: the chains and a reverse lookup.

    chains is ordered by stack creation, which follows commit timestamps, so
    stack ids are reproducible for identical input.
    """

    chains: dict[StackId, list[CommitId]]
    commit_to_stack: dict[CommitId, StackId]


def partition_stacks(commit_graph: CommitGraph) -> StackPartition:
    """Assign every commit in the graph to exactly one stack.

    Commits are visited oldest first. Each unvisited commit opens a new stack
    which then absorbs descendants while the chain stays linear.

    Raises:
        InvariantViolation: If a chain walk comes back to a commit already in
            the chain (the parent relation has a cycle)
    """
    # sorted() is stable: equal timestamps keep the input order
    ordered_ids = sorted(commit_graph, key=lambda cid: commit_graph[cid].commit.timestamp)

    chains: dict[StackId, list[CommitId]] = {}
    commit_to_stack: dict[CommitId, StackId] = {}
    next_index = 0

    for start_id in ordered_ids:
        if start_id in commit_to_stack:
            continue
        stack_id = create_stack_id(next_index)
        next_index += 1
        chain = _walk_chain(commit_graph, start_id, commit_to_stack)
        for commit_id in chain:
            commit_to_stack[commit_id] = stack_id
        chains[stack_id] = chain

    logger.debug("Partitioned %d commits into %d stacks", len(commit_graph), len(chains))
    return StackPartition(chains=chains, commit_to_stack=commit_to_stack)


def _walk_chain(
    commit_graph: CommitGraph,
    start_id: CommitId,
    visited: dict[CommitId, StackId],
) -> list[CommitId]:
    """Walk forward from start_id while the chain stays linear.

    The walk stops after a commit that has zero or several children, after a
    merge commit, and before a child that is itself a merge.
    """
    chain: list[CommitId] = []
    in_chain: set[CommitId] = set()
    current_id = start_id

    while True:
        chain.append(current_id)
        in_chain.add(current_id)
        node = commit_graph[current_id]

        if len(node.children) != 1 or node.commit.is_merge:
            break

        next_id = node.children[0]
        if commit_graph[next_id].commit.is_merge:
            break
        if next_id in in_chain:
            raise InvariantViolation(
                f"Cycle detected: commit {next_id} is reachable from itself",
                commit_id=next_id,
            )
        if next_id in visited:
            # Child is older than its parent and already opened its own stack
            break

        current_id = next_id

    return chain
