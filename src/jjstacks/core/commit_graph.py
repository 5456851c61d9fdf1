"""Commit graph construction.

Commits from jj only carry parent pointers. The stack partitioner walks
forward from old to new, so this module derives the child pointers.
"""

import logging
from collections.abc import Iterable

from jjstacks.core.commit_types import Commit
from jjstacks.core.errors import InvariantViolation
from jjstacks.core.ids import CommitId
from jjstacks.core.stack_types import CommitGraphNode

logger = logging.getLogger(__name__)

CommitGraph = dict[CommitId, CommitGraphNode]


def build_commit_graph(commits: Iterable[Commit]) -> CommitGraph:
    """Build a commit graph with explicit child pointers.

    Children are recorded in the order the commits were supplied. Parents
    that are not part of the input (ancestors outside the requested revset)
    are skipped, so such commits behave like roots. A commit id seen twice
    is kept once, using its first occurrence.

    Args:
        commits: Commits in the order the VCS reported them

    Returns:
        Mapping of commit id to node, in first-seen order

    Raises:
        InvariantViolation: If a commit lists itself as a parent
    """
    graph: CommitGraph = {}
    for commit in commits:
        if commit.id in commit.parents:
            raise InvariantViolation(
                f"Commit {commit.id} lists itself as a parent",
                commit_id=commit.id,
            )
        if commit.id in graph:
            logger.debug("Skipping duplicate commit %s", commit.id)
            continue
        graph[commit.id] = CommitGraphNode(commit=commit, children=[])

    external_parents = 0
    for commit_id, node in graph.items():
        for parent_id in node.commit.parents:
            parent = graph.get(parent_id)
            if parent is None:
                external_parents += 1
                continue
            if commit_id not in parent.children:
                parent.children.append(commit_id)

    logger.debug(
        "Built commit graph: %d commits, %d parents outside the window",
        len(graph),
        external_parents,
    )
    return graph
