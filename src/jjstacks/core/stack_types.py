"""Stack graph data types.

All types are frozen and hold only plain lists, dicts and strings so the
results can be handed to a renderer or serialized without conversion.
"""

from dataclasses import dataclass
from typing import Literal

from jjstacks.core.commit_types import Commit
from jjstacks.core.ids import CommitId, ParallelGroupId, StackId

ConnectionType = Literal["linear", "merge", "branch"]


@dataclass(frozen=True)
class CommitGraphNode:
    """A commit together with the children visible in the same window."""

    commit: Commit
    children: list[CommitId]


@dataclass(frozen=True)
class Stack:
    """A maximal linear run of commits with no internal branch or merge.

    Every commit except the newest has exactly one child, and that child has
    exactly one parent.
    """

    id: StackId
    commits: list[CommitId]  # Oldest (bottom) to newest (top)
    parent_stacks: list[StackId]
    child_stacks: list[StackId]

    @property
    def bottom_commit(self) -> CommitId:
        return self.commits[0]

    @property
    def top_commit(self) -> CommitId:
        return self.commits[-1]


@dataclass(frozen=True)
class StackConnection:
    """Directed edge between two stacks.

    from_stack is always the older side. Serialized as "from" / "to".
    """

    from_stack: StackId
    to_stack: StackId
    type: ConnectionType


@dataclass(frozen=True)
class StackGraph:
    """Stacks and their typed connections, derived from one commit list."""

    stacks: dict[StackId, Stack]  # Creation order
    connections: list[StackConnection]
    root_stacks: list[StackId]  # Stacks without parent stacks
    leaf_stacks: list[StackId]  # Stacks without child stacks

    def stack_for_commit(self, commit_id: CommitId) -> Stack | None:
        for stack in self.stacks.values():
            if commit_id in stack.commits:
                return stack
        return None

    def connection_between(
        self, from_stack: StackId, to_stack: StackId
    ) -> StackConnection | None:
        for connection in self.connections:
            if connection.from_stack == from_stack and connection.to_stack == to_stack:
                return connection
        return None


@dataclass(frozen=True)
class ParallelGroup:
    """Sibling stacks sharing the same parent and child stacks.

    is_complete is True only when every member merges into every shared
    child stack, i.e. the diamond closes.
    """

    id: ParallelGroupId
    stack_ids: list[StackId]
    parent_stacks: list[StackId]
    child_stacks: list[StackId]
    is_complete: bool


@dataclass(frozen=True)
class LayoutStackGraph(StackGraph):
    """A StackGraph with parallel-group hints attached for layout."""

    parallel_groups: list[ParallelGroup]
