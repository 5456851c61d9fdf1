"""JSON transport format for commits in and stack graphs out.

Commit records use the camelCase keys produced by the log collaborator.
Output helpers return plain dicts and lists so any JSON encoder can handle
them.
"""

import json
from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, ValidationError

from jjstacks.core.commit_types import Author, Commit
from jjstacks.core.errors import CommitDataError
from jjstacks.core.ids import (
    create_bookmark_name,
    create_change_id,
    create_commit_id,
    create_description,
    create_email,
)
from jjstacks.core.stack_types import (
    LayoutStackGraph,
    ParallelGroup,
    Stack,
    StackConnection,
    StackGraph,
)


class AuthorRecord(BaseModel):
    """Pydantic model for the author block of a commit record."""

    model_config = ConfigDict(extra="ignore")

    name: str
    email: str


class CommitRecord(BaseModel):
    """Pydantic model for one commit record in the transport format.

    Attributes:
        id: Full 40-character commit hash
        change_id: jj change id (JSON key "changeId")
        parents: Parent commit hashes, in order
        timestamp: ISO 8601 timestamp with a UTC offset, so records compare
        description: Commit description (may be empty)
        author: Author name and email
        has_conflicts: JSON key "hasConflicts", defaults to false
        bookmarks: Bookmark names pointing at the commit
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    change_id: str = Field(alias="changeId")
    parents: list[str] = Field(default_factory=list)
    timestamp: AwareDatetime
    description: str = ""
    author: AuthorRecord
    has_conflicts: bool = Field(default=False, alias="hasConflicts")
    bookmarks: list[str] = Field(default_factory=list)

    def to_commit(self) -> Commit:
        """Convert to a Commit, validating every identifier.

        Raises:
            ValueError: If an identifier or the email is malformed
        """
        return Commit(
            id=create_commit_id(self.id),
            change_id=create_change_id(self.change_id),
            parents=[create_commit_id(parent) for parent in self.parents],
            timestamp=self.timestamp,
            description=create_description(self.description),
            author=Author(name=self.author.name, email=create_email(self.author.email)),
            has_conflicts=self.has_conflicts,
            bookmarks=[create_bookmark_name(name) for name in self.bookmarks],
        )


def commits_from_data(data: Any) -> list[Commit]:
    """Validate decoded JSON and build Commit objects.

    Accepts either a list of commit records or an object with a "commits"
    list.

    Raises:
        CommitDataError: If the payload shape or any record is invalid
    """
    if isinstance(data, dict) and "commits" in data:
        data = data["commits"]
    if not isinstance(data, list):
        raise CommitDataError(
            f"Expected a list of commit records, got {type(data).__name__}"
        )

    commits: list[Commit] = []
    for index, raw in enumerate(data):
        try:
            commits.append(CommitRecord.model_validate(raw).to_commit())
        except (ValidationError, ValueError) as e:
            raise CommitDataError(f"Invalid commit record at index {index}: {e}") from e
    return commits


def commits_from_json(text: str) -> list[Commit]:
    """Parse the JSON transport format.

    Raises:
        CommitDataError: If the text is not valid JSON or records are invalid
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CommitDataError(f"Commit data is not valid JSON: {e}") from e
    return commits_from_data(data)


def commit_to_dict(commit: Commit) -> dict[str, Any]:
    return {
        "id": commit.id,
        "changeId": commit.change_id,
        "parents": list(commit.parents),
        "timestamp": commit.timestamp.isoformat(),
        "description": commit.description,
        "author": {"name": commit.author.name, "email": commit.author.email},
        "hasConflicts": commit.has_conflicts,
        "bookmarks": list(commit.bookmarks),
    }


def _stack_to_dict(stack: Stack) -> dict[str, Any]:
    return {
        "id": stack.id,
        "commits": list(stack.commits),
        "parentStacks": list(stack.parent_stacks),
        "childStacks": list(stack.child_stacks),
    }


def _connection_to_dict(connection: StackConnection) -> dict[str, Any]:
    return {"from": connection.from_stack, "to": connection.to_stack, "type": connection.type}


def parallel_group_to_dict(group: ParallelGroup) -> dict[str, Any]:
    return {
        "id": group.id,
        "stackIds": list(group.stack_ids),
        "parentStacks": list(group.parent_stacks),
        "childStacks": list(group.child_stacks),
        "isComplete": group.is_complete,
    }


def stack_graph_to_dict(graph: StackGraph) -> dict[str, Any]:
    return {
        "stacks": {stack_id: _stack_to_dict(stack) for stack_id, stack in graph.stacks.items()},
        "connections": [_connection_to_dict(c) for c in graph.connections],
        "rootStacks": list(graph.root_stacks),
        "leafStacks": list(graph.leaf_stacks),
    }


def layout_stack_graph_to_dict(graph: LayoutStackGraph) -> dict[str, Any]:
    result = stack_graph_to_dict(graph)
    result["parallelGroups"] = [parallel_group_to_dict(g) for g in graph.parallel_groups]
    return result
