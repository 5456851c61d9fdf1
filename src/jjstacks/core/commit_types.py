"""Commit data types supplied by the VCS log collaborator."""

from dataclasses import dataclass, field
from datetime import datetime

from jjstacks.core.ids import BookmarkName, ChangeId, CommitId, Description, Email


@dataclass(frozen=True)
class Author:
    """Commit author as reported by jj."""

    name: str
    email: Email


@dataclass(frozen=True)
class Commit:
    """A single commit in the visible window of the repository.

    Parent ids may reference commits outside the window (ancestors that were
    not part of the requested revset). Those are kept here as reported and
    ignored when the commit graph is built.
    """

    id: CommitId
    change_id: ChangeId
    parents: list[CommitId]  # Ordered; empty for roots, 2+ for merges
    timestamp: datetime
    description: Description
    author: Author
    has_conflicts: bool
    bookmarks: list[BookmarkName] = field(default_factory=list)

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1
