"""Identifier types for commits, changes, stacks and parallel groups.

Each id space is a distinct NewType over str so ids from different spaces
cannot be mixed up by the type checker, while still hashing and comparing
by value for use as dict keys and set members.
"""

from typing import NewType

CommitId = NewType("CommitId", str)
"""Content hash identifying one specific commit snapshot (40 hex chars)."""

ChangeId = NewType("ChangeId", str)
"""Identifier that stays stable across rewrites of the same logical change."""

StackId = NewType("StackId", str)
"""Identifier of a stack within a single decomposition run."""

ParallelGroupId = NewType("ParallelGroupId", str)
"""Identifier of a parallel group within a single detection run."""

BookmarkName = NewType("BookmarkName", str)

Email = NewType("Email", str)

Description = NewType("Description", str)

COMMIT_ID_LENGTH = 40
MIN_CHANGE_ID_LENGTH = 8
EMPTY_DESCRIPTION = "(no description)"


def create_commit_id(value: str) -> CommitId:
    """Validate and wrap a full commit hash.

    Raises:
        ValueError: If the value is empty or not exactly 40 characters
    """
    trimmed = value.strip()
    if not trimmed:
        raise ValueError("Empty commit ID")
    if len(trimmed) != COMMIT_ID_LENGTH:
        raise ValueError(
            f"Invalid commit ID: {value} "
            f"(length: {len(trimmed)}, expected {COMMIT_ID_LENGTH})"
        )
    return CommitId(trimmed)


def create_change_id(value: str) -> ChangeId:
    """Validate and wrap a change id.

    jj prints shortened change ids (12 chars by default), so only a lower
    bound on the length is enforced.

    Raises:
        ValueError: If the value is empty or shorter than 8 characters
    """
    trimmed = value.strip()
    if not trimmed:
        raise ValueError("Empty change ID")
    if len(trimmed) < MIN_CHANGE_ID_LENGTH:
        raise ValueError(
            f"Invalid change ID: {value} "
            f"(length: {len(trimmed)}, expected at least {MIN_CHANGE_ID_LENGTH})"
        )
    return ChangeId(trimmed)


def create_email(value: str) -> Email:
    trimmed = value.strip()
    if not trimmed or "@" not in trimmed:
        raise ValueError(f"Invalid email: {value}")
    return Email(trimmed)


def create_description(value: str) -> Description:
    """Wrap a commit description, substituting a placeholder when empty."""
    trimmed = value.strip()
    if not trimmed:
        return Description(EMPTY_DESCRIPTION)
    return Description(trimmed)


def create_bookmark_name(value: str) -> BookmarkName:
    trimmed = value.strip()
    if not trimmed:
        raise ValueError(f'Invalid bookmark name: "{value}"')
    return BookmarkName(trimmed)


def create_stack_id(index: int) -> StackId:
    return StackId(f"stack-{index}")


def create_parallel_group_id(index: int) -> ParallelGroupId:
    return ParallelGroupId(f"parallel-group-{index}")
