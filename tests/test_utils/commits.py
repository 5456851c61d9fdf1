"""Builders for Commit test data.

Short names such as "a" are padded to full-length ids so tests can talk
about commits by letter.
"""

import random
from datetime import UTC, datetime, timedelta

from jjstacks.core.commit_types import Author, Commit
from jjstacks.core.ids import (
    CommitId,
    create_change_id,
    create_commit_id,
    create_description,
    create_email,
)
from jjstacks.core.stack_types import StackGraph

BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


def cid(name: str) -> CommitId:
    """Full commit id for a short test name."""
    return create_commit_id(name.ljust(40, "0"))


def make_commit(
    name: str,
    parents: list[str] | None = None,
    *,
    minutes: int = 0,
    description: str | None = None,
    has_conflicts: bool = False,
    bookmarks: list[str] | None = None,
) -> Commit:
    """Create a commit named by a short string.

    All commits share BASE_TIME unless minutes is given, so by default stack
    order follows input order.
    """
    return Commit(
        id=cid(name),
        change_id=create_change_id(name.ljust(12, "z")),
        parents=[cid(p) for p in (parents or [])],
        timestamp=BASE_TIME + timedelta(minutes=minutes),
        description=create_description(description if description is not None else name),
        author=Author(name="Test Author", email=create_email("test@example.com")),
        has_conflicts=has_conflicts,
        bookmarks=bookmarks or [],  # type: ignore[arg-type]
    )


def commit_record(name: str, parents: list[str] | None = None, **overrides: object) -> dict:
    """JSON transport record for a short test name."""
    record: dict = {
        "id": name.ljust(40, "0"),
        "changeId": name.ljust(12, "z"),
        "parents": [p.ljust(40, "0") for p in (parents or [])],
        "timestamp": "2024-01-01T00:00:00+00:00",
        "description": name,
        "author": {"name": "Test Author", "email": "test@example.com"},
    }
    record.update(overrides)
    return record


def random_dag(seed: int, size: int) -> list[Commit]:
    """Generate a random commit DAG.

    Parents are always chosen among earlier commits, so the result is
    acyclic. Some commits reference an ancestor outside the list, and some
    timestamps are shuffled to simulate clock skew.
    """
    rng = random.Random(seed)
    commits: list[Commit] = []
    for index in range(size):
        commit_hex = f"{index + 1:040x}"
        parents: list[CommitId] = []
        if commits:
            roll = rng.random()
            if roll < 0.15:
                parent_count = 0
            elif roll < 0.8:
                parent_count = 1
            else:
                parent_count = min(len(commits), rng.choice([2, 2, 3]))
            # Bias towards recent commits to produce long chains
            window = commits[-6:] if rng.random() < 0.8 else commits
            candidates = rng.sample(window, min(parent_count, len(window)))
            parents = [c.id for c in candidates]
        if rng.random() < 0.05:
            parents.append(create_commit_id("f" * 40))
        minutes = index if rng.random() < 0.9 else rng.randint(0, size)
        commits.append(
            Commit(
                id=create_commit_id(commit_hex),
                change_id=create_change_id(f"change{index:06d}"),
                parents=parents,
                timestamp=BASE_TIME + timedelta(minutes=minutes),
                description=create_description(f"commit {index}"),
                author=Author(name="Test Author", email=create_email("test@example.com")),
                has_conflicts=False,
            )
        )
    return commits


def stack_of(graph: StackGraph, name: str) -> str:
    """Id of the stack holding the commit with the given short name."""
    stack = graph.stack_for_commit(cid(name))
    assert stack is not None, f"commit {name} is not in any stack"
    return stack.id
