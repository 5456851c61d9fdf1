"""Commit source interface.

The VCS engine is an external collaborator: it owns the repository and
reports commits. This module defines the interface the rest of jjstacks
depends on, plus an implementation backed by the JSON transport format.
"""

import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path

from jjstacks.core.commit_types import Commit
from jjstacks.core.errors import CommitDataError
from jjstacks.core.serialization import commits_from_json

logger = logging.getLogger(__name__)

STDIN_PATH = Path("-")


class CommitSource(ABC):
    """Abstract source of commits for a revset.

    Implementations never mutate repository state.
    """

    @abstractmethod
    def list_commits(self, revset: str | None) -> list[Commit]:
        """Return the commits visible for revset.

        Args:
            revset: Revset expression, or None for the source's default

        Returns:
            Commits in the order the source reports them

        Raises:
            CommitDataError: If the source produced malformed commit data
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """Human-readable description of where commits come from."""
        ...


class JsonFileCommitSource(CommitSource):
    """Reads commits exported as JSON by the log collaborator.

    The revset is not evaluated here; the export is assumed to already be
    the result of running it.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def list_commits(self, revset: str | None) -> list[Commit]:
        if revset is not None:
            logger.debug("Revset %r ignored for pre-exported file %s", revset, self._path)
        try:
            if self._path == STDIN_PATH:
                text = sys.stdin.read()
            else:
                text = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CommitDataError(f"Commit data is not valid UTF-8: {e}") from e
        commits = commits_from_json(text)
        logger.debug("Loaded %d commits from %s", len(commits), self.describe())
        return commits

    def describe(self) -> str:
        if self._path == STDIN_PATH:
            return "<stdin>"
        return str(self._path)
