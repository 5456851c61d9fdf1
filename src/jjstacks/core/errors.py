"""Exceptions raised by the stack decomposition pipeline."""

from jjstacks.core.ids import CommitId


class InvariantViolation(Exception):
    """The commit graph breaks a precondition the pipeline relies on.

    Raised for self-parented commits and for cycles met while walking a
    chain. Both mean the upstream commit source produced a non-DAG.
    """

    def __init__(self, message: str, *, commit_id: CommitId) -> None:
        super().__init__(message)
        self.commit_id = commit_id


class CommitDataError(ValueError):
    """Commit records from the transport layer failed validation."""
