"""Shared helpers for commands that read commits."""

from dataclasses import dataclass

import click

from jjstacks.cli.ensure import Ensure
from jjstacks.cli.output import user_output
from jjstacks.core.commit_types import Commit
from jjstacks.core.context import JjStacksContext
from jjstacks.core.errors import CommitDataError, InvariantViolation
from jjstacks.core.ids import CommitId
from jjstacks.core.parallel_groups import build_layout_stack_graph
from jjstacks.core.stack_types import LayoutStackGraph


@dataclass(frozen=True)
class LoadedGraph:
    """Stack graph plus the commits it was built from."""

    graph: LayoutStackGraph
    commits_by_id: dict[CommitId, Commit]


def load_stack_graph(
    ctx: JjStacksContext, revset: str | None, *, json_mode: bool = False
) -> LoadedGraph:
    """Load commits from the context's source and run the stack pipeline.

    In text mode, failures are reported as a styled error and exit code 1.
    In JSON mode they propagate so json_error_boundary can report them.

    Raises:
        SystemExit: On failure in text mode
        ValueError: If no commit source is configured (JSON mode)
        CommitDataError: On malformed commit data (JSON mode)
        InvariantViolation: If the commits do not form a DAG (JSON mode)
    """
    if json_mode and ctx.commit_source is None:
        raise ValueError("No commit data given. Pass --commits PATH or set JJSTACKS_COMMITS")
    source = Ensure.commit_source(ctx)

    effective_revset = revset if revset is not None else ctx.global_config.default_revset
    try:
        commits = source.list_commits(effective_revset)
        graph = build_layout_stack_graph(commits)
    except (CommitDataError, InvariantViolation, OSError) as e:
        if json_mode:
            raise
        user_output(click.style("Error: ", fg="red") + f"{e} (source: {source.describe()})")
        raise SystemExit(1) from e

    commits_by_id: dict[CommitId, Commit] = {}
    for commit in commits:
        commits_by_id.setdefault(commit.id, commit)
    return LoadedGraph(graph=graph, commits_by_id=commits_by_id)
