"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from jjstacks.core.commit_source import CommitSource, JsonFileCommitSource
from jjstacks.core.config_store import (
    ConfigStore,
    GlobalConfig,
    InMemoryConfigStore,
    RealConfigStore,
)

COMMITS_ENV_VAR = "JJSTACKS_COMMITS"


@dataclass(frozen=True)
class JjStacksContext:
    """Immutable context holding all dependencies for jjstacks commands.

    Created at CLI entry point and threaded through the application.

    commit_source is None when no commit export was given; only commands
    that read commits require it.
    """

    commit_source: CommitSource | None
    config_store: ConfigStore
    global_config: GlobalConfig
    cwd: Path

    @staticmethod
    def for_test(
        commit_source: CommitSource | None = None,
        config_store: ConfigStore | None = None,
        global_config: GlobalConfig | None = None,
        cwd: Path | None = None,
    ) -> "JjStacksContext":
        """Create test context with in-memory defaults.

        Args:
            commit_source: Optional CommitSource (usually FakeCommitSource)
            config_store: Optional ConfigStore. If None, an InMemoryConfigStore
                holding global_config is used.
            global_config: Optional GlobalConfig. If None, uses defaults.
            cwd: Optional working directory. If None, uses Path("/test/default/cwd")
                to prevent accidental use of the real Path.cwd() in tests.
        """
        if global_config is None:
            global_config = GlobalConfig.defaults()
        if config_store is None:
            config_store = InMemoryConfigStore(config=global_config)
        return JjStacksContext(
            commit_source=commit_source,
            config_store=config_store,
            global_config=global_config,
            cwd=cwd or Path("/test/default/cwd"),
        )


def resolve_commits_path(commits: str | None) -> Path | None:
    """Pick the commit export path from the option or the environment."""
    value = commits if commits is not None else os.environ.get(COMMITS_ENV_VAR)
    if not value:
        return None
    return Path(value)


def create_context(*, commits_path: Path | None) -> JjStacksContext:
    """Create production context with real implementations.

    Raises:
        ValueError: If the global config file is malformed
    """
    config_store = RealConfigStore()
    global_config = config_store.load()
    commit_source = JsonFileCommitSource(commits_path) if commits_path is not None else None
    return JjStacksContext(
        commit_source=commit_source,
        config_store=config_store,
        global_config=global_config,
        cwd=Path.cwd(),
    )
