"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from typing import TYPE_CHECKING, TypeVar

import click

from jjstacks.cli.output import user_output
from jjstacks.core.commit_source import CommitSource

if TYPE_CHECKING:
    from jjstacks.core.context import JjStacksContext

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Provides type narrowing from `T | None` to `T`.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def commit_source(ctx: "JjStacksContext") -> CommitSource:
        """Ensure a commit export was configured for this invocation.

        Raises:
            SystemExit: If neither --commits nor JJSTACKS_COMMITS was given
        """
        return Ensure.not_none(
            ctx.commit_source,
            "No commit data given.\n\n"
            "To fix:\n"
            "  • Pass --commits PATH (use '-' for stdin)\n"
            "  • Or set JJSTACKS_COMMITS=PATH",
        )
