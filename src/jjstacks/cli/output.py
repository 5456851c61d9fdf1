"""Output utilities for CLI commands with clear intent.

user_output() is for messages meant for a person and goes to stderr.
machine_output() is for data meant for other programs and goes to stdout.
Keeping the streams apart lets `jjstacks json > graph.json` stay clean.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    click.echo(message, nl=nl)
