"""Machine-readable export of the stack graph."""

import click

from jjstacks.cli.core import load_stack_graph
from jjstacks.cli.json_output import REPORTED_ERRORS, emit_json, emit_json_error
from jjstacks.core.context import JjStacksContext
from jjstacks.core.serialization import layout_stack_graph_to_dict


@click.command("json")
@click.option("--revset", "-r", default=None, help="Revset to export (defaults to config).")
@click.pass_obj
def json_cmd(ctx: JjStacksContext, revset: str | None) -> None:
    """Print stacks, connections and parallel groups as JSON on stdout.

    Errors are reported as a JSON object with "error", "error_type" and
    "exit_code" keys.
    """
    try:
        loaded = load_stack_graph(ctx, revset, json_mode=True)
    except REPORTED_ERRORS as e:
        emit_json_error(str(e), type(e).__name__, exit_code=1)
        return
    emit_json(layout_stack_graph_to_dict(loaded.graph))
