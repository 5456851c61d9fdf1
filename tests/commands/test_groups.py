"""Tests for the groups command."""

import json

from click.testing import CliRunner

from jjstacks.cli.cli import cli
from jjstacks.core.context import JjStacksContext
from tests.fakes.context import create_test_context
from tests.test_utils.commits import make_commit

BRANCHES = [make_commit("a"), make_commit("b", ["a"]), make_commit("c", ["a"])]


def test_groups_table() -> None:
    ctx = create_test_context(commits=BRANCHES)

    result = CliRunner().invoke(cli, ["groups"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "parallel-group-0" in result.output
    assert "stack-1, stack-2" in result.output
    assert "open" in result.output


def test_groups_none_found() -> None:
    ctx = create_test_context(commits=[make_commit("a"), make_commit("b", ["a"])])

    result = CliRunner().invoke(cli, ["groups"], obj=ctx)

    assert result.exit_code == 0
    assert "No parallel groups found" in result.output


def test_groups_json() -> None:
    ctx = create_test_context(commits=BRANCHES)

    result = CliRunner().invoke(cli, ["groups", "--format", "json"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "parallelGroups": [
            {
                "id": "parallel-group-0",
                "stackIds": ["stack-1", "stack-2"],
                "parentStacks": ["stack-0"],
                "childStacks": [],
                "isComplete": False,
            }
        ]
    }


def test_groups_json_error_without_commits() -> None:
    """Test that a missing commit source becomes a JSON error in JSON mode."""
    ctx = JjStacksContext.for_test()

    result = CliRunner().invoke(cli, ["groups", "--format", "json"], obj=ctx)

    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert payload["error_type"] == "ValueError"
    assert "No commit data given" in payload["error"]


def test_groups_text_error_without_commits() -> None:
    ctx = JjStacksContext.for_test()

    result = CliRunner().invoke(cli, ["groups"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "JJSTACKS_COMMITS" in result.output
