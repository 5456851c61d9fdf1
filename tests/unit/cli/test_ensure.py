"""Tests for CLI Ensure utility class."""

import pytest

from jjstacks.cli.ensure import Ensure
from jjstacks.core.context import JjStacksContext
from tests.fakes.commit_source import FakeCommitSource
from tests.fakes.context import create_test_context


class TestEnsureNotNone:
    """Tests for Ensure.not_none method."""

    def test_returns_value_when_not_none(self) -> None:
        result = Ensure.not_none("hello", "Value is None")
        assert result == "hello"

    def test_exits_when_none(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            Ensure.not_none(None, "Value is None")
        assert exc_info.value.code == 1

    def test_error_message_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ensure.not_none outputs error message with red Error prefix to stderr."""
        with pytest.raises(SystemExit):
            Ensure.not_none(None, "Custom error message")

        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "Custom error message" in captured.err
        assert captured.out == ""

    def test_zero_is_not_none(self) -> None:
        assert Ensure.not_none(0, "Value is None") == 0


class TestEnsureCommitSource:
    def test_returns_configured_source(self) -> None:
        source = FakeCommitSource()
        ctx = create_test_context(commit_source=source)

        assert Ensure.commit_source(ctx) is source

    def test_exits_without_source(self, capsys: pytest.CaptureFixture[str]) -> None:
        ctx = JjStacksContext.for_test()

        with pytest.raises(SystemExit):
            Ensure.commit_source(ctx)

        assert "--commits" in capsys.readouterr().err
