"""Tests for FakeToolRunner test infrastructure."""

from pathlib import Path

from devscripts.gateway.tool_runner.abc import COMMAND_NOT_FOUND_EXIT_CODE
from devscripts.gateway.tool_runner.fake import FakeToolRunner, RunCall


def test_fake_tool_runner_passes_by_default(tmp_path: Path) -> None:
    runner = FakeToolRunner()

    result = runner.run_tool(name="pytest", cmd=["pytest", "-v"], cwd=tmp_path)

    assert result.passed is True
    assert result.error_type is None
    assert result.exit_code == 0
    assert runner.run_calls == [RunCall(name="pytest", cmd=["pytest", "-v"], cwd=tmp_path)]


def test_fake_tool_runner_failing_tool(tmp_path: Path) -> None:
    runner = FakeToolRunner(failing_tools={"pytest": 2})

    result = runner.run_tool(name="pytest", cmd=["pytest"], cwd=tmp_path)

    assert result.passed is False
    assert result.error_type == "command_failed"
    assert result.exit_code == 2


def test_fake_tool_runner_missing_command(tmp_path: Path) -> None:
    runner = FakeToolRunner(missing_commands={"pre-commit"})

    result = runner.run_tool(name="pre-commit", cmd=["pre-commit"], cwd=tmp_path)

    assert result.passed is False
    assert result.error_type == "command_not_found"
    assert result.exit_code == COMMAND_NOT_FOUND_EXIT_CODE


def test_fake_tool_runner_tracks_names_in_order(tmp_path: Path) -> None:
    runner = FakeToolRunner()

    runner.run_tool(name="pip", cmd=["pip"], cwd=tmp_path)
    runner.run_tool(name="pre-commit", cmd=["pre-commit"], cwd=tmp_path)

    assert runner.tool_names_run == ["pip", "pre-commit"]
