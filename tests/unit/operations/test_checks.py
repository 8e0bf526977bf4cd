"""Tests for the test, coverage and lint operations."""

import sys
from pathlib import Path

from devscripts.cli.config import DevScriptsConfig
from devscripts.core.context import DevScriptsContext
from devscripts.gateway.tool_runner.fake import FakeToolRunner
from devscripts.operations.checks import execute_lint, execute_test_coverage, execute_tests
from devscripts.operations.types import ToolRunError, ToolRunSuccess

from tests.unit.operations.conftest import collect_events, has_event_containing


class TestExecuteTests:
    def test_runs_pytest_verbosely_over_test_paths(self, tmp_path: Path) -> None:
        tools = FakeToolRunner()
        ctx = DevScriptsContext.for_test(cwd=tmp_path, tools=tools)

        events, result = collect_events(execute_tests(ctx, ()))

        assert isinstance(result, ToolRunSuccess)
        assert tools.run_calls[0].name == "pytest"
        assert tools.run_calls[0].cmd == [sys.executable, "-m", "pytest", "tests/", "-v"]
        assert has_event_containing(events, "Running tests...")

    def test_passes_extra_args_through(self, tmp_path: Path) -> None:
        tools = FakeToolRunner()
        config = DevScriptsConfig(test_paths=("tests/unit", "tests/integration"))
        ctx = DevScriptsContext.for_test(cwd=tmp_path, tools=tools, config=config)

        collect_events(execute_tests(ctx, ("-k", "sync", "-x")))

        assert tools.run_calls[0].cmd[3:] == [
            "tests/unit",
            "tests/integration",
            "-v",
            "-k",
            "sync",
            "-x",
        ]

    def test_failure_carries_exit_code(self, tmp_path: Path) -> None:
        tools = FakeToolRunner(failing_tools={"pytest": 1})
        ctx = DevScriptsContext.for_test(cwd=tmp_path, tools=tools)

        _, result = collect_events(execute_tests(ctx, ()))

        assert isinstance(result, ToolRunError)
        assert result.exit_code == 1
        assert result.message == "pytest failed with exit code 1."

    def test_missing_tool_suggests_setup(self, tmp_path: Path) -> None:
        tools = FakeToolRunner(missing_commands={"pytest"})
        ctx = DevScriptsContext.for_test(cwd=tmp_path, tools=tools)

        _, result = collect_events(execute_tests(ctx, ()))

        assert isinstance(result, ToolRunError)
        assert result.exit_code == 127
        assert "Run 'dev-scripts setup' first" in result.message


class TestExecuteTestCoverage:
    def test_runs_coverage_then_report_then_html(self, tmp_path: Path) -> None:
        tools = FakeToolRunner()
        ctx = DevScriptsContext.for_test(cwd=tmp_path, tools=tools)

        events, result = collect_events(execute_test_coverage(ctx, ("-x",)))

        assert isinstance(result, ToolRunSuccess)
        assert tools.tool_names_run == ["coverage run", "coverage report", "coverage html"]
        assert tools.run_calls[0].cmd[1:] == ["-m", "coverage", "run", "-m", "pytest", "-x"]
        assert tools.run_calls[2].cmd[-2:] == ["-d", "htmlcov"]
        assert has_event_containing(events, "Coverage report generated in htmlcov/index.html")

    def test_stops_at_first_failing_step(self, tmp_path: Path) -> None:
        tools = FakeToolRunner(failing_tools={"coverage run": 1})
        ctx = DevScriptsContext.for_test(cwd=tmp_path, tools=tools)

        events, result = collect_events(execute_test_coverage(ctx, ()))

        assert isinstance(result, ToolRunError)
        assert result.tool == "coverage run"
        assert tools.tool_names_run == ["coverage run"]
        assert not has_event_containing(events, "Coverage report generated")


class TestExecuteLint:
    def test_runs_all_hooks(self, tmp_path: Path) -> None:
        tools = FakeToolRunner()
        ctx = DevScriptsContext.for_test(cwd=tmp_path, tools=tools)

        events, result = collect_events(execute_lint(ctx))

        assert isinstance(result, ToolRunSuccess)
        assert tools.run_calls[0].cmd == [
            sys.executable,
            "-m",
            "pre_commit",
            "run",
            "--all-files",
        ]
        assert has_event_containing(events, "Running linter...")

    def test_failure_propagates_exit_code(self, tmp_path: Path) -> None:
        tools = FakeToolRunner(failing_tools={"pre-commit": 3})
        ctx = DevScriptsContext.for_test(cwd=tmp_path, tools=tools)

        _, result = collect_events(execute_lint(ctx))

        assert isinstance(result, ToolRunError)
        assert result.exit_code == 3
