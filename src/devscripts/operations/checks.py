"""Test, coverage and lint runs.

Each run streams the tool's own output and stops at the first failing step,
reporting that step's exit code.
"""

import sys
from collections.abc import Generator, Sequence

from devscripts.core.context import DevScriptsContext
from devscripts.events import CompletionEvent, ProgressEvent
from devscripts.gateway.tool_runner.abc import ToolResult
from devscripts.operations.types import ToolRunError, ToolRunSuccess

ToolRunEvents = Generator[ProgressEvent | CompletionEvent[ToolRunSuccess | ToolRunError]]


def _python_module(module: str, *args: str) -> list[str]:
    return [sys.executable, "-m", module, *args]


def _tool_error(tool: str, result: ToolResult) -> ToolRunError:
    if result.error_type == "command_not_found":
        message = f"{tool} not found. Run 'dev-scripts setup' first."
    else:
        message = f"{tool} failed with exit code {result.exit_code}."
    return ToolRunError(tool=tool, message=message, exit_code=result.exit_code)


def execute_tests(ctx: DevScriptsContext, extra_args: Sequence[str]) -> ToolRunEvents:
    """Run pytest verbosely over the configured test paths."""
    yield ProgressEvent("Running tests...")
    result = ctx.tools.run_tool(
        name="pytest",
        cmd=_python_module("pytest", *ctx.config.test_paths, "-v", *extra_args),
        cwd=ctx.project_root,
    )
    if not result.passed:
        yield CompletionEvent(_tool_error("pytest", result))
        return
    yield CompletionEvent(ToolRunSuccess(message="Tests passed."))


def execute_test_coverage(ctx: DevScriptsContext, extra_args: Sequence[str]) -> ToolRunEvents:
    """Run pytest under coverage, then print the report and write the html report."""
    yield ProgressEvent("Running tests with coverage...")
    html_dir = ctx.config.coverage_html
    steps = [
        ("coverage run", _python_module("coverage", "run", "-m", "pytest", *extra_args)),
        ("coverage report", _python_module("coverage", "report")),
        ("coverage html", _python_module("coverage", "html", "-d", html_dir)),
    ]
    for name, cmd in steps:
        result = ctx.tools.run_tool(name=name, cmd=cmd, cwd=ctx.project_root)
        if not result.passed:
            yield CompletionEvent(_tool_error(name, result))
            return

    message = f"Coverage report generated in {html_dir}/index.html"
    yield ProgressEvent(message, style="success")
    yield CompletionEvent(ToolRunSuccess(message=message))


def execute_lint(ctx: DevScriptsContext) -> ToolRunEvents:
    """Run every pre-commit hook against all files."""
    yield ProgressEvent("Running linter...")
    result = ctx.tools.run_tool(
        name="pre-commit",
        cmd=_python_module("pre_commit", "run", "--all-files"),
        cwd=ctx.project_root,
    )
    if not result.passed:
        yield CompletionEvent(_tool_error("pre-commit", result))
        return
    yield CompletionEvent(ToolRunSuccess(message="Lint passed."))
