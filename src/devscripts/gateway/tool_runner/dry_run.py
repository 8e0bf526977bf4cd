"""No-op tool runner for dry-run mode.

Every tool invocation is a mutation (it runs a command), so all calls print
what would have been run and report success.
"""

from pathlib import Path

from devscripts.gateway.tool_runner.abc import ToolResult, ToolRunner
from devscripts.output import user_output


class DryRunToolRunner(ToolRunner):
    def __init__(self, wrapped: ToolRunner) -> None:
        """Create a dry-run wrapper around a ToolRunner implementation.

        Args:
            wrapped: The ToolRunner implementation to wrap
        """
        self._wrapped = wrapped

    def run_tool(self, *, name: str, cmd: list[str], cwd: Path) -> ToolResult:
        """No-op for tool runs in dry-run mode."""
        cmd_str = " ".join(cmd)
        user_output(f"[DRY RUN] Would run {name}: {cmd_str}")
        return ToolResult(passed=True, error_type=None, exit_code=0)
