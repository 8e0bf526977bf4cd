from dataclasses import dataclass
from pathlib import Path

from devscripts.gateway.tool_runner.abc import (
    COMMAND_NOT_FOUND_EXIT_CODE,
    ToolResult,
    ToolRunner,
)


@dataclass(frozen=True)
class RunCall:
    name: str
    cmd: list[str]
    cwd: Path


class FakeToolRunner(ToolRunner):
    def __init__(
        self,
        *,
        failing_tools: dict[str, int] | None = None,
        missing_commands: set[str] | None = None,
    ) -> None:
        """Create a FakeToolRunner.

        Args:
            failing_tools: Tool name -> exit code for tools that should fail
            missing_commands: Tool names that should report command_not_found
        """
        self._failing_tools = failing_tools if failing_tools is not None else {}
        self._missing_commands = missing_commands if missing_commands is not None else set()
        self._run_calls: list[RunCall] = []

    def run_tool(self, *, name: str, cmd: list[str], cwd: Path) -> ToolResult:
        self._run_calls.append(RunCall(name=name, cmd=cmd, cwd=cwd))

        if name in self._missing_commands:
            return ToolResult(
                passed=False,
                error_type="command_not_found",
                exit_code=COMMAND_NOT_FOUND_EXIT_CODE,
            )

        if name in self._failing_tools:
            return ToolResult(
                passed=False, error_type="command_failed", exit_code=self._failing_tools[name]
            )

        return ToolResult(passed=True, error_type=None, exit_code=0)

    @property
    def run_calls(self) -> list[RunCall]:
        return list(self._run_calls)

    @property
    def tool_names_run(self) -> list[str]:
        return [call.name for call in self._run_calls]
