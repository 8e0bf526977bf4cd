from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

ToolErrorType = Literal["command_not_found", "command_failed"]

# Shell convention for "command not found".
COMMAND_NOT_FOUND_EXIT_CODE = 127


@dataclass(frozen=True)
class ToolResult:
    passed: bool
    error_type: ToolErrorType | None
    exit_code: int


class ToolRunner(ABC):
    """Runs developer tools (pip, pytest, coverage, pre-commit) in the foreground.

    Output is not captured: tools stream straight to the user's terminal.
    """

    @abstractmethod
    def run_tool(self, *, name: str, cmd: list[str], cwd: Path) -> ToolResult:
        pass
