import importlib.util
import logging
import shutil
import subprocess
import sys
from pathlib import Path

from devscripts.gateway.tool_runner.abc import (
    COMMAND_NOT_FOUND_EXIT_CODE,
    ToolResult,
    ToolRunner,
)

logger = logging.getLogger(__name__)


def _is_available(cmd: list[str]) -> bool:
    """Whether the executable, or the module run with `python -m`, can be found."""
    if shutil.which(cmd[0]) is None:
        return False
    # The interpreter always exists; what can be missing is the module it runs
    if cmd[0] == sys.executable and len(cmd) >= 3 and cmd[1] == "-m":
        return importlib.util.find_spec(cmd[2]) is not None
    return True


class RealToolRunner(ToolRunner):
    def run_tool(self, *, name: str, cmd: list[str], cwd: Path) -> ToolResult:
        # LBYL: Check if command exists first
        if not _is_available(cmd):
            logger.debug("Tool '%s' not found: %s", name, " ".join(cmd))
            return ToolResult(
                passed=False,
                error_type="command_not_found",
                exit_code=COMMAND_NOT_FOUND_EXIT_CODE,
            )

        logger.debug("Running tool '%s': %s (cwd=%s)", name, " ".join(cmd), cwd)
        result = subprocess.run(cmd, cwd=cwd, check=False, capture_output=False)
        if result.returncode != 0:
            return ToolResult(
                passed=False, error_type="command_failed", exit_code=result.returncode
            )
        return ToolResult(passed=True, error_type=None, exit_code=0)
