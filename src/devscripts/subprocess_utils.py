"""Subprocess helpers shared by the gateways."""

import logging
import os
import subprocess
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Return a copy of the environment that keeps git from prompting.

    Network commands run with a timeout, so an interactive credential prompt
    would only show up as a hang followed by a timeout error.
    """
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def run_subprocess_with_context(
    *,
    cmd: list[str],
    operation_context: str,
    cwd: Path,
    timeout: float | None = None,
    env: Mapping[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, raising a RuntimeError that explains what failed.

    Args:
        cmd: Command and arguments
        operation_context: Short description of the operation for error messages
            (e.g., "fetch branch 'main' from remote 'origin'")
        cwd: Working directory
        timeout: Optional timeout in seconds
        env: Optional environment for the child process

    Returns:
        The completed process with captured text stdout/stderr

    Raises:
        RuntimeError: If the command exits non-zero, times out, or is not found
    """
    cmd_str = " ".join(cmd)
    logger.debug("Running %s (cwd=%s)", cmd_str, cwd)
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
            env=dict(env) if env is not None else None,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        message = f"Failed to {operation_context}\nCommand: {cmd_str}\nExit code: {e.returncode}"
        if stderr:
            message += f"\nstderr: {stderr}"
        raise RuntimeError(message) from e
    except subprocess.TimeoutExpired as e:
        raise RuntimeError(
            f"Failed to {operation_context}\nCommand: {cmd_str}\nTimed out after {timeout}s"
        ) from e
    except FileNotFoundError as e:
        raise RuntimeError(
            f"Failed to {operation_context}\nCommand not found: {cmd[0]}"
        ) from e

    return result
