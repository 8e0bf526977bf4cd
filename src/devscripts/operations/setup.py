"""Development environment setup: editable install, pre-commit hooks, env file."""

import shutil
import sys
from collections.abc import Generator

from devscripts.core.context import DevScriptsContext
from devscripts.events import CompletionEvent, ProgressEvent
from devscripts.operations.types import SetupError, SetupSuccess


def install_target(extras: str) -> str:
    """Editable-install target for pip, e.g. ".[dev]" or "." without extras."""
    if not extras:
        return "."
    return f".[{extras}]"


def execute_setup(
    ctx: DevScriptsContext,
) -> Generator[ProgressEvent | CompletionEvent[SetupSuccess | SetupError]]:
    """Install the project with its dev extras, install hooks, create the env file.

    Yields:
        ProgressEvent for status updates
        CompletionEvent with SetupSuccess, or SetupError naming the failed step
    """
    root = ctx.project_root
    config = ctx.config

    yield ProgressEvent("Setting up development environment...")

    # Step 1: Install dependencies
    yield ProgressEvent("Installing dependencies...")
    install = ctx.tools.run_tool(
        name="pip",
        cmd=[sys.executable, "-m", "pip", "install", "-e", install_target(config.install_extras)],
        cwd=root,
    )
    if not install.passed:
        yield CompletionEvent(
            SetupError(
                error="install_failed",
                message="Failed to install dependencies.",
                exit_code=install.exit_code,
            )
        )
        return

    # Step 2: Install pre-commit hooks
    yield ProgressEvent("Installing pre-commit hooks...")
    hooks = ctx.tools.run_tool(
        name="pre-commit",
        cmd=[sys.executable, "-m", "pre_commit", "install"],
        cwd=root,
    )
    if not hooks.passed:
        yield CompletionEvent(
            SetupError(
                error="hooks_failed",
                message="Failed to install pre-commit hooks.",
                exit_code=hooks.exit_code,
            )
        )
        return

    # Step 3: Create the env file from its example if missing
    env_file = root / config.env_file
    env_example = root / config.env_example
    env_file_created = False
    if not env_file.exists():
        yield ProgressEvent(
            f"{config.env_file} file not found. Creating from {config.env_example}...",
            style="warning",
        )
        if not env_example.exists():
            yield CompletionEvent(
                SetupError(
                    error="env_example_missing",
                    message=f"{config.env_example} not found; cannot create {config.env_file}.",
                    exit_code=1,
                )
            )
            return
        if ctx.dry_run:
            yield ProgressEvent(f"[DRY RUN] Would copy {config.env_example} to {config.env_file}")
        else:
            shutil.copyfile(env_example, env_file)
            env_file_created = True
        yield ProgressEvent(
            f"Please edit {config.env_file} file with your actual API keys", style="warning"
        )

    yield ProgressEvent("Setup complete!", style="success")
    yield CompletionEvent(
        SetupSuccess(env_file_created=env_file_created, message="Setup complete!")
    )
