"""Precondition checks that end the command with a user-facing error."""

from pathlib import Path
from typing import IO, Any, TypeVar

import click

from devscripts.core.context import DevScriptsContext
from devscripts.output import format_error, user_output

T = TypeVar("T")


class UserFacingCliError(click.ClickException):
    """Error shown to the user as a red status line; exits with code 1."""

    def show(self, file: IO[Any] | None = None) -> None:
        user_output(format_error(self.message))


class Ensure:
    """Helper class for CLI precondition checks."""

    @staticmethod
    def not_none(value: T | None, message: str) -> T:
        """Return value unchanged, or fail with message when it is None."""
        if value is None:
            raise UserFacingCliError(message)
        return value

    @staticmethod
    def in_repository(ctx: DevScriptsContext) -> Path:
        """Return the repository root, or fail when not inside a git repository."""
        return Ensure.not_none(ctx.repo_root, "Not in a git repository")
