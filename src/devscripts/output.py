"""User-facing output helpers.

All human-readable output goes to stderr so stdout stays free for tools that
stream their own output (pytest, coverage, pre-commit).
"""

import sys

import click


def user_output(message: str = "") -> None:
    """Write a line of user-facing output to stderr."""
    click.echo(message, err=True)


def user_confirm(prompt: str, *, default: bool) -> bool:
    """Ask a yes/no question on stderr and return the answer."""
    return click.confirm(prompt, default=default, err=True)


def read_multiline_input() -> str:
    """Read standard input until end-of-file (Ctrl+D) and return the text."""
    return sys.stdin.read()


def format_status(message: str) -> str:
    return click.style("[✓]", fg="green") + f" {message}"


def format_error(message: str) -> str:
    return click.style("[✗]", fg="red") + f" {message}"


def format_warning(message: str) -> str:
    return click.style("[!]", fg="yellow") + f" {message}"


def print_status(message: str) -> None:
    user_output(format_status(message))


def print_error(message: str) -> None:
    user_output(format_error(message))


def print_warning(message: str) -> None:
    user_output(format_warning(message))
