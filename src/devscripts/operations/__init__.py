"""Workflow operations - business logic without CLI dependencies.

Each operation:
- Takes explicit dependencies (DevScriptsContext) instead of using global state
- Yields ProgressEvent for progress updates instead of printing
- Yields CompletionEvent with the final result

CLI layers consume these generators and handle rendering and prompts.
"""

from devscripts.operations.checks import execute_lint, execute_test_coverage, execute_tests
from devscripts.operations.push import execute_push
from devscripts.operations.setup import execute_setup
from devscripts.operations.squash import count_squashable_commits, execute_squash
from devscripts.operations.sync import execute_sync

__all__ = [
    "count_squashable_commits",
    "execute_lint",
    "execute_push",
    "execute_setup",
    "execute_squash",
    "execute_sync",
    "execute_test_coverage",
    "execute_tests",
]
