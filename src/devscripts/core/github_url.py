"""GitHub repository slug and compare-URL helpers."""

import re

_GITHUB_REMOTE_PATTERNS = (
    re.compile(r"^https?://(?:[^@/]+@)?github\.com/(?P<repo>[^/]+/[^/]+?)(?:\.git)?/?$"),
    re.compile(r"^git@github\.com:(?P<repo>[^/]+/[^/]+?)(?:\.git)?$"),
    re.compile(r"^ssh://git@github\.com/(?P<repo>[^/]+/[^/]+?)(?:\.git)?/?$"),
)


def parse_github_repo(remote_url: str) -> str | None:
    """Extract "owner/name" from a GitHub remote URL.

    Supports https, scp-style ssh and ssh:// URLs. Returns None for anything
    that is not a github.com remote.
    """
    url = remote_url.strip()
    for pattern in _GITHUB_REMOTE_PATTERNS:
        match = pattern.match(url)
        if match is not None:
            return match.group("repo")
    return None


def compare_url(repo: str, base: str, head: str) -> str:
    """URL of the GitHub page that opens a pull request from head into base."""
    return f"https://github.com/{repo}/compare/{base}...{head}"
