import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

PYPROJECT_FILE = "pyproject.toml"
LOCAL_CONFIG_FILE = ".devscripts.toml"


class ConfigError(Exception):
    """Raised when a config file holds a value of the wrong type."""


@dataclass(frozen=True)
class DevScriptsConfig:
    """Workflow settings for the contributor branch.

    Example pyproject.toml:
      [tool.devscripts]
      work_branch = "my-feature-branch"
      github_repo = "acme/widgets"
      test_paths = ["tests/unit", "tests/integration"]

    `.devscripts.toml` holds the same keys at top level and overrides
    pyproject.toml. An empty `github_repo` means "derive from the remote URL".
    """

    work_branch: str = "genspark_ai_developer"
    remote: str = "origin"
    trunk: str = "main"
    github_repo: str = "MrBomaye/agentops"
    install_extras: str = "dev"
    test_paths: tuple[str, ...] = field(default=("tests/",))
    env_file: str = ".env"
    env_example: str = ".env.example"
    coverage_html: str = "htmlcov"

    @property
    def upstream_ref(self) -> str:
        """Remote-tracking ref of the trunk, e.g. origin/main."""
        return f"{self.remote}/{self.trunk}"


_STRING_KEYS = (
    "work_branch",
    "remote",
    "trunk",
    "github_repo",
    "install_extras",
    "env_file",
    "env_example",
    "coverage_html",
)


def _parse_table(data: dict[str, Any], source: Path) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for key in _STRING_KEYS:
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, str):
            raise ConfigError(f"{source}: '{key}' must be a string, got {type(value).__name__}")
        overrides[key] = value

    if "test_paths" in data:
        paths = data["test_paths"]
        if isinstance(paths, str):
            paths = [paths]
        if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
            raise ConfigError(f"{source}: 'test_paths' must be a string or a list of strings")
        overrides["test_paths"] = tuple(paths)

    return overrides


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: invalid TOML: {e}") from e


def load_config(repo_root: Path) -> DevScriptsConfig:
    """Load workflow settings for the repository; defaults when nothing is configured.

    Reads `[tool.devscripts]` from pyproject.toml, then overlays
    `.devscripts.toml` when present.
    """
    config = DevScriptsConfig()

    pyproject = repo_root / PYPROJECT_FILE
    if pyproject.exists():
        table = _read_toml(pyproject).get("tool", {}).get("devscripts", {})
        config = replace(config, **_parse_table(table, pyproject))

    local = repo_root / LOCAL_CONFIG_FILE
    if local.exists():
        config = replace(config, **_parse_table(_read_toml(local), local))

    return config
