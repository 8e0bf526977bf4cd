"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from devscripts.cli.config import DevScriptsConfig, load_config
from devscripts.gateway.browser.abc import BrowserLauncher
from devscripts.gateway.browser.real import RealBrowserLauncher
from devscripts.gateway.git.abc import Git
from devscripts.gateway.git.dry_run import DryRunGit
from devscripts.gateway.git.real import RealGit
from devscripts.gateway.tool_runner.abc import ToolRunner
from devscripts.gateway.tool_runner.dry_run import DryRunToolRunner
from devscripts.gateway.tool_runner.real import RealToolRunner


@dataclass(frozen=True)
class DevScriptsContext:
    """Immutable context holding all dependencies for the workflow commands.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    repo_root is None when the CLI runs outside a git repository; commands
    that need git check for that through Ensure.in_repository().
    """

    git: Git
    tools: ToolRunner
    browser: BrowserLauncher
    cwd: Path  # Current working directory at CLI invocation
    repo_root: Path | None
    config: DevScriptsConfig
    dry_run: bool

    @property
    def project_root(self) -> Path:
        """Directory the developer tools run in: the repo root, else the cwd."""
        if self.repo_root is not None:
            return self.repo_root
        return self.cwd

    @staticmethod
    def for_test(
        *,
        cwd: Path,
        git: Git | None = None,
        tools: ToolRunner | None = None,
        browser: BrowserLauncher | None = None,
        repo_root: Path | None = None,
        config: DevScriptsConfig | None = None,
        dry_run: bool = False,
    ) -> "DevScriptsContext":
        """Create a context backed by fakes.

        Any gateway not provided is replaced by its fake with default state.
        repo_root defaults to cwd. With dry_run=True the git and tool
        gateways are wrapped in their dry-run wrappers, as in production.
        """
        from devscripts.gateway.browser.fake import FakeBrowserLauncher
        from devscripts.gateway.git.fake import FakeGit
        from devscripts.gateway.tool_runner.fake import FakeToolRunner

        git_ops: Git = git if git is not None else FakeGit()
        tool_ops: ToolRunner = tools if tools is not None else FakeToolRunner()
        if dry_run:
            git_ops = DryRunGit(git_ops)
            tool_ops = DryRunToolRunner(tool_ops)

        return DevScriptsContext(
            git=git_ops,
            tools=tool_ops,
            browser=browser if browser is not None else FakeBrowserLauncher(),
            cwd=cwd,
            repo_root=repo_root if repo_root is not None else cwd,
            config=config if config is not None else DevScriptsConfig(),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool) -> DevScriptsContext:
    """Create production context with real implementations.

    Raises:
        ConfigError: If the repository's config holds invalid values
    """
    cwd = Path.cwd()
    git: Git = RealGit()
    repo_root = git.get_repository_root(cwd)
    config = load_config(repo_root if repo_root is not None else cwd)

    tools: ToolRunner = RealToolRunner()
    if dry_run:
        git = DryRunGit(git)
        tools = DryRunToolRunner(tools)

    return DevScriptsContext(
        git=git,
        tools=tools,
        browser=RealBrowserLauncher(),
        cwd=cwd,
        repo_root=repo_root,
        config=config,
        dry_run=dry_run,
    )
