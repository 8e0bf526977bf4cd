"""Tests for the prepare_pr command."""

from dataclasses import replace
from pathlib import Path

from click.testing import CliRunner

from devscripts.cli.cli import cli
from devscripts.core.context import DevScriptsContext
from devscripts.gateway.browser.fake import FakeBrowserLauncher
from devscripts.gateway.git.fake import FakeGit, PushedBranch
from devscripts.gateway.git.types import PushError

WORK_BRANCH = "genspark_ai_developer"
COMPARE_URL = "https://github.com/MrBomaye/agentops/compare/main...genspark_ai_developer"


def _git(tmp_path: Path, *, ahead: int, push_error: PushError | None = None) -> FakeGit:
    return FakeGit(
        current_branches={tmp_path: WORK_BRANCH},
        commits_ahead={(tmp_path, "origin/main"): ahead},
        push_error=push_error,
    )


def test_prepare_pr_message_from_stdin_aborts_at_push_prompt(tmp_path: Path) -> None:
    git = _git(tmp_path, ahead=3)
    ctx = DevScriptsContext.for_test(cwd=tmp_path, git=git)

    result = CliRunner().invoke(cli, ["prepare_pr"], obj=ctx, input="y\nFeature\n")

    # The commit message consumes stdin, so the push prompt aborts
    assert result.exit_code == 1
    assert git.pushed_branches == []
    assert "Preparing for Pull Request..." in result.output
    assert "Step 1: Syncing with main..." in result.output
    assert "Step 2: Squashing commits..." in result.output
    assert "Step 3: Pushing to remote..." in result.output
    assert git.fetched_branches == [(tmp_path, "origin", "main")]
    assert git.commits == [(tmp_path, "Feature")]


def test_prepare_pr_interactive_confirms_reach_push(tmp_path: Path) -> None:
    git = _git(tmp_path, ahead=3)
    ctx = DevScriptsContext.for_test(cwd=tmp_path, git=git)

    result = CliRunner().invoke(cli, ["prepare_pr", "-m", "Feature"], obj=ctx, input="y\ny\n")

    assert result.exit_code == 0, result.output
    assert "Squash all 3 commits?" in result.output
    assert "Push to origin?" in result.output
    assert git.commits == [(tmp_path, "Feature")]
    assert git.pushed_branches == [PushedBranch(remote="origin", branch=WORK_BRANCH, force=True)]
    assert f"GitHub URL: {COMPARE_URL}" in result.output


def test_prepare_pr_with_yes_pushes_and_opens_browser(tmp_path: Path) -> None:
    git = _git(tmp_path, ahead=3)
    browser = FakeBrowserLauncher()
    ctx = DevScriptsContext.for_test(cwd=tmp_path, git=git, browser=browser)

    result = CliRunner().invoke(
        cli, ["prepare_pr", "-m", "Feature", "-y", "--web"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert git.commits == [(tmp_path, "Feature")]
    assert git.pushed_branches == [PushedBranch(remote="origin", branch=WORK_BRANCH, force=True)]
    assert "Pushed successfully!" in result.output
    assert "Next step: Create PR from genspark_ai_developer to main" in result.output
    assert f"GitHub URL: {COMPARE_URL}" in result.output
    assert browser.launched_urls == [COMPARE_URL]


def test_prepare_pr_without_web_does_not_open_browser(tmp_path: Path) -> None:
    browser = FakeBrowserLauncher()
    ctx = DevScriptsContext.for_test(cwd=tmp_path, git=_git(tmp_path, ahead=1), browser=browser)

    result = CliRunner().invoke(cli, ["prepare_pr", "-m", "Feature", "-y"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert browser.launched_urls == []


def test_prepare_pr_push_declined(tmp_path: Path) -> None:
    git = _git(tmp_path, ahead=2)
    ctx = DevScriptsContext.for_test(cwd=tmp_path, git=git)

    result = CliRunner().invoke(cli, ["prepare_pr", "-m", "Feature"], obj=ctx, input="y\nn\n")

    assert result.exit_code == 0, result.output
    assert "Push to origin?" in result.output
    assert git.commits == [(tmp_path, "Feature")]
    assert git.pushed_branches == []


def test_prepare_pr_stops_when_nothing_to_squash(tmp_path: Path) -> None:
    git = _git(tmp_path, ahead=0)
    ctx = DevScriptsContext.for_test(cwd=tmp_path, git=git)

    result = CliRunner().invoke(cli, ["prepare_pr", "-y"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "No commits to squash" in result.output
    assert "Step 3" not in result.output
    assert git.pushed_branches == []


def test_prepare_pr_squash_declined_still_offers_push(tmp_path: Path) -> None:
    git = _git(tmp_path, ahead=2)
    ctx = DevScriptsContext.for_test(cwd=tmp_path, git=git)

    result = CliRunner().invoke(cli, ["prepare_pr"], obj=ctx, input="n\ny\n")

    assert result.exit_code == 0, result.output
    assert git.commits == []
    assert "Step 3: Pushing to remote..." in result.output
    assert len(git.pushed_branches) == 1


def test_prepare_pr_sync_failure_stops_workflow(tmp_path: Path) -> None:
    git = FakeGit(
        current_branches={tmp_path: WORK_BRANCH},
        commits_ahead={(tmp_path, "origin/main"): 2},
        dirty_worktrees={tmp_path},
    )
    ctx = DevScriptsContext.for_test(cwd=tmp_path, git=git)

    result = CliRunner().invoke(cli, ["prepare_pr", "-y"], obj=ctx)

    assert result.exit_code == 1
    assert "Step 2" not in result.output
    assert git.reset_soft_calls == []


def test_prepare_pr_push_failure(tmp_path: Path) -> None:
    git = _git(tmp_path, ahead=2, push_error=PushError(message="remote rejected"))
    ctx = DevScriptsContext.for_test(cwd=tmp_path, git=git)

    result = CliRunner().invoke(cli, ["prepare_pr", "-m", "Feature", "-y"], obj=ctx)

    assert result.exit_code == 1
    assert "remote rejected" in result.output


def test_prepare_pr_detached_head(tmp_path: Path) -> None:
    ctx = DevScriptsContext.for_test(cwd=tmp_path, git=FakeGit())

    result = CliRunner().invoke(cli, ["prepare_pr", "-y"], obj=ctx, input="y\n")

    assert result.exit_code == 1
    assert "Cannot prepare a pull request from a detached HEAD" in result.output


def test_prepare_pr_dry_run(tmp_path: Path) -> None:
    git = _git(tmp_path, ahead=2)
    ctx = DevScriptsContext.for_test(cwd=tmp_path, git=git, dry_run=True)

    result = CliRunner().invoke(cli, ["prepare_pr", "-m", "Feature", "-y"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "[DRY RUN] Would run: git fetch origin main" in result.output
    assert "[DRY RUN] Would run: git reset --soft HEAD~2" in result.output
    assert "[DRY RUN] Would run: git push -f origin genspark_ai_developer" in result.output
    assert git.commits == []
    assert git.pushed_branches == []


def test_prepare_pr_outside_repository_fails_before_branch_prompt(tmp_path: Path) -> None:
    ctx = replace(DevScriptsContext.for_test(cwd=tmp_path), repo_root=None)

    result = CliRunner().invoke(cli, ["prepare_pr", "-y"], obj=ctx)

    assert result.exit_code == 1
    assert "Not in a git repository" in result.output
    assert "Continue anyway?" not in result.output
