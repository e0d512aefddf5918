"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from repoprobe.models.config import DeployEnvironment
from repoprobe.testing import (
    FakeCommit,
    FakeRepository,
    FakeRepositoryGetter,
    FakeStatus,
    FakeWorktree,
)

HEAD_SHA = "0123456789abcdef0123456789abcdef01234567"
TREE_SHA = "89abcdef0123456789abcdef0123456789abcdef"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def local_env() -> DeployEnvironment:
    return DeployEnvironment()


@pytest.fixture
def remote_env() -> DeployEnvironment:
    return DeployEnvironment(git_commit="1234567890", deploy_remote=True)


@pytest.fixture(autouse=True)
def clean_deploy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Never let the developer's environment pick the control strategy."""
    monkeypatch.delenv("OKTETO_GIT_COMMIT", raising=False)
    monkeypatch.delenv("OKTETO_DEPLOY_REMOTE", raising=False)


@pytest.fixture
def clean_repository() -> FakeRepository:
    """A fake repository with a clean worktree and a resolvable HEAD."""
    return FakeRepository(
        worktree_result=FakeWorktree(status_result=FakeStatus(clean=True)),
        head_sha=HEAD_SHA,
        commit=FakeCommit(tree_sha=TREE_SHA),
    )


@pytest.fixture
def clean_getter(clean_repository: FakeRepository) -> FakeRepositoryGetter:
    return FakeRepositoryGetter(repositories=[clean_repository])


@pytest.fixture
def git_repo(temp_dir: Path) -> Path:
    """Create a real repository with one commit."""
    git = pytest.importorskip("git")
    if shutil.which("git") is None:
        pytest.skip("git binary not installed")

    repo_dir = temp_dir / "repo"
    repo = git.Repo.init(repo_dir)
    with repo.config_writer() as config:
        config.set_value("user", "name", "Test User")
        config.set_value("user", "email", "test@example.com")
        config.set_value("commit", "gpgsign", "false")

    (repo_dir / "README.md").write_text("# test\n")
    (repo_dir / ".gitignore").write_text("*.log\n")
    repo.index.add(["README.md", ".gitignore"])
    repo.index.commit("initial commit")
    repo.close()
    return repo_dir
