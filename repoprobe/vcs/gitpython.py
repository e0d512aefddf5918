"""Capability adapters backed by GitPython."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from repoprobe.errors import LocalGitError
from repoprobe.vcs.base import (
    EngineStatus,
    GitCommit,
    GitRepository,
    GitStatus,
    GitWorktree,
    LocalGit,
    PorcelainStatus,
    RepositoryGetter,
    StatusContext,
)

if TYPE_CHECKING:
    import git

logger = logging.getLogger(__name__)


class GitPythonCommit(GitCommit):
    def __init__(self, commit: git.Commit) -> None:
        self._commit = commit

    def tree(self) -> str:
        return self._commit.tree.hexsha


class GitPythonWorktree(GitWorktree):
    """Working directory of a GitPython repository."""

    def __init__(self, repo: git.Repo, root: str) -> None:
        self._repo = repo
        self._root = root

    def root(self) -> str:
        return self._root

    def status(self, ctx: StatusContext, local_git: LocalGit) -> GitStatus:
        """Ask the local git binary first, then fall back to the engine.

        The engine shells out to git as well, so a missing binary is an error
        and not a reason to fall back. Only a failing git call falls back;
        cancellation is never masked by the fallback.
        """
        ctx.raise_if_cancelled()
        if not local_git.exists():
            raise LocalGitError("git executable not found")
        try:
            output = local_git.status(ctx, self._root)
        except LocalGitError as e:
            logger.debug(f"Local git status failed, using engine status: {e}")
        else:
            return PorcelainStatus.from_output(output)

        ctx.raise_if_cancelled()
        return EngineStatus(dirty=self._repo.is_dirty(untracked_files=True))


class GitPythonRepository(GitRepository):
    """Repository handle wrapping ``git.Repo``."""

    def __init__(self, repo: git.Repo) -> None:
        self._repo = repo

    def worktree(self) -> GitWorktree:
        root = self._repo.working_tree_dir
        if root is None:
            raise ValueError(f"repository at {self._repo.git_dir} is bare and has no worktree")
        return GitPythonWorktree(self._repo, str(root))

    def head(self) -> str:
        # Raises ValueError when HEAD points to an unborn branch
        return self._repo.head.commit.hexsha.lower()

    def commit_object(self, sha: str) -> GitCommit:
        return GitPythonCommit(self._repo.commit(sha))

    def close(self) -> None:
        self._repo.close()


class GitPythonRepositoryGetter(RepositoryGetter):
    """Opens on-disk repositories, searching parent directories like git does."""

    def __init__(self, search_parent_directories: bool = True) -> None:
        self.search_parent_directories = search_parent_directories

    def get(self, path: str) -> GitRepository:
        # GitPython fails to import without a git binary, which remote deploys lack
        import git

        repo = git.Repo(path, search_parent_directories=self.search_parent_directories)
        return GitPythonRepository(repo)
