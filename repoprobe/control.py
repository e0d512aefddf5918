"""Strategies answering repository questions.

A repository is inspected either live, through the version-control engine,
or, inside a remote deploy where no git metadata exists, from the commit that
was resolved before the deploy started. The strategy is chosen once by
:func:`select_control` and never re-evaluated.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from repoprobe.errors import (
    CommitUnavailable,
    HeadUnavailable,
    OpenFailure,
    StatusFailure,
)
from repoprobe.models.config import DeployEnvironment
from repoprobe.vcs.base import GitRepository, LocalGit, RepositoryGetter, StatusContext
from repoprobe.vcs.gitpython import GitPythonRepositoryGetter
from repoprobe.vcs.local import LocalGitCLI

logger = logging.getLogger(__name__)


class RepositoryControl(ABC):
    """Answers whether the worktree is clean and which commit is checked out."""

    @abstractmethod
    def is_clean(self, ctx: StatusContext | None = None) -> bool:
        ...

    @abstractmethod
    def get_sha(self) -> str:
        ...

    @abstractmethod
    def get_tree_sha(self) -> str:
        """SHA of the root tree of the current commit."""
        ...


class LocalRepositoryControl(RepositoryControl):
    """Inspects the repository on disk through a :class:`RepositoryGetter`.

    Every call opens a fresh handle and closes it before returning. Failures
    are wrapped with the stage they happened in and never retried.
    """

    def __init__(
        self,
        path: str,
        getter: RepositoryGetter | None = None,
        local_git: LocalGit | None = None,
    ) -> None:
        self.path = path
        self.getter = getter if getter is not None else GitPythonRepositoryGetter()
        self.local_git = local_git if local_git is not None else LocalGitCLI()

    def _open(self) -> GitRepository:
        try:
            return self.getter.get(self.path)
        except Exception as e:
            raise OpenFailure(e) from e

    def is_clean(self, ctx: StatusContext | None = None) -> bool:
        ctx = ctx if ctx is not None else StatusContext()
        with self._open() as repo:
            try:
                worktree = repo.worktree()
            except Exception as e:
                raise HeadUnavailable(e) from e

            try:
                status = worktree.status(ctx, self.local_git)
            except Exception as e:
                raise StatusFailure(e) from e

            return status.is_clean()

    def get_sha(self) -> str:
        with self._open() as repo:
            try:
                return repo.head().lower()
            except Exception as e:
                raise HeadUnavailable(e) from e

    def get_tree_sha(self) -> str:
        with self._open() as repo:
            try:
                head = repo.head()
            except Exception as e:
                raise HeadUnavailable(e) from e

            try:
                return repo.commit_object(head).tree()
            except Exception as e:
                raise CommitUnavailable(e) from e

    def __repr__(self) -> str:
        return f"LocalRepositoryControl(path={self.path!r})"


class RemoteRepositoryControl(RepositoryControl):
    """Answers from the commit resolved before a remote deploy.

    A remote deploy has no working tree that could be dirty and never touches
    the filesystem.
    """

    def __init__(self, git_commit: str) -> None:
        self.git_commit = git_commit

    def is_clean(self, ctx: StatusContext | None = None) -> bool:
        return True

    def get_sha(self) -> str:
        return self.git_commit

    def get_tree_sha(self) -> str:
        return ""

    def __repr__(self) -> str:
        return f"RemoteRepositoryControl(git_commit={self.git_commit!r})"


def select_control(
    path: str,
    environment: DeployEnvironment,
    getter: RepositoryGetter | None = None,
    local_git: LocalGit | None = None,
) -> RepositoryControl:
    """Pick the strategy for a repository from the deploy environment."""
    if environment.is_remote:
        logger.debug(f"Using remote repository control for commit {environment.git_commit}")
        return RemoteRepositoryControl(environment.git_commit)
    logger.debug(f"Using local repository control for {path}")
    return LocalRepositoryControl(path, getter=getter, local_git=local_git)
