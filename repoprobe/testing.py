"""In-memory doubles for the version-control capability interfaces.

They let the control strategies be exercised without a repository on disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from repoprobe.vcs.base import (
    GitCommit,
    GitRepository,
    GitStatus,
    GitWorktree,
    LocalGit,
    RepositoryGetter,
    StatusContext,
)


@dataclass
class FakeStatus(GitStatus):
    clean: bool = True

    def is_clean(self) -> bool:
        return self.clean


@dataclass
class FakeCommit(GitCommit):
    tree_sha: str = ""
    err: Exception | None = None

    def tree(self) -> str:
        if self.err is not None:
            raise self.err
        return self.tree_sha


@dataclass
class FakeLocalGit(LocalGit):
    available: bool = False
    output: str = ""
    err: Exception | None = None
    calls: list[str] = field(default_factory=list)

    def exists(self) -> bool:
        return self.available

    def status(self, ctx: StatusContext, repo_root: str) -> str:
        self.calls.append(repo_root)
        if self.err is not None:
            raise self.err
        return self.output


@dataclass
class FakeWorktree(GitWorktree):
    status_result: GitStatus = field(default_factory=FakeStatus)
    root_path: str = "/tmp/repo"
    err: Exception | None = None
    received: list[tuple[StatusContext, LocalGit]] = field(default_factory=list)

    def root(self) -> str:
        return self.root_path

    def status(self, ctx: StatusContext, local_git: LocalGit) -> GitStatus:
        self.received.append((ctx, local_git))
        if self.err is not None:
            raise self.err
        return self.status_result


@dataclass
class FakeRepository(GitRepository):
    """Repository double.

    ``err`` is raised by every method; ``fail_in_commit`` restricts it to
    :meth:`commit_object` so HEAD still resolves.
    """

    worktree_result: FakeWorktree | None = None
    head_sha: str = ""
    commit: FakeCommit | None = None
    fail_in_commit: bool = False
    err: Exception | None = None
    closed: bool = False

    def worktree(self) -> GitWorktree:
        if self.err is not None and not self.fail_in_commit:
            raise self.err
        return self.worktree_result if self.worktree_result is not None else FakeWorktree()

    def head(self) -> str:
        if self.err is not None and not self.fail_in_commit:
            raise self.err
        return self.head_sha

    def commit_object(self, sha: str) -> GitCommit:
        if self.err is not None:
            raise self.err
        return self.commit if self.commit is not None else FakeCommit()

    def close(self) -> None:
        self.closed = True


@dataclass
class FakeRepositoryGetter(RepositoryGetter):
    """Returns the n-th repository (or raises the n-th error) on the n-th call."""

    repositories: list[FakeRepository] = field(default_factory=list)
    errors: list[Exception | None] = field(default_factory=list)
    call_count: int = 0
    paths: list[str] = field(default_factory=list)

    def get(self, path: str) -> GitRepository:
        i = self.call_count
        self.call_count += 1
        self.paths.append(path)
        if i < len(self.errors) and self.errors[i] is not None:
            raise self.errors[i]
        return self.repositories[i]
