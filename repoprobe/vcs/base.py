"""Capability interfaces over the version-control engine.

The control strategies only ever talk to these narrow interfaces, so every
code path can be exercised with in-memory doubles instead of a repository on
disk.
"""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

from repoprobe.errors import StatusCancelledError


class StatusContext:
    """Cancellation-bearing context for worktree status scans.

    Status scans on large trees can be slow; the caller may bound them with a
    timeout or cancel them from another thread.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout
        self._deadline = time.monotonic() + timeout if timeout is not None else None
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        if self._cancelled.is_set():
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None without a timeout."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise StatusCancelledError("context cancelled or deadline exceeded")


class GitStatus(ABC):
    """Result of a worktree status scan."""

    @abstractmethod
    def is_clean(self) -> bool:
        """True when there are no modified, added, deleted or untracked files."""
        ...


@dataclass(frozen=True)
class PorcelainStatus(GitStatus):
    """Status parsed from ``git status --porcelain`` output."""

    entries: tuple[str, ...] = ()

    @classmethod
    def from_output(cls, output: str) -> "PorcelainStatus":
        return cls(tuple(line for line in output.splitlines() if line.strip()))

    def is_clean(self) -> bool:
        return not self.entries


@dataclass(frozen=True)
class EngineStatus(GitStatus):
    """Status computed natively by the engine."""

    dirty: bool = False

    def is_clean(self) -> bool:
        return not self.dirty


class LocalGit(ABC):
    """Access to a ``git`` binary installed on the machine."""

    @abstractmethod
    def exists(self) -> bool:
        """Check whether a git binary is available."""
        ...

    @abstractmethod
    def status(self, ctx: StatusContext, repo_root: str) -> str:
        """Return porcelain status output for the worktree at ``repo_root``."""
        ...


class GitCommit(ABC):
    """A commit object."""

    @abstractmethod
    def tree(self) -> str:
        """Return the SHA of the commit's root tree."""
        ...


class GitWorktree(ABC):
    """The checked-out working directory of a repository."""

    @abstractmethod
    def root(self) -> str:
        """Absolute path of the working directory."""
        ...

    @abstractmethod
    def status(self, ctx: StatusContext, local_git: LocalGit) -> GitStatus:
        """Compute the worktree status.

        ``local_git`` may be used in place of, or in addition to, the engine's
        own status computation.
        """
        ...


class GitRepository(ABC):
    """An opened repository.

    Handles are call-scoped: use them as a context manager and drop them when
    the call that produced them ends.
    """

    @abstractmethod
    def worktree(self) -> GitWorktree:
        ...

    @abstractmethod
    def head(self) -> str:
        """Lowercase hex SHA of the commit HEAD points to."""
        ...

    @abstractmethod
    def commit_object(self, sha: str) -> GitCommit:
        ...

    def close(self) -> None:
        """Release engine resources held by the handle."""

    def __enter__(self) -> "GitRepository":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class RepositoryGetter(ABC):
    """Opens repositories from a filesystem path."""

    @abstractmethod
    def get(self, path: str) -> GitRepository:
        """Open the repository at ``path``.

        Any failure (not a repository, permissions, corrupt metadata) is
        raised as is; callers wrap it.
        """
        ...
