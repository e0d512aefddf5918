"""Exceptions raised by repository operations.

Every failure coming out of the version-control engine is wrapped in one of
the stage-labeled errors below, so callers can report which step failed
without knowing anything about the engine's own exception types. The engine
exception is kept as ``__cause__``.
"""

from __future__ import annotations


class RepositoryError(Exception):
    """Base class for repository errors carrying a stage label."""

    stage: str = "repository operation failed"

    def __init__(self, cause: BaseException | str | None = None) -> None:
        self.cause = cause
        if cause is None or cause == "":
            message = self.stage
        else:
            message = f"{self.stage}: {cause}"
        super().__init__(message)


class OpenFailure(RepositoryError):
    """The repository could not be opened (missing, corrupt, no permission)."""

    stage = "failed to analyze git repo"


class HeadUnavailable(RepositoryError):
    """The repository was opened but HEAD or its worktree could not be resolved."""

    stage = "failed to infer current branch"


class StatusFailure(RepositoryError):
    """Computing the worktree status failed."""

    stage = "failed to infer status"


class CommitUnavailable(RepositoryError):
    """The commit object or its tree could not be read."""

    stage = "failed to read commit tree"


class StatusCancelledError(RepositoryError):
    """A status scan was cancelled or ran out of time."""

    stage = "status scan cancelled"


class LocalGitError(RuntimeError):
    """The local ``git`` binary failed to produce a status."""


class LocationParseError(ValueError):
    """A git remote location could not be parsed."""
