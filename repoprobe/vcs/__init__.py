"""Version-control capability interfaces and their adapters."""

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
from repoprobe.vcs.gitpython import GitPythonRepositoryGetter
from repoprobe.vcs.local import LocalGitCLI

__all__ = [
    "EngineStatus",
    "GitCommit",
    "GitPythonRepositoryGetter",
    "GitRepository",
    "GitStatus",
    "GitWorktree",
    "LocalGit",
    "LocalGitCLI",
    "PorcelainStatus",
    "RepositoryGetter",
    "StatusContext",
]
