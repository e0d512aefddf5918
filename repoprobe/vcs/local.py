"""Worktree status through the locally installed ``git`` binary."""

from __future__ import annotations

import logging
import shutil
import subprocess

from repoprobe.errors import LocalGitError, StatusCancelledError
from repoprobe.vcs.base import LocalGit, StatusContext

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.1


class LocalGitCLI(LocalGit):
    """Runs ``git status --porcelain`` in a subprocess.

    The git binary honors every ignore source (global excludes, info/exclude,
    nested .gitignore files) and is much faster than the engine on large trees.
    """

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable
        self._resolved: str | None = None

    def exists(self) -> bool:
        if self._resolved is None:
            self._resolved = shutil.which(self.executable) or ""
        return self._resolved != ""

    def status(self, ctx: StatusContext, repo_root: str) -> str:
        if not self.exists():
            raise LocalGitError(f"{self.executable} executable not found")
        ctx.raise_if_cancelled()

        cmd = [self._resolved, "--no-optional-locks", "status", "--porcelain"]
        logger.debug(f"Running {' '.join(cmd)} in {repo_root}")
        try:
            process = subprocess.Popen(
                cmd,
                cwd=repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise LocalGitError(f"failed to run git status: {e}") from e

        while True:
            try:
                stdout, stderr = process.communicate(timeout=POLL_INTERVAL)
                break
            except subprocess.TimeoutExpired:
                if ctx.cancelled:
                    process.kill()
                    process.communicate()
                    raise StatusCancelledError(f"git status in {repo_root} was cancelled")

        if process.returncode != 0:
            raise LocalGitError(
                f"git status exited with code {process.returncode}: {stderr.strip()}"
            )
        return stdout
