"""Deployment environment configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, field_validator

GIT_COMMIT_ENV = "OKTETO_GIT_COMMIT"
DEPLOY_REMOTE_ENV = "OKTETO_DEPLOY_REMOTE"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class DeployEnvironment(BaseModel):
    """Facts about the execution context resolved from the environment.

    A remote deploy runs inside the cluster without any git metadata, so the
    commit has to be resolved beforehand and handed over through
    ``OKTETO_GIT_COMMIT``.
    """

    git_commit: str = Field(default="", description="Pre-resolved commit SHA")
    deploy_remote: bool = Field(default=False, description="Running as a remote deploy")

    model_config = {"frozen": True}

    @field_validator("deploy_remote", mode="before")
    @classmethod
    def _parse_flag(cls, value: object) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_VALUES
        return bool(value)

    @field_validator("git_commit", mode="before")
    @classmethod
    def _parse_commit(cls, value: object) -> str:
        if value is None:
            return ""
        return str(value)

    @property
    def is_remote(self) -> bool:
        """True when the repository state must come from the environment."""
        return self.deploy_remote and self.git_commit.strip() != ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DeployEnvironment":
        """Load the environment facts from ``os.environ`` (or a given mapping)."""
        env = os.environ if environ is None else environ
        return cls(
            git_commit=env.get(GIT_COMMIT_ENV, ""),
            deploy_remote=env.get(DEPLOY_REMOTE_ENV, ""),
        )
