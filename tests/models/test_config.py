"""Tests for the deploy environment configuration."""

from __future__ import annotations

import pytest

from repoprobe.models.config import DEPLOY_REMOTE_ENV, GIT_COMMIT_ENV, DeployEnvironment


class TestDeployEnvironment:
    """Tests for loading the deploy environment."""

    def test_defaults(self):
        env = DeployEnvironment()

        assert env.git_commit == ""
        assert env.deploy_remote is False
        assert env.is_remote is False

    def test_from_mapping(self):
        env = DeployEnvironment.from_env({GIT_COMMIT_ENV: "1234567890", DEPLOY_REMOTE_ENV: "true"})

        assert env.git_commit == "1234567890"
        assert env.deploy_remote is True
        assert env.is_remote is True

    def test_from_os_environ(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(GIT_COMMIT_ENV, "abcdef")
        monkeypatch.setenv(DEPLOY_REMOTE_ENV, "1")

        env = DeployEnvironment.from_env()

        assert env.git_commit == "abcdef"
        assert env.is_remote is True

    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes", "on", " True "])
    def test_truthy_flags(self, value: str):
        assert DeployEnvironment(deploy_remote=value).deploy_remote is True

    @pytest.mark.parametrize("value", ["", "false", "0", "no", "off", "t", "y", "maybe"])
    def test_falsy_flags(self, value: str):
        assert DeployEnvironment(deploy_remote=value).deploy_remote is False

    def test_remote_without_commit_is_not_remote(self):
        env = DeployEnvironment(deploy_remote=True, git_commit="")

        assert env.is_remote is False

    def test_blank_commit_is_not_remote(self):
        env = DeployEnvironment(deploy_remote=True, git_commit="   ")

        assert env.is_remote is False

    def test_commit_without_remote_flag_is_not_remote(self):
        env = DeployEnvironment(deploy_remote=False, git_commit="1234567890")

        assert env.is_remote is False
