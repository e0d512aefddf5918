"""Repository facade."""

from __future__ import annotations

import logging

from repoprobe.control import RepositoryControl, select_control
from repoprobe.errors import LocationParseError
from repoprobe.models.config import DeployEnvironment
from repoprobe.models.location import RepositoryLocation, parse_location
from repoprobe.vcs.base import LocalGit, RepositoryGetter, StatusContext

logger = logging.getLogger(__name__)

CANONICAL_REPOSITORY_URL = "https://github.com/okteto/okteto"


class Repository:
    """A git repository a tool is operating against.

    Checks whether the project has uncommitted changes and which commit is
    checked out, and compares or reports its remote location without leaking
    credentials.

    Construction never fails: an unparseable location is logged and left
    unset, in which case :meth:`is_equal` is always False and
    :meth:`get_anonymized_repo` returns an empty string.
    """

    def __init__(
        self,
        path: str,
        environment: DeployEnvironment | None = None,
        getter: RepositoryGetter | None = None,
        local_git: LocalGit | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            path: Repository location, either a remote URL or a local path
            environment: Deploy environment facts (defaults to os.environ)
            getter: Opens the on-disk repository (defaults to GitPython)
            local_git: Local git binary used for status scans
        """
        self._path = path
        self._location: RepositoryLocation | None = None
        try:
            self._location = parse_location(path)
        except LocationParseError as e:
            logger.info(f"could not parse url: {e}")

        if environment is None:
            environment = DeployEnvironment.from_env()
        self._control = select_control(path, environment, getter=getter, local_git=local_git)

    @property
    def path(self) -> str:
        return self._path

    @property
    def location(self) -> RepositoryLocation | None:
        return self._location

    @property
    def control(self) -> RepositoryControl:
        return self._control

    def is_clean(self, ctx: StatusContext | None = None) -> bool:
        """Check if the repository has no changes over the current commit."""
        return self._control.is_clean(ctx)

    def get_sha(self) -> str:
        """Return the SHA of the current commit."""
        return self._control.get_sha()

    def get_tree_sha(self) -> str:
        """Return the root tree SHA of the current commit, empty when unknown."""
        return self._control.get_tree_sha()

    def is_equal(self, other: Repository) -> bool:
        """Check if ``other`` points to the same repository as this one."""
        if self._location is None or other.location is None:
            return False
        return self._location.is_equal_to(other.location)

    def get_anonymized_repo(self) -> str:
        """Return the location without credentials, safe to report externally."""
        if self._location is None:
            return ""
        return self._location.anonymized()

    def is_canonical(self, canonical: str = CANONICAL_REPOSITORY_URL) -> bool:
        """Check if this is the project's own repository (used for telemetry)."""
        if self._location is None:
            return False
        try:
            canonical_location = parse_location(canonical)
        except LocationParseError:
            return False
        return self._location.is_equal_to(canonical_location)

    def __repr__(self) -> str:
        return f"Repository({self.get_anonymized_repo()!r}, control={self._control!r})"
