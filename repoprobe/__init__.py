"""repoprobe - Working tree and commit inspection for local and remote deploys."""

from repoprobe.errors import (
    CommitUnavailable,
    HeadUnavailable,
    OpenFailure,
    RepositoryError,
    StatusFailure,
)
from repoprobe.models.config import DeployEnvironment
from repoprobe.models.location import RepositoryLocation
from repoprobe.repository import Repository

__version__ = "0.1.0"
__all__ = [
    "CommitUnavailable",
    "DeployEnvironment",
    "HeadUnavailable",
    "OpenFailure",
    "Repository",
    "RepositoryError",
    "RepositoryLocation",
    "StatusFailure",
]
