"""Data models for repoprobe."""

from repoprobe.models.config import DeployEnvironment
from repoprobe.models.location import RepositoryLocation, comparison_path, parse_location

__all__ = ["DeployEnvironment", "RepositoryLocation", "comparison_path", "parse_location"]
