"""Data models for extracted Maven dependencies and descriptor files."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
import os

from .versioning import is_valid_version

DEFAULT_MAVEN_REPO = "https://repo.maven.apache.org/maven2"
DATASOURCE = "maven"

DEFAULT_REGISTRY_ENV = "POMSCOPE_DEFAULT_REGISTRY"


class SkipReason(str, Enum):
    """Why a dependency is excluded from automated version handling."""

    NAME_PLACEHOLDER = "name-placeholder"
    VERSION_PLACEHOLDER = "version-placeholder"
    NOT_A_VERSION = "not-a-version"


@dataclass(frozen=True)
class MavenProperty:
    """A single entry of a descriptor's <properties> block."""

    value: str
    source_position: Optional[int]
    owning_file: Optional[str]


@dataclass
class MavenDependency:
    """A dependency coordinate found in a descriptor.

    ``current_value`` holds the raw version text and may still contain a
    ``${...}`` placeholder until the cross-file resolver has run.
    """

    group_artifact: str
    current_value: str
    source_position: Optional[int] = None
    registry_urls: List[str] = field(default_factory=lambda: [DEFAULT_MAVEN_REPO])
    datasource: str = DATASOURCE
    group_name: Optional[str] = None
    resolved_from: Optional[str] = None
    skip_reason: Optional[SkipReason] = None

    def __post_init__(self) -> None:
        """Validate the coordinate."""
        if not self.group_artifact:
            raise ValueError("Dependency name cannot be empty")
        if not self.current_value:
            raise ValueError("Dependency version cannot be empty")

    def mark_skipped(self, reason: SkipReason) -> None:
        """Record why this dependency was skipped.

        Args:
            reason: Skip classification

        Raises:
            ValueError: If a skip reason was already recorded
        """
        if self.skip_reason is not None:
            raise ValueError(
                f"Skip reason already set for {self.group_artifact}: {self.skip_reason.value}"
            )
        self.skip_reason = reason

    def to_dict(self) -> Dict[str, Any]:
        """Convert the dependency to its public dictionary shape.

        Returns:
            Dictionary without resolution bookkeeping fields
        """
        data: Dict[str, Any] = {
            "depName": self.group_artifact,
            "currentValue": self.current_value,
            "fileReplacePosition": self.source_position,
            "registryUrls": list(self.registry_urls),
            "datasource": self.datasource,
        }
        if self.group_name:
            data["groupName"] = self.group_name
        if self.skip_reason is not None:
            data["skipReason"] = self.skip_reason.value
        return data


@dataclass
class PomFile:
    """Extraction result for a single descriptor file."""

    file_id: Optional[str] = None
    dependencies: List[MavenDependency] = field(default_factory=list)
    properties: Optional[Dict[str, MavenProperty]] = field(default_factory=dict)
    declared_repository_urls: List[str] = field(default_factory=list)
    parent_file_id: Optional[str] = None
    datasource: str = DATASOURCE

    def find_dependency(self, group_artifact: str) -> Optional[MavenDependency]:
        """Find a dependency by its ``group:artifact`` name.

        Args:
            group_artifact: Name to look for

        Returns:
            First matching dependency or None
        """
        for dep in self.dependencies:
            if dep.group_artifact == group_artifact:
                return dep
        return None

    def skipped_dependencies(self) -> List[MavenDependency]:
        """Dependencies that carry a skip reason."""
        return [dep for dep in self.dependencies if dep.skip_reason is not None]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the file result to its public dictionary shape.

        Returns:
            Dictionary without the internal property table
        """
        data: Dict[str, Any] = {
            "packageFile": self.file_id,
            "datasource": self.datasource,
            "deps": [dep.to_dict() for dep in self.dependencies],
        }
        if self.parent_file_id:
            data["parent"] = self.parent_file_id
        return data


@dataclass
class ExtractConfig:
    """Configuration for a batch extraction run."""

    default_registry_url: str = DEFAULT_MAVEN_REPO
    max_concurrent: int = 10
    version_checker: Callable[[str], bool] = is_valid_version

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.max_concurrent < 1:
            raise ValueError(f"max_concurrent must be positive: {self.max_concurrent}")
        if not self.default_registry_url:
            raise ValueError("Default registry URL cannot be empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> "ExtractConfig":
        """Build a configuration, honouring environment overrides.

        Args:
            **overrides: Explicit field values, applied last

        Returns:
            Extraction configuration
        """
        values: Dict[str, Any] = {}
        registry = os.environ.get(DEFAULT_REGISTRY_ENV)
        if registry:
            values["default_registry_url"] = registry
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
