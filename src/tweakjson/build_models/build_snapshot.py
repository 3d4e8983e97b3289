"""
Pydantic data models for the build snapshot exported by the build.

The build snapshot is a JSON document describing the resolved state of a
Gradle build: its projects, their configurations and declared dependencies,
the files each configuration materializes, the main runtime classpath and the
configured repositories. These models expose the handful of operations the
manifest assembler needs from the build.
"""

import json
import pathlib
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, ValidationError, field_validator

from tweakjson.tweakjson_exceptions import ResolutionException, SnapshotException
from tweakjson.tweakjson_utils import PathUtils


class Coordinate(BaseModel):
    """
    Maven-style coordinates of a declared dependency.

    ``group`` is absent for file and project dependencies; such coordinates
    never make it into a manifest.
    """

    group: Optional[str] = Field(None, description="Dependency group, e.g. org.ow2.asm")
    name: str = Field(..., description="Artifact name")
    version: Optional[str] = Field(None, description="Resolved or declared version")

    class Config:
        frozen = True

    @field_validator("group", "version", mode="before")
    @classmethod
    def blank_as_absent(cls, value):
        """Exporters write missing groups and versions as empty strings too."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def key(self) -> str:
        """Synthetic ``group:name:version`` key used for deduplication."""
        return f"{self.group or ''}:{self.name}:{self.version or ''}"

    @property
    def notation(self) -> str:
        """
        Library name as written into the manifest.

        A versionless coordinate is written as ``group:name`` rather than
        ``group:name:null``, which would name a version literally called null.
        """
        if self.version is None:
            return f"{self.group}:{self.name}"
        return f"{self.group}:{self.name}:{self.version}"

    def __str__(self) -> str:
        return self.key


class DeclaredDependency(Coordinate):
    """
    A dependency declared on a configuration, with the files the configuration
    materializes for it (the artifact itself plus its transitive artifacts).
    """

    files: List[str] = Field(default_factory=list)

    class Config:
        frozen = True
        extra = "allow"

    def coordinate(self) -> Coordinate:
        return Coordinate(group=self.group, name=self.name, version=self.version)


class Configuration(BaseModel):
    """A named set of declared dependencies within a project."""

    name: str
    can_be_resolved: bool = Field(True, alias="canBeResolved")
    resolution_failure: Optional[str] = Field(None, alias="resolutionFailure")
    dependencies: List[DeclaredDependency] = Field(default_factory=list)

    class Config:
        extra = "allow"
        populate_by_name = True

    def resolve(self) -> None:
        """
        Force resolution of the configuration.

        Raises:
            ResolutionException: If the build reported the configuration as unresolvable
        """
        if not self.can_be_resolved:
            raise ResolutionException(self.name, "configuration is not resolvable")
        if self.resolution_failure is not None:
            raise ResolutionException(self.name, self.resolution_failure)

    def files(self, dependency: Coordinate) -> List[str]:
        """
        Files this configuration resolves for ``dependency``.

        Returns:
            Normalized paths, or an empty list if the dependency is not declared here
        """
        for declared in self.dependencies:
            if declared.key == dependency.key:
                return [PathUtils.normalize(f) for f in declared.files]
        return []


class SourceSet(BaseModel):
    """A source set of a project; only its runtime classpath is used."""

    runtime_classpath: List[str] = Field(default_factory=list, alias="runtimeClasspath")

    class Config:
        extra = "allow"
        populate_by_name = True


class Project(BaseModel):
    """A project (build module) of the snapshot."""

    path: str = Field(":", description="Gradle project path, ':' for the root project")
    properties: Dict[str, Any] = Field(default_factory=dict)
    configurations: List[Configuration] = Field(default_factory=list)
    source_sets: Dict[str, SourceSet] = Field(default_factory=dict, alias="sourceSets")

    class Config:
        extra = "allow"
        populate_by_name = True

    def get_configuration(self, name: str) -> Optional[Configuration]:
        for configuration in self.configurations:
            if configuration.name == name:
                return configuration
        return None

    def get_property(self, name: str) -> Optional[Any]:
        return self.properties.get(name)

    def runtime_classpath(self, source_set: str = "main") -> List[str]:
        """
        The runtime classpath of ``source_set``, normalized.

        Raises:
            SnapshotException: If the project has no such source set
        """
        found = self.source_sets.get(source_set)
        if found is None:
            raise SnapshotException(
                f"Source set '{source_set}' not found in project '{self.path}'"
            )
        return [PathUtils.normalize(f) for f in found.runtime_classpath]


class Repository(BaseModel):
    """An artifact repository declared by the build."""

    name: str = Field("", description="Repository name as declared in the build")
    type: str = Field("maven", description="maven, ivy, flatDir, ...")
    url: Optional[str] = Field(None, description="Base URL, if any")

    class Config:
        extra = "allow"

    def is_maven_http(self) -> bool:
        """True for Maven-layout repositories reachable over http or https."""
        if self.type.lower() != "maven" or not self.url:
            return False
        return urlparse(self.url).scheme in ("http", "https")


class BuildSnapshot(BaseModel):
    """
    Complete exported build state.

    Structure:
    {
      "rootProject": Project,
      "project": Project | null,
      "repositories": [Repository, ...]
    }

    ``project`` is the project the manifest is generated for; when absent the
    root project is used.
    """

    root_project: Project = Field(..., alias="rootProject")
    project: Optional[Project] = Field(None)
    repositories: List[Repository] = Field(default_factory=list)

    class Config:
        extra = "allow"
        populate_by_name = True

    @property
    def current_project(self) -> Project:
        return self.project if self.project is not None else self.root_project

    def find_property(self, name: str) -> Optional[Any]:
        """Look a property up on the current project first, then on the root project."""
        value = self.current_project.get_property(name)
        if value is None:
            value = self.root_project.get_property(name)
        return value

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BuildSnapshot":
        """
        Validate a snapshot dictionary.

        Raises:
            SnapshotException: If the data does not match the snapshot schema
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise SnapshotException(f"Invalid build snapshot: {e}")

    @classmethod
    def from_file(cls, path: str) -> "BuildSnapshot":
        """
        Load a snapshot JSON file.

        Raises:
            SnapshotException: If the file cannot be read, parsed or validated
        """
        try:
            data = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
        except OSError as e:
            raise SnapshotException(f"Failed to read build snapshot {path}: {e}")
        except json.JSONDecodeError as e:
            raise SnapshotException(f"Build snapshot {path} is not valid JSON: {e}")
        if not isinstance(data, dict):
            raise SnapshotException(f"Build snapshot {path} must be a JSON object")
        return cls.from_dict(data)
