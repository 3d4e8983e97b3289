"""
Build snapshot models.

This package provides Pydantic data models for the resolved build state that
the build exports for tweakjson: projects, configurations, declared
dependencies, source sets and repositories.
"""

from .build_snapshot import (
    BuildSnapshot,
    Configuration,
    Coordinate,
    DeclaredDependency,
    Project,
    Repository,
    SourceSet,
)

__all__ = [
    "BuildSnapshot",
    "Configuration",
    "Coordinate",
    "DeclaredDependency",
    "Project",
    "Repository",
    "SourceSet",
]
