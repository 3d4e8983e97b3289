"""Launcher version manifest generation from exported Gradle build state."""

from .build_models import BuildSnapshot, Coordinate
from .manifest_assembler import ManifestAssembler, WriteOutcome, WriteStatus
from .manifest_models import Library, Manifest
from .repository_probe import ArtifactUrlResolver
from .tweakjson_config import TweakjsonConfig
from .tweakjson_logger import TweakjsonLogger

__all__ = [
    "ArtifactUrlResolver",
    "BuildSnapshot",
    "Coordinate",
    "Library",
    "Manifest",
    "ManifestAssembler",
    "TweakjsonConfig",
    "TweakjsonLogger",
    "WriteOutcome",
    "WriteStatus",
]
