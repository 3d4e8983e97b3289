"""
Repository probing.

This package handles:
1. Building Maven layout artifact URLs
2. Probing repositories with HEAD requests
3. Recording the outcome of every probe
"""

from .artifact_url_resolver import (
    ArtifactUrlResolver,
    ProbeResult,
    ProbeStatus,
    maven_artifact_url,
)

__all__ = ["ArtifactUrlResolver", "ProbeResult", "ProbeStatus", "maven_artifact_url"]
