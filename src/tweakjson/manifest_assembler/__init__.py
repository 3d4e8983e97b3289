"""
Manifest assembly.

This package handles:
1. Collecting the declared dependencies of the build
2. Keeping the ones present on the runtime classpath
3. Resolving their download URLs
4. Writing the launcher manifest
"""

from .assembler import (
    ConfigurationDependencyPair,
    ManifestAssembler,
    WriteOutcome,
    WriteStatus,
)

__all__ = ["ConfigurationDependencyPair", "ManifestAssembler", "WriteOutcome", "WriteStatus"]
