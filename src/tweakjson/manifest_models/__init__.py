"""
Launcher manifest models.
"""

from .launcher_manifest import (
    Arguments,
    LAUNCHWRAPPER_MAIN_CLASS,
    Library,
    Manifest,
    TWEAK_CLASS,
)

__all__ = [
    "Arguments",
    "LAUNCHWRAPPER_MAIN_CLASS",
    "Library",
    "Manifest",
    "TWEAK_CLASS",
]
