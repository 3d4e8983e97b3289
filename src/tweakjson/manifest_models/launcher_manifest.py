"""
Pydantic data models for the launcher version manifest.

The manifest is a version JSON understood by the vanilla launcher: it inherits
everything from the base game version and adds a tweaker argument plus the
libraries the mod needs at runtime.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

LAUNCHWRAPPER_MAIN_CLASS = "net.minecraft.launchwrapper.Launch"
TWEAK_CLASS = "baritone.launch.BaritoneTweaker"
RELEASE_TYPE = "release"


# ============================================================================
# Libraries
# ============================================================================


class Library(BaseModel):
    """A library entry; ``url`` is only set when a repository hosts the jar."""

    name: str = Field(..., description="group:name:version notation")
    url: Optional[str] = Field(None, description="Direct jar URL")


# ============================================================================
# Arguments
# ============================================================================


class Arguments(BaseModel):
    """Launch arguments appended to those of the inherited version."""

    game: List[str] = Field(
        default_factory=lambda: ["--tweakClass", TWEAK_CLASS],
    )


# ============================================================================
# Manifest
# ============================================================================


class Manifest(BaseModel):
    """
    Complete launcher manifest.

    Field declaration order is the key order of the written JSON.
    """

    id: str
    type: str = Field(RELEASE_TYPE)
    inherits_from: str = Field(..., alias="inheritsFrom")
    jar: str
    time: str
    release_time: str = Field(..., alias="releaseTime")
    downloads: Dict[str, Any] = Field(default_factory=dict)
    minimum_launcher_version: int = Field(0, alias="minimumLauncherVersion")
    main_class: str = Field(LAUNCHWRAPPER_MAIN_CLASS, alias="mainClass")
    arguments: Arguments = Field(default_factory=Arguments)
    libraries: List[Library] = Field(default_factory=list)

    class Config:
        populate_by_name = True

    @classmethod
    def for_version(
        cls, mc_version: str, timestamp: str, libraries: List[Library]
    ) -> "Manifest":
        """
        Build the manifest for ``mc_version``; ``timestamp`` is used for both
        ``time`` and ``releaseTime``.
        """
        return cls(
            id=mc_version,
            inherits_from=mc_version,
            jar=mc_version,
            time=timestamp,
            release_time=timestamp,
            libraries=libraries,
        )

    def to_launcher_dict(self) -> Dict[str, Any]:
        """
        Convert to the launcher format with camelCase keys.

        Libraries without a url carry no ``url`` key at all.
        """
        return self.model_dump(by_alias=True, exclude_none=True)
