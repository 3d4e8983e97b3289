"""
Configuration parameters for tweakjson.
"""

import os
from dataclasses import dataclass, field, fields, asdict
from typing import Any, Dict, List, Optional

try:
    import tomllib
except ModuleNotFoundError:
    # Python < 3.11
    import tomli as tomllib

from tweakjson.tweakjson_exceptions import ConfigurationException

DEFAULT_CONFIG_FILE = "tweakjson.toml"

DEFAULT_OUTPUT_PATH = os.path.join("build", "tweaker.json")

# Configurations populated by the Minecraft toolchain plugin itself.
DEFAULT_INTERNAL_CONFIGURATIONS = [
    "minecraftCombinedProvider",
    "minecraftClientProvider",
    "minecraftServerProvider",
    "minecraftLibrariesProvider",
]

MINECRAFT_VERSION_PROPERTY = "minecraft_version"


@dataclass
class TweakjsonConfig:
    """
    Configuration parameters
    """

    minecraft_version: Optional[str] = None
    output_path: str = DEFAULT_OUTPUT_PATH
    internal_configurations: List[str] = field(
        default_factory=lambda: list(DEFAULT_INTERNAL_CONFIGURATIONS)
    )
    source_set: str = "main"
    probe_timeout: float = 10.0

    @classmethod
    def from_dict(cls, env: Dict[str, Any]) -> "TweakjsonConfig":
        """
        Create a TweakjsonConfig instance from a dictionary

        Raises:
            ConfigurationException: If a key is unknown or a value has the wrong type
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(env) - known)
        if unknown:
            raise ConfigurationException(
                f"Unknown configuration keys: {', '.join(unknown)}"
            )

        internal = env.get("internal_configurations", DEFAULT_INTERNAL_CONFIGURATIONS)
        if not isinstance(internal, list) or not all(isinstance(n, str) for n in internal):
            raise ConfigurationException(
                "'internal_configurations' must be a list of configuration names"
            )

        try:
            probe_timeout = float(env.get("probe_timeout", 10.0))
        except (TypeError, ValueError):
            raise ConfigurationException(
                f"'probe_timeout' must be a number, got {env.get('probe_timeout')!r}"
            )
        if probe_timeout <= 0:
            raise ConfigurationException("'probe_timeout' must be positive")

        minecraft_version = env.get("minecraft_version")
        return cls(
            minecraft_version=str(minecraft_version) if minecraft_version is not None else None,
            output_path=str(env.get("output_path", DEFAULT_OUTPUT_PATH)),
            internal_configurations=list(internal),
            source_set=str(env.get("source_set", "main")),
            probe_timeout=probe_timeout,
        )

    @classmethod
    def from_toml(cls, path: str) -> "TweakjsonConfig":
        """
        Load the ``[tweakjson]`` table of a TOML file.

        Raises:
            ConfigurationException: If the file cannot be read or parsed
        """
        try:
            with open(path, "rb") as f:
                toml_dict = tomllib.load(f)
        except OSError as e:
            raise ConfigurationException(f"Failed to read {path}: {e}")
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationException(f"Failed to parse {path}: {e}")

        section = toml_dict.get("tweakjson", {})
        if not isinstance(section, dict):
            raise ConfigurationException(f"'tweakjson' in {path} must be a table")
        return cls.from_dict(section)

    def with_overrides(self, **overrides: Any) -> "TweakjsonConfig":
        """Return a copy with every non-None override applied."""
        merged = asdict(self)
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return TweakjsonConfig.from_dict(merged)
