"""
This file contains various exceptions raised by tweakjson.
"""


class TweakjsonException(Exception):
    """
    Base exception for all tweakjson errors.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationException(TweakjsonException):
    """Raised when the tweakjson configuration is missing or invalid."""

    pass


class SnapshotException(TweakjsonException):
    """Raised when a build snapshot cannot be read or does not match the schema."""

    pass


class ResolutionException(TweakjsonException):
    """
    Raised when a configuration of the build cannot be resolved.

    This is fatal for a manifest run and is never caught by the assembler.
    """

    def __init__(self, configuration_name: str, reason: str):
        super().__init__(
            f"Could not resolve all files for configuration '{configuration_name}': {reason}"
        )
        self.configuration_name = configuration_name
        self.reason = reason
