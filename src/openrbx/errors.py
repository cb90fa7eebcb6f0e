"""Exceptions raised by openrbx."""


class OpenRbxError(Exception):
    """Base class for all launcher errors."""


class ConfigError(OpenRbxError):
    """The launch request is incomplete or invalid."""


class MissingRequiredFieldError(ConfigError):
    """One or more required launch parameters were not supplied."""

    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        names = ", ".join("--" + f.replace("_", "-") for f in self.fields)
        super().__init__(f"missing required option(s): {names}")


class DetectionError(OpenRbxError):
    """The process probe could not be run or failed.

    Never reaches the user; the detector treats it as "not running".
    """


class ExistingInstanceError(OpenRbxError):
    """An instance of Roblox Studio is already running."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Roblox Studio is already running ({count} process(es) found)")


class LaunchError(OpenRbxError):
    """The protocol URL could not be handed off to the operating system."""


class UnsupportedPlatformError(LaunchError):
    def __init__(self, platform_name: str):
        self.platform_name = platform_name
        super().__init__(f"Failed to launch on: {platform_name}")


class SpawnFailedError(LaunchError):
    def __init__(self, command: list[str], reason: str):
        self.command = list(command)
        self.reason = reason
        super().__init__(f"Could not run {self.command[0]!r}: {reason}")
