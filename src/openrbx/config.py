"""Configuration management for openrbx."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_SCHEME = "roblox-studio:1"
DEBUG_ENV_VAR = "DEBUG"


@dataclass
class DetectionConfig:
    """Names used to find running Roblox Studio processes."""

    windows_image: str = "RobloxStudioBeta.exe"
    macos_process: str = "RobloxStudio"
    linux_process: str = "RobloxStudioBeta"


@dataclass
class LauncherConfig:
    """Main configuration for openrbx."""

    scheme: str = DEFAULT_SCHEME
    debug: bool = False
    detection: DetectionConfig = field(default_factory=DetectionConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LauncherConfig":
        """Load configuration from the process environment.

        Only the debug toggle is environment driven: any non-empty value of
        ``DEBUG`` turns it on.
        """
        if environ is None:
            environ = os.environ
        return cls(debug=bool(environ.get(DEBUG_ENV_VAR)))
