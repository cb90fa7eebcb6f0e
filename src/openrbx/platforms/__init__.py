"""Platform-specific process detection and URL opening."""

from openrbx.platforms.base import BasePlatform
from openrbx.platforms.linux import LinuxPlatform
from openrbx.platforms.macos import MacOSPlatform
from openrbx.platforms.registry import (
    PlatformRegistry,
    create_platform_registry,
    get_platform_registry,
)
from openrbx.platforms.windows import WindowsPlatform

__all__ = [
    "BasePlatform",
    "LinuxPlatform",
    "MacOSPlatform",
    "WindowsPlatform",
    "PlatformRegistry",
    "create_platform_registry",
    "get_platform_registry",
]
