"""Platform registry: selects the implementation for the host platform."""

from openrbx.config import DetectionConfig
from openrbx.models import HostPlatform, PlatformTarget
from openrbx.platforms.base import BasePlatform


class PlatformRegistry:
    """Registry of platform implementations keyed by target."""

    def __init__(self):
        self._platforms: dict[PlatformTarget, BasePlatform] = {}

    def register(self, platform: BasePlatform) -> None:
        """Register the implementation for a platform target."""
        self._platforms[platform.target] = platform

    def get_platform(self, target: PlatformTarget) -> BasePlatform | None:
        """Get the implementation for a target, or None if unsupported."""
        return self._platforms.get(target)

    def for_host(self, host: HostPlatform) -> BasePlatform | None:
        return self.get_platform(host.target)


def create_platform_registry(detection: DetectionConfig | None = None) -> PlatformRegistry:
    """Build a registry with the Windows, macOS and Linux implementations."""
    from openrbx.platforms.linux import LinuxPlatform
    from openrbx.platforms.macos import MacOSPlatform
    from openrbx.platforms.windows import WindowsPlatform

    registry = PlatformRegistry()
    registry.register(WindowsPlatform(detection))
    registry.register(MacOSPlatform(detection))
    registry.register(LinuxPlatform(detection))
    return registry


_default_registry: PlatformRegistry | None = None


def get_platform_registry() -> PlatformRegistry:
    """Get the default registry, built with the default detection names."""
    global _default_registry

    if _default_registry is None:
        _default_registry = create_platform_registry()

    return _default_registry
