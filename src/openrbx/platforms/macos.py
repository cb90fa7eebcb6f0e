"""macOS support: ps for detection, ``open`` for launching."""

from openrbx.models import PlatformTarget
from openrbx.platforms.base import BasePlatform, grep_pattern


class MacOSPlatform(BasePlatform):
    @property
    def target(self) -> PlatformTarget:
        return PlatformTarget.MACOS

    def probe_command(self) -> str:
        pattern = grep_pattern(self.detection.macos_process)
        return f'ps -A -o command | grep -i "{pattern}" | wc -l'

    def launch_command(self, url: str) -> list[str]:
        return ["open", url]
