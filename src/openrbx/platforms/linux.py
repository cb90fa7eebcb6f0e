"""Linux support: ps for detection, ``xdg-open`` for launching.

Studio runs under Wine on Linux, so the probe looks for the Windows image
name in process command lines.
"""

from openrbx.models import PlatformTarget
from openrbx.platforms.base import BasePlatform, grep_pattern


class LinuxPlatform(BasePlatform):
    @property
    def target(self) -> PlatformTarget:
        return PlatformTarget.LINUX

    def probe_command(self) -> str:
        pattern = grep_pattern(self.detection.linux_process)
        return f'ps -A -o args | grep -i "{pattern}" | wc -l'

    def launch_command(self, url: str) -> list[str]:
        return ["xdg-open", url]
