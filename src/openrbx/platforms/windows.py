"""Windows support: tasklist for detection, ``start`` for launching."""

from openrbx.models import PlatformTarget
from openrbx.platforms.base import BasePlatform


class WindowsPlatform(BasePlatform):
    @property
    def target(self) -> PlatformTarget:
        return PlatformTarget.WINDOWS

    def probe_command(self) -> str:
        image = self.detection.windows_image
        return f'tasklist /FI "IMAGENAME eq {image}" | find /c /i "{image}"'

    def launch_command(self, url: str) -> list[str]:
        # The empty argument is the window title `start` expects before a target.
        return ["cmd", "/c", "start", "", url]
