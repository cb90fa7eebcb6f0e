"""Best-effort detection of running Roblox Studio instances."""

import logging

from openrbx.errors import DetectionError
from openrbx.models import HostPlatform
from openrbx.platforms.registry import PlatformRegistry, get_platform_registry
from openrbx.runner import CommandRunner

logger = logging.getLogger(__name__)


class ProcessDetector:
    """Answers whether Studio is already running on the host.

    Detection is advisory: any failure to run or read the probe is reported
    as "not running" so that it never blocks a launch.
    """

    def __init__(
        self,
        registry: PlatformRegistry | None = None,
        runner: CommandRunner | None = None,
    ):
        self.registry = registry or get_platform_registry()
        self.runner = runner or CommandRunner()

    def count_running(self, host: HostPlatform) -> int:
        """Return the number of running Studio processes, 0 when unknown."""
        if not host.is_supported:
            logger.warning(f"Process detection is not supported on {host.name}")
            return 0

        platform = self.registry.for_host(host)
        command = platform.probe_command()
        try:
            output = self.runner.capture(command)
        except DetectionError as e:
            logger.debug(f"Process detection failed, assuming no running instance: {e}")
            return 0

        return platform.parse_count(output)

    def detect(self, host: HostPlatform) -> bool:
        """Check whether at least one Studio process is running."""
        return self.count_running(host) > 0
