"""Hands protocol URLs to the operating system."""

import logging

from openrbx.errors import UnsupportedPlatformError
from openrbx.models import HostPlatform
from openrbx.platforms.registry import PlatformRegistry, get_platform_registry
from openrbx.runner import CommandRunner

logger = logging.getLogger(__name__)


class PlatformLauncher:
    """Opens a protocol URL with the host's URL-scheme handler."""

    def __init__(
        self,
        registry: PlatformRegistry | None = None,
        runner: CommandRunner | None = None,
    ):
        self.registry = registry or get_platform_registry()
        self.runner = runner or CommandRunner()

    def launch(self, url: str, host: HostPlatform) -> None:
        """Open the URL and return once the OS has taken it over.

        Raises UnsupportedPlatformError when the host has no known open
        command and SpawnFailedError when the open command fails.
        """
        if not host.is_supported:
            raise UnsupportedPlatformError(host.name)

        platform = self.registry.for_host(host)
        command = platform.launch_command(url)
        logger.debug(f"Opening protocol URL with {command[0]}")
        self.runner.spawn_and_release(command)
