"""Base platform interface."""

from abc import ABC, abstractmethod

from openrbx.config import DetectionConfig
from openrbx.models import PlatformTarget


def grep_pattern(name: str) -> str:
    """Bracket the first character so grep does not match its own command line."""
    if not name:
        return name
    return f"[{name[0]}]{name[1:]}"


class BasePlatform(ABC):
    """Abstract base class for OS-specific probe and open commands."""

    def __init__(self, detection: DetectionConfig | None = None):
        self.detection = detection or DetectionConfig()

    @property
    @abstractmethod
    def target(self) -> PlatformTarget:
        """The platform variant this implementation handles."""
        pass

    @abstractmethod
    def probe_command(self) -> str:
        """Shell pipeline printing the number of running Studio processes."""
        pass

    @abstractmethod
    def launch_command(self, url: str) -> list[str]:
        """Command that asks the OS to open the protocol URL."""
        pass

    def parse_count(self, output: str) -> int:
        """Read the process count from probe output.

        Empty or non-numeric output counts as zero processes.
        """
        lines = output.strip().splitlines()
        if not lines:
            return 0
        try:
            count = int(lines[0].strip())
        except ValueError:
            return 0
        return max(count, 0)
