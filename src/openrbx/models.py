"""Data models for openrbx."""

import sys
from dataclasses import dataclass
from enum import Enum

from openrbx.errors import MissingRequiredFieldError

DEFAULT_LAUNCH_MODE = "edit"
DEFAULT_TASK = "EditPlace"


class PlatformTarget(str, Enum):
    """Operating systems the launcher knows how to drive."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_system_name(cls, name: str) -> "PlatformTarget":
        """Determine the target from a ``sys.platform`` style identity."""
        mapping = {
            "win32": cls.WINDOWS,
            "cygwin": cls.WINDOWS,
            "darwin": cls.MACOS,
        }
        name = name.lower()
        if name.startswith("linux"):
            return cls.LINUX
        return mapping.get(name, cls.UNSUPPORTED)


@dataclass(frozen=True)
class HostPlatform:
    """The resolved host platform: its target variant and raw OS identity."""

    target: PlatformTarget
    name: str

    @classmethod
    def from_name(cls, name: str) -> "HostPlatform":
        return cls(target=PlatformTarget.from_system_name(name), name=name)

    @classmethod
    def current(cls) -> "HostPlatform":
        """Resolve the platform of the running interpreter."""
        return cls.from_name(sys.platform)

    @property
    def is_supported(self) -> bool:
        return self.target != PlatformTarget.UNSUPPORTED


@dataclass(frozen=True)
class LaunchParameters:
    """Values embedded in the protocol URL."""

    place_id: str | None = None
    universe_id: str | None = None
    launch_mode: str = DEFAULT_LAUNCH_MODE
    task: str = DEFAULT_TASK

    def missing_fields(self) -> list[str]:
        """Names of required fields that are absent or empty."""
        missing = []
        if not self.place_id:
            missing.append("place_id")
        if not self.universe_id:
            missing.append("universe_id")
        return missing

    def validate(self) -> None:
        """Raise MissingRequiredFieldError unless both IDs are present."""
        missing = self.missing_fields()
        if missing:
            raise MissingRequiredFieldError(missing)


@dataclass(frozen=True)
class RunOptions:
    """Flags controlling a single launch run."""

    allow_multiple_instances: bool = False
    quiet: bool = False


class LaunchOutcome(str, Enum):
    """Terminal state of a launch run."""

    DONE = "done"
    ABORTED = "aborted"
    FAILED = "failed"

    @property
    def exit_code(self) -> int:
        return 0 if self is LaunchOutcome.DONE else 1
