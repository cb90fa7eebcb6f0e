"""Running external commands."""

import logging
import subprocess
import sys
from typing import Any

from openrbx.errors import DetectionError, SpawnFailedError

logger = logging.getLogger(__name__)


def _detached_popen_kwargs() -> dict[str, Any]:
    """Popen arguments that cut the child loose from this process."""
    kwargs: dict[str, Any] = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
        "close_fds": True,
    }
    if sys.platform == "win32":
        kwargs["creationflags"] = (
            subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
        )
    else:
        kwargs["start_new_session"] = True
    return kwargs


class CommandRunner:
    """Executes the probe and open commands.

    Detection and launching only talk to the OS through this class, so tests
    can swap in a fake.
    """

    def capture(self, command: str) -> str:
        """Run a shell pipeline to completion and return its standard output.

        Raises DetectionError if the command cannot be started or exits
        with a non-zero status.
        """
        logger.debug(f"Running probe: {command}")
        try:
            result = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True,
                stdin=subprocess.DEVNULL,
            )
        except OSError as e:
            raise DetectionError(f"could not run {command!r}: {e}") from e

        if result.returncode != 0:
            raise DetectionError(f"{command!r} exited with status {result.returncode}")
        return result.stdout

    def spawn_and_release(self, argv: list[str]) -> None:
        """Start a detached command and wait only for that command to exit.

        Whatever the command hands off to (the application behind a URL
        scheme) is not tracked. Raises SpawnFailedError if the command
        cannot be started or exits abnormally.
        """
        logger.debug(f"Spawning: {argv}")
        try:
            process = subprocess.Popen(argv, **_detached_popen_kwargs())
        except OSError as e:
            raise SpawnFailedError(argv, str(e)) from e

        returncode = process.wait()
        if returncode != 0:
            raise SpawnFailedError(argv, f"exited with status {returncode}")
