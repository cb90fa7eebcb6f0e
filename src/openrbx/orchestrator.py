"""Launch orchestrator: validate, build URL, check for Studio, open."""

import logging

from rich.console import Console

from openrbx.config import LauncherConfig
from openrbx.detector import ProcessDetector
from openrbx.errors import ExistingInstanceError, LaunchError
from openrbx.launcher import PlatformLauncher
from openrbx.models import HostPlatform, LaunchOutcome, LaunchParameters, RunOptions
from openrbx.platforms.registry import create_platform_registry
from openrbx.protocol import build_protocol_url
from openrbx.runner import CommandRunner

logger = logging.getLogger(__name__)


class LaunchOrchestrator:
    """Runs one launch attempt from parameters to outcome."""

    def __init__(
        self,
        config: LauncherConfig,
        console: Console | None = None,
        err_console: Console | None = None,
        detector: ProcessDetector | None = None,
        launcher: PlatformLauncher | None = None,
        host: HostPlatform | None = None,
    ):
        self.config = config
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

        if detector is None or launcher is None:
            registry = create_platform_registry(config.detection)
            runner = CommandRunner()
            detector = detector or ProcessDetector(registry, runner)
            launcher = launcher or PlatformLauncher(registry, runner)

        self.detector = detector
        self.launcher = launcher
        self.host = host or HostPlatform.current()

    def run(self, params: LaunchParameters, options: RunOptions) -> LaunchOutcome:
        """Run the launch flow.

        Raises MissingRequiredFieldError before doing anything else if an ID
        is missing. Every other failure is reported and returned as an
        outcome.
        """
        params.validate()

        url = build_protocol_url(params, self.config.scheme)
        self._print_summary(params)
        self._print_debug(f"Protocol URL: {url}")

        if not options.allow_multiple_instances:
            try:
                self._check_no_running_instance()
            except ExistingInstanceError as e:
                self.err_console.print(f"[bold yellow]Warning:[/bold yellow] {e}")
                self.err_console.print(
                    "Close it first or pass --multiple-process to open another instance"
                )
                return LaunchOutcome.ABORTED

        try:
            self.launcher.launch(url, self.host)
        except LaunchError as e:
            logger.debug(f"Launch failed on {self.host.name}", exc_info=True)
            self.err_console.print(f"[bold red]Error:[/bold red] {e}")
            return LaunchOutcome.FAILED

        self.console.print("[green]OK[/green] Roblox Studio launched successfully!")
        return LaunchOutcome.DONE

    def _check_no_running_instance(self) -> None:
        count = self.detector.count_running(self.host)
        self._print_debug(f"Found {count} running Roblox Studio process(es)")
        if count > 0:
            raise ExistingInstanceError(count)

    def _print_summary(self, params: LaunchParameters) -> None:
        self.console.print("[bold blue]Launching Roblox Studio:[/bold blue]")
        self.console.print(f"  Place ID: {params.place_id}")
        self.console.print(f"  Universe ID: {params.universe_id}")
        self.console.print(f"  Mode: {params.launch_mode}")
        self.console.print(f"  Task: {params.task}")

    def _print_debug(self, message: str) -> None:
        """Write a diagnostic line to stderr when DEBUG is set, never folding it."""
        if self.config.debug:
            self.err_console.print(message, markup=False, highlight=False, soft_wrap=True)
