"""Command-line interface for openrbx."""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from openrbx import __version__
from openrbx.config import LauncherConfig
from openrbx.errors import MissingRequiredFieldError
from openrbx.models import DEFAULT_LAUNCH_MODE, DEFAULT_TASK, LaunchParameters, RunOptions
from openrbx.orchestrator import LaunchOrchestrator

console = Console()
err_console = Console(stderr=True)

EPILOG = """\b
Examples:
  openrbx -p 134510530844509 -u 8049025471
  openrbx --place-id 134510530844509 --universe-id 8049025471 --mode edit
  openrbx -p 134510530844509 -u 8049025471 -t EditPlace
  openrbx -p 134510530844509 -u 8049025471 --multiple-process
"""


def setup_logging(verbose: bool) -> None:
    """Configure logging with rich output."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EPILOG,
)
@click.version_option(
    __version__,
    "-v",
    "--version",
    prog_name="openrbx",
    message="%(prog)s v%(version)s",
)
@click.option("-p", "--place-id", default=None, help="ID of the place to open (required)")
@click.option("-u", "--universe-id", default=None, help="ID of the universe (required)")
@click.option(
    "-m",
    "--mode",
    default=DEFAULT_LAUNCH_MODE,
    show_default=True,
    help="Launch mode",
)
@click.option(
    "-t",
    "--task",
    default=DEFAULT_TASK,
    show_default=True,
    help="Task to run",
)
@click.option(
    "--multiple-process",
    is_flag=True,
    default=False,
    help="Launch even if Roblox Studio is already running",
)
@click.option(
    "--no-logs",
    is_flag=True,
    default=False,
    help="Only print warnings and errors",
)
def main(
    place_id: str | None,
    universe_id: str | None,
    mode: str,
    task: str,
    multiple_process: bool,
    no_logs: bool,
) -> None:
    """OpenRBX - Open a Roblox Studio place from the command line."""
    config = LauncherConfig.from_env()
    setup_logging(config.debug)

    params = LaunchParameters(
        place_id=place_id,
        universe_id=universe_id,
        launch_mode=mode,
        task=task,
    )
    options = RunOptions(allow_multiple_instances=multiple_process, quiet=no_logs)

    try:
        orchestrator = LaunchOrchestrator(
            config,
            console=Console(quiet=True) if options.quiet else console,
            err_console=err_console,
        )
        outcome = orchestrator.run(params, options)
    except MissingRequiredFieldError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        err_console.print("Use --help for more information")
        sys.exit(1)
    except Exception as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        if config.debug:
            err_console.print_exception()
        sys.exit(1)

    sys.exit(outcome.exit_code)


if __name__ == "__main__":
    main()
