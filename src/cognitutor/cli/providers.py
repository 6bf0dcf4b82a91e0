"""Tutor construction for CLI commands.

Centralizes creation of the tutor service from environment variables.
Hides configuration details from command implementations.
"""

import typer
from pydantic import ValidationError
from rich.console import Console

from ..config import TutorSettings, build_tutor_service, load_settings
from ..logging_setup import configure_logging
from ..tutor import TutorService

# Default console for output
_console = Console()


def get_settings(console: Console | None = None) -> TutorSettings:
    """Load settings and configure logging from them.

    Raises:
        SystemExit: If an environment variable holds an invalid value
    """
    con = console or _console
    try:
        settings = load_settings()
    except ValidationError as e:
        con.print("[red]Error: invalid tutor configuration[/red]")
        con.print(str(e), markup=False)
        raise typer.Exit(code=1)

    configure_logging(settings.log_level)
    return settings


def get_tutor(console: Console | None = None, offline: bool = False) -> TutorService:
    """Create the tutor service from environment variables.

    Args:
        console: Optional Rich console for output
        offline: Skip the remote provider entirely

    Returns:
        Uninitialized TutorService
    """
    con = console or _console
    settings = get_settings(con)

    try:
        return build_tutor_service(settings, offline=offline)
    except (TypeError, ValueError) as e:
        con.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
