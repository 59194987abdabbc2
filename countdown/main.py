"""Main entry point for the countdown application.

Sets up the Typer CLI application, performs dependency injection (Composition Root),
defines CLI commands, and delegates execution to the CommandHandler.
"""

import logging
from typing import Any, Dict, Optional

import typer
from typing_extensions import Annotated

from countdown import __version__

# --- Core Layer ---
from countdown.core.command_handler import CommandHandler
from countdown.core.countdown_engine import CountdownEngine

# --- Domain Layer ---
from countdown.domain.models.event import DATE_FORMAT_HINT, SortOrder

# --- Infrastructure Layer ---
from countdown.infrastructure.cli.display import ConsoleDisplay
from countdown.infrastructure.config.settings import CountdownSettings, load_settings
from countdown.infrastructure.monitoring.logger_setup import setup_logging
from countdown.infrastructure.storage.yaml_store import YamlEventStore

logger = logging.getLogger(__name__)

# --- Dependency Injection (Manual) ---

def create_dependencies(settings: CountdownSettings, verbose: bool = False) -> Dict[str, Any]:
    """Creates and wires up all dependencies for one invocation.

    This acts as the Composition Root. Settings are passed in explicitly;
    no component reads configuration on its own.
    """
    setup_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
    )
    logger.debug(f"Initializing dependencies with events file {settings.events_file}")

    dependencies: Dict[str, Any] = {'settings': settings}
    dependencies['ui'] = ConsoleDisplay()
    dependencies['event_store'] = YamlEventStore(settings.events_file)
    dependencies['engine'] = CountdownEngine(event_store=dependencies['event_store'])
    dependencies['command_handler'] = CommandHandler(
        engine=dependencies['engine'],
        event_store=dependencies['event_store'],
        ui=dependencies['ui'],
    )
    return dependencies

# --- Typer App Definition ---
app = typer.Typer(
    name="countdown",
    help="Countdown to events you're looking forward to.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"countdown {__version__}")
        raise typer.Exit()

# --- CLI Commands ---

@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    order: Annotated[
        Optional[SortOrder],
        typer.Option("--order", "-o", help="Specify the ordering of the events returned (default: time-asc).")
    ] = None,
    n: Annotated[
        Optional[int],
        typer.Option("-n", "--n", help="Max number of events to display.")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr.")
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-V", callback=version_callback, is_eager=True, help="Show the version and exit.")
    ] = None,
):
    """Lists upcoming events with the days remaining, soonest first."""
    if ctx.invoked_subcommand is not None and (order is not None or n is not None):
        raise typer.BadParameter(
            f"cannot be combined with the '{ctx.invoked_subcommand}' command",
            ctx=ctx,
            param_hint="'-n' / '-o'",
        )
    ctx.obj = create_dependencies(load_settings(), verbose=verbose)

    if ctx.invoked_subcommand is None:
        handler: CommandHandler = ctx.obj['command_handler']
        raise typer.Exit(code=handler.handle_list(order=order, limit=n))


@app.command(name="add-event")
def add_event_command(
    ctx: typer.Context,
    event: Annotated[str, typer.Option("--event", "-e", help="Name of event.")],
    date: Annotated[str, typer.Option("--date", "-d", help=f"Date of event ({DATE_FORMAT_HINT}).")],
):
    """Add new events."""
    handler: CommandHandler = ctx.obj['command_handler']
    raise typer.Exit(code=handler.handle_add_event(event, date))

# --- Main Execution Guard ---

def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    app()  # Typer takes over


if __name__ == "__main__":
    cli_entry_point()
