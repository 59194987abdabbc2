import logging
from typing import Any, Optional, Sequence

from rich.box import HEAVY
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from countdown.domain.interfaces.user_interface import UserInterface
from countdown.domain.models.event import CountdownEntry

logger = logging.getLogger(__name__)

COUNTDOWN_LINE = "{days} days until {name}"


def render_entry(entry: CountdownEntry) -> str:
    return COUNTDOWN_LINE.format(days=entry.days_remaining, name=entry.name)


class ConsoleDisplay(UserInterface):
    """Concrete implementation of UserInterface using the rich library for console output.

    Countdown lines go to stdout as plain text so they can be embedded in a
    shell prompt; errors go to stderr.
    """

    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None):
        """Initializes the rich Consoles."""
        self._console = console or Console(highlight=False)
        self._error_console = error_console or Console(stderr=True, highlight=False)

    @property
    def console(self) -> Console:
        """Get the Rich console instance for direct operations."""
        return self._console

    @property
    def error_console(self) -> Console:
        return self._error_console

    def display_countdowns(self, entries: Sequence[CountdownEntry], **kwargs: Any) -> None:
        """Prints one "<days> days until <name>" line per entry."""
        logger.debug(f"display_countdowns called with {len(entries)} entries")
        for entry in entries:
            # Event names are user text: never interpret them as markup
            self.console.print(render_entry(entry), markup=False, highlight=False, emoji=False, soft_wrap=True)

    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays a one-line informational message.

        Args:
            info_message: The informational message to display.
        """
        self.console.print(Text(info_message, style=kwargs.get("style", "")), soft_wrap=True)

    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message in a distinct style on stderr.

        Args:
            error_message: The error message to display.
        """
        panel = Panel(
            Text(error_message, style="white"),
            title="[bold red]Error[/bold red]",
            border_style="red",
            box=HEAVY,
            padding=(0, 1)
        )
        self.error_console.print(panel)
