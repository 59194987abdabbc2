"""Command Handler: Orchestrates CLI command execution.

Receives commands from the main entry point (main.py) and delegates the work
to the CountdownEngine (listing) or the EventStore (adding). Domain errors are
reported through the UserInterface and turned into a process exit code.
"""

import logging
from datetime import date
from typing import Callable, Optional

from countdown.core.countdown_engine import CountdownEngine
from countdown.domain.errors import CountdownError
from countdown.domain.interfaces.event_store import EventStore
from countdown.domain.interfaces.user_interface import UserInterface
from countdown.domain.models.event import Event, SortOrder, format_date, parse_date

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class CommandHandler:
    """Handles incoming commands and delegates to the engine or the store."""

    def __init__(
        self,
        engine: CountdownEngine,
        event_store: EventStore,
        ui: UserInterface,
        today: Callable[[], date] = date.today,
    ):
        """Initializes the CommandHandler with its collaborators.

        Args:
            engine: Computes the countdown list.
            event_store: Receives new events.
            ui: Where results and errors are shown.
            today: Returns the current local date; injectable for tests.
        """
        self.engine = engine
        self.event_store = event_store
        self.ui = ui
        self.today = today

    def handle_list(self, order: Optional[SortOrder] = None, limit: Optional[int] = None) -> int:
        """Handles the default command: print upcoming events."""
        logger.info(f"Handling list command with order={order.value if order else 'default'}, limit={limit}")
        try:
            entries = self.engine.countdowns(self.today(), order=order, limit=limit)
        except CountdownError as e:
            logger.info(f"List command failed: {e}")
            self.ui.display_error(str(e))
            return EXIT_FAILURE

        self.ui.display_countdowns(entries)
        return EXIT_OK

    def handle_add_event(self, name: str, date_text: str) -> int:
        """Handles the 'add-event' command: parse, validate and store one event."""
        logger.info(f"Handling add-event command for '{name}' on '{date_text}'")
        try:
            event = Event(name=name.strip(), date=parse_date(date_text))
            self.event_store.append(event)
        except CountdownError as e:
            logger.info(f"Add-event command failed: {e}")
            self.ui.display_error(str(e))
            return EXIT_FAILURE

        self.ui.display_info(f"Added '{event.name}' on {format_date(event.date)}")
        return EXIT_OK
