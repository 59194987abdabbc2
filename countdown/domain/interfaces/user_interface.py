"""Interface for reporting results to the user.

Defines the contract for printing countdown lines, confirmations and errors,
allowing different UI implementations (e.g., plain console, prompt segment).
"""

import abc
from typing import Any, Sequence

from countdown.domain.models.event import CountdownEntry


class UserInterface(abc.ABC):
    """Abstract Base Class for user-facing output."""

    @abc.abstractmethod
    def display_countdowns(self, entries: Sequence[CountdownEntry], **kwargs: Any) -> None:
        """Displays one line per entry, in the given order.

        Args:
            entries: The entries to render. An empty sequence prints nothing.
            **kwargs: Additional arguments for formatting.
        """
        pass

    @abc.abstractmethod
    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message to the user.

        Args:
            info_message: The informational message string.
            **kwargs: Additional arguments for formatting.
        """
        pass

    @abc.abstractmethod
    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message to the user.

        Args:
            error_message: The error message string.
            **kwargs: Additional arguments for formatting.
        """
        pass
