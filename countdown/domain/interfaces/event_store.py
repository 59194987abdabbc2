"""Interface for the persisted event collection.

Defines the contract for loading and appending events, allowing the core
application to be independent of the storage format and location.
"""

import abc
from typing import List

from countdown.domain.models.event import Event


class EventStore(abc.ABC):
    """Abstract Base Class for durable event storage."""

    @abc.abstractmethod
    def load(self) -> List[Event]:
        """Reads every stored event, in stored order.

        Returns:
            The stored events, or an empty list if nothing has been stored yet.

        Raises:
            StorageError: If the store exists but cannot be read.
            FormatError: If the stored content cannot be parsed into events.
        """
        pass

    @abc.abstractmethod
    def append(self, event: Event) -> None:
        """Validates an event and adds it after the existing ones.

        A failed append must leave previously stored events intact.

        Raises:
            ValidationError: If the event is invalid (nothing is written).
            StorageError: If the write cannot be completed.
            FormatError: If the existing content cannot be parsed.
        """
        pass
