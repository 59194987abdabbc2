"""CountdownEngine: turns stored events into the list shown to the user.

Steps, in order: compute days remaining from today, drop past events,
order what is left, then truncate to the requested limit.
"""

import logging
import random
from datetime import date, datetime
from typing import Iterable, List, Optional, Union

from countdown.core.ordering import order_entries
from countdown.domain.errors import InvalidArgument
from countdown.domain.interfaces.event_store import EventStore
from countdown.domain.models.event import CountdownEntry, Event, SortOrder

logger = logging.getLogger(__name__)


def _as_day(now: Union[date, datetime]) -> date:
    # datetime is a subclass of date; drop the time of day explicitly
    if isinstance(now, datetime):
        return now.date()
    return now


def validate_limit(limit: Optional[int]) -> None:
    if limit is not None and limit <= 0:
        raise InvalidArgument(f"Invalid limit {limit}: must be a positive integer")


def upcoming_entries(events: Iterable[Event], now: Union[date, datetime]) -> List[CountdownEntry]:
    """Pairs each event with its days remaining, dropping events already past.

    An event dated today has 0 days remaining and is kept.
    """
    today = _as_day(now)
    entries = []
    for event in events:
        days = event.days_until(today)
        if days >= 0:
            entries.append(CountdownEntry(event=event, days_remaining=days))
    return entries


def compute_countdowns(
    now: Union[date, datetime],
    events: Iterable[Event],
    order: Optional[SortOrder] = None,
    limit: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[CountdownEntry]:
    """Builds the ordered, truncated display list from ``events``.

    Raises:
        InvalidArgument: If ``limit`` is zero or negative.
    """
    validate_limit(limit)
    events = list(events)
    entries = upcoming_entries(events, now)
    logger.debug(f"{len(entries)} of {len(events)} events are upcoming")

    ordered = order_entries(entries, order, rng)
    if limit is not None:
        ordered = ordered[:limit]
    return ordered


class CountdownEngine:
    """Computes countdowns over the events held by an EventStore."""

    def __init__(self, event_store: EventStore, rng: Optional[random.Random] = None):
        self.event_store = event_store
        self.rng = rng

    def countdowns(
        self,
        now: Union[date, datetime],
        order: Optional[SortOrder] = None,
        limit: Optional[int] = None,
    ) -> List[CountdownEntry]:
        """Loads the stored events and returns what should be displayed.

        The limit is checked before the store is read. Storage and format
        errors from the store propagate unchanged.
        """
        validate_limit(limit)
        events = self.event_store.load()
        return compute_countdowns(now, events, order=order, limit=limit, rng=self.rng)
