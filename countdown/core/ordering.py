"""Ordering of countdown entries for display.

Pure functions: the input sequence is never modified. Shuffling takes an
injectable ``random.Random`` so callers can make it deterministic.
"""

import logging
import random
from typing import List, Optional, Sequence

from countdown.domain.models.event import DEFAULT_ORDER, CountdownEntry, SortOrder

logger = logging.getLogger(__name__)


def sort_by_time(entries: Sequence[CountdownEntry], ascending: bool = True) -> List[CountdownEntry]:
    """Sorts by days remaining. Ties keep their input order in both directions."""
    return sorted(entries, key=lambda entry: entry.days_remaining, reverse=not ascending)


def shuffle_entries(entries: Sequence[CountdownEntry], rng: Optional[random.Random] = None) -> List[CountdownEntry]:
    """Returns a uniformly random permutation of the entries."""
    shuffled = list(entries)
    (rng or random.Random()).shuffle(shuffled)
    return shuffled


def order_entries(
    entries: Sequence[CountdownEntry],
    order: Optional[SortOrder] = None,
    rng: Optional[random.Random] = None,
) -> List[CountdownEntry]:
    """Arranges entries according to ``order`` (``time-asc`` when None)."""
    order = SortOrder(order) if order is not None else DEFAULT_ORDER
    logger.debug(f"Ordering {len(entries)} entries with mode '{order.value}'")

    if order is SortOrder.SHUFFLE:
        return shuffle_entries(entries, rng)
    if order is SortOrder.TIME_DESC:
        return sort_by_time(entries, ascending=False)
    return sort_by_time(entries, ascending=True)
