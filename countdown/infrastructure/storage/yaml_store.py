"""Concrete implementation of the EventStore interface backed by a YAML file.

The file holds a single mapping::

    events:
      - name: Launch
        date: {day: 10, month: 6, year: 2030}

Saves go through a temporary file in the same directory that is then moved
over the target with ``os.replace``, so a failed write never truncates the
events already stored.
"""

import logging
import os
import stat
import tempfile
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from countdown.domain.errors import FormatError, StorageError
from countdown.domain.interfaces.event_store import EventStore
from countdown.domain.models.event import Event, is_valid_calendar_date

logger = logging.getLogger(__name__)

EVENTS_KEY = "events"


def event_to_record(event: Event) -> Dict[str, Any]:
    return {
        "name": event.name,
        "date": {"day": event.date.day, "month": event.date.month, "year": event.date.year},
    }


def record_to_event(record: Any, index: int, path: Path) -> Event:
    """Converts one stored record into an Event.

    Raises:
        FormatError: If the record is missing a field or holds an invalid value.
    """
    where = f"{path}: event #{index + 1}"
    if not isinstance(record, dict):
        raise FormatError(f"{where} is not a mapping", path)

    name = record.get("name")
    if not isinstance(name, str) or not name.strip():
        raise FormatError(f"{where} has a missing or empty name", path)

    raw_date = record.get("date")
    if not isinstance(raw_date, dict):
        raise FormatError(f"{where} ('{name}') has a missing or malformed date", path)

    parts = []
    for field in ("day", "month", "year"):
        value = raw_date.get(field)
        # bool is an int subclass; 'true' is not a day
        if not isinstance(value, int) or isinstance(value, bool):
            raise FormatError(f"{where} ('{name}') has a non-integer date {field}", path)
        parts.append(value)

    day, month, year = parts
    if not is_valid_calendar_date(day, month, year):
        raise FormatError(f"{where} ('{name}') has an invalid date {day:02d}-{month:02d}-{year:04d}", path)
    return Event(name=name, date=date(year, month, day))


class YamlEventStore(EventStore):
    """Implementation of EventStore for a YAML file on the local disk."""

    def __init__(self, path: Union[str, Path]):
        """Initializes the store. Nothing is read or created until first use."""
        self.path = Path(path).expanduser()
        logger.debug(f"YamlEventStore initialized with file: {self.path}")

    def load(self) -> List[Event]:
        """Reads all events; a file that does not exist yet yields an empty list."""
        if not self.path.exists():
            logger.debug(f"Event file not found, starting empty: {self.path}")
            return []

        try:
            content = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"Failed to decode event file {self.path}: {e}", self.path) from e
        except OSError as e:
            logger.debug(f"Error reading event file {self.path}: {e}")
            raise StorageError(f"Failed to read event file {self.path}: {e}", self.path) from e

        try:
            document = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise FormatError(f"Failed to parse event file {self.path}: {e}", self.path) from e

        if document is None:
            return []
        if not isinstance(document, dict):
            raise FormatError(f"{self.path}: expected a mapping with an '{EVENTS_KEY}' list", self.path)

        records = document.get(EVENTS_KEY)
        if records is None:
            return []
        if not isinstance(records, list):
            raise FormatError(f"{self.path}: '{EVENTS_KEY}' must be a list", self.path)

        events = [record_to_event(record, i, self.path) for i, record in enumerate(records)]
        logger.debug(f"Loaded {len(events)} events from {self.path}")
        return events

    def append(self, event: Event) -> None:
        """Validates the event, then rewrites the file with it added at the end."""
        event.validate()
        events = self.load()
        events.append(event)
        self.save(events)
        logger.info(f"Stored event '{event.name}' ({len(events)} total) in {self.path}")

    def save(self, events: List[Event]) -> None:
        """Atomically replaces the file contents with ``events``."""
        document = {EVENTS_KEY: [event_to_record(event) for event in events]}
        content = yaml.safe_dump(document, sort_keys=False, allow_unicode=True, default_flow_style=False)

        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            if self.path.exists():
                os.chmod(tmp_name, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            logger.debug(f"Error writing event file {self.path}: {e}")
            raise StorageError(f"Failed to write event file {self.path}: {e}", self.path) from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        logger.debug(f"Wrote {len(events)} events to {self.path}")
