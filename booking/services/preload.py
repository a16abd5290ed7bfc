"""Seed-data loader.

Reads ``users.json``, ``events.json`` and ``tickets.json`` from a directory.
Each file holds a JSON list of objects with their original ids, which are
kept. Missing files are skipped. All files are parsed and validated before
anything is inserted, so a malformed file leaves the stores untouched.
"""

import json
import logging
from pathlib import Path

from booking.handlers.serializers import EventSerializer, TicketSerializer, UserSerializer
from booking.stores.interfaces import EventStore, TicketStore, UserStore

logger = logging.getLogger(__name__)


class SeedLoader:
    """Loads JSON seed files into the stores."""

    def __init__(self, seed_dir: str | Path) -> None:
        self.seed_dir = Path(seed_dir)

    def preload(self, users: UserStore, events: EventStore, tickets: TicketStore) -> None:
        seed_users = self._read("users.json", UserSerializer)
        seed_events = self._read("events.json", EventSerializer)
        seed_tickets = self._read("tickets.json", TicketSerializer)

        users.load(seed_users)
        events.load(seed_events)
        tickets.load(seed_tickets)

    def _read(self, filename: str, serializer_class) -> list:
        path = self.seed_dir / filename
        if not path.is_file():
            logger.info("No seed file at %s, skipping", path)
            return []

        with path.open(encoding="utf-8") as fh:
            payload = json.load(fh)

        serializer = serializer_class(data=payload, many=True)
        serializer.is_valid(raise_exception=True)
        entities = serializer.save()
        logger.info("Loaded %d record(s) from %s", len(entities), path)
        return entities
