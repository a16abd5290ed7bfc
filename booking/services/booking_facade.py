"""Booking facade - one call surface over the user, event and ticket stores.

The facade only delegates: every method has the contract of the store
operation behind it and adds no validation of its own.
"""

import datetime
import logging
import threading
from typing import Protocol

from booking.domain import Category, Event, Ticket, User
from booking.stores.interfaces import EventStore, TicketStore, UserStore
from booking.stores.memory_store import (
    InMemoryEventStore,
    InMemoryTicketStore,
    InMemoryUserStore,
)

logger = logging.getLogger(__name__)


class Preloader(Protocol):
    def preload(self, users: UserStore, events: EventStore, tickets: TicketStore) -> None: ...


class BookingFacade:
    """Facade for user, event and ticket operations."""

    def __init__(self, users: UserStore, events: EventStore, tickets: TicketStore) -> None:
        self._users = users
        self._events = events
        self._tickets = tickets
        self._preloaded = False
        self._preload_lock = threading.Lock()

    @classmethod
    def build(cls) -> "BookingFacade":
        """Wire a facade over fresh in-memory stores."""
        users = InMemoryUserStore()
        events = InMemoryEventStore()
        tickets = InMemoryTicketStore(users=users, events=events)
        return cls(users=users, events=events, tickets=tickets)

    def preload(self, *loaders: Preloader) -> bool:
        """Run seed loaders once; later calls do nothing and return False.

        A loader that fails leaves the facade un-preloaded so the call can be
        retried. SeedLoader validates every file before inserting, but a store
        rule broken by the seed data itself (duplicate email, taken seat) can
        leave earlier records in place; treat that as a startup error.
        """
        with self._preload_lock:
            if self._preloaded:
                return False
            for loader in loaders:
                loader.preload(self._users, self._events, self._tickets)
            self._preloaded = True
        logger.info("Preloaded seed data from %d loader(s)", len(loaders))
        return True

    # Events

    def get_event_by_id(self, event_id: int) -> Event | None:
        return self._events.get(event_id)

    def get_events_by_title(self, title: str, page_size: int, page_num: int) -> list[Event]:
        return self._events.find_by_title(title, page_size, page_num)

    def get_events_for_day(self, day: datetime.date, page_size: int, page_num: int) -> list[Event]:
        return self._events.find_for_day(day, page_size, page_num)

    def create_event(self, event: Event) -> Event:
        return self._events.create(event)

    def update_event(self, event: Event) -> Event:
        return self._events.update(event)

    def delete_event(self, event_id: int) -> bool:
        return self._events.delete(event_id)

    # Users

    def get_user_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_user_by_email(self, email: str) -> User | None:
        return self._users.find_by_email(email)

    def get_users_by_name(self, name: str, page_size: int, page_num: int) -> list[User]:
        return self._users.find_by_name(name, page_size, page_num)

    def create_user(self, user: User) -> User:
        return self._users.create(user)

    def update_user(self, user: User) -> User:
        return self._users.update(user)

    def delete_user(self, user_id: int) -> bool:
        return self._users.delete(user_id)

    # Tickets

    def get_ticket_by_id(self, ticket_id: int) -> Ticket | None:
        return self._tickets.get(ticket_id)

    def book_ticket(self, user_id: int, event_id: int, category: Category, place: int) -> Ticket:
        return self._tickets.book(user_id, event_id, category, place)

    def get_booked_tickets_for_user(self, user: User, page_size: int, page_num: int) -> list[Ticket]:
        return self._tickets.find_by_user(user, page_size, page_num)

    def get_booked_tickets_for_event(self, event: Event, page_size: int, page_num: int) -> list[Ticket]:
        return self._tickets.find_by_event(event, page_size, page_num)

    def cancel_ticket(self, ticket_id: int) -> bool:
        return self._tickets.cancel(ticket_id)
