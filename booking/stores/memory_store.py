"""In-memory implementations of the store interfaces.

Each store composes one EntityStore and enforces its type's rules while
holding that store's lock, so a uniqueness check and the write depending on
it happen in one critical section.
"""

import datetime
import logging

from booking.domain import Category, Event, PageRequest, Ticket, User
from booking.domain.errors import (
    DuplicateEmailError,
    EventNotFoundError,
    SeatTakenError,
    UserNotFoundError,
)
from booking.stores.entity_store import EntityStore
from booking.stores.interfaces import EventStore, TicketStore, UserStore

logger = logging.getLogger(__name__)


class InMemoryUserStore(UserStore):
    """User store enforcing email uniqueness."""

    def __init__(self) -> None:
        self._entities: EntityStore[User] = EntityStore("user")

    def get(self, user_id: int) -> User | None:
        return self._entities.get(user_id)

    def create(self, user: User) -> User:
        with self._entities.lock:
            self._ensure_email_free(user.email)
            return self._entities.save(user)

    def update(self, updated: User) -> User:
        with self._entities.lock:
            user = self._entities.get(updated.id)
            if user is None:
                raise UserNotFoundError(updated.id)

            # The check runs against every live user, the one being updated
            # included; it only triggers when the email actually changes.
            if updated.email and updated.email != user.email:
                self._ensure_email_free(updated.email)
                user.email = updated.email

            if updated.name:
                user.name = updated.name

        logger.info("Updated user with id %s", user.id)
        return user

    def delete(self, user_id: int) -> bool:
        return self._entities.delete(user_id)

    def find_by_email(self, email: str) -> User | None:
        return next(
            (user for user in self._entities.get_all() if user.email == email),
            None,
        )

    def find_by_name(self, name_part: str, page_size: int, page_num: int) -> list[User]:
        page = PageRequest(page_size, page_num)
        matches = [user for user in self._entities.get_all() if name_part in user.name]
        return page.apply(matches)

    def load(self, users: list[User]) -> None:
        with self._entities.lock:
            for user in users:
                self._ensure_email_free(user.email)
                self._entities.insert_with_id(user)

    def _ensure_email_free(self, email: str) -> None:
        if any(user.email == email for user in self._entities.get_all()):
            logger.warning("Rejected user write: email %s is already taken", email)
            raise DuplicateEmailError(email)


class InMemoryEventStore(EventStore):
    """Event store; events carry no uniqueness constraint."""

    def __init__(self) -> None:
        self._entities: EntityStore[Event] = EntityStore("event")

    def get(self, event_id: int) -> Event | None:
        return self._entities.get(event_id)

    def create(self, event: Event) -> Event:
        return self._entities.save(event)

    def update(self, updated: Event) -> Event:
        with self._entities.lock:
            event = self._entities.get(updated.id)
            if event is None:
                raise EventNotFoundError(updated.id)
            if updated.title:
                event.title = updated.title
            if updated.date is not None:
                event.date = updated.date

        logger.info("Updated event with id %s", event.id)
        return event

    def delete(self, event_id: int) -> bool:
        return self._entities.delete(event_id)

    def find_by_title(self, title_part: str, page_size: int, page_num: int) -> list[Event]:
        page = PageRequest(page_size, page_num)
        matches = [event for event in self._entities.get_all() if title_part in event.title]
        return page.apply(matches)

    def find_for_day(self, day: datetime.date, page_size: int, page_num: int) -> list[Event]:
        page = PageRequest(page_size, page_num)
        matches = [event for event in self._entities.get_all() if event.date == day]
        return page.apply(matches)

    def load(self, events: list[Event]) -> None:
        with self._entities.lock:
            for event in events:
                self._entities.insert_with_id(event)


class InMemoryTicketStore(TicketStore):
    """Ticket store enforcing one active ticket per (event, category, place).

    Sorted queries read from the user and event stores. Tickets are
    snapshotted first and the ticket lock is released before those reads,
    so no call ever holds two store locks.
    """

    def __init__(self, users: UserStore, events: EventStore) -> None:
        self._entities: EntityStore[Ticket] = EntityStore("ticket")
        self._users = users
        self._events = events

    def get(self, ticket_id: int) -> Ticket | None:
        return self._entities.get(ticket_id)

    def book(self, user_id: int, event_id: int, category: Category, place: int) -> Ticket:
        ticket = Ticket(id=0, user_id=user_id, event_id=event_id, category=category, place=place)
        with self._entities.lock:
            self._ensure_seat_free(ticket)
            self._entities.save(ticket)

        logger.info(
            "Booked ticket %s: user %s, event %s, %s place %s",
            ticket.id, user_id, event_id, category.value, place,
        )
        return ticket

    def find_by_user(self, user: User, page_size: int, page_num: int) -> list[Ticket]:
        page = PageRequest(page_size, page_num)
        tickets = [t for t in self._entities.get_all() if t.user_id == user.id]
        return page.apply(sorted(tickets, key=self._event_date_descending))

    def find_by_event(self, event: Event, page_size: int, page_num: int) -> list[Ticket]:
        page = PageRequest(page_size, page_num)
        tickets = [t for t in self._entities.get_all() if t.event_id == event.id]
        return page.apply(sorted(tickets, key=self._user_email_ascending))

    def cancel(self, ticket_id: int) -> bool:
        cancelled = self._entities.delete(ticket_id)
        if cancelled:
            logger.info("Cancelled ticket %s", ticket_id)
        return cancelled

    def load(self, tickets: list[Ticket]) -> None:
        with self._entities.lock:
            for ticket in tickets:
                self._ensure_seat_free(ticket)
                self._entities.insert_with_id(ticket)

    def _ensure_seat_free(self, ticket: Ticket) -> None:
        if any(held.seat == ticket.seat for held in self._entities.get_all()):
            logger.warning(
                "Rejected booking: event %s, %s place %s is taken",
                ticket.event_id, ticket.category.value, ticket.place,
            )
            raise SeatTakenError(ticket.event_id, ticket.category.value, ticket.place)

    # Missing references sort last; sorted() is stable so ties keep store order.

    def _event_date_descending(self, ticket: Ticket) -> tuple[bool, int]:
        event = self._events.get(ticket.event_id)
        if event is None or event.date is None:
            return (True, 0)
        return (False, -event.date.toordinal())

    def _user_email_ascending(self, ticket: Ticket) -> tuple[bool, str]:
        user = self._users.get(ticket.user_id)
        if user is None:
            return (True, "")
        return (False, user.email)
