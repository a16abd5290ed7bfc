"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Lookups that may find
nothing return None; only rule violations raise domain errors.
"""

import datetime
from abc import ABC, abstractmethod

from booking.domain import Category, Event, Ticket, User


class UserStore(ABC):
    """Interface for user storage operations."""

    @abstractmethod
    def get(self, user_id: int) -> User | None:
        """Return a user by ID, or None if not found."""
        ...

    @abstractmethod
    def create(self, user: User) -> User:
        """Store a new user under a generated id.

        Raises:
            DuplicateEmailError: If another user already has this email.
        """
        ...

    @abstractmethod
    def update(self, updated: User) -> User:
        """Overwrite the non-empty name/email of an existing user.

        Raises:
            UserNotFoundError: If no user has ``updated.id``.
            DuplicateEmailError: If a changed email is already taken.
        """
        ...

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Remove a user; return whether anything was removed."""
        ...

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """Return the user with exactly this email, or None."""
        ...

    @abstractmethod
    def find_by_name(self, name_part: str, page_size: int, page_num: int) -> list[User]:
        """Return one page of users whose name contains ``name_part``."""
        ...

    @abstractmethod
    def load(self, users: list[User]) -> None:
        """Insert seed users keeping their ids."""
        ...


class EventStore(ABC):
    """Interface for event storage operations."""

    @abstractmethod
    def get(self, event_id: int) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def create(self, event: Event) -> Event:
        """Store a new event under a generated id."""
        ...

    @abstractmethod
    def update(self, updated: Event) -> Event:
        """Overwrite the provided title/date of an existing event.

        Raises:
            EventNotFoundError: If no event has ``updated.id``.
        """
        ...

    @abstractmethod
    def delete(self, event_id: int) -> bool:
        """Remove an event; return whether anything was removed."""
        ...

    @abstractmethod
    def find_by_title(self, title_part: str, page_size: int, page_num: int) -> list[Event]:
        """Return one page of events whose title contains ``title_part``."""
        ...

    @abstractmethod
    def find_for_day(self, day: datetime.date, page_size: int, page_num: int) -> list[Event]:
        """Return one page of events held on ``day``."""
        ...

    @abstractmethod
    def load(self, events: list[Event]) -> None:
        """Insert seed events keeping their ids."""
        ...


class TicketStore(ABC):
    """Interface for ticket storage operations."""

    @abstractmethod
    def get(self, ticket_id: int) -> Ticket | None:
        """Return a ticket by ID, or None if not found."""
        ...

    @abstractmethod
    def book(self, user_id: int, event_id: int, category: Category, place: int) -> Ticket:
        """Book a seat. User and event ids are not checked.

        Raises:
            SeatTakenError: If an active ticket holds (event, category, place).
        """
        ...

    @abstractmethod
    def find_by_user(self, user: User, page_size: int, page_num: int) -> list[Ticket]:
        """Return one page of the user's tickets, latest event date first."""
        ...

    @abstractmethod
    def find_by_event(self, event: Event, page_size: int, page_num: int) -> list[Ticket]:
        """Return one page of the event's tickets, ordered by user email."""
        ...

    @abstractmethod
    def cancel(self, ticket_id: int) -> bool:
        """Remove a ticket, freeing its seat; return whether it existed."""
        ...

    @abstractmethod
    def load(self, tickets: list[Ticket]) -> None:
        """Insert seed tickets keeping their ids."""
        ...
