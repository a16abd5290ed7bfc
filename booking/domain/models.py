"""Domain models representing stored state.

These are plain mutable objects: updates change the stored instance in place,
so every holder of a reference sees the change. An id of 0 means "not yet
assigned".
"""

import datetime
from dataclasses import dataclass

from booking.domain.errors import InvalidPlaceError
from booking.domain.value_objects import Category


@dataclass
class User:
    """Domain representation of a User."""

    id: int
    name: str
    email: str


@dataclass
class Event:
    """Domain representation of an Event."""

    id: int
    title: str
    date: datetime.date | None


@dataclass
class Ticket:
    """Domain representation of a booked Ticket.

    References its user and event by id only.
    """

    id: int
    user_id: int
    event_id: int
    category: Category
    place: int

    def __post_init__(self) -> None:
        if self.place < 1:
            raise InvalidPlaceError(self.place)

    @property
    def seat(self) -> tuple[int, Category, int]:
        """The (event_id, category, place) slot this ticket holds."""
        return (self.event_id, self.category, self.place)
