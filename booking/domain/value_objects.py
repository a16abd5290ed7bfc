"""Domain primitives that enforce validity at creation time."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from booking.domain.errors import InvalidPageError

T = TypeVar("T")


class Category(Enum):
    """Ticket service category."""

    BAR = "BAR"
    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"


@dataclass(frozen=True)
class PageRequest:
    """One page of a filtered sequence. Page numbers start from 1."""

    size: int
    number: int

    def __post_init__(self) -> None:
        if self.size < 0 or self.number < 1:
            raise InvalidPageError(self.size, self.number)

    @property
    def skip(self) -> int:
        return self.size * (self.number - 1)

    def apply(self, items: Sequence[T]) -> list[T]:
        """Return items [skip, skip + size); past the end is an empty list."""
        return list(items[self.skip : self.skip + self.size])
