"""Domain error codes for the booking module.

Every failure raised by the stores is one of three kinds:
NotFoundError, ValidationError or ConflictError.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_ID = "DUPLICATE_ID"
    INVALID_PAGE = "INVALID_PAGE"
    INVALID_PLACE = "INVALID_PLACE"
    SEAT_TAKEN = "SEAT_TAKEN"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """An operation referenced an id that does not exist."""


class ValidationError(DomainError):
    """A uniqueness or input-shape rule was violated."""


class ConflictError(DomainError):
    """A booking collided with an active ticket."""


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found by id: {user_id}",
        )
        self.user_id = user_id


class UserEmailNotFoundError(NotFoundError):
    """Raised when no user has the given email."""

    def __init__(self, email: str) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            message="User not found by email",
        )
        self.email = email


class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message=f"Event not found by id: {event_id}",
        )
        self.event_id = event_id


class TicketNotFoundError(NotFoundError):
    """Raised when a ticket is not found."""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message=f"Ticket not found by id: {ticket_id}",
        )
        self.ticket_id = ticket_id


class DuplicateEmailError(ValidationError):
    """Raised when a user email is already taken."""

    def __init__(self, email: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_EMAIL,
            message="duplicate email",
        )
        self.email = email


class DuplicateIdError(ValidationError):
    """Raised when preloaded data reuses an id already in the store."""

    def __init__(self, entity_id: int) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_ID,
            message=f"Id already in use: {entity_id}",
        )
        self.entity_id = entity_id


class InvalidPageError(ValidationError):
    """Raised for a page size below 0 or a page number below 1."""

    def __init__(self, size: int, number: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PAGE,
            message="Page size must be >= 0 and page number >= 1",
        )
        self.size = size
        self.number = number


class InvalidPlaceError(ValidationError):
    """Raised when a ticket place is not a positive integer."""

    def __init__(self, place: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PLACE,
            message="Place must be a positive integer",
        )
        self.place = place


class SeatTakenError(ConflictError):
    """Raised when the (event, category, place) slot is already booked."""

    def __init__(self, event_id: int, category: str, place: int) -> None:
        super().__init__(
            code=ErrorCode.SEAT_TAKEN,
            message="seat taken",
        )
        self.event_id = event_id
        self.category = category
        self.place = place
