from booking.domain.errors import (
    ConflictError,
    DomainError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from booking.domain.models import Event, Ticket, User
from booking.domain.value_objects import Category, PageRequest

__all__ = [
    "User",
    "Event",
    "Ticket",
    "Category",
    "PageRequest",
    "ErrorCode",
    "DomainError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
]
