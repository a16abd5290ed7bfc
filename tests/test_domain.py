"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import pytest

from booking.domain import Category, PageRequest, Ticket
from booking.domain.errors import (
    ErrorCode,
    InvalidPageError,
    InvalidPlaceError,
    NotFoundError,
    SeatTakenError,
    UserEmailNotFoundError,
    UserNotFoundError,
    ValidationError,
)


class TestPageRequest:
    """Tests for PageRequest value object."""

    def test_first_page_skips_nothing(self):
        """Page 1 starts at the first item."""
        assert PageRequest(size=3, number=1).skip == 0

    def test_skip_is_size_times_previous_pages(self):
        """Skip is size * (number - 1)."""
        assert PageRequest(size=3, number=4).skip == 9

    def test_apply_returns_requested_window(self):
        """apply returns items [skip, skip + size)."""
        items = list(range(10))
        assert PageRequest(size=3, number=2).apply(items) == [3, 4, 5]

    def test_apply_last_partial_page(self):
        """The last page may hold fewer than size items."""
        assert PageRequest(size=4, number=3).apply(list(range(10))) == [8, 9]

    def test_apply_beyond_end_is_empty(self):
        """A page past the data returns an empty list, not an error."""
        assert PageRequest(size=5, number=7).apply(list(range(10))) == []

    def test_zero_size_yields_empty_page(self):
        """Page size 0 is allowed and returns nothing."""
        assert PageRequest(size=0, number=1).apply([1, 2, 3]) == []

    @pytest.mark.parametrize("number", [0, -1])
    def test_rejects_page_number_below_one(self, number):
        """PageRequest raises InvalidPageError for page numbers below 1."""
        with pytest.raises(InvalidPageError):
            PageRequest(size=2, number=number)

    def test_rejects_negative_size(self):
        """PageRequest raises InvalidPageError, a ValidationError, for negative size."""
        with pytest.raises(InvalidPageError) as exc_info:
            PageRequest(size=-1, number=1)
        assert isinstance(exc_info.value, ValidationError)


class TestTicket:
    """Tests for Ticket construction."""

    def test_seat_is_event_category_place(self):
        """Ticket.seat is the (event_id, category, place) triple."""
        ticket = Ticket(id=0, user_id=1, event_id=2, category=Category.BAR, place=7)
        assert ticket.seat == (2, Category.BAR, 7)

    @pytest.mark.parametrize("place", [0, -3])
    def test_rejects_non_positive_place(self, place):
        """Ticket raises InvalidPlaceError for a place below 1."""
        with pytest.raises(InvalidPlaceError):
            Ticket(id=0, user_id=1, event_id=1, category=Category.STANDARD, place=place)


class TestDomainErrors:
    """Tests for the error taxonomy."""

    def test_str_includes_code_and_message(self):
        """str() of a domain error is 'CODE: message'."""
        assert str(UserNotFoundError(5)) == "USER_NOT_FOUND: User not found by id: 5"

    def test_not_found_kind(self):
        """UserNotFoundError is a NotFoundError and keeps the id."""
        error = UserNotFoundError(5)
        assert isinstance(error, NotFoundError)
        assert error.user_id == 5

    def test_email_not_found_shares_user_code(self):
        """UserEmailNotFoundError is a NotFoundError with the USER_NOT_FOUND code."""
        error = UserEmailNotFoundError("ghost@x.com")
        assert isinstance(error, NotFoundError)
        assert error.code is ErrorCode.USER_NOT_FOUND
        assert error.email == "ghost@x.com"

    def test_seat_taken_message(self):
        """SeatTakenError carries the SEAT_TAKEN code and 'seat taken' message."""
        error = SeatTakenError(1, "STANDARD", 5)
        assert error.code is ErrorCode.SEAT_TAKEN
        assert error.message == "seat taken"
