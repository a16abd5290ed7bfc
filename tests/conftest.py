"""Pytest configuration and shared fixtures."""

import datetime

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from booking.domain import Event, User
from booking.services.booking_facade import BookingFacade
from booking.stores.memory_store import InMemoryEventStore, InMemoryTicketStore, InMemoryUserStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def ticket_store(user_store, event_store) -> InMemoryTicketStore:
    return InMemoryTicketStore(users=user_store, events=event_store)


@pytest.fixture
def facade() -> BookingFacade:
    return BookingFacade.build()


@pytest.fixture
def app_facade(facade, monkeypatch) -> BookingFacade:
    """Install a fresh, empty facade behind the HTTP handlers."""
    monkeypatch.setattr(apps.get_app_config("booking"), "facade", facade)
    return facade


@pytest.fixture
def make_user(user_store):
    def _make(name: str, email: str) -> User:
        return user_store.create(User(id=0, name=name, email=email))

    return _make


@pytest.fixture
def make_event(event_store):
    def _make(title: str, day: datetime.date | None) -> Event:
        return event_store.create(Event(id=0, title=title, date=day))

    return _make
