from booking.handlers.views import (
    EventDetailView,
    EventListView,
    TicketDetailView,
    TicketListView,
    UserByEmailView,
    UserDetailView,
    UserListView,
)

__all__ = [
    "UserListView",
    "UserByEmailView",
    "UserDetailView",
    "EventListView",
    "EventDetailView",
    "TicketListView",
    "TicketDetailView",
]
