from django.urls import path

from booking.handlers import (
    EventDetailView,
    EventListView,
    TicketDetailView,
    TicketListView,
    UserByEmailView,
    UserDetailView,
    UserListView,
)

urlpatterns = [
    path("users", UserListView.as_view(), name="user-list"),
    path("users/by-email", UserByEmailView.as_view(), name="user-by-email"),
    path("users/<int:user_id>", UserDetailView.as_view(), name="user-detail"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<int:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("tickets", TicketListView.as_view(), name="ticket-list"),
    path("tickets/<int:ticket_id>", TicketDetailView.as_view(), name="ticket-detail"),
]
