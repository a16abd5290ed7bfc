"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call the booking facade for business logic
- Leave domain error mapping to handlers.exceptions
- Never contain business logic
"""

from django.apps import apps
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from booking.domain.errors import (
    EventNotFoundError,
    TicketNotFoundError,
    UserEmailNotFoundError,
    UserNotFoundError,
)
from booking.handlers.serializers import (
    EventSearchQuerySerializer,
    EventSerializer,
    TicketSearchQuerySerializer,
    TicketSerializer,
    UserSearchQuerySerializer,
    UserSerializer,
)
from booking.services.booking_facade import BookingFacade


def get_facade() -> BookingFacade:
    return apps.get_app_config("booking").facade


def _validated(serializer_class, data) -> dict:
    serializer = serializer_class(data=data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


class UserListView(APIView):
    """Handler for GET/POST /api/users"""

    def get(self, request: Request) -> Response:
        query = _validated(UserSearchQuerySerializer, request.query_params)
        users = get_facade().get_users_by_name(query["name"], query["page_size"], query["page_num"])
        return Response(UserSerializer(users, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = UserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = get_facade().create_user(serializer.save())
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class UserByEmailView(APIView):
    """Handler for GET /api/users/by-email"""

    def get(self, request: Request) -> Response:
        email = request.query_params.get("email", "")
        user = get_facade().get_user_by_email(email)
        if user is None:
            raise UserEmailNotFoundError(email)
        return Response(UserSerializer(user).data)


class UserDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/users/{user_id}"""

    def get(self, request: Request, user_id: int) -> Response:
        user = get_facade().get_user_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return Response(UserSerializer(user).data)

    def put(self, request: Request, user_id: int) -> Response:
        serializer = UserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        changes = serializer.save()
        changes.id = user_id
        user = get_facade().update_user(changes)
        return Response(UserSerializer(user).data)

    def delete(self, request: Request, user_id: int) -> Response:
        return Response({"deleted": get_facade().delete_user(user_id)})


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        query = _validated(EventSearchQuerySerializer, request.query_params)
        facade = get_facade()
        if "day" in query:
            events = facade.get_events_for_day(query["day"], query["page_size"], query["page_num"])
        else:
            events = facade.get_events_by_title(
                query.get("title", ""), query["page_size"], query["page_num"]
            )
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_facade().create_event(serializer.save())
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: int) -> Response:
        event = get_facade().get_event_by_id(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: int) -> Response:
        serializer = EventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        changes = serializer.save()
        changes.id = event_id
        event = get_facade().update_event(changes)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: int) -> Response:
        return Response({"deleted": get_facade().delete_event(event_id)})


class TicketListView(APIView):
    """Handler for GET/POST /api/tickets"""

    def get(self, request: Request) -> Response:
        query = _validated(TicketSearchQuerySerializer, request.query_params)
        facade = get_facade()
        if "user_id" in query:
            user = facade.get_user_by_id(query["user_id"])
            if user is None:
                raise UserNotFoundError(query["user_id"])
            tickets = facade.get_booked_tickets_for_user(user, query["page_size"], query["page_num"])
        else:
            event = facade.get_event_by_id(query["event_id"])
            if event is None:
                raise EventNotFoundError(query["event_id"])
            tickets = facade.get_booked_tickets_for_event(event, query["page_size"], query["page_num"])
        return Response(TicketSerializer(tickets, many=True).data)

    def post(self, request: Request) -> Response:
        data = _validated(TicketSerializer, request.data)
        ticket = get_facade().book_ticket(
            data["user_id"], data["event_id"], data["category"], data["place"]
        )
        return Response(TicketSerializer(ticket).data, status=status.HTTP_201_CREATED)


class TicketDetailView(APIView):
    """Handler for GET/DELETE /api/tickets/{ticket_id}"""

    def get(self, request: Request, ticket_id: int) -> Response:
        ticket = get_facade().get_ticket_by_id(ticket_id)
        if ticket is None:
            raise TicketNotFoundError(ticket_id)
        return Response(TicketSerializer(ticket).data)

    def delete(self, request: Request, ticket_id: int) -> Response:
        return Response({"cancelled": get_facade().cancel_ticket(ticket_id)})
