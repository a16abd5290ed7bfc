"""Serializers between JSON payloads and domain models.

Used by the HTTP handlers and by the seed-file loader. ``save()`` builds a
domain object; it never touches a store.
"""

from django.conf import settings
from rest_framework import serializers

from booking.domain import Category, Event, Ticket, User


class CategoryField(serializers.ChoiceField):
    """Maps Category enum members to and from their string values."""

    def __init__(self, **kwargs):
        super().__init__(choices=[category.value for category in Category], **kwargs)

    def to_internal_value(self, data):
        return Category(super().to_internal_value(data))

    def to_representation(self, value):
        return value.value


class UserSerializer(serializers.Serializer):
    """Serializer for User domain model."""

    id = serializers.IntegerField(min_value=0, default=0)
    name = serializers.CharField(allow_blank=True, default="", trim_whitespace=False)
    email = serializers.CharField(allow_blank=True, default="", trim_whitespace=False)

    def create(self, validated_data):
        return User(**validated_data)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(min_value=0, default=0)
    title = serializers.CharField(allow_blank=True, default="", trim_whitespace=False)
    date = serializers.DateField(allow_null=True, default=None)

    def create(self, validated_data):
        return Event(**validated_data)


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.IntegerField(min_value=0, default=0)
    user_id = serializers.IntegerField()
    event_id = serializers.IntegerField()
    category = CategoryField()
    place = serializers.IntegerField(min_value=1)

    def create(self, validated_data):
        return Ticket(**validated_data)


def default_page_size() -> int:
    return settings.BOOKING["DEFAULT_PAGE_SIZE"]


class PageQuerySerializer(serializers.Serializer):
    """Pagination query parameters. Page bounds are checked by PageRequest."""

    page_size = serializers.IntegerField(default=default_page_size)
    page_num = serializers.IntegerField(default=1)


class UserSearchQuerySerializer(PageQuerySerializer):
    name = serializers.CharField(allow_blank=True, default="", trim_whitespace=False)


class EventSearchQuerySerializer(PageQuerySerializer):
    title = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    day = serializers.DateField(required=False)

    def validate(self, attrs):
        if "title" in attrs and "day" in attrs:
            raise serializers.ValidationError("Search by either title or day, not both")
        return attrs


class TicketSearchQuerySerializer(PageQuerySerializer):
    user_id = serializers.IntegerField(required=False)
    event_id = serializers.IntegerField(required=False)

    def validate(self, attrs):
        if ("user_id" in attrs) == ("event_id" in attrs):
            raise serializers.ValidationError("Exactly one of user_id or event_id is required")
        return attrs
