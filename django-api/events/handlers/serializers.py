"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers

from events.domain import EventCategory

CATEGORY_CHOICES = [category.value for category in EventCategory]


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    title = serializers.CharField()
    category = serializers.SerializerMethodField()
    date = serializers.CharField()
    time = serializers.CharField()
    location = serializers.CharField()
    organizer_name = serializers.CharField()
    organizer_contact = serializers.CharField()
    description = serializers.CharField()
    created_by_uid = serializers.CharField()
    image_url = serializers.CharField(allow_null=True)
    poster_url = serializers.CharField(allow_null=True)
    brochure_url = serializers.CharField(allow_null=True)
    about_event = serializers.CharField(allow_null=True)
    rules = serializers.CharField(allow_null=True)
    prizes = serializers.CharField(allow_null=True)
    registration_fee = serializers.CharField(allow_null=True)
    team_size = serializers.CharField(allow_null=True)

    def get_category(self, event) -> str:
        return event.category.value


class EventInputSerializer(serializers.Serializer):
    """Fields an organizer may set when creating or editing an event.

    Omitting ``id`` creates a new event owned by the caller.
    """

    id = serializers.CharField(required=False)
    title = serializers.CharField()
    category = serializers.ChoiceField(choices=CATEGORY_CHOICES)
    date = serializers.CharField()
    time = serializers.CharField()
    location = serializers.CharField()
    description = serializers.CharField()
    organizer_name = serializers.CharField(required=False)
    organizer_contact = serializers.CharField(required=False)
    image_url = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    poster_url = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    brochure_url = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    about_event = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    rules = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    prizes = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    registration_fee = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )
    team_size = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )


class RegistrationInputSerializer(serializers.Serializer):
    name = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField()
    college_or_company = serializers.CharField()
    year_of_study = serializers.CharField()
    team_members = serializers.CharField(
        required=False, allow_null=True, allow_blank=True
    )


class RegistrationSerializer(serializers.Serializer):
    """Serializer for Registration domain model."""

    id = serializers.CharField()
    event_id = serializers.CharField()
    name = serializers.CharField()
    email = serializers.CharField()
    phone = serializers.CharField()
    college_or_company = serializers.CharField()
    year_of_study = serializers.CharField()
    team_members = serializers.CharField(allow_null=True)
    user_id = serializers.CharField(allow_null=True)
    registered_at = serializers.CharField(allow_null=True)


class OwnedRegistrationSerializer(serializers.Serializer):
    """A registration with the title of the event it belongs to."""

    registration = RegistrationSerializer()
    event_title = serializers.CharField(source="event.title")
    event_date = serializers.CharField(source="event.date")


class MediaUploadSerializer(serializers.Serializer):
    file = serializers.FileField()
