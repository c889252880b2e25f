from rest_framework import serializers
from .models import Cafe, Drink, LatteType, DrinkCategory
from .services import (
    validate_schedule,
    is_open_now,
    get_today_hours,
    get_closing_info,
    weekly_hours_table,
    format_distance,
    InvalidScheduleError,
)
from .services.hours import DEFAULT_LOCALE


class DrinkSerializer(serializers.ModelSerializer):
    """Serializer for drinks."""

    class Meta:
        model = Drink
        fields = ['id', 'name', 'category', 'icon', 'created_at']
        read_only_fields = ['id', 'created_at']


class DrinkWriteSerializer(serializers.Serializer):
    """Input for creating/updating drinks."""

    name = serializers.CharField(max_length=100)
    category = serializers.ChoiceField(choices=DrinkCategory.choices, default=DrinkCategory.LATTE)
    icon = serializers.CharField(max_length=16, required=False, allow_blank=True, default='')


class CafeStatusMixin(serializers.Serializer):
    """
    Live fields shared by café serializers.

    Reads ``locale`` and ``now`` from the serializer context so that every
    café in one response is evaluated against the same instant.
    """

    rating = serializers.SerializerMethodField()
    distance = serializers.SerializerMethodField()
    distance_display = serializers.SerializerMethodField()
    is_open_now = serializers.SerializerMethodField()
    today_hours = serializers.SerializerMethodField()
    closing_info = serializers.SerializerMethodField()

    def _locale(self):
        return self.context.get('locale', DEFAULT_LOCALE)

    def _now(self):
        return self.context.get('now')

    def get_rating(self, obj):
        return float(obj.display_rating)

    def get_distance(self, obj):
        distance = getattr(obj, 'distance', None)
        return round(distance, 3) if distance is not None else None

    def get_distance_display(self, obj):
        distance = getattr(obj, 'distance', None)
        if distance is None:
            return None
        return format_distance(distance, self._locale())

    def get_is_open_now(self, obj):
        return is_open_now(obj.hours, self._now())

    def get_today_hours(self, obj):
        return get_today_hours(obj.hours, self._locale(), self._now())

    def get_closing_info(self, obj):
        return get_closing_info(obj.hours, self._locale(), self._now())


class CafeListSerializer(CafeStatusMixin, serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    class Meta:
        model = Cafe
        fields = [
            'id',
            'name',
            'address',
            'description',
            'image_url',
            'latitude',
            'longitude',
            'latte_types',
            'rating',
            'review_count',
            'distance',
            'distance_display',
            'is_open_now',
            'today_hours',
            'closing_info',
        ]
        read_only_fields = fields


class CafeSerializer(CafeStatusMixin, serializers.ModelSerializer):
    """Main serializer for cafés."""

    drinks = DrinkSerializer(many=True, read_only=True)
    weekly_hours = serializers.SerializerMethodField()

    class Meta:
        model = Cafe
        fields = [
            'id',
            'name',
            'address',
            'description',
            'phone',
            'image_url',
            'latitude',
            'longitude',
            'latte_types',
            'drinks',
            'hours',
            'weekly_hours',
            'social',
            'rating',
            'average_rating',
            'review_count',
            'distance',
            'distance_display',
            'is_open_now',
            'today_hours',
            'closing_info',
            'is_active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_weekly_hours(self, obj):
        return weekly_hours_table(obj.hours, self._locale())


class CafeWriteSerializer(serializers.Serializer):
    """Input for creating/updating cafés from the backoffice."""

    name = serializers.CharField(max_length=200)
    latitude = serializers.FloatField(min_value=-90, max_value=90)
    longitude = serializers.FloatField(min_value=-180, max_value=180)
    address = serializers.CharField(max_length=300, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    image_url = serializers.URLField(max_length=500, required=False, allow_blank=True)
    latte_types = serializers.ListField(
        child=serializers.ChoiceField(choices=LatteType.choices),
        required=False,
    )
    hours = serializers.JSONField(required=False, allow_null=True)
    social = serializers.JSONField(required=False, allow_null=True)
    drink_ids = serializers.ListField(child=serializers.UUIDField(), required=False)

    def validate_hours(self, value):
        try:
            return validate_schedule(value)
        except InvalidScheduleError as e:
            raise serializers.ValidationError(str(e))

    def validate_social(self, value):
        if value is not None and not isinstance(value, dict):
            raise serializers.ValidationError("Social links must be an object")
        return value


class LocationQuerySerializer(serializers.Serializer):
    """Query parameters for the nearest cafés endpoint."""

    lat = serializers.FloatField(min_value=-90, max_value=90)
    lng = serializers.FloatField(min_value=-180, max_value=180)
    radius = serializers.FloatField(min_value=0, required=False)
