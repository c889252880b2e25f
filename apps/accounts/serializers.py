from rest_framework import serializers
from apps.cafes.serializers import DrinkSerializer
from .models import User, Language


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    display_name = serializers.CharField(source='get_display_name', read_only=True)
    favorite_drink = DrinkSerializer(read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'username',
            'first_name',
            'last_name',
            'display_name',
            'avatar_url',
            'favorite_drink',
            'preferred_language',
            'is_staff',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.Serializer):
    """Input for profile updates."""

    username = serializers.CharField(max_length=50, required=False, allow_blank=True)
    first_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    avatar_url = serializers.URLField(max_length=500, required=False, allow_blank=True)
    preferred_language = serializers.ChoiceField(choices=Language.choices, required=False)
    favorite_drink_id = serializers.UUIDField(required=False, allow_null=True)
