from rest_framework import serializers
from apps.accounts.models import User
from apps.cafes.models import LatteType
from .models import Review


class UserMinimalSerializer(serializers.ModelSerializer):
    """Minimal user info for nested serialization."""

    display_name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'display_name', 'avatar_url']
        read_only_fields = fields

    def get_display_name(self, obj):
        return obj.get_display_name()


class ReviewSerializer(serializers.ModelSerializer):
    """Main review serializer."""

    author = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Review
        fields = [
            'id',
            'cafe',
            'author',
            'rating',
            'comment',
            'latte_type',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'cafe', 'author', 'created_at', 'updated_at']


class ReviewCreateSerializer(serializers.Serializer):
    """Input for creating a review."""

    cafe_id = serializers.UUIDField()
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(required=False, allow_blank=True, default='')
    latte_type = serializers.ChoiceField(choices=LatteType.choices, required=False, allow_blank=True, default='')


class ReviewUpdateSerializer(serializers.Serializer):
    """Input for updating a review."""

    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)
    comment = serializers.CharField(required=False, allow_blank=True)
    latte_type = serializers.ChoiceField(choices=LatteType.choices, required=False, allow_blank=True)
