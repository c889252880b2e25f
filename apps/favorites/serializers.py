from rest_framework import serializers
from apps.cafes.serializers import CafeListSerializer
from .models import Favorite


class FavoriteSerializer(serializers.ModelSerializer):
    """Favorite with the café's live status."""

    cafe = CafeListSerializer(read_only=True)

    class Meta:
        model = Favorite
        fields = ['id', 'cafe', 'created_at']
        read_only_fields = fields


class AddFavoriteSerializer(serializers.Serializer):
    cafe_id = serializers.UUIDField(help_text="UUID of café to save")


class SyncFavoritesSerializer(serializers.Serializer):
    cafe_ids = serializers.ListField(
        child=serializers.UUIDField(),
        allow_empty=True,
        help_text="Café ids stored on the device",
    )
