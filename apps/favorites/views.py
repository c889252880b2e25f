from django.utils import timezone
from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer
from apps.cafes.locale import resolve_locale
from apps.cafes.services import annotate_distances, parse_location, CafesServiceError
from .serializers import FavoriteSerializer, AddFavoriteSerializer, SyncFavoritesSerializer
from .services import (
    add_favorite,
    remove_favorite,
    get_user_favorites,
    sync_favorites,
    CafeNotFoundError,
    FavoriteNotFoundError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


FavoriteIdsResponseSerializer = inline_serializer(
    name='FavoriteIdsResponse',
    fields={'cafe_ids': serializers.ListField(child=serializers.UUIDField())},
)


def _serializer_context(request):
    return {
        'request': request,
        'locale': resolve_locale(request),
        'now': timezone.localtime(),
    }


@extend_schema(
    methods=['GET'],
    responses={200: FavoriteSerializer(many=True)},
    description="List the current user's favorite cafés (lat/lng add distances).",
    tags=['favorites'],
)
@extend_schema(
    methods=['POST'],
    request=AddFavoriteSerializer,
    responses={
        200: FavoriteSerializer,
        201: FavoriteSerializer,
        404: ErrorResponseSerializer,
    },
    description="Add a café to favorites. Adding twice returns the existing favorite.",
    tags=['favorites'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def favorites(request):
    """List or add favorites."""
    context = _serializer_context(request)

    if request.method == 'GET':
        try:
            location = parse_location(request.query_params.get('lat'), request.query_params.get('lng'))
        except CafesServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        entries = list(get_user_favorites(user=request.user))
        annotate_distances([entry.cafe for entry in entries], *(location or (None, None)))
        return Response(FavoriteSerializer(entries, many=True, context=context).data)

    serializer = AddFavoriteSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        favorite, created = add_favorite(
            user=request.user,
            cafe_id=serializer.validated_data['cafe_id'],
        )
    except CafeNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(
        FavoriteSerializer(favorite, context=context).data,
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
    )


@extend_schema(
    responses={204: None, 404: ErrorResponseSerializer},
    description="Remove a café from favorites.",
    tags=['favorites'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def remove(request, cafe_id):
    """Remove a favorite."""
    try:
        remove_favorite(user=request.user, cafe_id=cafe_id)
    except FavoriteNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    request=SyncFavoritesSerializer,
    responses={200: FavoriteIdsResponseSerializer},
    description="Merge favorites stored on the device into the account.",
    tags=['favorites'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def sync(request):
    """Sync locally stored favorites."""
    serializer = SyncFavoritesSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    cafe_ids = sync_favorites(user=request.user, cafe_ids=serializer.validated_data['cafe_ids'])
    return Response({'cafe_ids': cafe_ids})
