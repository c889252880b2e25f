from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from uuid import UUID
from apps.cafes.views import UUID_PATTERN
from .models import Review
from .serializers import ReviewSerializer, ReviewCreateSerializer, ReviewUpdateSerializer
from .permissions import IsReviewAuthorOrReadOnly
from .services import (
    create_review,
    update_review,
    delete_review,
    get_user_review,
    ReviewsServiceError,
    ReviewNotFoundError,
    CafeNotFoundError,
    UnauthorizedReviewActionError,
)


def _uuid_param(request, name):
    """Read an optional UUID query param, 400 when malformed."""
    value = request.query_params.get(name)
    if not value:
        return None
    try:
        return UUID(value)
    except ValueError:
        raise ValidationError({name: f"'{value}' is not a valid UUID"})


class ReviewPagination(PageNumberPagination):
    """Custom pagination for reviews."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ReviewViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Review CRUD operations.

    list: Get reviews (filter by cafe or author)
    create: Review a café (one review per user per café)
    retrieve: Get a specific review
    update: Update a review (author only)
    partial_update: Partially update a review (author only)
    destroy: Delete a review (author only)
    """

    queryset = Review.objects.select_related('author', 'cafe')
    serializer_class = ReviewSerializer
    permission_classes = [IsAuthenticatedOrReadOnly, IsReviewAuthorOrReadOnly]
    pagination_class = ReviewPagination
    lookup_value_regex = UUID_PATTERN

    @extend_schema(
        parameters=[
            OpenApiParameter('cafe', OpenApiTypes.UUID, description='Reviews of this café'),
            OpenApiParameter('author', OpenApiTypes.UUID, description='Reviews by this user'),
        ],
        tags=['reviews'],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    def get_queryset(self):
        """
        Filter reviews based on query parameters.

        Filters:
        - cafe: UUID of café
        - author: UUID of author
        """
        queryset = super().get_queryset()

        cafe_id = _uuid_param(self.request, 'cafe')
        if cafe_id:
            queryset = queryset.filter(cafe_id=cafe_id)

        author_id = _uuid_param(self.request, 'author')
        if author_id:
            queryset = queryset.filter(author_id=author_id)

        return queryset.order_by('-created_at')

    def get_serializer_class(self):
        if self.action == 'create':
            return ReviewCreateSerializer
        if self.action in ('update', 'partial_update'):
            return ReviewUpdateSerializer
        return ReviewSerializer

    def create(self, request, *args, **kwargs):
        """Create a review using the service layer."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            review = create_review(author=request.user, **serializer.validated_data)
        except CafeNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except ReviewsServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """Update a review (author only)."""
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            review = update_review(
                review_id=kwargs.get('pk'),
                user=request.user,
                **serializer.validated_data
            )
        except ReviewNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedReviewActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except ReviewsServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ReviewSerializer(review).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a review (author only)."""
        try:
            delete_review(review_id=kwargs.get('pk'), user=request.user)
        except ReviewNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedReviewActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[OpenApiParameter('cafe', OpenApiTypes.UUID, required=True, description='Café id')],
        tags=['reviews'],
    )
    @action(detail=False, methods=['get'], permission_classes=[IsAuthenticated])
    def mine(self, request):
        """Current user's review of a café (null when none)."""
        cafe_id = _uuid_param(request, 'cafe')
        if not cafe_id:
            return Response({'error': 'cafe is required'}, status=status.HTTP_400_BAD_REQUEST)

        review = get_user_review(user=request.user, cafe_id=cafe_id)
        return Response(ReviewSerializer(review).data if review else None)
