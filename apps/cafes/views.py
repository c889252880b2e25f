from django.conf import settings
from django.utils import timezone
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Cafe, Drink
from .serializers import (
    CafeSerializer,
    CafeListSerializer,
    CafeWriteSerializer,
    DrinkSerializer,
    DrinkWriteSerializer,
    LocationQuerySerializer,
)
from .services import (
    create_cafe,
    update_cafe,
    soft_delete_cafe,
    get_cafe_by_id,
    create_drink,
    update_drink,
    delete_drink,
    get_all_drinks,
    parse_location,
    parse_drink_id,
    search_cafes,
    annotate_distances,
    get_nearest_cafes,
    sort_cafes,
    filter_open_now,
    weekly_hours_table,
    CafesServiceError,
    CafeNotFoundError,
    DrinkNotFoundError,
)
from .permissions import IsStaffOrReadOnly
from .locale import resolve_locale

UUID_PATTERN = '[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'


class CafePagination(PageNumberPagination):
    """Custom pagination for cafés."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class CafeContextMixin:
    """Adds the display locale and a single "now" snapshot to serializer context."""

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['locale'] = resolve_locale(self.request)
        if not hasattr(self, '_now'):
            self._now = timezone.localtime()
        context['now'] = self._now
        return context


class CafeViewSet(CafeContextMixin, viewsets.ModelViewSet):
    """
    ViewSet for Cafe CRUD operations.

    list: Get active cafés (filter by latte type, sort by distance/rating/name)
    create: Create a café (staff only)
    retrieve: Get a café with its weekly hours
    update: Update a café (staff only)
    partial_update: Partially update a café (staff only)
    destroy: Deactivate a café (staff only)
    """

    queryset = Cafe.objects.filter(is_active=True).prefetch_related('drinks')
    serializer_class = CafeSerializer
    permission_classes = [IsStaffOrReadOnly]
    pagination_class = CafePagination
    lookup_value_regex = UUID_PATTERN

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action in ('list', 'nearest'):
            return CafeListSerializer
        elif self.action in ('create', 'update', 'partial_update'):
            return CafeWriteSerializer
        return CafeSerializer

    def _user_location(self):
        return parse_location(
            self.request.query_params.get('lat'),
            self.request.query_params.get('lng'),
        )

    @extend_schema(
        parameters=[
            OpenApiParameter('search', OpenApiTypes.STR, description='Search in name, address, description'),
            OpenApiParameter('latte_type', OpenApiTypes.STR, description='matcha, chai, cafe or iced'),
            OpenApiParameter('drink', OpenApiTypes.UUID, description='Drink on the menu'),
            OpenApiParameter('lat', OpenApiTypes.FLOAT, description='User latitude'),
            OpenApiParameter('lng', OpenApiTypes.FLOAT, description='User longitude'),
            OpenApiParameter('radius', OpenApiTypes.FLOAT, description='Max distance in km (needs lat/lng)'),
            OpenApiParameter('sort', OpenApiTypes.STR, description='distance, rating or name'),
            OpenApiParameter('open_now', OpenApiTypes.BOOL, description='Only cafés open right now'),
            OpenApiParameter('lang', OpenApiTypes.STR, description='fr, en or es'),
        ],
        tags=['cafes'],
    )
    def list(self, request, *args, **kwargs):
        """List cafés with live open status and distance."""
        params = request.query_params

        try:
            location = self._user_location()
            cafes = search_cafes(
                search=params.get('search'),
                latte_type=params.get('latte_type'),
                drink_id=parse_drink_id(params.get('drink')),
            )

            if location and params.get('radius'):
                try:
                    radius = float(params['radius'])
                except ValueError:
                    return Response(
                        {'error': 'radius must be a number'},
                        status=status.HTTP_400_BAD_REQUEST
                    )
                cafes = get_nearest_cafes(
                    latitude=location[0],
                    longitude=location[1],
                    radius_km=radius,
                    cafes=cafes,
                )
            else:
                cafes = annotate_distances(cafes, *(location or (None, None)))

            if params.get('open_now', '').lower() in ('1', 'true', 'yes'):
                cafes = filter_open_now(cafes, self.get_serializer_context()['now'])

            cafes = sort_cafes(cafes, params.get('sort', 'distance'))
        except CafesServiceError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        page = self.paginate_queryset(cafes)
        serializer = self.get_serializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    def retrieve(self, request, *args, **kwargs):
        """Get a café, with distance when lat/lng are given."""
        try:
            cafe = get_cafe_by_id(cafe_id=kwargs.get('pk'))
            location = self._user_location()
        except CafeNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except CafesServiceError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        annotate_distances([cafe], *(location or (None, None)))
        return Response(self.get_serializer(cafe).data)

    def create(self, request, *args, **kwargs):
        """Create a new café."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            cafe = create_cafe(
                created_by=request.user,
                **serializer.validated_data
            )
        except CafesServiceError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        output_serializer = CafeSerializer(cafe, context=self.get_serializer_context())
        return Response(
            output_serializer.data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """Update a café (PUT or PATCH)."""
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            cafe = update_cafe(cafe_id=kwargs.get('pk'), data=serializer.validated_data)
        except CafeNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except CafesServiceError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        output_serializer = CafeSerializer(cafe, context=self.get_serializer_context())
        return Response(output_serializer.data)

    def destroy(self, request, *args, **kwargs):
        """Soft delete a café."""
        try:
            soft_delete_cafe(cafe_id=kwargs.get('pk'))
        except CafeNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[OpenApiParameter('lang', OpenApiTypes.STR, description='fr, en or es')],
        tags=['cafes'],
    )
    @action(detail=True, methods=['get'])
    def hours(self, request, pk=None):
        """Weekly opening hours, Monday first."""
        try:
            cafe = get_cafe_by_id(cafe_id=pk)
        except CafeNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(weekly_hours_table(cafe.hours, resolve_locale(request)))

    @extend_schema(
        parameters=[
            OpenApiParameter('lat', OpenApiTypes.FLOAT, required=True, description='User latitude'),
            OpenApiParameter('lng', OpenApiTypes.FLOAT, required=True, description='User longitude'),
            OpenApiParameter('radius', OpenApiTypes.FLOAT, description='Max distance in km'),
            OpenApiParameter('lang', OpenApiTypes.STR, description='fr, en or es'),
        ],
        tags=['cafes'],
    )
    @action(detail=False, methods=['get'])
    def nearest(self, request):
        """Active cafés within the radius, nearest first."""
        query_serializer = LocationQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)
        params = query_serializer.validated_data

        cafes = get_nearest_cafes(
            latitude=params['lat'],
            longitude=params['lng'],
            radius_km=params.get('radius', settings.LATTEFINDER_DEFAULT_RADIUS_KM),
        )

        serializer = self.get_serializer(cafes, many=True)
        return Response(serializer.data)


class DrinkViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Drink CRUD operations.

    Reads are public, writes are for backoffice staff.
    """

    queryset = Drink.objects.all()
    serializer_class = DrinkSerializer
    permission_classes = [IsStaffOrReadOnly]
    lookup_value_regex = UUID_PATTERN

    def get_queryset(self):
        """Filter drinks by category if specified."""
        queryset = get_all_drinks()

        category = self.request.query_params.get('category')
        if category:
            queryset = queryset.filter(category=category)

        return queryset

    def get_serializer_class(self):
        if self.action in ('create', 'update', 'partial_update'):
            return DrinkWriteSerializer
        return DrinkSerializer

    def create(self, request, *args, **kwargs):
        """Create a new drink."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            drink = create_drink(**serializer.validated_data)
        except CafesServiceError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(DrinkSerializer(drink).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """Update a drink (PUT or PATCH)."""
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            drink = update_drink(drink_id=kwargs.get('pk'), data=serializer.validated_data)
        except DrinkNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except CafesServiceError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(DrinkSerializer(drink).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a drink."""
        try:
            delete_drink(drink_id=kwargs.get('pk'))
        except DrinkNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(status=status.HTTP_204_NO_CONTENT)
