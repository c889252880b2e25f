"""
Café search, distance annotation and sorting.

Distances are computed in Python with the haversine formula, so search
results are plain lists once a location is involved.
"""

import math
from datetime import datetime
from django.db.models import Q
from django.utils import timezone
from typing import Iterable, Optional
from uuid import UUID

from ..models import Cafe
from .exceptions import DrinkNotFoundError, InvalidLocationError, InvalidSortError
from .geo import calculate_distance
from .hours import is_open_now

DEFAULT_RADIUS_KM = 10

# Cafés without a known distance sort as if this far away
MISSING_DISTANCE_KM = 999

SORT_DISTANCE = 'distance'
SORT_RATING = 'rating'
SORT_NAME = 'name'
VALID_SORTS = (SORT_DISTANCE, SORT_RATING, SORT_NAME)


def parse_location(latitude, longitude) -> Optional[tuple[float, float]]:
    """
    Parse a user location from raw values (e.g. query params).

    Returns:
        (latitude, longitude) tuple, or None when both are missing

    Raises:
        InvalidLocationError: If only one is given or either isn't a finite number
    """
    if latitude in (None, '') and longitude in (None, ''):
        return None
    if latitude in (None, '') or longitude in (None, ''):
        raise InvalidLocationError("Both lat and lng are required")

    try:
        location = float(latitude), float(longitude)
    except (TypeError, ValueError):
        raise InvalidLocationError("lat and lng must be numbers")

    if not all(math.isfinite(value) for value in location):
        raise InvalidLocationError("lat and lng must be finite numbers")
    return location


def parse_drink_id(value) -> Optional[UUID]:
    """
    Parse a drink id from a query param.

    Raises:
        DrinkNotFoundError: If the value is not a UUID
    """
    if not value:
        return None
    try:
        return UUID(str(value))
    except ValueError:
        raise DrinkNotFoundError(f"Drink {value} not found")


def search_cafes(
    *,
    search: Optional[str] = None,
    latte_type: Optional[str] = None,
    drink_id: Optional[UUID] = None,
) -> list[Cafe]:
    """
    Search active cafés.

    Args:
        search: Search term for name, address, description
        latte_type: Only cafés serving this latte type
        drink_id: Only cafés with this drink on the menu

    Returns:
        List of matching cafés ordered by name
    """
    queryset = Cafe.objects.filter(is_active=True).prefetch_related('drinks')

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(address__icontains=search) |
            Q(description__icontains=search)
        )

    if drink_id:
        queryset = queryset.filter(drinks__id=drink_id)

    cafes = list(queryset.distinct().order_by('name'))

    if latte_type:
        cafes = [cafe for cafe in cafes if latte_type in (cafe.latte_types or [])]

    return cafes


def annotate_distances(
    cafes: Iterable[Cafe],
    latitude: Optional[float],
    longitude: Optional[float]
) -> list[Cafe]:
    """
    Set ``cafe.distance`` in km from the given point.

    Without a location every café gets ``distance = None``.
    """
    cafes = list(cafes)
    has_location = latitude is not None and longitude is not None

    for cafe in cafes:
        if has_location:
            cafe.distance = calculate_distance(latitude, longitude, cafe.latitude, cafe.longitude)
        else:
            cafe.distance = None

    return cafes


def get_nearest_cafes(
    *,
    latitude: float,
    longitude: float,
    radius_km: float = DEFAULT_RADIUS_KM,
    cafes: Optional[Iterable[Cafe]] = None,
) -> list[Cafe]:
    """
    Active cafés within ``radius_km``, nearest first.

    Args:
        latitude: User latitude
        longitude: User longitude
        radius_km: Search radius in km
        cafes: Candidates, defaults to all active cafés
    """
    if cafes is None:
        cafes = search_cafes()

    nearby = [
        cafe for cafe in annotate_distances(cafes, latitude, longitude)
        if cafe.distance <= radius_km
    ]
    return sorted(nearby, key=lambda cafe: cafe.distance)


def sort_cafes(cafes: Iterable[Cafe], sort_by: str = SORT_DISTANCE) -> list[Cafe]:
    """
    Sort cafés for display.

    Args:
        cafes: Cafés, annotated with ``distance`` when sorting by distance
        sort_by: 'distance' (nearest first), 'rating' (best first) or 'name'

    Raises:
        InvalidSortError: If sort_by is unknown
    """
    if sort_by == SORT_DISTANCE:
        return sorted(
            cafes,
            key=lambda cafe: MISSING_DISTANCE_KM if getattr(cafe, 'distance', None) is None else cafe.distance
        )
    if sort_by == SORT_RATING:
        return sorted(cafes, key=lambda cafe: cafe.display_rating, reverse=True)
    if sort_by == SORT_NAME:
        return sorted(cafes, key=lambda cafe: cafe.name.casefold())

    raise InvalidSortError(
        f"Invalid sort: '{sort_by}'. Valid options: {', '.join(VALID_SORTS)}"
    )


def filter_open_now(cafes: Iterable[Cafe], now: Optional[datetime] = None) -> list[Cafe]:
    """Keep cafés open at ``now``. Cafés without a schedule are dropped."""
    now = now or timezone.localtime()
    return [cafe for cafe in cafes if is_open_now(cafe.hours, now) is True]
