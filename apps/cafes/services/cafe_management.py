"""Cafe CRUD operations service."""

import logging
from django.db import transaction
from django.contrib.auth import get_user_model
from uuid import UUID
from typing import Optional, Dict, Any, Iterable

from ..models import Cafe, Drink, LatteType
from .exceptions import CafeNotFoundError, DrinkNotFoundError, InvalidLatteTypeError
from .hours import validate_schedule

User = get_user_model()

logger = logging.getLogger(__name__)

SOCIAL_FIELDS = ('website', 'instagram', 'facebook', 'email')


def clean_social(social: Optional[Dict[str, Any]]) -> Optional[Dict[str, str]]:
    """
    Drop empty and unknown social links.

    Returns:
        Dict of the remaining links, or None when nothing is left
    """
    if not social:
        return None

    cleaned = {}
    for key in SOCIAL_FIELDS:
        value = social.get(key)
        if isinstance(value, str) and value.strip():
            cleaned[key] = value.strip()

    return cleaned or None


def clean_latte_types(latte_types: Optional[Iterable[str]]) -> list[str]:
    """
    Validate latte type slugs, keeping order and dropping duplicates.

    Raises:
        InvalidLatteTypeError: If an unknown latte type is given
    """
    if not latte_types:
        return [LatteType.CAFE.value]

    cleaned = []
    for latte_type in latte_types:
        if latte_type not in LatteType.values:
            raise InvalidLatteTypeError(
                f"Invalid latte type: '{latte_type}'. Valid options: {', '.join(LatteType.values)}"
            )
        if latte_type not in cleaned:
            cleaned.append(latte_type)
    return cleaned


def _set_drinks(cafe: Cafe, drink_ids: Iterable[UUID]) -> None:
    drink_ids = list(drink_ids)
    drinks = list(Drink.objects.filter(id__in=drink_ids))
    if len(drinks) != len(set(drink_ids)):
        raise DrinkNotFoundError("One or more drinks not found")
    cafe.drinks.set(drinks)


@transaction.atomic
def create_cafe(
    *,
    name: str,
    latitude: float,
    longitude: float,
    created_by: Optional[User] = None,
    address: str = '',
    description: str = '',
    phone: str = '',
    image_url: str = '',
    latte_types: Optional[list[str]] = None,
    hours: Optional[dict] = None,
    social: Optional[dict] = None,
    drink_ids: Optional[list[UUID]] = None,
) -> Cafe:
    """
    Create a new café.

    Args:
        name: Café name
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        created_by: Staff user creating the café
        address: Street address
        description: Short description
        phone: Phone number
        image_url: Cover image URL
        latte_types: Drink type slugs served (defaults to ['cafe'])
        hours: Weekly schedule
        social: Social links (website, instagram, facebook, email)
        drink_ids: Drinks on the menu

    Returns:
        Created Cafe instance

    Raises:
        InvalidScheduleError: If hours are malformed
        DrinkNotFoundError: If a drink id doesn't exist
    """
    cafe = Cafe.objects.create(
        name=name,
        latitude=latitude,
        longitude=longitude,
        address=address,
        description=description,
        phone=phone,
        image_url=image_url,
        latte_types=clean_latte_types(latte_types),
        hours=validate_schedule(hours),
        social=clean_social(social),
        created_by=created_by,
    )

    if drink_ids:
        _set_drinks(cafe, drink_ids)

    logger.info("Created cafe %s (%s)", cafe.id, cafe.name)
    return cafe


@transaction.atomic
def update_cafe(
    *,
    cafe_id: UUID,
    data: Dict[str, Any]
) -> Cafe:
    """
    Update an existing café.

    Args:
        cafe_id: Cafe UUID
        data: Fields to update

    Returns:
        Updated Cafe instance

    Raises:
        CafeNotFoundError: If café doesn't exist
        InvalidScheduleError: If hours are malformed
    """
    try:
        cafe = (
            Cafe.objects
            .select_for_update()
            .get(id=cafe_id, is_active=True)
        )
    except Cafe.DoesNotExist:
        raise CafeNotFoundError(f"Cafe {cafe_id} not found")

    allowed_fields = [
        'name', 'address', 'description', 'phone', 'image_url',
        'latitude', 'longitude',
    ]

    for field, value in data.items():
        if field in allowed_fields:
            setattr(cafe, field, value)

    if 'hours' in data:
        cafe.hours = validate_schedule(data['hours'])
    if 'social' in data:
        cafe.social = clean_social(data['social'])
    if 'latte_types' in data:
        cafe.latte_types = clean_latte_types(data['latte_types'])

    cafe.save()

    if 'drink_ids' in data:
        _set_drinks(cafe, data['drink_ids'] or [])

    logger.info("Updated cafe %s", cafe.id)
    return cafe


@transaction.atomic
def soft_delete_cafe(*, cafe_id: UUID) -> None:
    """
    Soft delete a café (set is_active=False).

    Raises:
        CafeNotFoundError: If café doesn't exist
    """
    try:
        cafe = (
            Cafe.objects
            .select_for_update()
            .get(id=cafe_id)
        )
    except Cafe.DoesNotExist:
        raise CafeNotFoundError(f"Cafe {cafe_id} not found")

    cafe.is_active = False
    cafe.save(update_fields=['is_active', 'updated_at'])
    logger.info("Deactivated cafe %s", cafe.id)


def get_cafe_by_id(*, cafe_id: UUID, include_inactive: bool = False) -> Cafe:
    """
    Get café by ID.

    Raises:
        CafeNotFoundError: If café doesn't exist
    """
    try:
        queryset = Cafe.objects.prefetch_related('drinks')

        if not include_inactive:
            queryset = queryset.filter(is_active=True)

        return queryset.get(id=cafe_id)
    except Cafe.DoesNotExist:
        raise CafeNotFoundError(f"Cafe {cafe_id} not found")
