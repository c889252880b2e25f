"""Favorite management service - cafés saved by a user."""

import logging
from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID
from typing import Iterable

from apps.accounts.models import User
from apps.cafes.models import Cafe
from apps.favorites.models import Favorite
from .exceptions import CafeNotFoundError, FavoriteNotFoundError

logger = logging.getLogger(__name__)


@transaction.atomic
def add_favorite(*, user: User, cafe_id: UUID) -> tuple[Favorite, bool]:
    """
    Add a café to the user's favorites.

    Adding a café twice returns the existing favorite.

    Args:
        user: User saving the café
        cafe_id: UUID of the café

    Returns:
        Tuple of (Favorite, created: bool)

    Raises:
        CafeNotFoundError: If café doesn't exist or inactive
    """
    try:
        cafe = Cafe.objects.get(id=cafe_id, is_active=True)
    except Cafe.DoesNotExist:
        raise CafeNotFoundError("Cafe not found or inactive")

    favorite, created = Favorite.objects.get_or_create(user=user, cafe=cafe)
    if created:
        logger.info("User %s saved cafe %s", user.id, cafe.id)

    return favorite, created


@transaction.atomic
def remove_favorite(*, user: User, cafe_id: UUID) -> None:
    """
    Remove a café from the user's favorites.

    Raises:
        FavoriteNotFoundError: If the café isn't a favorite of this user
    """
    deleted, _ = Favorite.objects.filter(user=user, cafe_id=cafe_id).delete()
    if not deleted:
        raise FavoriteNotFoundError("Cafe is not in your favorites")


def get_user_favorites(*, user: User) -> QuerySet[Favorite]:
    """User's favorites on active cafés, newest first."""
    return (
        Favorite.objects
        .filter(user=user, cafe__is_active=True)
        .select_related('cafe')
        .order_by('-created_at')
    )


def get_user_favorite_ids(*, user: User) -> list[UUID]:
    """Ids of the user's favorite cafés, newest first."""
    return list(get_user_favorites(user=user).values_list('cafe_id', flat=True))


@transaction.atomic
def sync_favorites(*, user: User, cafe_ids: Iterable[UUID]) -> list[UUID]:
    """
    Merge favorites saved on a device before sign-in into the account.

    Ids already saved, unknown or pointing to inactive cafés are skipped, so
    syncing the same list twice changes nothing.

    Args:
        user: Signed-in user
        cafe_ids: Café ids stored locally on the device

    Returns:
        The user's favorite café ids after the merge
    """
    existing = set(Favorite.objects.filter(user=user).values_list('cafe_id', flat=True))
    wanted = [cafe_id for cafe_id in dict.fromkeys(cafe_ids) if cafe_id not in existing]

    cafes = Cafe.objects.filter(id__in=wanted, is_active=True)
    new_favorites = [Favorite(user=user, cafe=cafe) for cafe in cafes]
    Favorite.objects.bulk_create(new_favorites, ignore_conflicts=True)

    if new_favorites:
        logger.info("Synced %d favorite(s) for user %s", len(new_favorites), user.id)

    return get_user_favorite_ids(user=user)
