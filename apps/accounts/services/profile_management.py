"""Profile management service."""

import logging
from django.conf import settings
from django.db import transaction
from django.contrib.auth import get_user_model
from typing import Dict, Any

from apps.cafes.models import Drink
from .exceptions import InvalidLanguageError, FavoriteDrinkNotFoundError

User = get_user_model()

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ['username', 'first_name', 'last_name', 'avatar_url']


@transaction.atomic
def update_profile(*, user: User, data: Dict[str, Any]) -> User:
    """
    Update the user's own profile.

    Args:
        user: User being updated
        data: Fields to update (username, first_name, last_name, avatar_url,
            preferred_language, favorite_drink_id)

    Returns:
        Updated User instance

    Raises:
        InvalidLanguageError: If preferred_language is not supported
        FavoriteDrinkNotFoundError: If favorite_drink_id doesn't exist
    """
    for field in PROFILE_FIELDS:
        if field in data:
            setattr(user, field, data[field])

    if 'preferred_language' in data:
        language = data['preferred_language']
        if language not in settings.LATTEFINDER_SUPPORTED_LOCALES:
            raise InvalidLanguageError(
                f"Invalid language: '{language}'. "
                f"Valid options: {', '.join(settings.LATTEFINDER_SUPPORTED_LOCALES)}"
            )
        user.preferred_language = language

    if 'favorite_drink_id' in data:
        drink_id = data['favorite_drink_id']
        if drink_id is None:
            user.favorite_drink = None
        else:
            try:
                user.favorite_drink = Drink.objects.get(id=drink_id)
            except Drink.DoesNotExist:
                raise FavoriteDrinkNotFoundError(f"Drink {drink_id} not found")

    user.save()
    logger.info("Updated profile of user %s", user.id)
    return user
