"""Drink CRUD operations service."""

import logging
from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID
from typing import Dict, Any

from ..models import Drink
from .exceptions import DrinkNotFoundError, DuplicateDrinkError

logger = logging.getLogger(__name__)


def _name_taken(name: str, exclude_id=None) -> bool:
    queryset = Drink.objects.filter(name__iexact=name.strip())
    if exclude_id is not None:
        queryset = queryset.exclude(id=exclude_id)
    return queryset.exists()


@transaction.atomic
def create_drink(*, name: str, category: str = 'latte', icon: str = '') -> Drink:
    """
    Create a new drink.

    Raises:
        DuplicateDrinkError: If a drink with the same name exists
    """
    if _name_taken(name):
        raise DuplicateDrinkError(f"Drink '{name}' already exists")

    drink = Drink.objects.create(name=name.strip(), category=category, icon=icon or '')
    logger.info("Created drink %s (%s)", drink.id, drink.name)
    return drink


@transaction.atomic
def update_drink(*, drink_id: UUID, data: Dict[str, Any]) -> Drink:
    """
    Update name, category or icon of a drink.

    Raises:
        DrinkNotFoundError: If drink doesn't exist
        DuplicateDrinkError: If the new name is already used
    """
    try:
        drink = Drink.objects.select_for_update().get(id=drink_id)
    except Drink.DoesNotExist:
        raise DrinkNotFoundError(f"Drink {drink_id} not found")

    if 'name' in data:
        if _name_taken(data['name'], exclude_id=drink.id):
            raise DuplicateDrinkError(f"Drink '{data['name']}' already exists")
        drink.name = data['name'].strip()
    if 'category' in data:
        drink.category = data['category']
    if 'icon' in data:
        drink.icon = data['icon'] or ''

    drink.save()
    logger.info("Updated drink %s", drink.id)
    return drink


@transaction.atomic
def delete_drink(*, drink_id: UUID) -> None:
    """
    Delete a drink. Cafés and profiles referencing it are unlinked.

    Raises:
        DrinkNotFoundError: If drink doesn't exist
    """
    deleted, _ = Drink.objects.filter(id=drink_id).delete()
    if not deleted:
        raise DrinkNotFoundError(f"Drink {drink_id} not found")
    logger.info("Deleted drink %s", drink_id)


def get_all_drinks() -> QuerySet[Drink]:
    """All drinks ordered by category then name."""
    return Drink.objects.order_by('category', 'name')
