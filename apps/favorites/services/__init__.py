"""Services for favorites business logic."""

from .exceptions import (
    FavoritesServiceError,
    CafeNotFoundError,
    FavoriteNotFoundError,
)
from .favorite_management import (
    add_favorite,
    remove_favorite,
    get_user_favorites,
    get_user_favorite_ids,
    sync_favorites,
)

__all__ = [
    # Exceptions
    'FavoritesServiceError',
    'CafeNotFoundError',
    'FavoriteNotFoundError',
    # Favorite Management
    'add_favorite',
    'remove_favorite',
    'get_user_favorites',
    'get_user_favorite_ids',
    'sync_favorites',
]
