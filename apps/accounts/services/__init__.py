"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidLanguageError,
    FavoriteDrinkNotFoundError,
)
from .profile_management import (
    update_profile,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidLanguageError',
    'FavoriteDrinkNotFoundError',
    # Profile Management
    'update_profile',
]
