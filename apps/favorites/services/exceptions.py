"""Domain-specific exceptions for favorites services."""


class FavoritesServiceError(Exception):
    """Base exception for favorites services."""
    pass


class CafeNotFoundError(FavoritesServiceError):
    """Raised when the café does not exist or is inactive."""
    pass


class FavoriteNotFoundError(FavoritesServiceError):
    """Raised when the café is not in the user's favorites."""
    pass
