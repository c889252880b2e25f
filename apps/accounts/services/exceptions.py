"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class InvalidLanguageError(AccountsServiceError):
    """Raised when the preferred language is not supported."""
    pass


class FavoriteDrinkNotFoundError(AccountsServiceError):
    """Raised when the chosen favorite drink does not exist."""
    pass
