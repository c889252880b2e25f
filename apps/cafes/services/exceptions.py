"""Domain-specific exceptions for cafes services."""


class CafesServiceError(Exception):
    """Base exception for cafes services."""
    pass


class CafeNotFoundError(CafesServiceError):
    """Raised when cafe does not exist or is inactive."""
    pass


class DrinkNotFoundError(CafesServiceError):
    """Raised when drink does not exist."""
    pass


class DuplicateDrinkError(CafesServiceError):
    """Raised when a drink with the same name already exists."""
    pass


class InvalidScheduleError(CafesServiceError):
    """Raised when weekly opening hours cannot be stored as given."""
    pass


class InvalidTimeError(CafesServiceError):
    """Raised when a time of day is not in 24-hour HH:MM format."""
    pass


class InvalidSortError(CafesServiceError):
    """Raised when an unknown sort key is requested."""
    pass


class InvalidLocationError(CafesServiceError):
    """Raised when coordinates are missing or not numeric."""
    pass


class InvalidLatteTypeError(CafesServiceError):
    """Raised when a latte type slug is not one of the known types."""
    pass
