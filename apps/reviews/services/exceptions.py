"""Domain exceptions for reviews app."""


class ReviewsServiceError(Exception):
    """Base exception for all reviews service errors."""
    pass


class ReviewNotFoundError(ReviewsServiceError):
    """Review does not exist or is inaccessible."""
    pass


class DuplicateReviewError(ReviewsServiceError):
    """User already reviewed this café."""
    pass


class InvalidRatingError(ReviewsServiceError):
    """Rating must be between 1 and 5."""
    pass


class InvalidLatteTypeError(ReviewsServiceError):
    """Latte type is not one of the known drink types."""
    pass


class CafeNotFoundError(ReviewsServiceError):
    """Café does not exist or is inactive."""
    pass


class UnauthorizedReviewActionError(ReviewsServiceError):
    """User is not the author of the review."""
    pass
