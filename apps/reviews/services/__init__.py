"""Services for reviews business logic."""

from .exceptions import (
    ReviewsServiceError,
    ReviewNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
    InvalidLatteTypeError,
    CafeNotFoundError,
    UnauthorizedReviewActionError,
)
from .review_management import (
    create_review,
    get_review_by_id,
    update_review,
    delete_review,
    get_cafe_reviews,
    get_user_review,
)
from .rating_aggregation import (
    update_cafe_rating,
)

__all__ = [
    # Exceptions
    'ReviewsServiceError',
    'ReviewNotFoundError',
    'DuplicateReviewError',
    'InvalidRatingError',
    'InvalidLatteTypeError',
    'CafeNotFoundError',
    'UnauthorizedReviewActionError',
    # Review Management
    'create_review',
    'get_review_by_id',
    'update_review',
    'delete_review',
    'get_cafe_reviews',
    'get_user_review',
    # Rating Aggregation
    'update_cafe_rating',
]
