"""Review management service - CRUD operations for café reviews."""

import logging
from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID
from typing import Optional

from apps.accounts.models import User
from apps.cafes.models import Cafe, LatteType
from apps.reviews.models import Review
from .exceptions import (
    ReviewNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
    InvalidLatteTypeError,
    CafeNotFoundError,
    UnauthorizedReviewActionError,
)
from .rating_aggregation import update_cafe_rating

logger = logging.getLogger(__name__)


def _validate_rating(rating: int) -> None:
    if not (1 <= rating <= 5):
        raise InvalidRatingError("Rating must be between 1 and 5")


def _validate_latte_type(latte_type: str) -> None:
    if latte_type and latte_type not in LatteType.values:
        raise InvalidLatteTypeError(f"Invalid latte type: '{latte_type}'")


@transaction.atomic
def create_review(
    *,
    author: User,
    cafe_id: UUID,
    rating: int,
    comment: str = '',
    latte_type: str = ''
) -> Review:
    """
    Create a review for a café and refresh its average rating.

    Args:
        author: User writing the review
        cafe_id: UUID of the reviewed café
        rating: Rating 1-5
        comment: Free text
        latte_type: Drink type the rating is about (optional)

    Returns:
        Created Review instance

    Raises:
        InvalidRatingError: If rating not in 1-5 range
        InvalidLatteTypeError: If latte type is unknown
        CafeNotFoundError: If café doesn't exist or inactive
        DuplicateReviewError: If user already reviewed this café
    """
    _validate_rating(rating)
    _validate_latte_type(latte_type)

    try:
        cafe = Cafe.objects.get(id=cafe_id, is_active=True)
    except Cafe.DoesNotExist:
        raise CafeNotFoundError("Cafe not found or inactive")

    if Review.objects.filter(author=author, cafe=cafe).exists():
        raise DuplicateReviewError(
            "You have already reviewed this cafe. Please update your existing review instead."
        )

    review = Review.objects.create(
        author=author,
        cafe=cafe,
        rating=rating,
        comment=comment,
        latte_type=latte_type,
    )

    update_cafe_rating(cafe_id=cafe.id)
    logger.info("User %s reviewed cafe %s (%d)", author.id, cafe.id, rating)
    return review


def get_review_by_id(*, review_id: UUID) -> Review:
    """
    Get review by ID.

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    try:
        return Review.objects.select_related('author', 'cafe').get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError(f"Review {review_id} not found")


@transaction.atomic
def update_review(
    *,
    review_id: UUID,
    user: User,
    rating: Optional[int] = None,
    comment: Optional[str] = None,
    latte_type: Optional[str] = None
) -> Review:
    """
    Update a review. Only the author can update it.

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
        InvalidRatingError: If rating not in 1-5 range
        InvalidLatteTypeError: If latte type is unknown
    """
    try:
        review = Review.objects.select_for_update().get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError(f"Review {review_id} not found")

    if review.author_id != user.id:
        raise UnauthorizedReviewActionError("You can only update your own reviews")

    if rating is not None:
        _validate_rating(rating)
        review.rating = rating
    if comment is not None:
        review.comment = comment
    if latte_type is not None:
        _validate_latte_type(latte_type)
        review.latte_type = latte_type

    review.save()
    update_cafe_rating(cafe_id=review.cafe_id)
    logger.info("User %s updated review %s", user.id, review.id)
    return review


@transaction.atomic
def delete_review(*, review_id: UUID, user: User) -> None:
    """
    Delete a review. Only the author can delete it.

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
    """
    try:
        review = Review.objects.select_for_update().get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError(f"Review {review_id} not found")

    if review.author_id != user.id:
        raise UnauthorizedReviewActionError("You can only delete your own reviews")

    cafe_id = review.cafe_id
    review.delete()
    update_cafe_rating(cafe_id=cafe_id)
    logger.info("User %s deleted review %s", user.id, review_id)


def get_cafe_reviews(*, cafe_id: UUID) -> QuerySet[Review]:
    """Reviews of a café, newest first."""
    return (
        Review.objects
        .filter(cafe_id=cafe_id)
        .select_related('author')
        .order_by('-created_at')
    )


def get_user_review(*, user: User, cafe_id: UUID) -> Optional[Review]:
    """The user's review of a café, or None."""
    return Review.objects.filter(author=user, cafe_id=cafe_id).first()
