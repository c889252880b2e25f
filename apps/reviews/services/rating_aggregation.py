"""Café rating aggregation with concurrency protection."""

from django.db import transaction
from django.db.models import Avg, Count
from decimal import Decimal, ROUND_HALF_UP
from uuid import UUID

from apps.cafes.models import Cafe
from .exceptions import CafeNotFoundError


@transaction.atomic
def update_cafe_rating(*, cafe_id: UUID) -> Cafe:
    """
    Recalculate and store a café's average rating.

    The café row is locked so concurrent review writes can't lose an
    update. The average is rounded to one decimal, None without reviews.

    Raises:
        CafeNotFoundError: If café doesn't exist
    """
    try:
        cafe = (
            Cafe.objects
            .select_for_update()
            .get(id=cafe_id)
        )
    except Cafe.DoesNotExist:
        raise CafeNotFoundError(f"Cafe {cafe_id} not found")

    aggregates = cafe.reviews.aggregate(
        avg=Avg('rating'),
        count=Count('id')
    )

    average = aggregates['avg']
    cafe.average_rating = (
        Decimal(str(average)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
        if average is not None else None
    )
    cafe.review_count = aggregates['count']
    cafe.save(update_fields=['average_rating', 'review_count', 'updated_at'])

    return cafe
