# ==========================================
# apps/reviews/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid
from apps.cafes.models import LatteType


class Review(models.Model):
    """User rating of a café."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    cafe = models.ForeignKey('cafes.Cafe', on_delete=models.CASCADE, related_name='reviews')
    author = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField(blank=True)
    latte_type = models.CharField(max_length=20, choices=LatteType.choices, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reviews'
        unique_together = [['author', 'cafe']]
        indexes = [
            models.Index(fields=['cafe', 'created_at']),
            models.Index(fields=['author', 'created_at']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.author.get_display_name()} - {self.cafe.name} ({self.rating}★)"
