# ==========================================
# apps/favorites/models.py
# ==========================================

from django.db import models
import uuid


class Favorite(models.Model):
    """Café saved by a user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='favorites')
    cafe = models.ForeignKey('cafes.Cafe', on_delete=models.CASCADE, related_name='favorited_by')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'favorites'
        unique_together = [['user', 'cafe']]
        indexes = [
            models.Index(fields=['user', 'created_at']),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user.get_display_name()} - {self.cafe.name}"
