# ==========================================
# apps/cafes/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class LatteType(models.TextChoices):
    MATCHA = 'matcha', 'Matcha'
    CHAI = 'chai', 'Chai'
    CAFE = 'cafe', 'Café'
    ICED = 'iced', 'Iced'


class DrinkCategory(models.TextChoices):
    ESPRESSO = 'espresso', 'Espresso'
    LATTE = 'latte', 'Latte'
    FILTER = 'filter', 'Filter'
    COLD = 'cold', 'Cold'
    OTHER = 'other', 'Other'


class Drink(models.Model):
    """Drink on the menu of one or more cafés."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    category = models.CharField(max_length=20, choices=DrinkCategory.choices, default=DrinkCategory.LATTE)
    icon = models.CharField(max_length=16, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'drinks'
        ordering = ['category', 'name']

    def __str__(self):
        return f"{self.icon} {self.name}".strip()


class Cafe(models.Model):
    """Café listed in the app."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    address = models.CharField(max_length=300, blank=True)
    description = models.TextField(blank=True)
    phone = models.CharField(max_length=30, blank=True)
    image_url = models.URLField(blank=True, max_length=500)
    latitude = models.FloatField(validators=[MinValueValidator(-90), MaxValueValidator(90)])
    longitude = models.FloatField(validators=[MinValueValidator(-180), MaxValueValidator(180)])
    latte_types = models.JSONField(default=list, blank=True)
    drinks = models.ManyToManyField(Drink, blank=True, related_name='cafes')
    # Weekly schedule keyed by weekday, see apps.cafes.services.hours
    hours = models.JSONField(null=True, blank=True)
    social = models.JSONField(null=True, blank=True)
    average_rating = models.DecimalField(
        max_digits=2, decimal_places=1, null=True, blank=True,
        validators=[MinValueValidator(Decimal('1.0')), MaxValueValidator(Decimal('5.0'))]
    )
    review_count = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    created_by = models.ForeignKey('accounts.User', on_delete=models.SET_NULL, null=True, blank=True, related_name='created_cafes')

    class Meta:
        db_table = 'cafes'
        indexes = [
            models.Index(fields=['name']),
            models.Index(fields=['is_active']),
            models.Index(fields=['average_rating']),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def display_rating(self):
        """Average rating, or the default shown for cafés without reviews."""
        return self.average_rating or Decimal('4.5')
