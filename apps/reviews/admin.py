# ==========================================
# apps/reviews/admin.py
# ==========================================

from django.contrib import admin
from .models import Review
from .services import update_cafe_rating


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """Admin interface for reviews."""

    list_display = ['cafe', 'author', 'rating', 'latte_type', 'created_at']
    list_filter = ['rating', 'latte_type', 'created_at']
    search_fields = ['cafe__name', 'author__email', 'comment']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['-created_at']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('cafe', 'author')

    def delete_model(self, request, obj):
        cafe_id = obj.cafe_id
        super().delete_model(request, obj)
        update_cafe_rating(cafe_id=cafe_id)

    def delete_queryset(self, request, queryset):
        cafe_ids = set(queryset.values_list('cafe_id', flat=True))
        super().delete_queryset(request, queryset)
        for cafe_id in cafe_ids:
            update_cafe_rating(cafe_id=cafe_id)
