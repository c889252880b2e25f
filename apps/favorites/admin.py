from django.contrib import admin
from .models import Favorite


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    """Admin interface for favorites."""

    list_display = ['user', 'cafe', 'created_at']
    search_fields = ['user__email', 'cafe__name']
    readonly_fields = ['created_at']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('user', 'cafe')
