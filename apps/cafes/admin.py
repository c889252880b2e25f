# ==========================================
# apps/cafes/admin.py
# ==========================================

from django import forms
from django.contrib import admin
from apps.cafes.models import Cafe, Drink
from apps.cafes.services import validate_schedule, is_open_now, InvalidScheduleError


class CafeAdminForm(forms.ModelForm):
    """Validates weekly hours the same way the API does."""

    class Meta:
        model = Cafe
        fields = '__all__'

    def clean_hours(self):
        try:
            return validate_schedule(self.cleaned_data.get('hours'))
        except InvalidScheduleError as e:
            raise forms.ValidationError(str(e))


@admin.register(Cafe)
class CafeAdmin(admin.ModelAdmin):
    """Admin interface for cafés."""

    form = CafeAdminForm
    list_display = [
        'name',
        'address',
        'average_rating',
        'review_count',
        'open_now',
        'is_active',
        'created_at'
    ]
    list_filter = [
        'is_active',
        'created_at'
    ]
    search_fields = [
        'name',
        'address',
        'description'
    ]
    readonly_fields = [
        'average_rating',
        'review_count',
        'created_at',
        'updated_at'
    ]
    filter_horizontal = ['drinks']

    fieldsets = (
        ('Basic Info', {
            'fields': ('name', 'address', 'description', 'phone', 'image_url')
        }),
        ('Location', {
            'fields': ('latitude', 'longitude')
        }),
        ('Menu', {
            'fields': ('latte_types', 'drinks')
        }),
        ('Hours & Links', {
            'fields': ('hours', 'social')
        }),
        ('Statistics', {
            'fields': ('average_rating', 'review_count'),
            'classes': ('collapse',)
        }),
        ('Metadata', {
            'fields': ('is_active', 'created_by', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['activate_cafes', 'deactivate_cafes']

    @admin.display(boolean=True, description='Open now')
    def open_now(self, obj):
        return is_open_now(obj.hours)

    def activate_cafes(self, request, queryset):
        """Activate selected cafés."""
        updated = queryset.update(is_active=True)
        self.message_user(request, f'{updated} cafés activated.')
    activate_cafes.short_description = 'Activate selected cafés'

    def deactivate_cafes(self, request, queryset):
        """Deactivate selected cafés."""
        updated = queryset.update(is_active=False)
        self.message_user(request, f'{updated} cafés deactivated.')
    deactivate_cafes.short_description = 'Deactivate selected cafés'


@admin.register(Drink)
class DrinkAdmin(admin.ModelAdmin):
    """Admin interface for drinks."""

    list_display = ['name', 'category', 'icon', 'created_at']
    list_filter = ['category']
    search_fields = ['name']
