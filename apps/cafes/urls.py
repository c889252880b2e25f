from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'cafes'

# Note: drinks must be registered BEFORE empty prefix to avoid URL conflicts
router = DefaultRouter()
router.register(r'drinks', views.DrinkViewSet, basename='drink')
router.register(r'', views.CafeViewSet, basename='cafe')

urlpatterns = [
    # Cafe ViewSet routes
    # GET    /api/cafes/                 - List cafés (search, latte_type, drink, lat/lng, radius, sort, open_now, lang)
    # POST   /api/cafes/                 - Create café (staff)
    # GET    /api/cafes/{id}/            - Café details with weekly hours
    # PUT    /api/cafes/{id}/            - Update café (staff)
    # PATCH  /api/cafes/{id}/            - Partial update (staff)
    # DELETE /api/cafes/{id}/            - Deactivate café (staff)

    # Custom actions
    # GET    /api/cafes/nearest/         - Cafés within radius, nearest first
    # GET    /api/cafes/{id}/hours/      - Weekly hours table, Monday first

    # Drink routes
    # GET    /api/cafes/drinks/          - List drinks
    # POST   /api/cafes/drinks/          - Create drink (staff)
    # PATCH  /api/cafes/drinks/{id}/     - Update drink (staff)
    # DELETE /api/cafes/drinks/{id}/     - Delete drink (staff)

    path('', include(router.urls)),
]
