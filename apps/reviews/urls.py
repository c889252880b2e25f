from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'reviews'

router = DefaultRouter()
router.register(r'', views.ReviewViewSet, basename='review')

urlpatterns = [
    # GET    /api/reviews/?cafe={id}      - List reviews of a café
    # POST   /api/reviews/                - Create review
    # GET    /api/reviews/mine/?cafe={id} - Current user's review of a café
    # PATCH  /api/reviews/{id}/           - Update own review
    # DELETE /api/reviews/{id}/           - Delete own review
    path('', include(router.urls)),
]
