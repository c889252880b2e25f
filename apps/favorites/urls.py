from django.urls import path
from . import views

app_name = 'favorites'

urlpatterns = [
    # GET    /api/favorites/              - List favorites
    # POST   /api/favorites/              - Add favorite
    # DELETE /api/favorites/{cafe_id}/    - Remove favorite
    # POST   /api/favorites/sync/         - Merge device favorites
    path('', views.favorites, name='favorite-list'),
    path('sync/', views.sync, name='favorite-sync'),
    path('<uuid:cafe_id>/', views.remove, name='favorite-remove'),
]
