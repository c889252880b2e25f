from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # GET   /api/accounts/me/   - Current user profile
    # PATCH /api/accounts/me/   - Update profile
    path('me/', views.current_user, name='current-user'),
]
