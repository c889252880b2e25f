import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.cafes.models import Cafe
from apps.favorites.models import Favorite


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def favorite_user(db):
    """Create and return a test user for favorites."""
    return User.objects.create_user(
        email='fan@example.com',
        password='TestPass123!',
        username='cafe_fan',
    )


@pytest.fixture
def favorite_other_user(db):
    """Create and return another test user for favorites."""
    return User.objects.create_user(
        email='other_fan@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def favorite_auth_client(api_client, favorite_user):
    """Return API client authenticated as favorite user."""
    refresh = RefreshToken.for_user(favorite_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def favorite_cafe(db):
    """Create a café to save."""
    return Cafe.objects.create(
        name='Matcha Bar',
        latitude=48.8566,
        longitude=2.3522,
        latte_types=['matcha'],
        hours={'monday': {'open': '08:00', 'close': '18:00'}},
    )


@pytest.fixture
def favorite_another_cafe(db):
    """Create another café to save."""
    return Cafe.objects.create(
        name='Chai Corner',
        latitude=48.8867,
        longitude=2.3408,
        latte_types=['chai'],
    )


@pytest.fixture
def favorite_inactive_cafe(db):
    """Create a deactivated café."""
    return Cafe.objects.create(
        name='Gone',
        latitude=0,
        longitude=0,
        is_active=False,
    )


@pytest.fixture
def favorite(db, favorite_user, favorite_cafe):
    """Save favorite_cafe for favorite_user."""
    return Favorite.objects.create(user=favorite_user, cafe=favorite_cafe)
