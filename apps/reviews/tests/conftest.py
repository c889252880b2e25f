import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.cafes.models import Cafe
from apps.reviews.models import Review


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def review_user(db):
    """Create and return a test user for reviews."""
    return User.objects.create_user(
        email='reviewer@example.com',
        password='TestPass123!',
        username='latte_reviewer',
    )


@pytest.fixture
def review_other_user(db):
    """Create and return another test user for reviews."""
    return User.objects.create_user(
        email='review_other@example.com',
        password='TestPass123!',
        first_name='Other',
        last_name='Reviewer',
    )


@pytest.fixture
def review_auth_client(api_client, review_user):
    """Return API client authenticated as review user."""
    refresh = RefreshToken.for_user(review_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def review_other_client(api_client, review_other_user):
    """Return API client authenticated as other user."""
    refresh = RefreshToken.for_user(review_other_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def review_cafe(db):
    """Create and return a café to review."""
    return Cafe.objects.create(
        name='Matcha Bar',
        latitude=48.8566,
        longitude=2.3522,
        latte_types=['matcha', 'cafe'],
    )


@pytest.fixture
def review_another_cafe(db):
    """Create and return another café to review."""
    return Cafe.objects.create(
        name='Chai Corner',
        latitude=48.8867,
        longitude=2.3408,
        latte_types=['chai'],
    )


@pytest.fixture
def review(db, review_user, review_cafe):
    """Create and return a test review."""
    return Review.objects.create(
        cafe=review_cafe,
        author=review_user,
        rating=4,
        comment='Creamy matcha, friendly staff.',
        latte_type='matcha',
    )


@pytest.fixture
def other_review(db, review_other_user, review_cafe):
    """Create a review by another user."""
    return Review.objects.create(
        cafe=review_cafe,
        author=review_other_user,
        rating=3,
        comment='Decent.',
    )
