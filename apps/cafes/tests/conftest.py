import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.cafes.models import Cafe, Drink, DrinkCategory, LatteType


ALWAYS_OPEN = {
    day: {'open': '00:00', 'close': '24:00'}
    for day in ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')
}

NEVER_OPEN = {
    day: None
    for day in ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')
}


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def cafe_user(db):
    """Create and return a regular app user."""
    return User.objects.create_user(
        email='latte@example.com',
        password='TestPass123!',
        username='latte_lover',
    )


@pytest.fixture
def cafe_staff_user(db):
    """Create and return a backoffice staff user."""
    return User.objects.create_user(
        email='staff@example.com',
        password='TestPass123!',
        username='backoffice',
        is_staff=True,
    )


@pytest.fixture
def cafe_auth_client(api_client, cafe_user):
    """Return API client authenticated as a regular user."""
    refresh = RefreshToken.for_user(cafe_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def cafe_staff_client(api_client, cafe_staff_user):
    """Return API client authenticated as staff."""
    refresh = RefreshToken.for_user(cafe_staff_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def drink_matcha(db):
    """Create a matcha latte drink."""
    return Drink.objects.create(name='Matcha Latte', category=DrinkCategory.LATTE, icon='🍵')


@pytest.fixture
def drink_espresso(db):
    """Create an espresso drink."""
    return Drink.objects.create(name='Espresso', category=DrinkCategory.ESPRESSO)


@pytest.fixture
def paris_cafe(db, drink_matcha):
    """Café in central Paris, always open, serving matcha."""
    cafe = Cafe.objects.create(
        name='Matcha Bar',
        address='1 Rue de Rivoli, Paris',
        description='Ceremonial grade matcha',
        latitude=48.8566,
        longitude=2.3522,
        latte_types=[LatteType.MATCHA, LatteType.CAFE],
        hours=ALWAYS_OPEN,
        social={'instagram': '@matchabar'},
    )
    cafe.drinks.add(drink_matcha)
    return cafe


@pytest.fixture
def montmartre_cafe(db):
    """Café about 4 km from central Paris, closed every day."""
    return Cafe.objects.create(
        name='chai corner',
        address='Place du Tertre, Paris',
        latitude=48.8867,
        longitude=2.3408,
        latte_types=[LatteType.CHAI],
        hours=NEVER_OPEN,
    )


@pytest.fixture
def lyon_cafe(db):
    """Café in Lyon, far from Paris, without opening hours."""
    return Cafe.objects.create(
        name='Iced Lyon',
        latitude=45.7640,
        longitude=4.8357,
        latte_types=[LatteType.ICED],
        hours=None,
    )


@pytest.fixture
def inactive_cafe(db):
    """Deactivated café."""
    return Cafe.objects.create(
        name='Closed Forever',
        latitude=48.8566,
        longitude=2.3522,
        latte_types=[LatteType.MATCHA],
        is_active=False,
    )
