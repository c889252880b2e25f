import pytest
from django.urls import reverse
from rest_framework import status
from apps.cafes.models import Cafe, Drink


# =============================================================================
# Cafe List Tests
# =============================================================================

@pytest.mark.django_db
class TestCafeList:
    """Tests for GET /api/cafes/"""

    def test_list_cafes(self, api_client, paris_cafe, montmartre_cafe, inactive_cafe):
        """List active cafés (public endpoint)."""
        url = reverse('cafes:cafe-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 2
        names = {item['name'] for item in response.data['results']}
        assert names == {'Matcha Bar', 'chai corner'}

    def test_list_item_live_fields(self, api_client, paris_cafe):
        """Items carry open status and hours in French by default."""
        url = reverse('cafes:cafe-list')
        response = api_client.get(url)

        item = response.data['results'][0]
        assert item['is_open_now'] is True
        assert item['today_hours'] == '00:00 - 24:00'
        assert item['closing_info'] == 'Ferme à 24:00'
        assert item['distance'] is None
        assert item['distance_display'] is None
        assert item['rating'] == 4.5

    def test_list_lang_param(self, api_client, montmartre_cafe):
        """lang query param selects the display locale."""
        url = reverse('cafes:cafe-list')
        response = api_client.get(url, {'lang': 'es'})

        item = response.data['results'][0]
        assert item['is_open_now'] is False
        assert item['today_hours'] == 'Cerrado'
        assert item['closing_info'] is None

    def test_list_user_preferred_language(self, cafe_auth_client, cafe_user, paris_cafe):
        """Signed-in users get their preferred language."""
        cafe_user.preferred_language = 'en'
        cafe_user.save()

        url = reverse('cafes:cafe-list')
        response = cafe_auth_client.get(url)

        assert response.data['results'][0]['closing_info'] == 'Closes at 24:00'

    def test_list_without_hours(self, api_client, lyon_cafe):
        """Cafés without a schedule have no live status."""
        url = reverse('cafes:cafe-list')
        response = api_client.get(url)

        item = response.data['results'][0]
        assert item['is_open_now'] is None
        assert item['today_hours'] is None

    def test_filter_latte_type(self, api_client, paris_cafe, montmartre_cafe):
        url = reverse('cafes:cafe-list')
        response = api_client.get(url, {'latte_type': 'chai'})

        assert response.status_code == status.HTTP_200_OK
        assert [item['name'] for item in response.data['results']] == ['chai corner']

    def test_filter_drink(self, api_client, paris_cafe, montmartre_cafe, drink_matcha):
        url = reverse('cafes:cafe-list')
        response = api_client.get(url, {'drink': str(drink_matcha.id)})

        assert [item['name'] for item in response.data['results']] == ['Matcha Bar']

    def test_invalid_drink_id(self, api_client, paris_cafe):
        url = reverse('cafes:cafe-list')
        response = api_client.get(url, {'drink': 'espresso'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_search(self, api_client, paris_cafe, montmartre_cafe):
        url = reverse('cafes:cafe-list')
        response = api_client.get(url, {'search': 'rivoli'})

        assert [item['name'] for item in response.data['results']] == ['Matcha Bar']

    def test_open_now_filter(self, api_client, paris_cafe, montmartre_cafe, lyon_cafe):
        url = reverse('cafes:cafe-list')
        response = api_client.get(url, {'open_now': 'true'})

        assert [item['name'] for item in response.data['results']] == ['Matcha Bar']

    def test_sort_by_distance(self, api_client, paris_cafe, montmartre_cafe, lyon_cafe):
        """Nearest first from the user's location."""
        url = reverse('cafes:cafe-list')
        response = api_client.get(url, {'lat': 48.8867, 'lng': 2.3408, 'sort': 'distance'})

        results = response.data['results']
        assert [item['name'] for item in results] == ['chai corner', 'Matcha Bar', 'Iced Lyon']
        assert results[0]['distance_display'].endswith(' m')
        assert results[1]['distance_display'].endswith(' km')

    def test_radius(self, api_client, paris_cafe, montmartre_cafe, lyon_cafe):
        url = reverse('cafes:cafe-list')
        response = api_client.get(url, {'lat': 48.8566, 'lng': 2.3522, 'radius': 1})

        assert [item['name'] for item in response.data['results']] == ['Matcha Bar']

    def test_sort_by_name(self, api_client, paris_cafe, montmartre_cafe, lyon_cafe):
        url = reverse('cafes:cafe-list')
        response = api_client.get(url, {'sort': 'name'})

        assert [item['name'] for item in response.data['results']] == [
            'chai corner', 'Iced Lyon', 'Matcha Bar'
        ]

    def test_invalid_sort(self, api_client, paris_cafe):
        url = reverse('cafes:cafe-list')
        response = api_client.get(url, {'sort': 'popularity'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_partial_location(self, api_client, paris_cafe):
        url = reverse('cafes:cafe-list')
        response = api_client.get(url, {'lat': 48.85})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_invalid_radius(self, api_client, paris_cafe):
        url = reverse('cafes:cafe-list')
        response = api_client.get(url, {'lat': 48.85, 'lng': 2.35, 'radius': 'far'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.parametrize('lat', ['nan', 'inf'])
    def test_non_finite_location(self, api_client, paris_cafe, lat):
        url = reverse('cafes:cafe-list')
        response = api_client.get(url, {'lat': lat, 'lng': 2.35})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data


# =============================================================================
# Cafe Detail Tests
# =============================================================================

@pytest.mark.django_db
class TestCafeDetail:
    """Tests for GET /api/cafes/{id}/"""

    def test_retrieve(self, api_client, paris_cafe):
        url = reverse('cafes:cafe-detail', kwargs={'pk': paris_cafe.id})
        response = api_client.get(url, {'lang': 'en'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Matcha Bar'
        assert response.data['social'] == {'instagram': '@matchabar'}
        assert response.data['drinks'][0]['name'] == 'Matcha Latte'
        assert len(response.data['weekly_hours']) == 7
        assert response.data['weekly_hours'][0]['label'] == 'Monday'

    def test_retrieve_with_location(self, api_client, paris_cafe):
        url = reverse('cafes:cafe-detail', kwargs={'pk': paris_cafe.id})
        response = api_client.get(url, {'lat': 51.5074, 'lng': -0.1278, 'lang': 'en'})

        assert response.data['distance'] == pytest.approx(343.6, abs=1)
        assert response.data['distance_display'].endswith(' km')

    def test_retrieve_inactive(self, api_client, inactive_cafe):
        url = reverse('cafes:cafe-detail', kwargs={'pk': inactive_cafe.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_retrieve_malformed_id(self, api_client, paris_cafe):
        url = reverse('cafes:cafe-list') + '-' * 36 + '/'
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_hours(self, api_client, montmartre_cafe):
        """GET /api/cafes/{id}/hours/"""
        url = reverse('cafes:cafe-hours', kwargs={'pk': montmartre_cafe.id})
        response = api_client.get(url, {'lang': 'en'})

        assert response.status_code == status.HTTP_200_OK
        assert [row['day'] for row in response.data][0] == 'monday'
        assert all(row['hours'] == 'Closed' for row in response.data)


@pytest.mark.django_db
class TestNearest:
    """Tests for GET /api/cafes/nearest/"""

    def test_nearest(self, api_client, paris_cafe, montmartre_cafe, lyon_cafe):
        url = reverse('cafes:cafe-nearest')
        response = api_client.get(url, {'lat': 48.8566, 'lng': 2.3522})

        assert response.status_code == status.HTTP_200_OK
        assert [item['name'] for item in response.data] == ['Matcha Bar', 'chai corner']

    def test_nearest_radius(self, api_client, paris_cafe, lyon_cafe):
        url = reverse('cafes:cafe-nearest')
        response = api_client.get(url, {'lat': 48.8566, 'lng': 2.3522, 'radius': 500})

        assert [item['name'] for item in response.data] == ['Matcha Bar', 'Iced Lyon']

    def test_nearest_requires_location(self, api_client):
        url = reverse('cafes:cafe-nearest')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Cafe Write Tests
# =============================================================================

@pytest.mark.django_db
class TestCafeWrite:
    """Staff-only writes."""

    def test_create_cafe(self, cafe_staff_client, drink_matcha):
        url = reverse('cafes:cafe-list')
        data = {
            'name': 'Chai Spot',
            'latitude': 48.86,
            'longitude': 2.34,
            'latte_types': ['chai'],
            'hours': {'monday': {'open': '08:00', 'close': '18:00'}},
            'drink_ids': [str(drink_matcha.id)],
        }
        response = cafe_staff_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        cafe = Cafe.objects.get(name='Chai Spot')
        assert cafe.latte_types == ['chai']
        assert cafe.hours['sunday'] is None
        assert response.data['drinks'][0]['id'] == str(drink_matcha.id)

    def test_create_rejects_overnight_hours(self, cafe_staff_client):
        url = reverse('cafes:cafe-list')
        data = {
            'name': 'Night Owl',
            'latitude': 48.86,
            'longitude': 2.34,
            'hours': {'friday': {'open': '20:00', 'close': '02:00'}},
        }
        response = cafe_staff_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'hours' in response.data

    def test_create_rejects_malformed_hours(self, cafe_staff_client):
        url = reverse('cafes:cafe-list')
        data = {
            'name': 'Typo Café',
            'latitude': 48.86,
            'longitude': 2.34,
            'hours': {'monday': {'open': '8h', 'close': '18:00'}},
        }
        response = cafe_staff_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_unknown_drink(self, cafe_staff_client):
        url = reverse('cafes:cafe-list')
        data = {
            'name': 'Odd',
            'latitude': 0,
            'longitude': 0,
            'drink_ids': ['00000000-0000-0000-0000-000000000000'],
        }
        response = cafe_staff_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_requires_staff(self, cafe_auth_client):
        url = reverse('cafes:cafe-list')
        response = cafe_auth_client.post(url, {'name': 'X', 'latitude': 0, 'longitude': 0}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_create_unauthenticated(self, api_client):
        url = reverse('cafes:cafe-list')
        response = api_client.post(url, {'name': 'X', 'latitude': 0, 'longitude': 0}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_partial_update(self, cafe_staff_client, paris_cafe):
        url = reverse('cafes:cafe-detail', kwargs={'pk': paris_cafe.id})
        response = cafe_staff_client.patch(url, {'description': 'Now with oat milk'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        paris_cafe.refresh_from_db()
        assert paris_cafe.description == 'Now with oat milk'
        assert paris_cafe.name == 'Matcha Bar'

    def test_update_bad_hours(self, cafe_staff_client, paris_cafe):
        url = reverse('cafes:cafe-detail', kwargs={'pk': paris_cafe.id})
        response = cafe_staff_client.patch(url, {'hours': {'monday': '18:00-09:00'}}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_is_soft(self, cafe_staff_client, paris_cafe):
        url = reverse('cafes:cafe-detail', kwargs={'pk': paris_cafe.id})
        response = cafe_staff_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        paris_cafe.refresh_from_db()
        assert paris_cafe.is_active is False


# =============================================================================
# Drink Tests
# =============================================================================

@pytest.mark.django_db
class TestDrinks:
    """Tests for /api/cafes/drinks/"""

    def test_list_drinks(self, api_client, drink_matcha, drink_espresso):
        url = reverse('cafes:drink-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [drink['name'] for drink in response.data] == ['Espresso', 'Matcha Latte']

    def test_filter_by_category(self, api_client, drink_matcha, drink_espresso):
        url = reverse('cafes:drink-list')
        response = api_client.get(url, {'category': 'latte'})

        assert [drink['name'] for drink in response.data] == ['Matcha Latte']

    def test_create_drink(self, cafe_staff_client):
        url = reverse('cafes:drink-list')
        response = cafe_staff_client.post(url, {'name': 'Iced Chai', 'category': 'cold'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Drink.objects.filter(name='Iced Chai').exists()

    def test_create_duplicate_drink(self, cafe_staff_client, drink_matcha):
        url = reverse('cafes:drink-list')
        response = cafe_staff_client.post(url, {'name': 'MATCHA LATTE'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_drink_requires_staff(self, cafe_auth_client):
        url = reverse('cafes:drink-list')
        response = cafe_auth_client.post(url, {'name': 'Flat White'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_update_drink(self, cafe_staff_client, drink_espresso):
        url = reverse('cafes:drink-detail', kwargs={'pk': drink_espresso.id})
        response = cafe_staff_client.patch(url, {'icon': '☕'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        drink_espresso.refresh_from_db()
        assert drink_espresso.icon == '☕'

    def test_delete_drink(self, cafe_staff_client, drink_espresso):
        url = reverse('cafes:drink-detail', kwargs={'pk': drink_espresso.id})
        response = cafe_staff_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Drink.objects.filter(id=drink_espresso.id).exists()
