import math

import pytest

from apps.cafes.services.geo import calculate_distance, format_distance


PARIS = (48.8566, 2.3522)
LONDON = (51.5074, -0.1278)


class TestCalculateDistance:
    """Haversine distance."""

    def test_paris_to_itself(self):
        assert calculate_distance(*PARIS, *PARIS) == 0

    def test_paris_to_london(self):
        assert calculate_distance(*PARIS, *LONDON) == pytest.approx(343.6, abs=1)

    @pytest.mark.parametrize('point', [
        (0, 0),
        (-33.8688, 151.2093),
        (90, 0),
        (35.6762, 139.6503),
    ])
    def test_reflexive(self, point):
        assert calculate_distance(*point, *point) == 0

    @pytest.mark.parametrize('a,b', [
        (PARIS, LONDON),
        ((40.7128, -74.0060), (-33.8688, 151.2093)),
        ((0, 179.5), (0, -179.5)),
    ])
    def test_symmetric(self, a, b):
        assert calculate_distance(*a, *b) == pytest.approx(calculate_distance(*b, *a))

    def test_antimeridian_is_short(self):
        assert calculate_distance(0, 179.5, 0, -179.5) == pytest.approx(111.2, abs=0.5)

    def test_non_negative(self):
        assert calculate_distance(10, 10, -10, -10) > 0

    @pytest.mark.parametrize('a,b', [
        ((0, 0), (0, 180)),
        ((58.74635340283021, 120.65500195453278), (-58.746353442156504, -59.3449980279511)),
        ((-70.37, 18.46), (70.37, 198.46)),
    ])
    def test_antipodes_are_half_the_circumference(self, a, b):
        distance = calculate_distance(*a, *b)

        assert math.isfinite(distance)
        assert distance == pytest.approx(math.pi * 6371, abs=0.1)

    def test_out_of_range_longitude(self):
        distance = calculate_distance(0, 0, 0, 540)

        assert math.isfinite(distance)
        assert distance >= 0


class TestFormatDistance:
    """Display form of distances."""

    @pytest.mark.parametrize('distance_km,expected', [
        (0, '0 m'),
        (0.05, '50 m'),
        (0.8504, '850 m'),
        (0.9994, '999 m'),
    ])
    def test_meters_below_one_km(self, distance_km, expected):
        assert format_distance(distance_km, 'en') == expected

    def test_rounds_up_to_one_km(self):
        assert format_distance(0.9996, 'en') == '1 km'

    @pytest.mark.parametrize('locale,expected', [
        ('fr', '2,5 km'),
        ('es', '2,5 km'),
        ('en', '2.5 km'),
        ('xx', '2,5 km'),
    ])
    def test_decimal_separator(self, locale, expected):
        assert format_distance(2.54, locale) == expected

    def test_drops_trailing_zero(self):
        assert format_distance(2.02, 'en') == '2 km'
        assert format_distance(12, 'fr') == '12 km'

    def test_default_locale_is_french(self):
        assert format_distance(343.64) == '343,6 km'
