"""Great-circle distance between coordinates and its display form."""

import math

from .hours import DEFAULT_LOCALE, locale_chain

EARTH_RADIUS_KM = 6371

# Locales that write decimals with a comma
DECIMAL_SEPARATORS = {
    'fr': ',',
    'en': '.',
    'es': ',',
}


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Haversine distance in kilometers.

    Args:
        lat1: Latitude of the first point in decimal degrees
        lon1: Longitude of the first point in decimal degrees
        lat2: Latitude of the second point in decimal degrees
        lon2: Longitude of the second point in decimal degrees

    Returns:
        Distance in km, 0 when both points coincide
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push a just outside [0, 1] near antipodes
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def _decimal_separator(locale):
    for candidate in locale_chain(locale):
        if candidate in DECIMAL_SEPARATORS:
            return DECIMAL_SEPARATORS[candidate]
    return DECIMAL_SEPARATORS[DEFAULT_LOCALE]


def format_distance(distance_km: float, locale: str = DEFAULT_LOCALE) -> str:
    """
    Human readable distance.

    Under 1 km: whole meters (``"850 m"``). Otherwise kilometers with at
    most one decimal and no trailing ``.0`` (``"2 km"``, ``"2,5 km"``).
    """
    meters = round(distance_km * 1000)
    if meters < 1000:
        return f"{meters} m"

    km = round(distance_km, 1)
    if km == int(km):
        return f"{int(km)} km"
    return f"{km:.1f}".replace('.', _decimal_separator(locale)) + " km"
