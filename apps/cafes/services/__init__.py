"""Services for cafes business logic."""

from .exceptions import (
    CafesServiceError,
    CafeNotFoundError,
    DrinkNotFoundError,
    DuplicateDrinkError,
    InvalidScheduleError,
    InvalidTimeError,
    InvalidSortError,
    InvalidLocationError,
    InvalidLatteTypeError,
)
from .hours import (
    SUNDAY_FIRST_DAYS,
    DISPLAY_ORDER_DAYS,
    DayHours,
    parse_day_hours,
    time_to_minutes,
    validate_schedule,
    current_day,
    is_open_now,
    get_today_hours,
    get_closing_info,
    get_day_label,
    format_hours_for_day,
    get_all_days_ordered,
    weekly_hours_table,
)
from .geo import (
    EARTH_RADIUS_KM,
    calculate_distance,
    format_distance,
)
from .cafe_management import (
    clean_social,
    clean_latte_types,
    create_cafe,
    update_cafe,
    soft_delete_cafe,
    get_cafe_by_id,
)
from .drink_management import (
    create_drink,
    update_drink,
    delete_drink,
    get_all_drinks,
)
from .cafe_search import (
    DEFAULT_RADIUS_KM,
    parse_location,
    parse_drink_id,
    search_cafes,
    annotate_distances,
    get_nearest_cafes,
    sort_cafes,
    filter_open_now,
)

__all__ = [
    # Exceptions
    'CafesServiceError',
    'CafeNotFoundError',
    'DrinkNotFoundError',
    'DuplicateDrinkError',
    'InvalidScheduleError',
    'InvalidTimeError',
    'InvalidSortError',
    'InvalidLocationError',
    'InvalidLatteTypeError',
    # Opening Hours
    'SUNDAY_FIRST_DAYS',
    'DISPLAY_ORDER_DAYS',
    'DayHours',
    'parse_day_hours',
    'time_to_minutes',
    'validate_schedule',
    'current_day',
    'is_open_now',
    'get_today_hours',
    'get_closing_info',
    'get_day_label',
    'format_hours_for_day',
    'get_all_days_ordered',
    'weekly_hours_table',
    # Distance
    'EARTH_RADIUS_KM',
    'calculate_distance',
    'format_distance',
    # Cafe Management
    'clean_social',
    'clean_latte_types',
    'create_cafe',
    'update_cafe',
    'soft_delete_cafe',
    'get_cafe_by_id',
    # Drink Management
    'create_drink',
    'update_drink',
    'delete_drink',
    'get_all_drinks',
    # Cafe Search
    'DEFAULT_RADIUS_KM',
    'parse_location',
    'parse_drink_id',
    'search_cafes',
    'annotate_distances',
    'get_nearest_cafes',
    'sort_cafes',
    'filter_open_now',
]
