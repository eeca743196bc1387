"""Restaurants services - Business logic layer."""

from .restaurant_search import (
    get_restaurant_by_id,
    search_restaurants,
    SORT_ORDERS,
)

from .exceptions import (
    RestaurantsServiceError,
    RestaurantNotFoundError,
    InvalidSortError,
)

__all__ = [
    'get_restaurant_by_id',
    'search_restaurants',
    'SORT_ORDERS',
    'RestaurantsServiceError',
    'RestaurantNotFoundError',
    'InvalidSortError',
]
