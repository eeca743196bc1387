"""Restaurant search service - lookup and listing."""

from django.db.models import Q, QuerySet
from typing import Optional
from uuid import UUID

from apps.restaurants.models import Restaurant
from .exceptions import RestaurantNotFoundError, InvalidSortError

SORT_ORDERS = {
    'created_at': '-created_at',
    'avg_score': '-avg_score',
    'lowest_price': 'lowest_price',
}


def get_restaurant_by_id(*, restaurant_id: UUID) -> Restaurant:
    """
    Retrieve a listed restaurant.

    Raises:
        RestaurantNotFoundError: If restaurant doesn't exist or is inactive
    """
    try:
        return Restaurant.objects.get(id=restaurant_id, is_active=True)
    except Restaurant.DoesNotExist:
        raise RestaurantNotFoundError("Restaurant not found")


def search_restaurants(
    *,
    keyword: Optional[str] = None,
    sort: Optional[str] = None
) -> QuerySet[Restaurant]:
    """
    List active restaurants, optionally filtered by keyword.

    Args:
        keyword: Matched against name, address and description
        sort: One of 'created_at' (newest first), 'avg_score' (best first),
            'lowest_price' (cheapest first)

    Returns:
        QuerySet of Restaurant instances

    Raises:
        InvalidSortError: If sort key is not supported
    """
    if sort and sort not in SORT_ORDERS:
        raise InvalidSortError(f"Unsupported sort '{sort}'")

    queryset = Restaurant.objects.filter(is_active=True)

    if keyword:
        queryset = queryset.filter(
            Q(name__icontains=keyword) |
            Q(address__icontains=keyword) |
            Q(description__icontains=keyword)
        )

    return queryset.order_by(SORT_ORDERS[sort or 'created_at'])
