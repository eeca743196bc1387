"""Domain exceptions for restaurants app."""


class RestaurantsServiceError(Exception):
    """Base exception for all restaurant service errors."""
    pass


class RestaurantNotFoundError(RestaurantsServiceError):
    """Restaurant does not exist or is not listed."""
    pass


class InvalidSortError(RestaurantsServiceError):
    """Unsupported sort key."""
    pass
