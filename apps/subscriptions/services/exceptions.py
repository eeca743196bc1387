"""Domain exceptions for subscriptions app."""


class SubscriptionsServiceError(Exception):
    """Base exception for all subscription service errors."""
    pass


class AlreadySubscribedError(SubscriptionsServiceError):
    """User already holds a valid subscription to the plan."""
    pass


class SubscriptionNotFoundError(SubscriptionsServiceError):
    """User has no valid subscription to the plan."""
    pass
