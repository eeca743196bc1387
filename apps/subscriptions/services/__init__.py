"""
Subscriptions services - Business logic layer.

Membership tier is derived from these: a member holding a valid
subscription to the premium plan is a premium member.
"""

from .subscription_management import (
    get_active_subscription,
    has_active_subscription,
    start_subscription,
    cancel_subscription,
)

from .exceptions import (
    SubscriptionsServiceError,
    AlreadySubscribedError,
    SubscriptionNotFoundError,
)

__all__ = [
    'get_active_subscription',
    'has_active_subscription',
    'start_subscription',
    'cancel_subscription',
    'SubscriptionsServiceError',
    'AlreadySubscribedError',
    'SubscriptionNotFoundError',
]
