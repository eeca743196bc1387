"""Subscription management service - start, cancel and query plan membership."""

import logging
from typing import Optional

from django.conf import settings
from django.db import transaction
from django.db.models import Q, QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.subscriptions.models import Subscription
from .exceptions import AlreadySubscribedError, SubscriptionNotFoundError

logger = logging.getLogger(__name__)


def _plan(name: Optional[str]) -> str:
    return name or settings.PREMIUM_PLAN_NAME


def _valid_subscriptions() -> QuerySet[Subscription]:
    """Subscriptions still granting access (not ended, or ending in the future)."""
    return Subscription.objects.filter(Q(ends_at__isnull=True) | Q(ends_at__gt=timezone.now()))


def get_active_subscription(*, user: User, name: Optional[str] = None) -> Optional[Subscription]:
    """Return the user's valid subscription to the plan, or None."""
    if user.pk is None:
        return None
    return (
        _valid_subscriptions()
        .filter(user=user, name=_plan(name))
        .order_by('-created_at')
        .first()
    )


def has_active_subscription(*, user: User, name: Optional[str] = None) -> bool:
    """Whether the user currently holds a valid subscription to the plan."""
    if user.pk is None:
        return False
    return _valid_subscriptions().filter(user=user, name=_plan(name)).exists()


@transaction.atomic
def start_subscription(
    *,
    user: User,
    provider_reference: str = '',
    name: Optional[str] = None
) -> Subscription:
    """
    Subscribe a member to a plan.

    Charging is handled by the billing provider; this only records the
    subscription (and the provider's reference, when given).

    Args:
        user: Member subscribing
        provider_reference: Billing provider id for the subscription
        name: Plan name (defaults to the premium plan)

    Returns:
        Created Subscription instance

    Raises:
        AlreadySubscribedError: If the user already holds a valid subscription
    """
    plan = _plan(name)

    # Serialize concurrent subscribe attempts for the same user
    User.objects.select_for_update().filter(pk=user.pk).first()

    if _valid_subscriptions().filter(user=user, name=plan).exists():
        raise AlreadySubscribedError("You are already subscribed to this plan")

    subscription = Subscription.objects.create(
        user=user,
        name=plan,
        provider_reference=provider_reference,
    )
    logger.info("User %s subscribed to %s", user.id, plan)
    return subscription


@transaction.atomic
def cancel_subscription(*, user: User, name: Optional[str] = None) -> Subscription:
    """
    Cancel the user's subscription to a plan, effective immediately.

    Raises:
        SubscriptionNotFoundError: If the user has no valid subscription
    """
    plan = _plan(name)
    subscription = (
        _valid_subscriptions()
        .select_for_update()
        .filter(user=user, name=plan)
        .order_by('-created_at')
        .first()
    )
    if subscription is None:
        raise SubscriptionNotFoundError("No active subscription to cancel")

    subscription.ends_at = timezone.now()
    subscription.save(update_fields=['ends_at'])
    logger.info("User %s cancelled %s", user.id, plan)
    return subscription
