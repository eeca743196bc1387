"""
Identity provider: who is making the request.

Each request is resolved into exactly one actor variant. Policies match on
the variant instead of asking the user model questions directly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union
from uuid import UUID


class Tier(str, Enum):
    FREE = 'free'
    PREMIUM = 'premium'


@dataclass(frozen=True)
class Anonymous:
    """Unauthenticated visitor."""


@dataclass(frozen=True)
class Member:
    """Authenticated non-staff account and its membership tier."""

    id: UUID
    tier: Tier

    @property
    def is_premium(self) -> bool:
        return self.tier is Tier.PREMIUM


@dataclass(frozen=True)
class Admin:
    """Staff account."""

    id: UUID


Actor = Union[Anonymous, Member, Admin]


def resolve_actor(user) -> Actor:
    """
    Resolve the request user into an actor.

    Args:
        user: ``request.user`` (a User or AnonymousUser), or None

    Returns:
        Anonymous, Admin for staff accounts, otherwise a Member whose tier
        reflects the user's subscription
    """
    if user is None or not user.is_authenticated:
        return Anonymous()

    if user.is_staff:
        return Admin(id=user.id)

    tier = Tier.PREMIUM if user.is_premium else Tier.FREE
    return Member(id=user.id, tier=tier)
