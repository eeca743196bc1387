"""
Access policy for restaurant reviews.

Rules, first match wins:

1. Guests are sent to login, whatever the action.
2. Staff are sent back to the admin; the review pages are for members.
3. Free members may list reviews; anything else needs a subscription.
4. Premium members may list, open the form and post. Editing, updating
   and deleting require authorship of the review.
"""

from enum import Enum
from typing import Optional

from apps.accounts.access import Outcome
from apps.accounts.identity import Actor, Admin, Anonymous, Member


class ReviewAction(str, Enum):
    LIST = 'list'
    CREATE = 'create'
    STORE = 'store'
    EDIT = 'edit'
    UPDATE = 'update'
    DESTROY = 'destroy'


FREE_ACTIONS = frozenset({ReviewAction.LIST})
OWNER_ACTIONS = frozenset({ReviewAction.EDIT, ReviewAction.UPDATE, ReviewAction.DESTROY})


def owner_matches(actor: Actor, review) -> bool:
    """Whether ``actor`` wrote ``review``."""
    return isinstance(actor, Member) and review.author_id == actor.id


def decide(actor: Actor, action: ReviewAction, review: Optional[object] = None) -> Outcome:
    """
    Decide whether ``actor`` may perform ``action``.

    ``review`` is the loaded review for owner-scoped actions. Without it
    only the role-level rules apply, and authorship is checked again once
    the review is loaded.
    """
    if isinstance(actor, Anonymous):
        return Outcome.REDIRECT_LOGIN

    if isinstance(actor, Admin):
        return Outcome.REDIRECT_HOME

    if isinstance(actor, Member):
        if not actor.is_premium:
            return Outcome.ALLOW if action in FREE_ACTIONS else Outcome.REDIRECT_UPGRADE

        if action in OWNER_ACTIONS and review is not None and not owner_matches(actor, review):
            return Outcome.REDIRECT_OWNER_ONLY

        return Outcome.ALLOW

    raise TypeError(f"Unknown actor: {actor!r}")
