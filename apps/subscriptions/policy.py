"""Who may reach which subscription page."""

from enum import Enum

from apps.accounts.access import Outcome
from apps.accounts.identity import Actor, Admin, Anonymous, Member


class SubscriptionAction(str, Enum):
    CREATE = 'create'
    STORE = 'store'
    SHOW = 'show'
    CANCEL = 'cancel'


SUBSCRIBE_ACTIONS = frozenset({SubscriptionAction.CREATE, SubscriptionAction.STORE})


def decide(actor: Actor, action: SubscriptionAction) -> Outcome:
    """
    Free members may subscribe; premium members may view or cancel.

    Members landing on the wrong side are sent to the other page.
    """
    if isinstance(actor, Anonymous):
        return Outcome.REDIRECT_LOGIN
    if isinstance(actor, Admin):
        return Outcome.REDIRECT_HOME
    if isinstance(actor, Member):
        if action in SUBSCRIBE_ACTIONS:
            return Outcome.REDIRECT_SUBSCRIBED if actor.is_premium else Outcome.ALLOW
        return Outcome.ALLOW if actor.is_premium else Outcome.REDIRECT_UPGRADE
    raise TypeError(f"Unknown actor: {actor!r}")
