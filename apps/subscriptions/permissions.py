from apps.accounts.access import Outcome, OutcomePermission
from .policy import SubscriptionAction, decide


class SubscriptionAccessPolicy(OutcomePermission):
    """
    Permission: free members reach the subscribe pages,
    premium members the manage pages.
    """

    def decide(self, actor, view, obj=None):
        if view.action is None:
            # OPTIONS metadata
            return Outcome.ALLOW
        return decide(actor, SubscriptionAction(view.action))
