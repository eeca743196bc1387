from apps.accounts.access import Outcome, OutcomePermission
from .policy import ReviewAction, decide


class ReviewAccessPolicy(OutcomePermission):
    """
    Permission: review pages by membership tier.
    Only the author can edit/delete their review.
    """

    def decide(self, actor, view, obj=None):
        if view.action is None:
            # OPTIONS metadata
            return Outcome.ALLOW
        return decide(actor, ReviewAction(view.action), obj)
