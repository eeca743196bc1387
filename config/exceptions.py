"""Project-wide DRF exception handling."""

import logging

from django.http import HttpResponseRedirect
from rest_framework.exceptions import AuthenticationFailed, NotAuthenticated
from rest_framework.views import exception_handler

from apps.accounts.access import AccessRedirect, AccessRedirectMixin, Outcome

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """
    Turn access denials into redirects, defer everything else to DRF.

    Denials on the member-facing surface are part of normal navigation
    (guest -> login, free member -> subscription page, ...), so they
    never produce an error body. A rejected or expired token on that
    surface leaves the client a guest and is sent to login as well.
    """
    view = context.get('view')

    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)) and isinstance(view, AccessRedirectMixin):
        logger.info("Rejected credentials on %s: %s", view.__class__.__name__, exc.detail)
        exc = AccessRedirect(view.get_redirect_url(Outcome.REDIRECT_LOGIN), outcome=Outcome.REDIRECT_LOGIN)

    if isinstance(exc, AccessRedirect):
        logger.debug(
            "Redirecting %s to %s",
            view.__class__.__name__ if view else 'view',
            exc.redirect_to,
        )
        return HttpResponseRedirect(exc.redirect_to)

    return exception_handler(exc, context)
