"""
Outcome-based access control for the member-facing surface.

A policy decides an ``Outcome`` for the current actor; denials are not
errors but redirects (guests to login, free members to the subscription
page, staff to the admin). Permissions record the denied outcome as their
``code`` and ``AccessRedirectMixin`` turns it into an ``AccessRedirect``,
which the project exception handler renders as a 302.
"""

import logging
from enum import Enum

from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import ImproperlyConfigured
from django.urls import reverse
from rest_framework.exceptions import APIException
from rest_framework.permissions import BasePermission

from .identity import resolve_actor

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    ALLOW = 'allow'
    REDIRECT_LOGIN = 'redirect_login'
    REDIRECT_UPGRADE = 'redirect_upgrade'
    REDIRECT_HOME = 'redirect_home'
    REDIRECT_OWNER_ONLY = 'redirect_owner_only'
    REDIRECT_SUBSCRIBED = 'redirect_subscribed'


class AccessRedirect(APIException):
    """Access denied; the client is sent elsewhere instead of getting an error."""
    status_code = 302
    default_detail = 'Redirecting.'
    default_code = 'access_redirect'

    def __init__(self, redirect_to, outcome=None):
        super().__init__()
        self.redirect_to = redirect_to
        self.outcome = outcome


def get_request_actor(request):
    """Resolve (once per request) the actor behind ``request.user``."""
    actor = getattr(request, '_access_actor', None)
    if actor is None:
        actor = resolve_actor(request.user)
        request._access_actor = actor
    return actor


class OutcomePermission(BasePermission):
    """
    Permission backed by an access policy.

    Subclasses implement ``decide(actor, view, obj=None)`` returning an
    Outcome. Anything other than ALLOW denies access and is exposed as
    ``code`` for the view to translate.
    """

    code = None

    def has_permission(self, request, view):
        return self._check(request, view)

    def has_object_permission(self, request, view, obj):
        return self._check(request, view, obj)

    def decide(self, actor, view, obj=None):
        raise NotImplementedError

    def _check(self, request, view, obj=None):
        actor = get_request_actor(request)
        outcome = self.decide(actor, view, obj)
        if outcome is Outcome.ALLOW:
            return True

        self.code = outcome.value
        logger.info(
            "Denied %s %s for %s: %s",
            request.method,
            request.path,
            type(actor).__name__,
            outcome.value,
        )
        return False


class AccessRedirectMixin:
    """
    View mixin translating denied outcomes into redirects.

    Views whose policy can answer REDIRECT_OWNER_ONLY must implement
    ``get_owner_only_url()``.
    """

    def permission_denied(self, request, message=None, code=None):
        try:
            outcome = Outcome(code)
        except ValueError:
            return super().permission_denied(request, message=message, code=code)

        raise AccessRedirect(self.get_redirect_url(outcome), outcome=outcome)

    def get_redirect_url(self, outcome):
        if outcome is Outcome.REDIRECT_LOGIN:
            return redirect_to_login(self.request.get_full_path()).url
        if outcome is Outcome.REDIRECT_UPGRADE:
            return reverse('subscriptions:create')
        if outcome is Outcome.REDIRECT_HOME:
            return reverse('admin:index')
        if outcome is Outcome.REDIRECT_SUBSCRIBED:
            return reverse('subscriptions:detail')
        if outcome is Outcome.REDIRECT_OWNER_ONLY:
            return self.get_owner_only_url()
        raise ImproperlyConfigured(f"No redirect for outcome {outcome!r}")

    def get_owner_only_url(self):
        raise ImproperlyConfigured(
            f"{self.__class__.__name__} must define get_owner_only_url()"
        )
