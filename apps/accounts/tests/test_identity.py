import pytest
from django.contrib.auth.models import AnonymousUser

from apps.accounts.identity import Admin, Anonymous, Member, Tier, resolve_actor


@pytest.mark.django_db
class TestResolveActor:

    def test_none_is_anonymous(self):
        assert resolve_actor(None) == Anonymous()

    def test_anonymous_user(self):
        assert resolve_actor(AnonymousUser()) == Anonymous()

    def test_free_member(self, user):
        actor = resolve_actor(user)

        assert actor == Member(id=user.id, tier=Tier.FREE)
        assert not actor.is_premium

    def test_premium_member(self, premium_user):
        actor = resolve_actor(premium_user)

        assert actor == Member(id=premium_user.id, tier=Tier.PREMIUM)
        assert actor.is_premium

    def test_staff_is_admin_even_when_subscribed(self, staff_user):
        from apps.subscriptions.models import Subscription
        Subscription.objects.create(user=staff_user, name='premium_plan')

        assert resolve_actor(staff_user) == Admin(id=staff_user.id)
