"""Access policy for reviews, evaluated without a database."""

import pytest
from types import SimpleNamespace
from uuid import uuid4

from apps.accounts.access import Outcome
from apps.accounts.identity import Admin, Anonymous, Member, Tier
from apps.reviews.policy import ReviewAction, decide, owner_matches


ALL_ACTIONS = list(ReviewAction)
OWNER_ACTIONS = [ReviewAction.EDIT, ReviewAction.UPDATE, ReviewAction.DESTROY]


def make_review(author_id):
    return SimpleNamespace(id=uuid4(), author_id=author_id)


@pytest.fixture
def premium():
    return Member(id=uuid4(), tier=Tier.PREMIUM)


@pytest.fixture
def free():
    return Member(id=uuid4(), tier=Tier.FREE)


class TestRolePrecedence:

    @pytest.mark.parametrize('action', ALL_ACTIONS)
    def test_anonymous_goes_to_login(self, action):
        assert decide(Anonymous(), action) is Outcome.REDIRECT_LOGIN
        assert decide(Anonymous(), action, make_review(uuid4())) is Outcome.REDIRECT_LOGIN

    @pytest.mark.parametrize('action', ALL_ACTIONS)
    def test_admin_goes_home(self, action):
        admin = Admin(id=uuid4())
        assert decide(admin, action) is Outcome.REDIRECT_HOME
        # Even on a review carrying the admin's id
        assert decide(admin, action, make_review(admin.id)) is Outcome.REDIRECT_HOME

    def test_unknown_actor_rejected(self):
        with pytest.raises(TypeError):
            decide(object(), ReviewAction.LIST)


class TestFreeMember:

    def test_free_member_can_list(self, free):
        assert decide(free, ReviewAction.LIST) is Outcome.ALLOW

    @pytest.mark.parametrize('action', [a for a in ALL_ACTIONS if a is not ReviewAction.LIST])
    def test_free_member_must_upgrade(self, free, action):
        assert decide(free, action) is Outcome.REDIRECT_UPGRADE

    @pytest.mark.parametrize('action', OWNER_ACTIONS)
    def test_free_author_must_upgrade(self, free, action):
        assert decide(free, action, make_review(free.id)) is Outcome.REDIRECT_UPGRADE


class TestPremiumMember:

    @pytest.mark.parametrize('action', [ReviewAction.LIST, ReviewAction.CREATE, ReviewAction.STORE])
    def test_unscoped_actions_allowed(self, premium, action):
        assert decide(premium, action) is Outcome.ALLOW

    @pytest.mark.parametrize('action', OWNER_ACTIONS)
    def test_author_allowed(self, premium, action):
        assert decide(premium, action, make_review(premium.id)) is Outcome.ALLOW

    @pytest.mark.parametrize('action', OWNER_ACTIONS)
    def test_non_author_sent_to_list(self, premium, action):
        assert decide(premium, action, make_review(uuid4())) is Outcome.REDIRECT_OWNER_ONLY

    @pytest.mark.parametrize('action', OWNER_ACTIONS)
    def test_route_level_check_allows(self, premium, action):
        assert decide(premium, action) is Outcome.ALLOW


class TestOwnerMatches:

    def test_author(self, premium):
        assert owner_matches(premium, make_review(premium.id)) is True

    def test_other_member(self, premium):
        assert owner_matches(premium, make_review(uuid4())) is False

    def test_non_members_never_own(self):
        admin = Admin(id=uuid4())
        assert owner_matches(admin, make_review(admin.id)) is False
        assert owner_matches(Anonymous(), make_review(uuid4())) is False
