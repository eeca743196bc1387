import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.subscriptions.models import Subscription


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def free_user(db):
    """Member without a subscription."""
    return User.objects.create_user(
        email='free@example.com',
        password='TestPass123!',
        display_name='Free Member',
    )


@pytest.fixture
def premium_user(db):
    """Member with an active premium subscription."""
    user = User.objects.create_user(
        email='premium@example.com',
        password='TestPass123!',
        display_name='Premium Member',
    )
    Subscription.objects.create(user=user, name='premium_plan', provider_reference='sub_test')
    return user


@pytest.fixture
def admin_user(db):
    """Staff account."""
    return User.objects.create_superuser(
        email='admin@example.com',
        password='AdminPass123!',
    )


@pytest.fixture
def free_client(free_user):
    return _client_for(free_user)


@pytest.fixture
def premium_client(premium_user):
    return _client_for(premium_user)


@pytest.fixture
def admin_client(admin_user):
    return _client_for(admin_user)
