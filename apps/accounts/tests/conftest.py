import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.subscriptions.models import Subscription


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        display_name='Test User',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        display_name='Inactive User',
        is_active=False,
    )


@pytest.fixture
def premium_user(db):
    """Member with an active premium subscription."""
    user = User.objects.create_user(
        email='premium@example.com',
        password='TestPass123!',
    )
    Subscription.objects.create(user=user, name='premium_plan')
    return user


@pytest.fixture
def staff_user(db):
    return User.objects.create_superuser(
        email='admin@example.com',
        password='AdminPass123!',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an API client authenticated as test user."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
