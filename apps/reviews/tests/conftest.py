import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.restaurants.models import Restaurant
from apps.reviews.models import Review
from apps.subscriptions.models import Subscription


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


def _subscribe(user):
    Subscription.objects.create(
        user=user,
        name='premium_plan',
        provider_reference='sub_test',
    )
    return user


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
    return _subscribe(user)


@pytest.fixture
def other_premium_user(db):
    """Another premium member."""
    user = User.objects.create_user(
        email='premium_other@example.com',
        password='TestPass123!',
        display_name='Other Premium Member',
    )
    return _subscribe(user)


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
def other_premium_client(other_premium_user):
    return _client_for(other_premium_user)


@pytest.fixture
def admin_client(admin_user):
    return _client_for(admin_user)


@pytest.fixture
def restaurant(db):
    """Create and return a test restaurant."""
    return Restaurant.objects.create(
        name='Miso Katsu Yabaton',
        description='Nagoya-style miso katsu.',
        address='3-6-18 Osu, Naka-ku, Nagoya',
        postal_code='460-0011',
        lowest_price=1000,
        highest_price=3000,
        seating_capacity=50,
    )


@pytest.fixture
def another_restaurant(db):
    """Create and return another restaurant."""
    return Restaurant.objects.create(
        name='Atsuta Horaiken',
        description='Hitsumabushi since 1873.',
        address='503 Godo-cho, Atsuta-ku, Nagoya',
    )


@pytest.fixture
def review(db, premium_user, restaurant):
    """Review written by the premium user."""
    return Review.objects.create(
        restaurant=restaurant,
        author=premium_user,
        score=1,
        content='test',
    )


@pytest.fixture
def other_review(db, other_premium_user, restaurant):
    """Review written by another premium member."""
    return Review.objects.create(
        restaurant=restaurant,
        author=other_premium_user,
        score=1,
        content='test',
    )
