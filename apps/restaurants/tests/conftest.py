import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.restaurants.models import Restaurant


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(
        email='member@example.com',
        password='TestPass123!',
        display_name='Member',
    )


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
def restaurants(db):
    """Three restaurants with distinct prices and scores."""
    return [
        Restaurant.objects.create(
            name='Atsuta Horaiken',
            description='Hitsumabushi since 1873.',
            address='Atsuta-ku, Nagoya',
            lowest_price=3000,
            avg_score=Decimal('4.50'),
        ),
        Restaurant.objects.create(
            name='Sekai no Yamachan',
            description='Peppery chicken wings.',
            address='Sakae, Naka-ku, Nagoya',
            lowest_price=500,
            avg_score=Decimal('3.20'),
        ),
        Restaurant.objects.create(
            name='Komeda Coffee',
            description='Morning service with toast.',
            address='Mizuho-ku, Nagoya',
            lowest_price=800,
            avg_score=Decimal('4.90'),
        ),
    ]
