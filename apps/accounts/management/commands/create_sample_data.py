"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 4 users (admin, a free member, two premium members)
- Premium subscriptions for the premium members
- 8 restaurants
- Reviews by the premium members
"""

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction
from datetime import time
import random

from apps.accounts.models import User
from apps.restaurants.models import Restaurant
from apps.reviews.models import Review
from apps.subscriptions.models import Subscription


RESTAURANTS = [
    {
        'name': 'Miso Katsu Yabaton',
        'description': 'Nagoya-style pork cutlet smothered in red miso sauce.',
        'address': '3-6-18 Osu, Naka-ku, Nagoya',
        'postal_code': '460-0011',
        'lowest_price': 1000,
        'highest_price': 3000,
        'seating_capacity': 50,
    },
    {
        'name': 'Atsuta Horaiken',
        'description': 'Hitsumabushi, grilled eel over rice, since 1873.',
        'address': '503 Godo-cho, Atsuta-ku, Nagoya',
        'postal_code': '456-0043',
        'lowest_price': 3000,
        'highest_price': 6000,
        'seating_capacity': 120,
    },
    {
        'name': 'Sekai no Yamachan',
        'description': 'Peppery tebasaki chicken wings.',
        'address': '4-9-6 Sakae, Naka-ku, Nagoya',
        'postal_code': '460-0008',
        'lowest_price': 500,
        'highest_price': 2500,
        'seating_capacity': 80,
    },
    {
        'name': 'Komeda Coffee',
        'description': 'Coffee with a free morning toast set.',
        'address': '2-1 Mizuho-dori, Mizuho-ku, Nagoya',
        'postal_code': '467-0806',
        'lowest_price': 500,
        'highest_price': 1500,
        'seating_capacity': 60,
    },
    {
        'name': 'Yamamotoya Honten',
        'description': 'Miso nikomi udon simmered in an earthenware pot.',
        'address': '3-12-19 Sakae, Naka-ku, Nagoya',
        'postal_code': '460-0008',
        'lowest_price': 1200,
        'highest_price': 2500,
        'seating_capacity': 40,
    },
    {
        'name': 'Misen',
        'description': 'Taiwan ramen with chili minced pork.',
        'address': '3-6-3 Osu, Naka-ku, Nagoya',
        'postal_code': '460-0011',
        'lowest_price': 700,
        'highest_price': 1500,
        'seating_capacity': 45,
    },
    {
        'name': 'Kishimen Tei',
        'description': 'Flat kishimen noodles in bonito broth.',
        'address': '1-1-4 Meieki, Nakamura-ku, Nagoya',
        'postal_code': '450-0002',
        'lowest_price': 600,
        'highest_price': 1200,
        'seating_capacity': 30,
    },
    {
        'name': 'Ankake Spa Chao',
        'description': 'Thick spaghetti under a spicy starchy sauce.',
        'address': '2-11-14 Nishiki, Naka-ku, Nagoya',
        'postal_code': '460-0003',
        'lowest_price': 800,
        'highest_price': 1600,
        'seating_capacity': 35,
    },
]

REVIEW_TEXTS = [
    'Worth the queue. Will come back.',
    'Solid local food, friendly staff.',
    'A bit salty for my taste.',
    'Great value for the price.',
    'Crowded at lunch, go early.',
    'The signature dish lives up to the hype.',
]


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        self.create_subscriptions(users)
        restaurants = self.create_restaurants()
        self.create_reviews(users, restaurants)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (staff)')
        self.stdout.write('  free@example.com / password123 (free member)')
        self.stdout.write('  alice@example.com / password123 (premium member)')
        self.stdout.write('  bob@example.com / password123 (premium member)')

    def clear_data(self):
        """Clear all data from the database."""
        Review.objects.all().delete()
        Restaurant.objects.all().delete()
        Subscription.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(email='admin@example.com').delete()

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'display_name': 'Admin User',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        users = {'admin': admin}
        for key, display_name in [
            ('free', 'Free Member'),
            ('alice', 'Alice Gourmet'),
            ('bob', 'Bob Foodie'),
        ]:
            user, _ = User.objects.get_or_create(
                email=f'{key}@example.com',
                defaults={'display_name': display_name}
            )
            user.set_password('password123')
            user.save()
            users[key] = user

        return users

    def create_subscriptions(self, users):
        """Subscribe the premium members."""
        self.stdout.write('  Creating subscriptions...')

        for key in ('alice', 'bob'):
            Subscription.objects.get_or_create(
                user=users[key],
                name=settings.PREMIUM_PLAN_NAME,
                ends_at=None,
                defaults={'provider_reference': f'sample_{key}'}
            )

    def create_restaurants(self):
        """Create restaurants."""
        self.stdout.write('  Creating restaurants...')

        restaurants = []
        for data in RESTAURANTS:
            restaurant, _ = Restaurant.objects.get_or_create(
                name=data['name'],
                defaults={
                    **data,
                    'opening_time': time(11, 0),
                    'closing_time': time(22, 0),
                }
            )
            restaurants.append(restaurant)

        return restaurants

    def create_reviews(self, users, restaurants):
        """Create reviews by the premium members and refresh scores."""
        self.stdout.write('  Creating reviews...')

        for restaurant in restaurants:
            for key in ('alice', 'bob'):
                if random.random() < 0.3:
                    continue
                Review.objects.get_or_create(
                    restaurant=restaurant,
                    author=users[key],
                    defaults={
                        'score': random.randint(2, 5),
                        'content': random.choice(REVIEW_TEXTS),
                    }
                )
            restaurant.update_aggregate_score()
