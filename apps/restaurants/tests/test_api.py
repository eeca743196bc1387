import pytest
from datetime import timedelta
from decimal import Decimal
from uuid import uuid4
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.restaurants.models import Restaurant
from apps.reviews.models import Review


LIST_URL = reverse('restaurants:restaurant-list')


def detail_url(restaurant_id):
    return reverse('restaurants:restaurant-detail', kwargs={'pk': restaurant_id})


def names(response):
    return [item['name'] for item in response.data['results']]


@pytest.mark.django_db
class TestRestaurantList:

    def test_list_is_public(self, api_client, restaurants):
        response = api_client.get(LIST_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 3

    def test_default_sort_newest_first(self, api_client, restaurants):
        now = timezone.now()
        for offset, restaurant in enumerate(restaurants):
            Restaurant.objects.filter(id=restaurant.id).update(created_at=now - timedelta(days=offset))

        response = api_client.get(LIST_URL)

        assert names(response) == ['Atsuta Horaiken', 'Sekai no Yamachan', 'Komeda Coffee']

    def test_sort_by_score(self, api_client, restaurants):
        response = api_client.get(LIST_URL, {'sort': 'avg_score'})

        assert names(response) == ['Komeda Coffee', 'Atsuta Horaiken', 'Sekai no Yamachan']

    def test_sort_by_price(self, api_client, restaurants):
        response = api_client.get(LIST_URL, {'sort': 'lowest_price'})

        assert names(response) == ['Sekai no Yamachan', 'Komeda Coffee', 'Atsuta Horaiken']

    def test_invalid_sort(self, api_client, restaurants):
        response = api_client.get(LIST_URL, {'sort': 'name; drop table'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'sort' in response.data

    @pytest.mark.parametrize('keyword, expected', [
        ('yamachan', ['Sekai no Yamachan']),
        ('Atsuta', ['Atsuta Horaiken']),
        ('toast', ['Komeda Coffee']),
        ('ramen', []),
    ])
    def test_keyword_search(self, api_client, restaurants, keyword, expected):
        response = api_client.get(LIST_URL, {'keyword': keyword})

        assert names(response) == expected

    def test_inactive_hidden(self, api_client, restaurants):
        restaurants[0].is_active = False
        restaurants[0].save()

        response = api_client.get(LIST_URL)

        assert 'Atsuta Horaiken' not in names(response)


@pytest.mark.django_db
class TestRestaurantDetail:

    def test_detail_with_review_summary(self, api_client, restaurant, user):
        Review.objects.create(restaurant=restaurant, author=user, score=4, content='good')
        Review.objects.create(restaurant=restaurant, author=user, score=2, content='so-so')
        restaurant.update_aggregate_score()

        response = api_client.get(detail_url(restaurant.id))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Miso Katsu Yabaton'
        assert response.data['review_count'] == 2
        assert Decimal(response.data['avg_score']) == Decimal('3.00')
        summary = response.data['review_summary']
        assert summary['total_reviews'] == 2
        assert summary['score_breakdown']['4'] == 1
        assert summary['score_breakdown']['2'] == 1
        assert summary['score_breakdown']['5'] == 0

    def test_detail_not_found(self, api_client, db):
        response = api_client.get(detail_url(uuid4()))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_detail_inactive(self, api_client, restaurant):
        Restaurant.objects.filter(id=restaurant.id).update(is_active=False)

        response = api_client.get(detail_url(restaurant.id))

        assert response.status_code == status.HTTP_404_NOT_FOUND
