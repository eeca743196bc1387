from rest_framework import viewsets
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .models import Restaurant
from .serializers import RestaurantSerializer, RestaurantDetailSerializer
from .services import (
    get_restaurant_by_id,
    search_restaurants,
    RestaurantNotFoundError,
    InvalidSortError,
)


class RestaurantPagination(PageNumberPagination):
    """Custom pagination for restaurants."""
    page_size = 15
    page_size_query_param = 'page_size'
    max_page_size = 100


class RestaurantViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Public restaurant listing.

    list: Search restaurants
    retrieve: Restaurant page with review summary
    """

    queryset = Restaurant.objects.filter(is_active=True)
    serializer_class = RestaurantSerializer
    permission_classes = [AllowAny]
    pagination_class = RestaurantPagination
    lookup_value_regex = '[0-9a-f-]{36}'

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return RestaurantDetailSerializer
        return RestaurantSerializer

    def get_queryset(self):
        """
        Filter restaurants based on query parameters.

        Filters:
        - keyword: Search in name, address, description
        - sort: created_at / avg_score / lowest_price
        """
        try:
            return search_restaurants(
                keyword=self.request.query_params.get('keyword'),
                sort=self.request.query_params.get('sort'),
            )
        except InvalidSortError as e:
            raise ValidationError({'sort': str(e)})

    @extend_schema(
        parameters=[
            OpenApiParameter('keyword', OpenApiTypes.STR, description='Search in name, address or description'),
            OpenApiParameter('sort', OpenApiTypes.STR, enum=['created_at', 'avg_score', 'lowest_price']),
        ],
        tags=['restaurants'],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(responses={200: RestaurantDetailSerializer}, tags=['restaurants'])
    def retrieve(self, request, pk=None):
        """Restaurant page using service layer."""
        from apps.reviews.services import get_restaurant_review_summary

        try:
            restaurant = get_restaurant_by_id(restaurant_id=pk)
        except RestaurantNotFoundError as e:
            raise NotFound(str(e))

        restaurant.review_summary = get_restaurant_review_summary(restaurant_id=restaurant.id)
        return Response(RestaurantDetailSerializer(restaurant).data)
