from rest_framework import serializers
from .models import Restaurant


class RestaurantSerializer(serializers.ModelSerializer):
    """Restaurant listing item."""

    class Meta:
        model = Restaurant
        fields = [
            'id',
            'name',
            'address',
            'lowest_price',
            'highest_price',
            'avg_score',
            'review_count',
        ]
        read_only_fields = fields


class RestaurantMinimalSerializer(serializers.ModelSerializer):
    """Minimal restaurant info for nested serialization."""

    class Meta:
        model = Restaurant
        fields = ['id', 'name']
        read_only_fields = fields


class ReviewSummarySerializer(serializers.Serializer):
    """Summary of a restaurant's reviews."""

    total_reviews = serializers.IntegerField()
    avg_score = serializers.DecimalField(max_digits=3, decimal_places=2)
    score_breakdown = serializers.DictField(child=serializers.IntegerField())


class RestaurantDetailSerializer(serializers.ModelSerializer):
    """Full restaurant page."""

    review_summary = ReviewSummarySerializer(read_only=True)

    class Meta:
        model = Restaurant
        fields = [
            'id',
            'name',
            'description',
            'address',
            'postal_code',
            'lowest_price',
            'highest_price',
            'opening_time',
            'closing_time',
            'seating_capacity',
            'avg_score',
            'review_count',
            'review_summary',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields
