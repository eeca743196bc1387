from rest_framework import serializers
from .models import Subscription


class SubscriptionSerializer(serializers.ModelSerializer):
    """Subscription status for its owner."""

    is_canceled = serializers.BooleanField(read_only=True)

    class Meta:
        model = Subscription
        fields = ['id', 'name', 'created_at', 'ends_at', 'is_canceled']
        read_only_fields = fields


class SubscriptionCreateSerializer(serializers.Serializer):
    """Input for subscribing; payment is confirmed by the billing provider."""

    provider_reference = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')


class PlanSerializer(serializers.Serializer):
    """Premium plan shown on the subscribe page."""

    name = serializers.CharField()
    monthly_fee = serializers.IntegerField()
