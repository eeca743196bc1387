from django.conf import settings
from django.contrib import messages
from django.shortcuts import redirect
from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.response import Response

from apps.accounts.access import AccessRedirectMixin
from .permissions import SubscriptionAccessPolicy
from .serializers import (
    PlanSerializer,
    SubscriptionCreateSerializer,
    SubscriptionSerializer,
)
from .services import (
    AlreadySubscribedError,
    SubscriptionNotFoundError,
    cancel_subscription,
    get_active_subscription,
    start_subscription,
)


class SubscriptionViewSet(AccessRedirectMixin, viewsets.ViewSet):
    """
    Member subscription pages.

    create: Premium plan page (free members)
    store: Subscribe to the premium plan (free members)
    show: Current subscription (premium members)
    cancel: Cancel the subscription (premium members)
    """

    permission_classes = [SubscriptionAccessPolicy]

    @extend_schema(responses={200: PlanSerializer}, tags=['subscription'])
    def create(self, request):
        plan = {
            'name': settings.PREMIUM_PLAN_NAME,
            'monthly_fee': settings.PREMIUM_PLAN_MONTHLY_FEE,
        }
        return Response(PlanSerializer(plan).data)

    @extend_schema(request=SubscriptionCreateSerializer, responses={302: None}, tags=['subscription'])
    def store(self, request):
        serializer = SubscriptionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            start_subscription(
                user=request.user,
                provider_reference=serializer.validated_data['provider_reference'],
            )
        except AlreadySubscribedError:
            return redirect('subscriptions:detail')

        messages.success(request, 'Your premium membership has started.')
        return redirect('subscriptions:detail')

    @extend_schema(responses={200: SubscriptionSerializer}, tags=['subscription'])
    def show(self, request):
        subscription = get_active_subscription(user=request.user)
        return Response(SubscriptionSerializer(subscription).data)

    @extend_schema(responses={302: None}, tags=['subscription'])
    def cancel(self, request):
        try:
            cancel_subscription(user=request.user)
        except SubscriptionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        messages.success(request, 'Your premium membership has been cancelled.')
        return redirect('restaurants:restaurant-list')
