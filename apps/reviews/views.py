from django.conf import settings
from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from rest_framework import viewsets
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from apps.accounts.access import AccessRedirectMixin, get_request_actor
from apps.accounts.identity import Member
from apps.restaurants.models import Restaurant
from .models import SCORE_CHOICES
from .permissions import ReviewAccessPolicy
from .serializers import ReviewSerializer, ReviewWriteSerializer, ReviewFormSerializer
from .services import (
    create_review,
    update_review,
    delete_review,
    get_restaurant_reviews,
    get_review_by_id,
    ReviewNotFoundError,
    RestaurantNotFoundError,
    InvalidScoreError,
    InvalidContentError,
    UnauthorizedReviewActionError,
)


class ReviewPagination(PageNumberPagination):
    """Custom pagination for reviews."""
    page_size = settings.REVIEWS_PER_PAGE


class ReviewViewSet(AccessRedirectMixin, viewsets.GenericViewSet):
    """
    Reviews of a restaurant, for members.

    list: Reviews of the restaurant (free members see a short preview)
    create: Data for the post-review form (premium)
    store: Post a review (premium)
    edit: Data for the edit form (premium, author only)
    update: Update a review (premium, author only)
    destroy: Delete a review (premium, author only)

    Denied requests are redirected, see ``apps.reviews.policy``.
    """

    serializer_class = ReviewSerializer
    permission_classes = [ReviewAccessPolicy]
    pagination_class = ReviewPagination

    def get_restaurant(self):
        if not hasattr(self, '_restaurant'):
            self._restaurant = get_object_or_404(
                Restaurant, pk=self.kwargs['restaurant_pk'], is_active=True
            )
        return self._restaurant

    def get_queryset(self):
        return get_restaurant_reviews(restaurant_id=self.kwargs['restaurant_pk'])

    def get_object(self):
        """Load the review under a listed restaurant, then check authorship."""
        restaurant = self.get_restaurant()
        try:
            review = get_review_by_id(review_id=self.kwargs['pk'], restaurant_id=restaurant.id)
        except ReviewNotFoundError as e:
            raise NotFound(str(e))

        self.check_object_permissions(self.request, review)
        return review

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['actor'] = get_request_actor(self.request)
        return context

    def get_list_url(self):
        return reverse('reviews:review-list', kwargs={'restaurant_pk': self.kwargs['restaurant_pk']})

    def get_owner_only_url(self):
        return self.get_list_url()

    def _validated_input(self):
        serializer = ReviewWriteSerializer(data=self.request.data)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data

    @extend_schema(
        parameters=[OpenApiParameter('page', OpenApiTypes.INT, description='Page (premium members)')],
        responses={200: ReviewSerializer(many=True), 302: None},
        tags=['reviews'],
    )
    def list(self, request, restaurant_pk=None):
        self.get_restaurant()
        queryset = self.get_queryset()
        actor = get_request_actor(request)

        if isinstance(actor, Member) and actor.is_premium:
            page = self.paginate_queryset(queryset)
            serializer = self.get_serializer(page, many=True)
            return self.get_paginated_response(serializer.data)

        preview = queryset[:settings.FREE_REVIEW_PREVIEW_COUNT]
        return Response({
            'count': queryset.count(),
            'next': None,
            'previous': None,
            'results': self.get_serializer(preview, many=True).data,
        })

    @extend_schema(responses={200: ReviewFormSerializer, 302: None}, tags=['reviews'])
    def create(self, request, restaurant_pk=None):
        form = {
            'restaurant': self.get_restaurant(),
            'score_choices': SCORE_CHOICES,
        }
        return Response(ReviewFormSerializer(form, context=self.get_serializer_context()).data)

    @extend_schema(request=ReviewWriteSerializer, responses={302: None, 400: None}, tags=['reviews'])
    def store(self, request, restaurant_pk=None):
        restaurant = self.get_restaurant()
        data = self._validated_input()

        try:
            create_review(
                author=request.user,
                restaurant_id=restaurant.id,
                score=data['score'],
                content=data['content'],
            )
        except (InvalidScoreError, InvalidContentError) as e:
            raise ValidationError(str(e))
        except RestaurantNotFoundError as e:
            raise NotFound(str(e))

        messages.success(request, 'Your review has been posted.')
        return redirect(self.get_list_url())

    @extend_schema(responses={200: ReviewFormSerializer, 302: None}, tags=['reviews'])
    def edit(self, request, restaurant_pk=None, pk=None):
        review = self.get_object()
        form = {
            'restaurant': review.restaurant,
            'review': review,
            'score_choices': SCORE_CHOICES,
        }
        return Response(ReviewFormSerializer(form, context=self.get_serializer_context()).data)

    @extend_schema(request=ReviewWriteSerializer, responses={302: None, 400: None}, tags=['reviews'])
    def update(self, request, restaurant_pk=None, pk=None):
        data = self._validated_input()
        review = self.get_object()

        try:
            update_review(
                review_id=review.id,
                user=request.user,
                score=data['score'],
                content=data['content'],
            )
        except (InvalidScoreError, InvalidContentError) as e:
            raise ValidationError(str(e))
        except ReviewNotFoundError as e:
            raise NotFound(str(e))
        except UnauthorizedReviewActionError:
            return redirect(self.get_owner_only_url())

        messages.success(request, 'Your review has been updated.')
        return redirect(self.get_list_url())

    @extend_schema(responses={302: None}, tags=['reviews'])
    def destroy(self, request, restaurant_pk=None, pk=None):
        review = self.get_object()

        try:
            delete_review(review_id=review.id, user=request.user)
        except ReviewNotFoundError as e:
            raise NotFound(str(e))
        except UnauthorizedReviewActionError:
            return redirect(self.get_owner_only_url())

        messages.success(request, 'Your review has been deleted.')
        return redirect(self.get_list_url())
