"""Review management service - CRUD operations for reviews."""

import logging

from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID
from typing import Optional

from apps.accounts.models import User
from apps.restaurants.models import Restaurant
from apps.reviews.models import Review, MIN_SCORE, MAX_SCORE
from .exceptions import (
    ReviewNotFoundError,
    RestaurantNotFoundError,
    InvalidScoreError,
    InvalidContentError,
    UnauthorizedReviewActionError,
)

logger = logging.getLogger(__name__)


def _validate_score(score) -> None:
    if isinstance(score, bool) or not isinstance(score, int) or not (MIN_SCORE <= score <= MAX_SCORE):
        raise InvalidScoreError(f"Score must be between {MIN_SCORE} and {MAX_SCORE}")


def _validate_content(content) -> None:
    if not isinstance(content, str) or not content.strip():
        raise InvalidContentError("Review content is required")


def _refresh_restaurant_score(restaurant: Restaurant) -> None:
    transaction.on_commit(restaurant.update_aggregate_score)


@transaction.atomic
def create_review(
    *,
    author: User,
    restaurant_id: UUID,
    score: int,
    content: str
) -> Review:
    """
    Post a new review for a restaurant.

    Args:
        author: Member posting the review
        restaurant_id: UUID of the reviewed restaurant
        score: Score (1-5)
        content: Review text

    Returns:
        Created Review instance

    Raises:
        InvalidScoreError: If score not in 1-5 range
        InvalidContentError: If content is blank
        RestaurantNotFoundError: If restaurant doesn't exist or is inactive
    """
    _validate_score(score)
    _validate_content(content)

    try:
        restaurant = Restaurant.objects.get(id=restaurant_id, is_active=True)
    except Restaurant.DoesNotExist:
        raise RestaurantNotFoundError("Restaurant not found")

    review = Review.objects.create(
        restaurant=restaurant,
        author=author,
        score=score,
        content=content,
    )

    _refresh_restaurant_score(restaurant)
    logger.info("User %s posted review %s on restaurant %s", author.id, review.id, restaurant.id)
    return review


def get_review_by_id(*, review_id: UUID, restaurant_id: Optional[UUID] = None) -> Review:
    """
    Retrieve a review by ID.

    Args:
        review_id: UUID of review
        restaurant_id: When given, the review must belong to this restaurant

    Raises:
        ReviewNotFoundError: If review doesn't exist (under the restaurant)
    """
    queryset = Review.objects.select_related('author', 'restaurant')
    if restaurant_id is not None:
        queryset = queryset.filter(restaurant_id=restaurant_id)

    try:
        return queryset.get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")


@transaction.atomic
def update_review(
    *,
    review_id: UUID,
    user: User,
    score: Optional[int] = None,
    content: Optional[str] = None
) -> Review:
    """
    Update an existing review.

    Only the review author can update their review.
    Restaurant and author cannot be changed.

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
        InvalidScoreError: If score not in 1-5 range
        InvalidContentError: If content is blank
    """
    if score is not None:
        _validate_score(score)
    if content is not None:
        _validate_content(content)

    # Get review with row lock
    try:
        review = (
            Review.objects
            .select_for_update()
            .select_related('restaurant')
            .get(id=review_id)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    if review.author_id != user.id:
        logger.warning("User %s tried to update review %s by %s", user.id, review.id, review.author_id)
        raise UnauthorizedReviewActionError("You can only update your own reviews")

    if score is not None:
        review.score = score
    if content is not None:
        review.content = content

    review.save()

    _refresh_restaurant_score(review.restaurant)
    logger.info("User %s updated review %s", user.id, review.id)
    return review


@transaction.atomic
def delete_review(*, review_id: UUID, user: User) -> None:
    """
    Delete a review.

    Only the review author can delete their review.

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
    """
    try:
        review = (
            Review.objects
            .select_for_update()
            .select_related('restaurant')
            .get(id=review_id)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    if review.author_id != user.id:
        logger.warning("User %s tried to delete review %s by %s", user.id, review.id, review.author_id)
        raise UnauthorizedReviewActionError("You can only delete your own reviews")

    restaurant = review.restaurant
    review.delete()

    _refresh_restaurant_score(restaurant)
    logger.info("User %s deleted review %s", user.id, review_id)


def get_restaurant_reviews(*, restaurant_id: UUID, limit: Optional[int] = None) -> QuerySet[Review]:
    """
    Reviews of a restaurant, newest first.

    Args:
        restaurant_id: UUID of restaurant
        limit: Keep only the latest ``limit`` reviews
    """
    queryset = (
        Review.objects
        .filter(restaurant_id=restaurant_id)
        .select_related('author', 'restaurant')
        .order_by('-created_at', '-id')
    )
    if limit is not None:
        queryset = queryset[:limit]
    return queryset
