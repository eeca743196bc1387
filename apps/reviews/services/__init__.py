"""
Reviews services - Business logic layer.

This package contains all business operations for the reviews app:
- Review CRUD operations
- Review statistics
"""

from .review_management import (
    create_review,
    get_review_by_id,
    update_review,
    delete_review,
    get_restaurant_reviews,
)

from .statistics import (
    get_restaurant_review_summary,
)

# Domain Exceptions
from .exceptions import (
    ReviewsServiceError,
    ReviewNotFoundError,
    RestaurantNotFoundError,
    InvalidScoreError,
    InvalidContentError,
    UnauthorizedReviewActionError,
)

__all__ = [
    # Review Management Services
    'create_review',
    'get_review_by_id',
    'update_review',
    'delete_review',
    'get_restaurant_reviews',
    # Statistics Services
    'get_restaurant_review_summary',
    # Exceptions
    'ReviewsServiceError',
    'ReviewNotFoundError',
    'RestaurantNotFoundError',
    'InvalidScoreError',
    'InvalidContentError',
    'UnauthorizedReviewActionError',
]
