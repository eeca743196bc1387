"""Domain exceptions for reviews app."""


class ReviewsServiceError(Exception):
    """Base exception for all reviews service errors."""
    pass


class ReviewNotFoundError(ReviewsServiceError):
    """Review does not exist or is not under the given restaurant."""
    pass


class RestaurantNotFoundError(ReviewsServiceError):
    """Restaurant does not exist or is not listed."""
    pass


class InvalidScoreError(ReviewsServiceError):
    """Score must be between 1 and 5."""
    pass


class InvalidContentError(ReviewsServiceError):
    """Review content must not be blank."""
    pass


class UnauthorizedReviewActionError(ReviewsServiceError):
    """User cannot modify this review."""
    pass
