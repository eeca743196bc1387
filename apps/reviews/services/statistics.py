"""Statistics service - Review aggregations."""

from decimal import Decimal
from django.db.models import Avg, Count
from uuid import UUID

from apps.reviews.models import Review, SCORE_CHOICES


def get_restaurant_review_summary(*, restaurant_id: UUID) -> dict:
    """
    Summarize a restaurant's reviews.

    Returns:
        Dictionary with:
        - total_reviews: int
        - avg_score: Decimal rounded to 2 places (0.00 without reviews)
        - score_breakdown: count per score, keyed '1'..'5'
    """
    queryset = Review.objects.filter(restaurant_id=restaurant_id)

    aggregates = queryset.aggregate(avg=Avg('score'), total=Count('id'))

    counts = {
        row['score']: row['count']
        for row in queryset.values('score').annotate(count=Count('id'))
    }
    breakdown = {str(score): counts.get(score, 0) for score in SCORE_CHOICES}

    avg = aggregates['avg']
    return {
        'total_reviews': aggregates['total'],
        'avg_score': Decimal(str(round(avg, 2))) if avg is not None else Decimal('0.00'),
        'score_breakdown': breakdown,
    }
