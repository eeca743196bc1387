# ==========================================
# apps/restaurants/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class Restaurant(models.Model):
    """Restaurant listed on the site; reviews hang off it."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    description = models.TextField(blank=True)
    address = models.CharField(max_length=255, blank=True)
    postal_code = models.CharField(max_length=16, blank=True)
    lowest_price = models.PositiveIntegerField(null=True, blank=True)
    highest_price = models.PositiveIntegerField(null=True, blank=True)
    opening_time = models.TimeField(null=True, blank=True)
    closing_time = models.TimeField(null=True, blank=True)
    seating_capacity = models.PositiveIntegerField(null=True, blank=True)
    avg_score = models.DecimalField(max_digits=3, decimal_places=2, default=Decimal('0.00'), validators=[MinValueValidator(Decimal('0.00'))])
    review_count = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'restaurants'
        indexes = [
            models.Index(fields=['avg_score'], name='restaurants_avg_score_idx'),
            models.Index(fields=['created_at'], name='restaurants_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def update_aggregate_score(self):
        from django.db.models import Avg, Count
        aggregates = self.reviews.aggregate(avg=Avg('score'), count=Count('id'))
        avg = aggregates['avg']
        self.avg_score = Decimal(str(round(avg, 2))) if avg is not None else Decimal('0.00')
        self.review_count = aggregates['count']
        self.save(update_fields=['avg_score', 'review_count', 'updated_at'])
