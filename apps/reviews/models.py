# ==========================================
# apps/reviews/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid

MIN_SCORE = 1
MAX_SCORE = 5
SCORE_CHOICES = list(range(MIN_SCORE, MAX_SCORE + 1))


class Review(models.Model):
    """A member's review of a restaurant."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    restaurant = models.ForeignKey('restaurants.Restaurant', on_delete=models.CASCADE, related_name='reviews')
    author = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    score = models.PositiveSmallIntegerField(validators=[MinValueValidator(MIN_SCORE), MaxValueValidator(MAX_SCORE)])
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reviews'
        indexes = [
            models.Index(fields=['restaurant', 'created_at'], name='reviews_restaurant_idx'),
            models.Index(fields=['author', 'created_at'], name='reviews_author_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.author.get_display_name()} - {self.restaurant.name} ({self.score}★)"
