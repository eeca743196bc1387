# ==========================================
# apps/subscriptions/models.py
# ==========================================

from django.db import models
from django.utils import timezone
import uuid


class Subscription(models.Model):
    """A member's subscription to a named plan."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='subscriptions')
    name = models.CharField(max_length=100)
    provider_reference = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    ends_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'subscriptions'
        indexes = [
            models.Index(fields=['user', 'name'], name='subscriptions_user_name_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} - {self.name}"

    @property
    def is_valid(self):
        return self.ends_at is None or self.ends_at > timezone.now()

    @property
    def is_canceled(self):
        return self.ends_at is not None
