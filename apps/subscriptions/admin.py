from django.contrib import admin
from .models import Subscription


class SubscriptionInline(admin.TabularInline):
    """Subscriptions shown on the user page."""

    model = Subscription
    extra = 0
    fields = ['name', 'provider_reference', 'created_at', 'ends_at']
    readonly_fields = ['created_at']


@admin.register(Subscription)
class SubscriptionAdmin(admin.ModelAdmin):
    """Admin interface for Subscriptions."""

    list_display = ['user', 'name', 'created_at', 'ends_at', 'is_valid_display']
    list_filter = ['name', 'created_at', 'ends_at']
    search_fields = ['user__email', 'provider_reference']
    readonly_fields = ['created_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def is_valid_display(self, obj):
        return obj.is_valid
    is_valid_display.short_description = 'Valid'
    is_valid_display.boolean = True

    def get_queryset(self, request):
        """Optimize query with select_related."""
        qs = super().get_queryset(request)
        return qs.select_related('user')
