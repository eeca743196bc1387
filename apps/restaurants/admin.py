from django.contrib import admin
from .models import Restaurant


@admin.register(Restaurant)
class RestaurantAdmin(admin.ModelAdmin):
    """Admin interface for Restaurants."""

    list_display = [
        'name',
        'address',
        'lowest_price',
        'highest_price',
        'avg_score',
        'review_count',
        'is_active',
        'created_at',
    ]
    list_filter = ['is_active', 'created_at']
    search_fields = ['name', 'address', 'description']
    readonly_fields = ['avg_score', 'review_count', 'created_at', 'updated_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'description', 'is_active')
        }),
        ('Location', {
            'fields': ('postal_code', 'address')
        }),
        ('Business', {
            'fields': (
                'lowest_price',
                'highest_price',
                'opening_time',
                'closing_time',
                'seating_capacity',
            )
        }),
        ('Ratings', {
            'fields': ('avg_score', 'review_count'),
            'classes': ('collapse',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['recalculate_scores']

    def recalculate_scores(self, request, queryset):
        """Recalculate aggregate scores for restaurants."""
        for restaurant in queryset:
            restaurant.update_aggregate_score()
        self.message_user(request, f"Recalculated scores for {queryset.count()} restaurants")
    recalculate_scores.short_description = "Recalculate review scores"
