from django.contrib import admin
from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """Admin interface for Reviews."""

    list_display = [
        'restaurant',
        'author',
        'score',
        'created_at'
    ]
    list_filter = [
        'score',
        'created_at',
    ]
    search_fields = [
        'restaurant__name',
        'author__email',
        'content'
    ]
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('restaurant', 'author', 'score')
        }),
        ('Review Content', {
            'fields': ('content',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        """Optimize query with select_related."""
        qs = super().get_queryset(request)
        return qs.select_related('author', 'restaurant')

    actions = ['recalculate_restaurant_scores']

    def recalculate_restaurant_scores(self, request, queryset):
        """Recalculate aggregate scores for restaurants."""
        restaurants = set(review.restaurant for review in queryset)
        for restaurant in restaurants:
            restaurant.update_aggregate_score()
        self.message_user(request, f"Recalculated scores for {len(restaurants)} restaurants")
    recalculate_restaurant_scores.short_description = "Recalculate restaurant scores"
