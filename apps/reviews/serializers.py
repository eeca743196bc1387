from rest_framework import serializers
from .models import Review, MIN_SCORE, MAX_SCORE
from .policy import owner_matches
from apps.accounts.serializers import UserPublicSerializer
from apps.restaurants.serializers import RestaurantMinimalSerializer


class ReviewSerializer(serializers.ModelSerializer):
    """Review as shown in listings and on the edit page."""

    author = UserPublicSerializer(read_only=True)
    restaurant = RestaurantMinimalSerializer(read_only=True)
    is_owner = serializers.SerializerMethodField()

    class Meta:
        model = Review
        fields = [
            'id',
            'restaurant',
            'author',
            'score',
            'content',
            'is_owner',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_is_owner(self, obj):
        actor = self.context.get('actor')
        return owner_matches(actor, obj)


class ReviewWriteSerializer(serializers.Serializer):
    """Input for posting or updating a review."""

    score = serializers.IntegerField(min_value=MIN_SCORE, max_value=MAX_SCORE)
    content = serializers.CharField()


class ReviewFormSerializer(serializers.Serializer):
    """Data backing the post/edit review forms."""

    restaurant = RestaurantMinimalSerializer()
    review = ReviewSerializer(required=False)
    score_choices = serializers.ListField(child=serializers.IntegerField())
