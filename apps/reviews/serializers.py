from rest_framework import serializers
from .models import Comment


class ReviewRowSerializer(serializers.Serializer):
    """
    Review with its aggregated comment count.

    Serializes the row dicts produced by the listing engine and the
    single-review services, not model instances.
    """

    review_id = serializers.IntegerField()
    title = serializers.CharField()
    review_body = serializers.CharField()
    designer = serializers.CharField(allow_blank=True)
    category = serializers.CharField()
    review_img_url = serializers.CharField()
    owner = serializers.CharField()
    votes = serializers.IntegerField()
    created_at = serializers.DateTimeField()
    comment_count = serializers.IntegerField()


class ReviewPageSerializer(serializers.Serializer):
    rows = ReviewRowSerializer(many=True)
    total_count = serializers.IntegerField()


class ReviewListResponseSerializer(serializers.Serializer):
    reviews = ReviewPageSerializer()


class ReviewDetailResponseSerializer(serializers.Serializer):
    review = ReviewRowSerializer()


class CommentSerializer(serializers.ModelSerializer):
    """Comment on a review."""

    review_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Comment
        fields = ['comment_id', 'review_id', 'author', 'body', 'votes', 'created_at']
        read_only_fields = fields


class CommentListResponseSerializer(serializers.Serializer):
    comments = CommentSerializer(many=True)


# Request bodies (documentation only, services validate the payload)

class ReviewCreateRequestSerializer(serializers.Serializer):
    owner = serializers.CharField()
    title = serializers.CharField()
    review_body = serializers.CharField()
    designer = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField()
    review_img_url = serializers.URLField(required=False)


class VoteIncrementRequestSerializer(serializers.Serializer):
    inc_votes = serializers.IntegerField(help_text="Amount to add to votes (may be negative)")


class CommentCreateRequestSerializer(serializers.Serializer):
    username = serializers.CharField()
    body = serializers.CharField()


class MessageSerializer(serializers.Serializer):
    message = serializers.CharField()
