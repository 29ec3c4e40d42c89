# ==========================================
# apps/reviews/models.py
# ==========================================

from django.db import models
from django.utils import timezone

DEFAULT_REVIEW_IMG_URL = (
    'https://images.pexels.com/photos/163064/play-activity-board-game-163064.jpeg'
    '?w=700&h=700'
)


class Review(models.Model):
    """Review of a board game."""

    review_id = models.AutoField(primary_key=True)
    title = models.CharField(max_length=255)
    review_body = models.TextField()
    designer = models.CharField(max_length=255, blank=True)
    category = models.ForeignKey(
        'categories.Category',
        on_delete=models.PROTECT,
        related_name='reviews',
        db_column='category',
    )
    review_img_url = models.URLField(max_length=1000, default=DEFAULT_REVIEW_IMG_URL)
    owner = models.ForeignKey(
        'users.User',
        on_delete=models.CASCADE,
        related_name='reviews',
        db_column='owner',
    )
    votes = models.IntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        db_table = 'reviews'
        indexes = [
            models.Index(fields=['category', 'created_at'], name='reviews_category_created_idx'),
            models.Index(fields=['created_at'], name='reviews_created_at_idx'),
            models.Index(fields=['votes'], name='reviews_votes_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} ({self.category_id})"


class Comment(models.Model):
    """Comment left on a review."""

    comment_id = models.AutoField(primary_key=True)
    review = models.ForeignKey(
        Review,
        on_delete=models.CASCADE,
        related_name='comments',
        db_column='review_id',
    )
    author = models.ForeignKey(
        'users.User',
        on_delete=models.CASCADE,
        related_name='comments',
        db_column='author',
    )
    body = models.TextField()
    votes = models.IntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        db_table = 'comments'
        indexes = [
            models.Index(fields=['review', 'created_at'], name='comments_review_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.author_id} on review {self.review_id}"
