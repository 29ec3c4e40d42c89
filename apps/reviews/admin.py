from django.contrib import admin
from django.db.models import Count
from .models import Review, Comment


class CommentInline(admin.TabularInline):
    """Inline comments for a review."""

    model = Comment
    extra = 0
    fields = ['author', 'body', 'votes', 'created_at']
    readonly_fields = ['created_at']


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """Admin interface for Reviews."""

    list_display = [
        'review_id',
        'title',
        'category',
        'owner',
        'votes',
        'comment_count',
        'created_at',
    ]
    list_filter = ['category', 'created_at']
    search_fields = ['title', 'designer', 'review_body', 'owner__username']
    readonly_fields = ['created_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    inlines = [CommentInline]

    def comment_count(self, obj):
        """Show how many comments the review has."""
        return obj.comment_count
    comment_count.short_description = 'Comments'
    comment_count.admin_order_field = 'comment_count'

    def get_queryset(self, request):
        """Optimize query with annotation."""
        qs = super().get_queryset(request)
        return qs.select_related('category', 'owner').annotate(comment_count=Count('comments'))


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    """Admin interface for Comments."""

    list_display = ['comment_id', 'review', 'author', 'votes', 'created_at']
    search_fields = ['body', 'author__username', 'review__title']
    readonly_fields = ['created_at']
    ordering = ['-created_at']
