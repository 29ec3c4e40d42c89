from django.contrib import admin
from django.db.models import Count
from .models import Category


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    """Admin interface for Categories."""

    list_display = ['slug', 'description', 'review_count']
    search_fields = ['slug', 'description']
    ordering = ['slug']

    def review_count(self, obj):
        """Show how many reviews use the category."""
        return obj.review_count
    review_count.short_description = 'Reviews'

    def get_queryset(self, request):
        """Optimize query with annotation."""
        qs = super().get_queryset(request)
        return qs.annotate(review_count=Count('reviews'))
