"""
Storage gateway for the review listing engine.

The engine only talks to storage through the three reads defined by
``ReviewGateway``. ``DjangoReviewGateway`` implements them with ORM
querysets, so every value (category, limit, offset) is a bound parameter and
the ordering column comes from a fixed set of field names.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional, Protocol

from django.db import DatabaseError
from django.db.models import Count, F

from apps.categories.models import Category
from apps.reviews.models import Review
from .exceptions import ReviewStorageError

REVIEW_ROW_FIELDS = (
    'review_id',
    'title',
    'review_body',
    'designer',
    'category',
    'review_img_url',
    'owner',
    'votes',
    'created_at',
    'comment_count',
)

ORDERABLE_COLUMNS = frozenset({'created_at', 'votes', 'comment_count'})


class ReviewGateway(Protocol):
    """Reads the review listing engine needs from storage."""

    def list_category_slugs(self) -> list[str]:
        ...

    def query_review_page(
        self,
        category: Optional[str],
        sort_column: str,
        sort_direction: str,
        limit: int,
        offset: int,
    ) -> list[dict[str, Any]]:
        ...

    def count_reviews(self, category: Optional[str]) -> int:
        ...


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except DatabaseError as exc:
        raise ReviewStorageError(f"{operation} failed: {exc}") from exc


def annotate_comment_count(queryset):
    """Left-join comments and attach an integer ``comment_count`` per review."""
    return queryset.annotate(comment_count=Count('comments'))


class DjangoReviewGateway:
    """ReviewGateway backed by the default Django database."""

    def list_category_slugs(self) -> list[str]:
        with _storage_errors('list_category_slugs'):
            return list(Category.objects.values_list('slug', flat=True))

    def query_review_page(
        self,
        category: Optional[str],
        sort_column: str,
        sort_direction: str,
        limit: int,
        offset: int,
    ) -> list[dict[str, Any]]:
        if sort_column not in ORDERABLE_COLUMNS:
            raise ValueError(f"Unsupported sort column: {sort_column!r}")

        ordering = F(sort_column).asc() if sort_direction == 'ASC' else F(sort_column).desc()

        queryset = annotate_comment_count(Review.objects.all())
        if category is not None:
            queryset = queryset.filter(category_id=category)
        queryset = queryset.order_by(ordering).values(*REVIEW_ROW_FIELDS)

        with _storage_errors('query_review_page'):
            return list(queryset[offset:offset + limit])

    def count_reviews(self, category: Optional[str]) -> int:
        queryset = Review.objects.all()
        if category is not None:
            queryset = queryset.filter(category_id=category)

        with _storage_errors('count_reviews'):
            return queryset.count()
