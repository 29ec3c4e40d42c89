"""Category management service - listing and creating categories."""

import structlog
from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from apps.categories.models import Category
from .exceptions import DuplicateCategoryError, InvalidCategoryError

logger = structlog.get_logger(__name__)


def list_categories() -> QuerySet[Category]:
    """Return every category ordered by slug."""
    return Category.objects.order_by('slug')


def create_category(*, slug: str, description: str = '') -> Category:
    """
    Create a new category.

    Args:
        slug: Unique category identifier, used by reviews as their category
        description: Free text shown next to the category

    Returns:
        Created Category instance

    Raises:
        InvalidCategoryError: If slug is blank or not a string
        DuplicateCategoryError: If the slug is already taken
    """
    if not isinstance(slug, str) or not slug.strip():
        raise InvalidCategoryError("Category slug is required")
    if description is None:
        description = ''
    if not isinstance(description, str):
        raise InvalidCategoryError("Category description must be text")

    if Category.objects.filter(slug=slug).exists():
        raise DuplicateCategoryError(f"Category '{slug}' already exists")

    try:
        with transaction.atomic():
            category = Category.objects.create(slug=slug, description=description)
    except IntegrityError:
        # Concurrent insert won the race
        raise DuplicateCategoryError(f"Category '{slug}' already exists")

    logger.info('category_created', slug=category.slug)
    return category
