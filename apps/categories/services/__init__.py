"""
Categories services - Business logic layer.
"""

from .category_management import (
    list_categories,
    create_category,
)

from .exceptions import (
    CategoriesServiceError,
    InvalidCategoryError,
    DuplicateCategoryError,
)

__all__ = [
    'list_categories',
    'create_category',
    'CategoriesServiceError',
    'InvalidCategoryError',
    'DuplicateCategoryError',
]
