"""Domain exceptions for categories app."""


class CategoriesServiceError(Exception):
    """Base exception for all categories service errors."""
    pass


class InvalidCategoryError(CategoriesServiceError):
    """Category payload is missing its slug or description."""
    pass


class DuplicateCategoryError(CategoriesServiceError):
    """A category with this slug already exists."""
    pass
