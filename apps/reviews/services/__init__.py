"""
Reviews services - Business logic layer.

This package contains all business operations for the reviews app:
- Review listing (validated, sorted, paginated pages with comment counts)
- Single review CRUD operations
- Comment management
"""

# Review listing
from .review_listing import (
    ReviewQueryEngine,
    ReviewPage,
    calculate_offset,
)
from .gateway import (
    ReviewGateway,
    DjangoReviewGateway,
)

# Review management
from .review_management import (
    parse_id,
    get_review_by_id,
    create_review,
    update_review_votes,
    delete_review,
)

# Comment management
from .comment_management import (
    get_comments_for_review,
    create_comment,
    update_comment_votes,
    delete_comment,
)

# Domain Exceptions
from .exceptions import (
    ReviewsServiceError,
    InvalidReviewQueryError,
    InvalidVoteIncrementError,
    ReviewNotFoundError,
    CommentNotFoundError,
    CategoryNotFoundError,
    ReviewStorageError,
)

__all__ = [
    # Review Listing
    'ReviewQueryEngine',
    'ReviewPage',
    'calculate_offset',
    'ReviewGateway',
    'DjangoReviewGateway',
    # Review Management Services
    'parse_id',
    'get_review_by_id',
    'create_review',
    'update_review_votes',
    'delete_review',
    # Comment Management Services
    'get_comments_for_review',
    'create_comment',
    'update_comment_votes',
    'delete_comment',
    # Exceptions
    'ReviewsServiceError',
    'InvalidReviewQueryError',
    'InvalidVoteIncrementError',
    'ReviewNotFoundError',
    'CommentNotFoundError',
    'CategoryNotFoundError',
    'ReviewStorageError',
]
