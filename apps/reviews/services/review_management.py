"""Review management service - single-review reads and writes."""

import re
from typing import Any, Optional

import structlog
from django.db import transaction
from django.db.models import F

from apps.categories.models import Category
from apps.reviews.models import Review
from apps.users.models import User
from apps.users.services.exceptions import UserNotFoundError
from .exceptions import (
    CategoryNotFoundError,
    InvalidReviewQueryError,
    InvalidVoteIncrementError,
    ReviewNotFoundError,
)
from .gateway import REVIEW_ROW_FIELDS, annotate_comment_count

logger = structlog.get_logger(__name__)

_ID_LITERAL = re.compile(r'[0-9]+')


def parse_id(value: Any) -> int:
    """
    Coerce a path id (``'3'``) to an int.

    Raises:
        InvalidReviewQueryError: If the value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise InvalidReviewQueryError("Invalid Request")
    if isinstance(value, int) and value >= 0:
        return value
    if isinstance(value, str) and _ID_LITERAL.fullmatch(value):
        return int(value)
    raise InvalidReviewQueryError("Invalid Request")


def validate_vote_increment(inc_votes: Any) -> int:
    """
    Check an ``inc_votes`` body value.

    Raises:
        InvalidVoteIncrementError: If inc_votes is missing or not an integer
    """
    if isinstance(inc_votes, bool) or not isinstance(inc_votes, int):
        raise InvalidVoteIncrementError("inc_votes must be an integer")
    return inc_votes


def get_review_by_id(*, review_id: int) -> dict[str, Any]:
    """
    Retrieve a review with its comment count.

    Args:
        review_id: Primary key of the review

    Returns:
        Review row as a dict including ``comment_count``

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    queryset = annotate_comment_count(Review.objects.filter(review_id=review_id))
    row = queryset.values(*REVIEW_ROW_FIELDS).first()
    if row is None:
        raise ReviewNotFoundError(f"No review found for review_id {review_id}")
    return row


def _require_text(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidReviewQueryError("Invalid Request")
    return value


@transaction.atomic
def create_review(
    *,
    owner: str,
    title: str,
    review_body: str,
    designer: str = '',
    category: str,
    review_img_url: Optional[str] = None,
) -> dict[str, Any]:
    """
    Create a new review.

    This operation:
    1. Validates required text fields
    2. Checks the owner and category exist
    3. Inserts the review and reads it back with ``comment_count``

    Args:
        owner: Username of the reviewer
        title: Review title
        review_body: Review text
        designer: Game designer
        category: Category slug
        review_img_url: Optional image URL (stock image if omitted)

    Returns:
        Created review row including ``comment_count`` (always 0)

    Raises:
        InvalidReviewQueryError: If a required field is missing or blank
        UserNotFoundError: If owner doesn't exist
        CategoryNotFoundError: If category doesn't exist
    """
    for value in (owner, title, review_body, category):
        _require_text(value)
    if designer is None:
        designer = ''
    if not isinstance(designer, str):
        raise InvalidReviewQueryError("Invalid Request")
    if review_img_url is not None and not isinstance(review_img_url, str):
        raise InvalidReviewQueryError("Invalid Request")

    if not User.objects.filter(username=owner).exists():
        raise UserNotFoundError(f"No user found with username {owner}")

    if not Category.objects.filter(slug=category).exists():
        raise CategoryNotFoundError(f"No category found with slug {category}")

    fields = {
        'owner_id': owner,
        'title': title,
        'review_body': review_body,
        'designer': designer,
        'category_id': category,
    }
    if review_img_url:
        fields['review_img_url'] = review_img_url

    review = Review.objects.create(**fields)
    logger.info('review_created', review_id=review.review_id, owner=owner, category=category)

    return get_review_by_id(review_id=review.review_id)


@transaction.atomic
def update_review_votes(*, review_id: int, inc_votes: Any) -> dict[str, Any]:
    """
    Add ``inc_votes`` (may be negative) to a review's vote count.

    The increment runs as a single UPDATE with an F() expression, so
    concurrent votes are never lost.

    Raises:
        InvalidVoteIncrementError: If inc_votes is not an integer
        ReviewNotFoundError: If review doesn't exist
    """
    increment = validate_vote_increment(inc_votes)

    updated = Review.objects.filter(review_id=review_id).update(votes=F('votes') + increment)
    if not updated:
        raise ReviewNotFoundError(f"No review found for review_id {review_id}")

    return get_review_by_id(review_id=review_id)


@transaction.atomic
def delete_review(*, review_id: int) -> None:
    """
    Delete a review and, by cascade, its comments.

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    deleted, _ = Review.objects.filter(review_id=review_id).delete()
    if not deleted:
        raise ReviewNotFoundError(f"No review found for review_id {review_id}")

    logger.info('review_deleted', review_id=review_id)
