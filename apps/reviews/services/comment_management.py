"""Comment management service - comments attached to reviews."""

from typing import Any

import structlog
from django.db import transaction
from django.db.models import F, QuerySet

from apps.reviews.models import Comment, Review
from apps.users.models import User
from apps.users.services.exceptions import UserNotFoundError
from .exceptions import (
    CommentNotFoundError,
    InvalidReviewQueryError,
    ReviewNotFoundError,
)
from .review_management import validate_vote_increment

logger = structlog.get_logger(__name__)


def _ensure_review_exists(review_id: int) -> None:
    if not Review.objects.filter(review_id=review_id).exists():
        raise ReviewNotFoundError(f"No review found for review_id {review_id}")


def get_comments_for_review(*, review_id: int) -> QuerySet[Comment]:
    """
    Get a review's comments, newest first.

    A review without comments yields an empty queryset.

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    _ensure_review_exists(review_id)
    return Comment.objects.filter(review_id=review_id).order_by('-created_at')


@transaction.atomic
def create_comment(*, review_id: int, username: Any, body: Any) -> Comment:
    """
    Post a comment on a review.

    Args:
        review_id: Review being commented on
        username: Author's username
        body: Comment text

    Returns:
        Created Comment instance

    Raises:
        InvalidReviewQueryError: If username or body is missing
        ReviewNotFoundError: If review doesn't exist
        UserNotFoundError: If username doesn't exist
    """
    if not isinstance(username, str) or not username:
        raise InvalidReviewQueryError("Invalid Request")
    if not isinstance(body, str) or not body:
        raise InvalidReviewQueryError("Invalid Request")

    _ensure_review_exists(review_id)

    if not User.objects.filter(username=username).exists():
        raise UserNotFoundError(f"No user found with username {username}")

    comment = Comment.objects.create(review_id=review_id, author_id=username, body=body)
    logger.info('comment_created', comment_id=comment.comment_id, review_id=review_id, author=username)
    return comment


@transaction.atomic
def update_comment_votes(*, comment_id: int, inc_votes: Any) -> Comment:
    """
    Add ``inc_votes`` (may be negative) to a comment's vote count.

    Raises:
        InvalidVoteIncrementError: If inc_votes is not an integer
        CommentNotFoundError: If comment doesn't exist
    """
    increment = validate_vote_increment(inc_votes)

    updated = Comment.objects.filter(comment_id=comment_id).update(votes=F('votes') + increment)
    if not updated:
        raise CommentNotFoundError(f"No comment found for comment_id {comment_id}")

    return Comment.objects.get(comment_id=comment_id)


@transaction.atomic
def delete_comment(*, comment_id: int) -> None:
    """
    Delete a comment.

    Raises:
        CommentNotFoundError: If comment doesn't exist
    """
    deleted, _ = Comment.objects.filter(comment_id=comment_id).delete()
    if not deleted:
        raise CommentNotFoundError(f"No comment found for comment_id {comment_id}")

    logger.info('comment_deleted', comment_id=comment_id)
