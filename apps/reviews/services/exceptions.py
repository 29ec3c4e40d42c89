"""Domain exceptions for reviews app."""


class ReviewsServiceError(Exception):
    """Base exception for all reviews service errors."""
    pass


class InvalidReviewQueryError(ReviewsServiceError):
    """Malformed request input: listing params, ids or required fields."""
    pass


class InvalidVoteIncrementError(ReviewsServiceError):
    """inc_votes must be an integer."""
    pass


class ReviewNotFoundError(ReviewsServiceError):
    """Review does not exist."""
    pass


class CommentNotFoundError(ReviewsServiceError):
    """Comment does not exist."""
    pass


class CategoryNotFoundError(ReviewsServiceError):
    """Category slug does not match any existing category."""
    pass




class ReviewStorageError(ReviewsServiceError):
    """The database failed while serving a review query."""
    pass
