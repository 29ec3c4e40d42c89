"""Project-wide exception handling for the REST API."""

from typing import Any

import structlog
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, ParseError, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.categories.services.exceptions import (
    DuplicateCategoryError,
    InvalidCategoryError,
)
from apps.reviews.services.exceptions import (
    CategoryNotFoundError,
    CommentNotFoundError,
    InvalidReviewQueryError,
    InvalidVoteIncrementError,
    ReviewNotFoundError,
    ReviewStorageError,
)
from apps.users.services.exceptions import UserNotFoundError

logger = structlog.get_logger(__name__)

INVALID_REQUEST_MESSAGE = 'Invalid Request'
NOT_FOUND_MESSAGE = 'Not Found'
INTERNAL_ERROR_MESSAGE = 'Internal Server Error'

INVALID_REQUEST_ERRORS = (
    InvalidReviewQueryError,
    InvalidVoteIncrementError,
    InvalidCategoryError,
    DuplicateCategoryError,
    ParseError,
    ValidationError,
)

NOT_FOUND_ERRORS = (
    CategoryNotFoundError,
    CommentNotFoundError,
    ReviewNotFoundError,
    UserNotFoundError,
    NotFound,
    Http404,
)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    """
    Map domain and DRF exceptions onto ``{"message": ...}`` responses.

    - Malformed input (bad query params, bad ids, bad JSON) -> 400 Invalid Request
    - Anything that references a missing row -> 404 Not Found
    - Storage failures and unexpected errors -> 500 Internal Server Error

    Other DRF exceptions (405, 415, ...) keep their status code and detail.
    """
    view = context.get('view')
    request = context.get('request')
    path = request.path if request is not None else None
    view_name = view.__class__.__name__ if view is not None else None

    if isinstance(exc, INVALID_REQUEST_ERRORS):
        response = Response(
            {'message': INVALID_REQUEST_MESSAGE},
            status=status.HTTP_400_BAD_REQUEST,
        )
    elif isinstance(exc, NOT_FOUND_ERRORS):
        response = Response(
            {'message': NOT_FOUND_MESSAGE},
            status=status.HTTP_404_NOT_FOUND,
        )
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        response.data = {'message': str(exc.detail)}
    else:
        logger.error(
            'api_request_failed',
            path=path,
            view=view_name,
            error_type=type(exc).__name__,
            storage_error=isinstance(exc, ReviewStorageError),
            exc_info=exc,
        )
        return Response(
            {'message': INTERNAL_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    logger.warning(
        'api_request_rejected',
        path=path,
        view=view_name,
        status_code=response.status_code,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return response
