"""
Review listing service - sorted, filtered and paginated review pages.

``ReviewQueryEngine.list_reviews`` takes the raw query-string values for
``sort_by``, ``order_by``, ``category``, ``limit`` and ``page`` and returns a
``ReviewPage`` with the requested slice of reviews (each carrying its
``comment_count``) plus the total number of reviews in the filtered set.

Error precedence is fixed:

1. Shape errors (unknown sort column or direction, non-integer limit/page)
   raise ``InvalidReviewQueryError``. They never reach storage.
2. A well-formed but unknown category raises ``CategoryNotFoundError``.
3. Anything the gateway raises (``ReviewStorageError``) propagates untouched.

Example::

    engine = ReviewQueryEngine(DjangoReviewGateway())
    page = engine.list_reviews(sort_by='votes', order_by='asc', limit='5', page='2')
    page.total_count, len(page.rows)
"""

import re
from dataclasses import dataclass, field
from typing import Any, Optional, Union

import structlog

from .exceptions import CategoryNotFoundError, InvalidReviewQueryError
from .gateway import ReviewGateway

logger = structlog.get_logger(__name__)

# Query-string value -> trusted ordering token handed to the gateway
SORT_COLUMNS = {
    'created_at': 'created_at',
    'votes': 'votes',
    'comment_count': 'comment_count',
}
SORT_DIRECTIONS = {
    'asc': 'ASC',
    'desc': 'DESC',
}

DEFAULT_SORT_BY = 'created_at'
DEFAULT_ORDER_BY = 'DESC'
DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1

# Largest LIMIT/OFFSET a signed 64-bit SQL integer can carry
MAX_ROW_BOUND = 2 ** 63 - 1

INVALID_REQUEST = 'Invalid Request'
NOT_FOUND = 'Not Found'

_INTEGER_LITERAL = re.compile(r'[0-9]+')

RawParam = Optional[Union[str, int]]


@dataclass
class ReviewPage:
    """One page of reviews plus the size of the whole filtered set."""

    rows: list[dict[str, Any]] = field(default_factory=list)
    total_count: int = 0

    def as_dict(self) -> dict[str, Any]:
        return {'rows': self.rows, 'total_count': self.total_count}


def _is_supplied(value: RawParam) -> bool:
    return value is not None and value != ''


def _parse_non_negative_int(value: RawParam, default: int) -> int:
    if not _is_supplied(value):
        return default
    if isinstance(value, bool):
        raise InvalidReviewQueryError(INVALID_REQUEST)
    if isinstance(value, int):
        if value < 0:
            raise InvalidReviewQueryError(INVALID_REQUEST)
        return value
    if isinstance(value, str) and _INTEGER_LITERAL.fullmatch(value):
        return int(value)
    raise InvalidReviewQueryError(INVALID_REQUEST)


def calculate_offset(limit: int, page: int) -> int:
    """Rows to skip for a 1-based page; pages below 2 start at row 0."""
    if page <= 1:
        return 0
    return limit * (page - 1)


class ReviewQueryEngine:
    """
    Validates listing parameters and reads one page of reviews.

    The engine keeps no state between calls; the gateway is injected so the
    same engine logic runs against the ORM or an in-memory fake.
    """

    def __init__(self, gateway: ReviewGateway, *, default_limit: int = DEFAULT_LIMIT):
        self.gateway = gateway
        self.default_limit = default_limit

    def list_reviews(
        self,
        sort_by: RawParam = None,
        order_by: RawParam = None,
        category: RawParam = None,
        limit: RawParam = None,
        page: RawParam = None,
    ) -> ReviewPage:
        """
        Return the requested page of reviews.

        Args:
            sort_by: created_at (default), votes or comment_count
            order_by: asc or desc in any case (default DESC)
            category: Category slug to filter by (default: all categories)
            limit: Page size as a non-negative integer literal (default 10)
            page: 1-based page number as a non-negative integer literal

        Limit and offset are clamped so ``offset + limit`` never exceeds
        ``MAX_ROW_BOUND``; pages beyond it are simply empty.

        Returns:
            ReviewPage with ``rows`` and ``total_count``

        Raises:
            InvalidReviewQueryError: If any parameter is malformed
            CategoryNotFoundError: If the category slug does not exist
            ReviewStorageError: If the database read fails
        """
        sort_column = self._resolve_sort_column(sort_by)
        sort_direction = self._resolve_sort_direction(order_by)
        page_size = _parse_non_negative_int(limit, self.default_limit)
        page_number = _parse_non_negative_int(page, DEFAULT_PAGE)

        category_filter = category if _is_supplied(category) else None
        valid_slugs = set(self.gateway.list_category_slugs())
        if category_filter is not None and category_filter not in valid_slugs:
            logger.info('review_listing_rejected', reason='unknown_category', category=category_filter)
            raise CategoryNotFoundError(NOT_FOUND)

        offset = min(calculate_offset(page_size, page_number), MAX_ROW_BOUND)
        page_size = min(page_size, MAX_ROW_BOUND - offset)

        rows = self.gateway.query_review_page(
            category_filter,
            sort_column,
            sort_direction,
            page_size,
            offset,
        )
        total_count = self.gateway.count_reviews(category_filter)

        logger.debug(
            'review_listing_served',
            sort_column=sort_column,
            sort_direction=sort_direction,
            category=category_filter,
            limit=page_size,
            offset=offset,
            returned=len(rows),
            total_count=total_count,
        )
        return ReviewPage(rows=list(rows), total_count=int(total_count))

    @staticmethod
    def _resolve_sort_column(sort_by: RawParam) -> str:
        if not _is_supplied(sort_by):
            return SORT_COLUMNS[DEFAULT_SORT_BY]
        try:
            return SORT_COLUMNS[sort_by]
        except (KeyError, TypeError):
            raise InvalidReviewQueryError(INVALID_REQUEST)

    @staticmethod
    def _resolve_sort_direction(order_by: RawParam) -> str:
        if not _is_supplied(order_by):
            return DEFAULT_ORDER_BY
        if not isinstance(order_by, str):
            raise InvalidReviewQueryError(INVALID_REQUEST)
        try:
            return SORT_DIRECTIONS[order_by.lower()]
        except KeyError:
            raise InvalidReviewQueryError(INVALID_REQUEST)
