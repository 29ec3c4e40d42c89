from collections.abc import Mapping

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import (
    ReviewRowSerializer,
    ReviewListResponseSerializer,
    ReviewDetailResponseSerializer,
    CommentSerializer,
    CommentListResponseSerializer,
    ReviewCreateRequestSerializer,
    VoteIncrementRequestSerializer,
    CommentCreateRequestSerializer,
    MessageSerializer,
)
from .services import (
    ReviewQueryEngine,
    DjangoReviewGateway,
    InvalidReviewQueryError,
    parse_id,
    get_review_by_id,
    create_review,
    update_review_votes,
    delete_review,
    get_comments_for_review,
    create_comment,
    update_comment_votes,
    delete_comment,
)


def get_review_query_engine() -> ReviewQueryEngine:
    """Build the listing engine for one request."""
    return ReviewQueryEngine(
        DjangoReviewGateway(),
        default_limit=settings.REVIEWS_DEFAULT_LIMIT,
    )


def _request_body(request) -> Mapping:
    """JSON body as a mapping; arrays and scalars are rejected."""
    if not isinstance(request.data, Mapping):
        raise InvalidReviewQueryError("Invalid Request")
    return request.data


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('sort_by', OpenApiTypes.STR, enum=['created_at', 'votes', 'comment_count'], default='created_at'),
        OpenApiParameter('order_by', OpenApiTypes.STR, description='asc or desc (any case)', default='desc'),
        OpenApiParameter('category', OpenApiTypes.STR, description='Category slug to filter by'),
        OpenApiParameter('limit', OpenApiTypes.INT, description='Page size', default=10),
        OpenApiParameter('p', OpenApiTypes.INT, description='1-based page number', default=1),
    ],
    responses={200: ReviewListResponseSerializer, 400: MessageSerializer, 404: MessageSerializer},
    description="List reviews with comment counts, sorted and paginated. total_count covers the whole filtered set.",
    tags=['reviews'],
)
@extend_schema(
    methods=['POST'],
    request=ReviewCreateRequestSerializer,
    responses={201: ReviewRowSerializer, 400: MessageSerializer, 404: MessageSerializer},
    description="Create a review. Returns 404 if the owner or category does not exist.",
    tags=['reviews'],
)
@api_view(['GET', 'POST'])
def review_list(request):
    """List reviews or create a new one."""
    if request.method == 'POST':
        data = _request_body(request)
        review = create_review(
            owner=data.get('owner'),
            title=data.get('title'),
            review_body=data.get('review_body'),
            designer=data.get('designer', ''),
            category=data.get('category'),
            review_img_url=data.get('review_img_url'),
        )
        return Response(ReviewRowSerializer(review).data, status=status.HTTP_201_CREATED)

    params = request.query_params
    page = get_review_query_engine().list_reviews(
        sort_by=params.get('sort_by'),
        order_by=params.get('order_by'),
        category=params.get('category'),
        limit=params.get('limit'),
        page=params.get('p', params.get('page')),
    )

    return Response({
        'reviews': {
            'rows': ReviewRowSerializer(page.rows, many=True).data,
            'total_count': page.total_count,
        }
    })


@extend_schema(
    methods=['GET'],
    responses={200: ReviewDetailResponseSerializer, 400: MessageSerializer, 404: MessageSerializer},
    description="Get a review with its comment count.",
    tags=['reviews'],
)
@extend_schema(
    methods=['PATCH'],
    request=VoteIncrementRequestSerializer,
    responses={200: ReviewRowSerializer, 400: MessageSerializer, 404: MessageSerializer},
    description="Increment (or decrement) a review's votes.",
    tags=['reviews'],
)
@extend_schema(
    methods=['DELETE'],
    responses={204: None, 400: MessageSerializer, 404: MessageSerializer},
    description="Delete a review and its comments.",
    tags=['reviews'],
)
@api_view(['GET', 'PATCH', 'DELETE'])
def review_detail(request, review_id):
    """Get, vote on or delete a single review."""
    review_id = parse_id(review_id)

    if request.method == 'PATCH':
        data = _request_body(request)
        review = update_review_votes(review_id=review_id, inc_votes=data.get('inc_votes'))
        return Response(ReviewRowSerializer(review).data)

    if request.method == 'DELETE':
        delete_review(review_id=review_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    review = get_review_by_id(review_id=review_id)
    return Response({'review': ReviewRowSerializer(review).data})


@extend_schema(
    methods=['GET'],
    responses={200: CommentListResponseSerializer, 400: MessageSerializer, 404: MessageSerializer},
    description="List a review's comments, newest first.",
    tags=['comments'],
)
@extend_schema(
    methods=['POST'],
    request=CommentCreateRequestSerializer,
    responses={201: CommentSerializer, 400: MessageSerializer, 404: MessageSerializer},
    description="Post a comment on a review. Returns 404 if the review or username does not exist.",
    tags=['comments'],
)
@api_view(['GET', 'POST'])
def review_comments(request, review_id):
    """List or post comments for a review."""
    review_id = parse_id(review_id)

    if request.method == 'POST':
        data = _request_body(request)
        comment = create_comment(
            review_id=review_id,
            username=data.get('username'),
            body=data.get('body'),
        )
        return Response(CommentSerializer(comment).data, status=status.HTTP_201_CREATED)

    comments = get_comments_for_review(review_id=review_id)
    return Response({'comments': CommentSerializer(comments, many=True).data})


@extend_schema(
    methods=['PATCH'],
    request=VoteIncrementRequestSerializer,
    responses={200: CommentSerializer, 400: MessageSerializer, 404: MessageSerializer},
    description="Increment (or decrement) a comment's votes.",
    tags=['comments'],
)
@extend_schema(
    methods=['DELETE'],
    responses={204: None, 400: MessageSerializer, 404: MessageSerializer},
    description="Delete a comment.",
    tags=['comments'],
)
@api_view(['PATCH', 'DELETE'])
def comment_detail(request, comment_id):
    """Vote on or delete a comment."""
    comment_id = parse_id(comment_id)

    if request.method == 'PATCH':
        data = _request_body(request)
        comment = update_comment_votes(comment_id=comment_id, inc_votes=data.get('inc_votes'))
        return Response(CommentSerializer(comment).data)

    delete_comment(comment_id=comment_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
