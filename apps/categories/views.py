from collections.abc import Mapping

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    CategorySerializer,
    CategoryCreateSerializer,
    CategoryListResponseSerializer,
)
from .services import list_categories, create_category
from .services.exceptions import InvalidCategoryError


@extend_schema(
    methods=['GET'],
    responses={200: CategoryListResponseSerializer},
    description="List all board game categories.",
    tags=['categories'],
)
@extend_schema(
    methods=['POST'],
    request=CategoryCreateSerializer,
    responses={201: CategorySerializer},
    description="Create a new category. Returns 400 if the slug is missing or taken.",
    tags=['categories'],
)
@api_view(['GET', 'POST'])
def category_list(request):
    """List categories or create a new one."""
    if request.method == 'POST':
        if not isinstance(request.data, Mapping):
            raise InvalidCategoryError("Category payload must be an object")
        category = create_category(
            slug=request.data.get('slug'),
            description=request.data.get('description', ''),
        )
        return Response(CategorySerializer(category).data, status=status.HTTP_201_CREATED)

    serializer = CategorySerializer(list_categories(), many=True)
    return Response({'categories': serializer.data})
