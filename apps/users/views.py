from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    UserSerializer,
    UserListResponseSerializer,
    UserDetailResponseSerializer,
)
from .services import list_users, get_user_by_username


@extend_schema(
    responses={200: UserListResponseSerializer},
    description="List all users.",
    tags=['users'],
)
@api_view(['GET'])
def user_list(request):
    """List all users."""
    serializer = UserSerializer(list_users(), many=True)
    return Response({'users': serializer.data})


@extend_schema(
    responses={200: UserDetailResponseSerializer},
    description="Get a single user by username. Returns 404 if unknown.",
    tags=['users'],
)
@api_view(['GET'])
def user_detail(request, username):
    """Get a user by username."""
    user = get_user_by_username(username=username)
    return Response({'user': UserSerializer(user).data})
