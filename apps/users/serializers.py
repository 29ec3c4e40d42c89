from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Public user profile."""

    class Meta:
        model = User
        fields = ['username', 'name', 'avatar_url']
        read_only_fields = fields


class UserListResponseSerializer(serializers.Serializer):
    users = UserSerializer(many=True)


class UserDetailResponseSerializer(serializers.Serializer):
    user = UserSerializer()
