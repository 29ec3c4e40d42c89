from rest_framework import serializers
from .models import Category


class CategorySerializer(serializers.ModelSerializer):
    """Serializer for board game categories."""

    class Meta:
        model = Category
        fields = ['slug', 'description']
        read_only_fields = fields


class CategoryCreateSerializer(serializers.Serializer):
    """Request body for POST /api/categories/ (documentation only)."""

    slug = serializers.CharField()
    description = serializers.CharField(required=False, allow_blank=True)


class CategoryListResponseSerializer(serializers.Serializer):
    categories = CategorySerializer(many=True)
