from rest_framework import serializers
from .models import Article, Category


class ArticleSerializer(serializers.ModelSerializer):
    """Main serializer for catalog articles."""

    imageUrl = serializers.URLField(
        source='image_url',
        max_length=500,
        required=False,
        allow_blank=True
    )
    isAvailable = serializers.BooleanField(source='is_available', required=False)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Article
        fields = [
            'id',
            'name',
            'description',
            'price',
            'unit',
            'category',
            'imageUrl',
            'isAvailable',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = ['id', 'createdAt', 'updatedAt']
        extra_kwargs = {
            'description': {'required': False},
        }

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError('Name is required')
        return value.strip()


class ArticleMinimalSerializer(serializers.ModelSerializer):
    """Compact article reference used inside orders."""

    class Meta:
        model = Article
        fields = ['id', 'name', 'price', 'unit']
        read_only_fields = fields


class ArticleFilterSerializer(serializers.Serializer):
    """Query parameters accepted by the catalog listing."""

    category = serializers.ChoiceField(choices=Category.choices, required=False)
    isAvailable = serializers.BooleanField(required=False, allow_null=True, default=None)
