from rest_framework import serializers

from apps.articles.serializers import ArticleMinimalSerializer
from .models import Order, OrderItem
from .services import MAX_ITEM_QUANTITY


class OrderItemSerializer(serializers.ModelSerializer):
    """Order line with its price snapshot."""

    article = ArticleMinimalSerializer(read_only=True, allow_null=True)
    articleName = serializers.CharField(source='article_name', read_only=True)
    unitPrice = serializers.DecimalField(
        source='unit_price', max_digits=10, decimal_places=2, read_only=True
    )

    class Meta:
        model = OrderItem
        fields = ['id', 'article', 'articleName', 'quantity', 'unitPrice']
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Main serializer for orders."""

    items = OrderItemSerializer(many=True, read_only=True)
    community = serializers.UUIDField(source='community_id', read_only=True)
    communityName = serializers.CharField(source='community.name', read_only=True)
    totalAmount = serializers.DecimalField(
        source='total_amount', max_digits=10, decimal_places=2, read_only=True
    )
    deliveryDate = serializers.DateTimeField(source='delivery_date', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Order
        fields = [
            'id',
            'community',
            'communityName',
            'items',
            'totalAmount',
            'deliveryDate',
            'status',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields


class OrderItemInputSerializer(serializers.Serializer):
    article = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_ITEM_QUANTITY)


class OrderCreateSerializer(serializers.Serializer):
    """Input for placing an order."""

    items = OrderItemInputSerializer(many=True, allow_empty=False)
    community = serializers.UUIDField()
    deliveryDate = serializers.DateTimeField()

    def validate_items(self, value):
        return [
            {'article_id': item['article'], 'quantity': item['quantity']}
            for item in value
        ]
