from rest_framework import viewsets, status, serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer

from config.patterns import UUID_PATTERN

from .models import Order
from .serializers import OrderSerializer, OrderCreateSerializer
from apps.orders.services import (
    create_order,
    get_user_orders,
    delete_order,
    OrderNotFoundError,
    EmptyOrderError,
    InvalidQuantityError,
    PriceNotFoundError,
    OrderCommunityNotFoundError,
    OrderTotalTooLargeError,
)


class OrderViewSet(viewsets.GenericViewSet):
    """
    ViewSet for the current user's orders.

    list: Get own orders, newest first
    create: Place an order
    remove: Delete an own order
    """

    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_PATTERN

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return Order.objects.none()
        return get_user_orders(user=self.request.user)

    @extend_schema(responses={200: OrderSerializer(many=True)})
    def list(self, request):
        """Get the current user's orders."""
        return Response(OrderSerializer(self.get_queryset(), many=True).data)

    @extend_schema(request=OrderCreateSerializer, responses={201: OrderSerializer})
    def create(self, request):
        """Place an order priced from the current catalog."""
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = create_order(
                user=request.user,
                community_id=serializer.validated_data['community'],
                items=serializer.validated_data['items'],
                delivery_date=serializer.validated_data['deliveryDate']
            )
        except (EmptyOrderError, InvalidQuantityError, OrderTotalTooLargeError) as e:
            return Response(
                {'message': 'Invalid order', 'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )
        except OrderCommunityNotFoundError as e:
            return Response(
                {'message': 'Community not found', 'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )
        except PriceNotFoundError as e:
            return Response(
                {'message': 'Error creating order', 'error': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response(
            OrderSerializer(order).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(
        request=None,
        responses={
            200: inline_serializer(
                name='DeleteOrderResponse',
                fields={'message': serializers.CharField()},
            ),
        },
    )
    @action(detail=True, methods=['delete'], url_path='delete', url_name='delete')
    def remove(self, request, pk=None):
        """Delete one of the current user's orders."""
        try:
            delete_order(order_id=pk, user=request.user)
        except OrderNotFoundError as e:
            return Response(
                {'message': 'Order not found or unauthorized', 'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response({'message': 'Order deleted successfully'})
