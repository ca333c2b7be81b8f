"""
Services for order business logic.

Orders are priced from a single snapshot of the catalog and persisted
atomically together with their items.
"""

from .exceptions import (
    OrdersServiceError,
    OrderNotFoundError,
    EmptyOrderError,
    InvalidQuantityError,
    PriceNotFoundError,
    OrderCommunityNotFoundError,
    OrderTotalTooLargeError,
)
from .order_management import (
    MAX_ITEM_QUANTITY,
    MAX_ORDER_TOTAL,
    calculate_total,
    create_order,
    get_user_orders,
    get_order_for_user,
    delete_order,
)

__all__ = [
    # Exceptions
    'OrdersServiceError',
    'OrderNotFoundError',
    'EmptyOrderError',
    'InvalidQuantityError',
    'PriceNotFoundError',
    'OrderCommunityNotFoundError',
    'OrderTotalTooLargeError',
    # Order Management
    'MAX_ITEM_QUANTITY',
    'MAX_ORDER_TOTAL',
    'calculate_total',
    'create_order',
    'get_user_orders',
    'get_order_for_user',
    'delete_order',
]
