"""Domain-specific exceptions for orders services."""


class OrdersServiceError(Exception):
    """Base exception for orders services."""
    pass


class OrderNotFoundError(OrdersServiceError):
    """Raised when order does not exist or belongs to someone else."""
    pass


class EmptyOrderError(OrdersServiceError):
    """Raised when an order has no items."""
    pass


class InvalidQuantityError(OrdersServiceError):
    """Raised when an item quantity is below one."""
    pass


class PriceNotFoundError(OrdersServiceError):
    """Raised when an ordered article cannot be priced."""
    pass


class OrderCommunityNotFoundError(OrdersServiceError):
    """Raised when the target community does not exist."""
    pass


class OrderTotalTooLargeError(OrdersServiceError):
    """Raised when the order total does not fit the stored amount."""
    pass
