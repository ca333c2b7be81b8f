"""Order pricing and lifecycle service."""

import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet, Prefetch

from apps.accounts.models import User
from apps.articles.models import Article
from apps.communities.models import Community
from ..models import Order, OrderItem, OrderStatus
from .exceptions import (
    OrderNotFoundError,
    EmptyOrderError,
    InvalidQuantityError,
    PriceNotFoundError,
    OrderCommunityNotFoundError,
    OrderTotalTooLargeError,
)

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')

# Quantities and totals must fit their columns; total_amount is
# max_digits=10 with 2 decimal places
MAX_ITEM_QUANTITY = 10000
MAX_ORDER_TOTAL = Decimal('99999999.99')


def calculate_total(lines: List[tuple]) -> Decimal:
    """Sum (unit_price, quantity) pairs, rounded to cents."""
    total = sum(
        (Decimal(price) * quantity for price, quantity in lines),
        Decimal('0')
    )
    return total.quantize(CENT, rounding=ROUND_HALF_UP)


@transaction.atomic
def create_order(
    *,
    user: User,
    community_id: UUID,
    items: List[Dict],
    delivery_date: datetime
) -> Order:
    """
    Price and persist an order.

    All referenced articles are fetched in one query. Each item keeps
    the article's current price and name, so the order total never
    follows later catalog changes.

    Args:
        user: Ordering user
        community_id: Community the order is delivered to
        items: List of {'article_id': UUID, 'quantity': int}
        delivery_date: Requested delivery date and time

    Returns:
        Created Order with items

    Raises:
        EmptyOrderError: If no items are given
        InvalidQuantityError: If any quantity is below one or above MAX_ITEM_QUANTITY
        OrderCommunityNotFoundError: If community doesn't exist
        PriceNotFoundError: If any article doesn't exist
        OrderTotalTooLargeError: If the total exceeds MAX_ORDER_TOTAL
    """
    if not items:
        raise EmptyOrderError("Order must contain at least one item")

    for item in items:
        if item['quantity'] < 1:
            raise InvalidQuantityError(
                f"Quantity for article {item['article_id']} must be at least 1"
            )
        if item['quantity'] > MAX_ITEM_QUANTITY:
            raise InvalidQuantityError(
                f"Quantity for article {item['article_id']} must be at most {MAX_ITEM_QUANTITY}"
            )

    try:
        community = Community.objects.get(id=community_id)
    except Community.DoesNotExist:
        raise OrderCommunityNotFoundError(f"Community {community_id} not found")

    article_ids = {item['article_id'] for item in items}
    articles = Article.objects.in_bulk(article_ids)

    missing = article_ids - set(articles)
    if missing:
        raise PriceNotFoundError(
            "Price not found for article(s): "
            + ", ".join(sorted(str(article_id) for article_id in missing))
        )

    total = calculate_total([
        (articles[item['article_id']].price, item['quantity'])
        for item in items
    ])
    if total > MAX_ORDER_TOTAL:
        raise OrderTotalTooLargeError(
            f"Order total {total} exceeds the maximum of {MAX_ORDER_TOTAL}"
        )

    order = Order.objects.create(
        user=user,
        community=community,
        total_amount=total,
        delivery_date=delivery_date,
        status=OrderStatus.PENDING
    )

    OrderItem.objects.bulk_create([
        OrderItem(
            order=order,
            article=articles[item['article_id']],
            article_name=articles[item['article_id']].name,
            unit_price=articles[item['article_id']].price,
            quantity=item['quantity'],
            position=position
        )
        for position, item in enumerate(items)
    ])

    logger.info(
        "User %s created order %s for community %s (%s items, total %s)",
        user.id, order.id, community.id, len(items), total
    )
    return get_order_for_user(order_id=order.id, user=user)


def get_user_orders(*, user: User) -> QuerySet[Order]:
    """Get the user's orders, newest first."""
    return (
        Order.objects
        .filter(user=user)
        .select_related('community')
        .prefetch_related(
            Prefetch('items', queryset=OrderItem.objects.select_related('article'))
        )
        .order_by('-created_at')
    )


def get_order_for_user(*, order_id: UUID, user: User) -> Order:
    """
    Get one of the user's orders.

    Raises:
        OrderNotFoundError: If order doesn't exist or isn't the user's
    """
    try:
        return get_user_orders(user=user).get(id=order_id)
    except Order.DoesNotExist:
        raise OrderNotFoundError("Order not found or unauthorized")


@transaction.atomic
def delete_order(*, order_id: UUID, user: User) -> None:
    """
    Delete an order owned by the user.

    A missing order and someone else's order are indistinguishable.

    Raises:
        OrderNotFoundError: If no order with this id belongs to the user
    """
    deleted, _ = Order.objects.filter(id=order_id, user=user).delete()
    if not deleted:
        raise OrderNotFoundError("Order not found or unauthorized")

    logger.info("User %s deleted order %s", user.id, order_id)
