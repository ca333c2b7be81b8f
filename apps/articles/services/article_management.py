"""Article catalog CRUD service."""

import logging
from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from ..models import Article, Unit
from .exceptions import ArticleNotFoundError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = [
    'name', 'description', 'price', 'unit',
    'category', 'image_url', 'is_available',
]


def create_article(
    *,
    name: str,
    price: Decimal,
    category: str,
    unit: str = Unit.PIECE,
    description: str = '',
    image_url: str = '',
    is_available: bool = True
) -> Article:
    """
    Add an article to the catalog.

    Args:
        name: Article name
        price: Price per unit (>= 0)
        category: Catalog category
        unit: Unit the price refers to
        description: Free-text description
        image_url: Optional product image
        is_available: Whether the article can currently be ordered

    Returns:
        Created Article instance
    """
    article = Article.objects.create(
        name=name.strip(),
        price=price,
        category=category,
        unit=unit,
        description=description.strip(),
        image_url=image_url,
        is_available=is_available
    )
    logger.info("Created article %s (%s)", article.id, article.name)
    return article


def get_article_by_id(*, article_id: UUID) -> Article:
    """
    Get an article by ID.

    Raises:
        ArticleNotFoundError: If article doesn't exist
    """
    try:
        return Article.objects.get(id=article_id)
    except Article.DoesNotExist:
        raise ArticleNotFoundError(f"Article {article_id} not found")


def list_articles(
    *,
    category: Optional[str] = None,
    is_available: Optional[bool] = None
) -> QuerySet[Article]:
    """Get catalog articles, optionally filtered by category and availability."""
    queryset = Article.objects.all()

    if category:
        queryset = queryset.filter(category=category)
    if is_available is not None:
        queryset = queryset.filter(is_available=is_available)

    return queryset


@transaction.atomic
def update_article(*, article_id: UUID, data: Dict[str, Any]) -> Article:
    """
    Update an existing article.

    Price changes never touch existing orders; their totals are frozen.

    Args:
        article_id: Article UUID
        data: Fields to update

    Returns:
        Updated Article instance

    Raises:
        ArticleNotFoundError: If article doesn't exist
    """
    try:
        article = (
            Article.objects
            .select_for_update()
            .get(id=article_id)
        )
    except Article.DoesNotExist:
        raise ArticleNotFoundError(f"Article {article_id} not found")

    update_fields = ['updated_at']
    for field in UPDATABLE_FIELDS:
        if field in data:
            setattr(article, field, data[field])
            update_fields.append(field)

    article.save(update_fields=update_fields)
    return article


@transaction.atomic
def delete_article(*, article_id: UUID) -> None:
    """
    Remove an article from the catalog.

    Order items keep their name and price snapshot; their article
    reference becomes NULL.

    Raises:
        ArticleNotFoundError: If article doesn't exist
    """
    deleted, _ = Article.objects.filter(id=article_id).delete()
    if not deleted:
        raise ArticleNotFoundError(f"Article {article_id} not found")

    logger.info("Deleted article %s", article_id)
