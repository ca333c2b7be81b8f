"""Services for article catalog business logic."""

from .exceptions import (
    ArticlesServiceError,
    ArticleNotFoundError,
)
from .article_management import (
    create_article,
    get_article_by_id,
    list_articles,
    update_article,
    delete_article,
)

__all__ = [
    # Exceptions
    'ArticlesServiceError',
    'ArticleNotFoundError',
    # Article Management
    'create_article',
    'get_article_by_id',
    'list_articles',
    'update_article',
    'delete_article',
]
