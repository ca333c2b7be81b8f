"""Domain-specific exceptions for articles services."""


class ArticlesServiceError(Exception):
    """Base exception for articles services."""
    pass


class ArticleNotFoundError(ArticlesServiceError):
    """Raised when article does not exist."""
    pass
