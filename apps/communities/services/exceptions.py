"""
Domain-specific exceptions for communities app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class CommunitiesServiceError(Exception):
    """Base exception for all communities service errors."""
    pass


class CommunityNotFoundError(CommunitiesServiceError):
    """Raised when a community does not exist."""
    pass


class AlreadyMemberError(CommunitiesServiceError):
    """Raised when a user tries to join a community they're already in."""
    pass


class AlreadyInAnotherCommunityError(CommunitiesServiceError):
    """Raised when a user who belongs to a community tries to join or found another."""
    pass


class NotMemberError(CommunitiesServiceError):
    """Raised when a non-member attempts a member-only action."""
    pass


class StaleCommunityError(CommunitiesServiceError):
    """Raised when the community changed between read and write."""
    pass


class ConcurrentModificationError(CommunitiesServiceError):
    """Raised when a write kept losing the version race after all retries."""
    pass


class InvalidDeliverySlotError(CommunitiesServiceError):
    """Raised when a vote names something other than a delivery slot."""
    pass


class InvalidPreferencesError(CommunitiesServiceError):
    """Raised when a preferences override has an invalid day or time."""
    pass
