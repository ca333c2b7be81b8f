"""
Communities app services layer.

Services contain the membership and delivery-time voting rules and
orchestrate writes across communities, roster entries and users.
All community writes are transactional and version-checked.
"""

from .exceptions import (
    CommunitiesServiceError,
    CommunityNotFoundError,
    AlreadyMemberError,
    AlreadyInAnotherCommunityError,
    NotMemberError,
    StaleCommunityError,
    ConcurrentModificationError,
    InvalidDeliverySlotError,
    InvalidPreferencesError,
)

from .aggregate import (
    lock_community,
    save_community,
    retry_on_stale,
)

from .community_management import (
    create_community,
    get_community_by_id,
    list_communities,
    update_preferences,
    is_valid_delivery_time,
)

from .membership_management import (
    join_community,
    leave_community,
    get_community_members,
)

from .voting import (
    tally_delivery_time,
    recompute_delivery_time,
    vote_for_delivery_time,
    get_votes,
)


__all__ = [
    # Exceptions
    'CommunitiesServiceError',
    'CommunityNotFoundError',
    'AlreadyMemberError',
    'AlreadyInAnotherCommunityError',
    'NotMemberError',
    'StaleCommunityError',
    'ConcurrentModificationError',
    'InvalidDeliverySlotError',
    'InvalidPreferencesError',

    # Aggregate persistence
    'lock_community',
    'save_community',
    'retry_on_stale',

    # Community Management
    'create_community',
    'get_community_by_id',
    'list_communities',
    'update_preferences',
    'is_valid_delivery_time',

    # Membership Management
    'join_community',
    'leave_community',
    'get_community_members',

    # Voting
    'tally_delivery_time',
    'recompute_delivery_time',
    'vote_for_delivery_time',
    'get_votes',
]
