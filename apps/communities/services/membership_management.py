"""
Membership management service.

Handles joining and leaving communities. The roster entry and the user's
community back-reference are always written in the same transaction.
"""

import logging
from uuid import UUID

from django.db import IntegrityError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.communities.models import Community, CommunityMember, DeliverySlot

from .aggregate import lock_community, save_community, retry_on_stale
from .community_management import get_community_by_id
from .exceptions import (
    CommunityNotFoundError,
    AlreadyMemberError,
    AlreadyInAnotherCommunityError,
)
from .voting import recompute_delivery_time

logger = logging.getLogger(__name__)


@retry_on_stale
def join_community(*, community_id: UUID, user: User) -> Community:
    """
    Add a user to a community roster with a default Morning vote.

    The back-reference is claimed with a conditional UPDATE (only while it
    is still NULL), so two concurrent joins by the same user into different
    communities cannot both succeed.

    Args:
        community_id: UUID of the community
        user: User joining the community

    Returns:
        Updated Community instance with members resolved

    Raises:
        CommunityNotFoundError: If community doesn't exist
        AlreadyMemberError: If user is already on this roster
        AlreadyInAnotherCommunityError: If user already belongs to a community
        ConcurrentModificationError: If the write kept losing the version race
    """
    community = lock_community(community_id)

    if community.has_member(user):
        raise AlreadyMemberError(f"User is already a member of {community.name}")

    claimed = (
        User.objects
        .filter(id=user.id, community__isnull=True)
        .update(community=community)
    )
    if not claimed:
        raise AlreadyInAnotherCommunityError(
            "User is already a member of another community"
        )

    try:
        CommunityMember.objects.create(
            community=community,
            user_id=user.id,
            delivery_time_choice=DeliverySlot.MORNING
        )
    except IntegrityError:
        # Database constraint caught duplicate membership
        raise AlreadyMemberError(f"User is already a member of {community.name}")

    recompute_delivery_time(community)
    save_community(community, fields=['delivery_time'])

    user.community_id = community.id
    logger.info("User %s joined community %s", user.id, community.id)

    return get_community_by_id(community_id=community.id)


@retry_on_stale
def leave_community(*, community_id: UUID, user: User) -> Community:
    """
    Remove a user from a community roster.

    Leaving a community you are not on changes nothing. When the roster
    is left empty the last computed preferences stay as they are.

    Also clears the user's back-reference if it points at this community.

    Args:
        community_id: UUID of the community
        user: User leaving the community

    Returns:
        Community instance

    Raises:
        CommunityNotFoundError: If community doesn't exist
        ConcurrentModificationError: If the write kept losing the version race
    """
    community = lock_community(community_id)

    removed, _ = (
        CommunityMember.objects
        .filter(community=community, user_id=user.id)
        .delete()
    )
    if not removed:
        return community

    User.objects.filter(id=user.id, community=community).update(community=None)

    recompute_delivery_time(community)
    save_community(community, fields=['delivery_time'])

    if user.community_id == community.id:
        user.community_id = None
    logger.info("User %s left community %s", user.id, community.id)

    return community


def get_community_members(*, community_id: UUID) -> QuerySet[CommunityMember]:
    """
    Get the roster of a community in join order.

    Args:
        community_id: UUID of the community

    Returns:
        QuerySet of CommunityMember instances

    Raises:
        CommunityNotFoundError: If community doesn't exist
    """
    if not Community.objects.filter(id=community_id).exists():
        raise CommunityNotFoundError(f"Community with ID {community_id} not found")

    return (
        CommunityMember.objects
        .filter(community_id=community_id)
        .select_related('user')
        .order_by('joined_at')
    )
