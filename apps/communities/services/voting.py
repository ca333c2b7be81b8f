"""
Delivery-time voting service.

Members each hold one delivery-slot vote; the community's preferred
delivery time is the plurality winner over all current votes.
"""

import logging
from collections import Counter
from typing import Iterable, Optional
from uuid import UUID

from apps.accounts.models import User
from apps.communities.models import Community, CommunityMember, DeliverySlot

from .aggregate import lock_community, save_community, retry_on_stale
from .community_management import get_community_by_id
from .exceptions import (
    NotMemberError,
    InvalidDeliverySlotError,
)

logger = logging.getLogger(__name__)


def tally_delivery_time(choices: Iterable[str]) -> str:
    """
    Pick the plurality delivery slot.

    Slots are checked in the order Morning, Afternoon, Evening and a later
    slot only takes over with a strictly greater count, so the earlier slot
    wins every tie it is part of. Evening is compared against whichever of
    Morning/Afternoon is leading at that point.

    An empty roster tallies to Morning.
    """
    counts = Counter(choices)

    winner = DeliverySlot.MORNING.value
    best = counts[DeliverySlot.MORNING.value]

    if counts[DeliverySlot.AFTERNOON.value] > best:
        winner = DeliverySlot.AFTERNOON.value
        best = counts[DeliverySlot.AFTERNOON.value]

    if counts[DeliverySlot.EVENING.value] > best:
        winner = DeliverySlot.EVENING.value

    return winner


def recompute_delivery_time(community: Community) -> Optional[str]:
    """
    Re-derive community.delivery_time from the current roster.

    Leaves the stored value alone when the roster is empty. The caller
    persists the result with save_community().
    """
    choices = list(
        CommunityMember.objects
        .filter(community=community)
        .values_list('delivery_time_choice', flat=True)
    )
    if choices:
        community.delivery_time = tally_delivery_time(choices)
    return community.delivery_time


@retry_on_stale
def vote_for_delivery_time(
    *,
    community_id: UUID,
    user: User,
    choice: str
) -> Community:
    """
    Record a member's delivery-slot vote and recompute the community preference.

    Args:
        community_id: UUID of the community
        user: Voting user (must be on the roster)
        choice: One of Morning, Afternoon, Evening

    Returns:
        Updated Community instance

    Raises:
        InvalidDeliverySlotError: If choice is not a delivery slot
        CommunityNotFoundError: If community doesn't exist
        NotMemberError: If user is not a member
        ConcurrentModificationError: If the write kept losing the version race
    """
    if choice not in DeliverySlot.values:
        raise InvalidDeliverySlotError(
            f"Invalid delivery time '{choice}'. Choose one of: {', '.join(DeliverySlot.values)}"
        )

    community = lock_community(community_id)

    try:
        membership = (
            CommunityMember.objects
            .select_for_update()
            .get(community=community, user_id=user.id)
        )
    except CommunityMember.DoesNotExist:
        raise NotMemberError(f"User is not a member of {community.name}")

    membership.delivery_time_choice = choice
    membership.save(update_fields=['delivery_time_choice'])

    recompute_delivery_time(community)
    save_community(community, fields=['delivery_time'])

    logger.info(
        "User %s voted %s in community %s; preference is now %s",
        user.id, choice, community.id, community.delivery_time
    )
    return community


def get_votes(*, community_id: UUID) -> Community:
    """
    Get a community with its preferences and resolved roster votes.

    Raises:
        CommunityNotFoundError: If community doesn't exist
    """
    return get_community_by_id(community_id=community_id)
