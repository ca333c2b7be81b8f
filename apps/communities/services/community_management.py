"""
Community management service.

Handles community creation, lookup and the direct preferences override.
"""

import logging
import re
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Prefetch, QuerySet

from apps.accounts.models import User
from apps.communities.models import Community, CommunityMember, DeliveryDay, DeliverySlot

from .aggregate import lock_community, save_community, retry_on_stale
from .exceptions import (
    CommunityNotFoundError,
    AlreadyInAnotherCommunityError,
    InvalidPreferencesError,
)

logger = logging.getLogger(__name__)

CLOCK_TIME_RE = re.compile(r'^([01]\d|2[0-3]):([0-5]\d)$')


def is_valid_delivery_time(value: str) -> bool:
    """A preferences delivery time is either a delivery slot or a 24h HH:MM time."""
    return value in DeliverySlot.values or bool(CLOCK_TIME_RE.match(value))


def _with_members(queryset):
    return queryset.prefetch_related(
        Prefetch(
            'members',
            queryset=CommunityMember.objects.select_related('user')
        )
    )


@transaction.atomic
def create_community(
    *,
    name: str,
    longitude: float,
    latitude: float,
    founder: User
) -> Community:
    """
    Create a community with its founder as first member.

    The founder starts with a Morning vote, so the initial preferred
    delivery time is Morning.

    Args:
        name: Community name
        longitude: Location longitude
        latitude: Location latitude
        founder: User creating the community

    Returns:
        Created Community instance

    Raises:
        AlreadyInAnotherCommunityError: If founder already belongs to a community
    """
    community = Community.objects.create(
        name=name.strip(),
        longitude=longitude,
        latitude=latitude,
        delivery_time=DeliverySlot.MORNING.value
    )

    claimed = (
        User.objects
        .filter(id=founder.id, community__isnull=True)
        .update(community=community)
    )
    if not claimed:
        raise AlreadyInAnotherCommunityError(
            "User is already a member of another community"
        )

    CommunityMember.objects.create(
        community=community,
        user_id=founder.id,
        delivery_time_choice=DeliverySlot.MORNING
    )

    founder.community_id = community.id
    logger.info("User %s founded community %s", founder.id, community.id)

    return community


def get_community_by_id(*, community_id: UUID) -> Community:
    """
    Get a community by ID with its roster resolved.

    Raises:
        CommunityNotFoundError: If community doesn't exist
    """
    try:
        return _with_members(Community.objects).get(id=community_id)
    except Community.DoesNotExist:
        raise CommunityNotFoundError(f"Community with ID {community_id} not found")


def list_communities() -> QuerySet[Community]:
    """Get all communities with their rosters resolved."""
    return _with_members(Community.objects.all())


@retry_on_stale
def update_preferences(
    *,
    community_id: UUID,
    delivery_day: Optional[str],
    delivery_time: Optional[str]
) -> Community:
    """
    Overwrite the community's delivery day and time directly.

    This bypasses the vote tally: the stored time stays until the next
    join, leave or vote recomputes it. Whichever path writes last wins.

    Args:
        community_id: UUID of the community
        delivery_day: Weekday name
        delivery_time: Delivery slot or HH:MM time

    Returns:
        Updated Community instance

    Raises:
        InvalidPreferencesError: If day or time is invalid
        CommunityNotFoundError: If community doesn't exist
        ConcurrentModificationError: If the write kept losing the version race
    """
    if delivery_day is not None and delivery_day not in DeliveryDay.values:
        raise InvalidPreferencesError(f"Invalid delivery day '{delivery_day}'")
    if delivery_time is not None and not is_valid_delivery_time(delivery_time):
        raise InvalidPreferencesError(
            f"Invalid delivery time '{delivery_time}'. Use HH:MM or one of: {', '.join(DeliverySlot.values)}"
        )

    community = lock_community(community_id)

    community.delivery_day = delivery_day
    community.delivery_time = delivery_time
    save_community(community, fields=['delivery_day', 'delivery_time'])

    logger.info(
        "Preferences of community %s overridden to %s %s",
        community.id, delivery_day, delivery_time
    )
    return community
