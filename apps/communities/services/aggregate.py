"""
Community aggregate persistence.

Every roster, vote and preference change is a read-modify-write of the
Community row. The row is read with select_for_update() and written back
with a version check, so a write computed from a stale read fails with
StaleCommunityError instead of silently overwriting a concurrent one.
"""

import functools
import logging
from uuid import UUID

from django.conf import settings
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from apps.communities.models import Community

from .exceptions import (
    CommunityNotFoundError,
    StaleCommunityError,
    ConcurrentModificationError,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 3


def lock_community(community_id: UUID) -> Community:
    """
    Load a community for writing.

    Must be called inside a transaction. The row lock is a no-op on
    backends without SELECT ... FOR UPDATE; the version check in
    save_community() still applies there.

    Raises:
        CommunityNotFoundError: If community doesn't exist
    """
    try:
        return (
            Community.objects
            .select_for_update()
            .get(id=community_id)
        )
    except Community.DoesNotExist:
        raise CommunityNotFoundError(f"Community with ID {community_id} not found")


def save_community(community: Community, fields=()) -> Community:
    """
    Write the given fields and bump the version.

    The UPDATE only matches the version the caller read, so it affects
    zero rows if someone else committed in between.

    Raises:
        StaleCommunityError: If the stored version moved on
    """
    values = {name: getattr(community, name) for name in fields}
    now = timezone.now()

    updated = (
        Community.objects
        .filter(id=community.id, version=community.version)
        .update(version=F('version') + 1, updated_at=now, **values)
    )
    if not updated:
        raise StaleCommunityError(
            f"Community {community.id} changed since version {community.version}"
        )

    community.version += 1
    community.updated_at = now
    return community


def retry_on_stale(func):
    """
    Run a community write in its own transaction, retrying stale attempts.

    Each attempt is rolled back completely before the next one starts, so
    roster rows and user back-references never outlive a failed version
    check.

    Raises:
        ConcurrentModificationError: If every attempt was stale
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        max_retries = getattr(settings, 'COMMUNITY_WRITE_MAX_RETRIES', DEFAULT_MAX_RETRIES)

        for attempt in range(1, max_retries + 1):
            try:
                with transaction.atomic():
                    return func(*args, **kwargs)
            except StaleCommunityError as e:
                logger.warning(
                    "%s attempt %d/%d lost version race: %s",
                    func.__name__, attempt, max_retries, e
                )

        raise ConcurrentModificationError(
            f"Community was modified concurrently; gave up after {max_retries} attempts"
        )

    return wrapper
