from django.db import models
import uuid


class DeliveryDay(models.TextChoices):
    MONDAY = 'Monday', 'Monday'
    TUESDAY = 'Tuesday', 'Tuesday'
    WEDNESDAY = 'Wednesday', 'Wednesday'
    THURSDAY = 'Thursday', 'Thursday'
    FRIDAY = 'Friday', 'Friday'
    SATURDAY = 'Saturday', 'Saturday'
    SUNDAY = 'Sunday', 'Sunday'


class DeliverySlot(models.TextChoices):
    # Declaration order is the tie-break order of the plurality vote
    MORNING = 'Morning', 'Morning'
    AFTERNOON = 'Afternoon', 'Afternoon'
    EVENING = 'Evening', 'Evening'


class Community(models.Model):
    """
    Geographically-anchored community; aggregate root for roster and votes.

    `version` is bumped by every roster, vote or preference write so
    concurrent read-modify-write cycles can detect each other.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)

    # Point location, [longitude, latitude] on the wire
    longitude = models.FloatField()
    latitude = models.FloatField()

    # Preferences
    delivery_day = models.CharField(max_length=10, choices=DeliveryDay.choices, null=True, blank=True)
    delivery_time = models.CharField(max_length=16, null=True, blank=True)

    version = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'communities'
        indexes = [
            models.Index(fields=['created_at'], name='communities_created_idx'),
            models.Index(fields=['longitude', 'latitude'], name='communities_location_idx'),
        ]
        ordering = ['-created_at']
        verbose_name_plural = 'communities'

    def __str__(self):
        return self.name

    @property
    def coordinates(self):
        return [self.longitude, self.latitude]

    def has_member(self, user):
        return self.members.filter(user=user).exists()


class CommunityMember(models.Model):
    """Roster entry: a member and their individual delivery-time vote."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    community = models.ForeignKey(Community, on_delete=models.CASCADE, related_name='members')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='community_memberships')
    delivery_time_choice = models.CharField(
        max_length=10,
        choices=DeliverySlot.choices,
        default=DeliverySlot.MORNING
    )
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'community_members'
        unique_together = [['community', 'user']]
        indexes = [
            models.Index(fields=['community', 'joined_at'], name='members_community_joined_idx'),
        ]
        ordering = ['joined_at']

    def __str__(self):
        return f"{self.user.get_display_name()} in {self.community.name} ({self.delivery_time_choice})"
