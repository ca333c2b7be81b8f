from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer
from .models import Community, CommunityMember, DeliveryDay, DeliverySlot
from .services import is_valid_delivery_time


class PointSerializer(serializers.Serializer):
    """GeoJSON-style point: coordinates are [longitude, latitude]."""

    type = serializers.ChoiceField(choices=['Point'], default='Point')
    coordinates = serializers.ListField(
        child=serializers.FloatField(),
        min_length=2,
        max_length=2,
        error_messages={
            'min_length': 'Coordinates must be [longitude, latitude]',
            'max_length': 'Coordinates must be [longitude, latitude]',
        }
    )

    def validate_coordinates(self, value):
        longitude, latitude = value
        if not -180 <= longitude <= 180:
            raise serializers.ValidationError('Longitude must be between -180 and 180')
        if not -90 <= latitude <= 90:
            raise serializers.ValidationError('Latitude must be between -90 and 90')
        return value


class PreferencesSerializer(serializers.Serializer):
    """Community delivery preferences."""

    deliveryDay = serializers.CharField(source='delivery_day', allow_null=True, read_only=True)
    deliveryTime = serializers.CharField(source='delivery_time', allow_null=True, read_only=True)


class CommunityMemberSerializer(serializers.ModelSerializer):
    """Roster entry with the member's identity resolved."""

    user = UserMinimalSerializer(read_only=True)
    deliveryTime = serializers.CharField(source='delivery_time_choice', read_only=True)
    joinedAt = serializers.DateTimeField(source='joined_at', read_only=True)

    class Meta:
        model = CommunityMember
        fields = ['user', 'deliveryTime', 'joinedAt']
        read_only_fields = fields


class CommunitySerializer(serializers.ModelSerializer):
    """Main serializer for communities."""

    location = serializers.SerializerMethodField()
    members = CommunityMemberSerializer(many=True, read_only=True)
    preferences = PreferencesSerializer(source='*', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Community
        fields = [
            'id',
            'name',
            'location',
            'members',
            'preferences',
            'version',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields

    def get_location(self, obj):
        return {'type': 'Point', 'coordinates': obj.coordinates}


class CommunityCreateSerializer(serializers.Serializer):
    """Input for creating a community."""

    name = serializers.CharField(max_length=200)
    location = PointSerializer()


class VotesSerializer(serializers.Serializer):
    """Community preferences together with every member's vote."""

    preferences = PreferencesSerializer(source='*', read_only=True)
    members = CommunityMemberSerializer(many=True, read_only=True)


class UpdatePreferencesSerializer(serializers.Serializer):
    """Input for the direct preferences override."""

    deliveryDay = serializers.ChoiceField(choices=DeliveryDay.choices)
    deliveryTime = serializers.CharField(max_length=16)

    def validate_deliveryTime(self, value):
        if not is_valid_delivery_time(value):
            raise serializers.ValidationError(
                f"Time must be in HH:MM format or one of: {', '.join(DeliverySlot.values)}"
            )
        return value


class VoteSerializer(serializers.Serializer):
    """Input for a delivery-time vote."""

    deliveryTime = serializers.ChoiceField(choices=DeliverySlot.choices)
