from rest_framework import viewsets, status, serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer

from config.patterns import UUID_PATTERN

from .serializers import (
    CommunitySerializer,
    CommunityCreateSerializer,
    CommunityMemberSerializer,
    PreferencesSerializer,
    UpdatePreferencesSerializer,
    VoteSerializer,
    VotesSerializer,
)

from apps.communities.services import (
    create_community,
    get_community_by_id,
    list_communities,
    update_preferences,
    join_community,
    leave_community,
    get_community_members,
    vote_for_delivery_time,
    get_votes,
    # Exceptions
    CommunityNotFoundError,
    AlreadyMemberError,
    AlreadyInAnotherCommunityError,
    NotMemberError,
    ConcurrentModificationError,
    InvalidDeliverySlotError,
    InvalidPreferencesError,
)


class ErrorResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    error = serializers.CharField()


def _not_found(e):
    return Response(
        {'message': 'Community not found', 'error': str(e)},
        status=status.HTTP_404_NOT_FOUND
    )


def _conflict(e):
    return Response(
        {'message': 'Community was modified concurrently, try again', 'error': str(e)},
        status=status.HTTP_409_CONFLICT
    )


class CommunityViewSet(viewsets.GenericViewSet):
    """
    ViewSet for communities, their rosters and delivery-time votes.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Get all communities
    create: Create a community (caller becomes the first member)
    retrieve: Get a specific community
    """

    serializer_class = CommunitySerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = UUID_PATTERN

    def get_queryset(self):
        return list_communities()

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'create':
            return CommunityCreateSerializer
        elif self.action == 'preferences':
            return UpdatePreferencesSerializer
        elif self.action == 'vote':
            return VoteSerializer
        return CommunitySerializer

    @extend_schema(responses={200: CommunitySerializer(many=True)})
    def list(self, request):
        """Get all communities."""
        serializer = CommunitySerializer(list_communities(), many=True)
        return Response(serializer.data)

    @extend_schema(
        request=CommunityCreateSerializer,
        responses={201: CommunitySerializer, 400: ErrorResponseSerializer},
    )
    def create(self, request):
        """Create a new community."""
        serializer = CommunityCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        longitude, latitude = serializer.validated_data['location']['coordinates']

        try:
            community = create_community(
                name=serializer.validated_data['name'],
                longitude=longitude,
                latitude=latitude,
                founder=request.user
            )
        except AlreadyInAnotherCommunityError as e:
            return Response(
                {'message': 'Error creating community', 'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        output_serializer = CommunitySerializer(get_community_by_id(community_id=community.id))
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: CommunitySerializer, 404: ErrorResponseSerializer})
    def retrieve(self, request, pk=None):
        """Get a single community."""
        try:
            community = get_community_by_id(community_id=pk)
        except CommunityNotFoundError as e:
            return _not_found(e)

        return Response(CommunitySerializer(community).data)

    @extend_schema(
        request=None,
        responses={
            200: inline_serializer(
                name='JoinCommunityResponse',
                fields={'message': serializers.CharField(), 'community': CommunitySerializer()},
            ),
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    @action(detail=True, methods=['post'])
    def join(self, request, pk=None):
        """Join a community."""
        try:
            community = join_community(community_id=pk, user=request.user)
        except CommunityNotFoundError as e:
            return _not_found(e)
        except (AlreadyMemberError, AlreadyInAnotherCommunityError) as e:
            return Response(
                {'message': 'Error joining community', 'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )
        except ConcurrentModificationError as e:
            return _conflict(e)

        return Response({
            'message': 'Successfully joined the community',
            'community': CommunitySerializer(community).data,
        })

    @extend_schema(
        request=None,
        responses={
            200: inline_serializer(
                name='LeaveCommunityResponse',
                fields={'message': serializers.CharField()},
            ),
            404: ErrorResponseSerializer,
        },
    )
    @action(detail=True, methods=['post'])
    def leave(self, request, pk=None):
        """Leave a community."""
        try:
            leave_community(community_id=pk, user=request.user)
        except CommunityNotFoundError as e:
            return _not_found(e)
        except ConcurrentModificationError as e:
            return _conflict(e)

        return Response({'message': 'Successfully left the community'})

    @extend_schema(responses={200: CommunityMemberSerializer(many=True), 404: ErrorResponseSerializer})
    @action(detail=True, methods=['get'])
    def members(self, request, pk=None):
        """Get all members of the community."""
        try:
            memberships = get_community_members(community_id=pk)
        except CommunityNotFoundError as e:
            return _not_found(e)

        return Response(CommunityMemberSerializer(memberships, many=True).data)

    @extend_schema(
        request=UpdatePreferencesSerializer,
        responses={
            200: inline_serializer(
                name='UpdatePreferencesResponse',
                fields={'message': serializers.CharField(), 'preferences': PreferencesSerializer()},
            ),
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    @action(detail=True, methods=['put'])
    def preferences(self, request, pk=None):
        """Override the community's delivery day and time."""
        serializer = UpdatePreferencesSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            community = update_preferences(
                community_id=pk,
                delivery_day=serializer.validated_data['deliveryDay'],
                delivery_time=serializer.validated_data['deliveryTime']
            )
        except CommunityNotFoundError as e:
            return _not_found(e)
        except InvalidPreferencesError as e:
            return Response(
                {'message': 'Invalid preferences', 'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )
        except ConcurrentModificationError as e:
            return _conflict(e)

        return Response({
            'message': 'Preferences updated successfully',
            'preferences': PreferencesSerializer(community).data,
        })

    @extend_schema(
        request=VoteSerializer,
        responses={
            200: VotesSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    @action(detail=True, methods=['post'])
    def vote(self, request, pk=None):
        """Vote for the community's delivery time."""
        serializer = VoteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            vote_for_delivery_time(
                community_id=pk,
                user=request.user,
                choice=serializer.validated_data['deliveryTime']
            )
        except CommunityNotFoundError as e:
            return _not_found(e)
        except NotMemberError as e:
            return Response(
                {'message': 'Only community members can vote', 'error': str(e)},
                status=status.HTTP_403_FORBIDDEN
            )
        except InvalidDeliverySlotError as e:
            return Response(
                {'message': 'Invalid delivery time', 'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )
        except ConcurrentModificationError as e:
            return _conflict(e)

        return Response(VotesSerializer(get_votes(community_id=pk)).data)

    @extend_schema(responses={200: VotesSerializer, 404: ErrorResponseSerializer})
    @action(detail=True, methods=['get'])
    def votes(self, request, pk=None):
        """Get the community's preferences and every member's vote."""
        try:
            community = get_votes(community_id=pk)
        except CommunityNotFoundError as e:
            return _not_found(e)

        return Response(VotesSerializer(community).data)
