import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.communities.models import Community, CommunityMember, DeliverySlot
from apps.communities.services import create_community


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def founder(db):
    """Create and return the founding member of a community."""
    return User.objects.create_user(
        email='founder@example.com',
        password='TestPass123!',
        display_name='Founder',
    )


@pytest.fixture
def neighbour(db):
    """Create and return a user without a community."""
    return User.objects.create_user(
        email='neighbour@example.com',
        password='TestPass123!',
        display_name='Neighbour',
    )


@pytest.fixture
def outsider(db):
    """Create and return another user without a community."""
    return User.objects.create_user(
        email='outsider@example.com',
        password='TestPass123!',
        display_name='Outsider',
    )


@pytest.fixture
def community(founder):
    """Create a community founded by `founder`."""
    return create_community(
        name='Maple Street',
        longitude=14.42,
        latitude=50.08,
        founder=founder,
    )


@pytest.fixture
def other_community(outsider):
    """Create a second community founded by `outsider`."""
    return create_community(
        name='Oak Avenue',
        longitude=16.61,
        latitude=49.19,
        founder=outsider,
    )


@pytest.fixture
def make_member(db):
    """Factory adding a fresh user to a community roster with a given vote."""
    counter = {'n': 0}

    def _make(community, choice=DeliverySlot.MORNING):
        counter['n'] += 1
        user = User.objects.create_user(
            email=f"member{counter['n']}@example.com",
            password='TestPass123!',
            community=community,
        )
        CommunityMember.objects.create(
            community=community,
            user=user,
            delivery_time_choice=choice,
        )
        return user

    return _make


@pytest.fixture
def empty_community(db):
    """A community with no roster."""
    return Community.objects.create(
        name='Empty Court',
        longitude=0.0,
        latitude=0.0,
        delivery_time=DeliverySlot.MORNING,
    )


def _authenticate(client, user):
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def founder_client(founder):
    """Return an API client authenticated as the founder."""
    return _authenticate(APIClient(), founder)


@pytest.fixture
def neighbour_client(neighbour):
    """Return an API client authenticated as the neighbour."""
    return _authenticate(APIClient(), neighbour)


@pytest.fixture
def outsider_client(outsider):
    """Return an API client authenticated as the outsider."""
    return _authenticate(APIClient(), outsider)
