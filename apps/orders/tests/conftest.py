import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.articles.models import Article, Category, Unit
from apps.communities.models import Community, DeliverySlot


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return the ordering user."""
    return User.objects.create_user(
        email='buyer@example.com',
        password='TestPass123!',
        display_name='Buyer',
    )


@pytest.fixture
def other_user(db):
    """Create and return another user."""
    return User.objects.create_user(
        email='otherbuyer@example.com',
        password='TestPass123!',
        display_name='Other Buyer',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def other_client(other_user):
    """Return an API client authenticated as `other_user`."""
    client = APIClient()
    refresh = RefreshToken.for_user(other_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def community(db):
    return Community.objects.create(
        name='Maple Street',
        longitude=14.42,
        latitude=50.08,
        delivery_time=DeliverySlot.MORNING,
    )


@pytest.fixture
def apples(db):
    """Priced at 2.50."""
    return Article.objects.create(
        name='Apples',
        price=Decimal('2.50'),
        unit=Unit.KILOGRAM,
        category=Category.FRUITS,
    )


@pytest.fixture
def milk(db):
    """Priced at 1.00."""
    return Article.objects.create(
        name='Milk',
        price=Decimal('1.00'),
        unit=Unit.LITRE,
        category=Category.DAIRY,
    )
