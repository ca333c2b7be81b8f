import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.articles.models import Article, Category, Unit


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='shopper@example.com',
        password='TestPass123!',
        display_name='Shopper',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def apples(db):
    return Article.objects.create(
        name='Apples',
        description='Crisp red apples',
        price=Decimal('2.50'),
        unit=Unit.KILOGRAM,
        category=Category.FRUITS,
    )


@pytest.fixture
def milk(db):
    return Article.objects.create(
        name='Milk',
        price=Decimal('1.00'),
        unit=Unit.LITRE,
        category=Category.DAIRY,
    )


@pytest.fixture
def sold_out_bread(db):
    return Article.objects.create(
        name='Sourdough',
        price=Decimal('4.20'),
        category=Category.BAKERY,
        is_available=False,
    )
