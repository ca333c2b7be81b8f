import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User
from apps.communities.models import Community


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register"""

    def test_register_success(self, api_client):
        """Successfully register a new user."""
        url = reverse('users:register')
        data = {
            'email': 'newuser@example.com',
            'password': 'SecurePass123!',
            'passwordConfirm': 'SecurePass123!',
            'displayName': 'New User',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['displayName'] == 'New User'
        assert response.data['user']['community'] is None
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_register_without_display_name(self, api_client):
        """Register without display name (optional field)."""
        url = reverse('users:register')
        data = {
            'email': 'minimal@example.com',
            'password': 'SecurePass123!',
            'passwordConfirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert User.objects.filter(email='minimal@example.com').exists()

    def test_register_duplicate_email(self, api_client, user):
        """Cannot register with existing email."""
        url = reverse('users:register')
        data = {
            'email': user.email,
            'password': 'SecurePass123!',
            'passwordConfirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Error registering user'

    def test_register_password_mismatch(self, api_client):
        """Registration fails when passwords don't match."""
        url = reverse('users:register')
        data = {
            'email': 'mismatch@example.com',
            'password': 'SecurePass123!',
            'passwordConfirm': 'DifferentPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'passwordConfirm' in response.data['error']

    def test_register_weak_password(self, api_client):
        """Registration fails with weak password."""
        url = reverse('users:register')
        data = {
            'email': 'weak@example.com',
            'password': '123',
            'passwordConfirm': '123',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data['error']

    def test_register_invalid_email(self, api_client):
        """Registration fails with invalid email format."""
        url = reverse('users:register')
        data = {
            'email': 'not-an-email',
            'password': 'SecurePass123!',
            'passwordConfirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Invalid input'


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login"""

    def test_login_success(self, api_client, user):
        """Successfully login with valid credentials."""
        url = reverse('users:login')
        data = {
            'email': user.email,
            'password': 'TestPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['email'] == user.email

    def test_login_reports_community(self, api_client, user):
        community = Community.objects.create(name='Maple Street', longitude=1.0, latitude=2.0)
        User.objects.filter(id=user.id).update(community=community)

        response = api_client.post(reverse('users:login'), {
            'email': user.email,
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['community'] == str(community.id)

    def test_login_wrong_password(self, api_client, user):
        """Login fails with wrong password."""
        url = reverse('users:login')
        data = {
            'email': user.email,
            'password': 'WrongPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['message'] == 'Invalid credentials'

    def test_login_inactive(self, api_client, user_inactive):
        """Deactivated accounts cannot log in."""
        url = reverse('users:login')
        data = {
            'email': user_inactive.email,
            'password': 'TestPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_missing_fields(self, api_client):
        url = reverse('users:login')
        response = api_client.post(url, {})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Current User Tests
# =============================================================================

@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/me"""

    def test_me(self, authenticated_client, user):
        url = reverse('users:current-user')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email
        assert response.data['community'] is None

    def test_me_unauthenticated(self, api_client):
        url = reverse('users:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestHealthCheck:
    """Tests for GET /api/health"""

    def test_health(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'status': 'ok'}
