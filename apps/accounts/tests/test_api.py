import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_success(self, api_client):
        """Successfully register a new user."""
        url = reverse('accounts:register')
        data = {
            'email': 'newuser@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
            'display_name': 'New User',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['is_premium'] is False
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_register_without_display_name(self, api_client):
        """Register without display name (optional field)."""
        url = reverse('accounts:register')
        data = {
            'email': 'minimal@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED

    def test_register_duplicate_email(self, api_client, user):
        """Cannot register with existing email."""
        url = reverse('accounts:register')
        data = {
            'email': user.email,
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert User.objects.filter(email=user.email).count() == 1

    def test_register_password_mismatch(self, api_client):
        """Registration fails when passwords don't match."""
        url = reverse('accounts:register')
        data = {
            'email': 'mismatch@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'DifferentPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password_confirm' in response.data

    def test_register_weak_password(self, api_client):
        url = reverse('accounts:register')
        data = {
            'email': 'weak@example.com',
            'password': '123',
            'password_confirm': '123',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not User.objects.filter(email='weak@example.com').exists()


# =============================================================================
# Login / Logout Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, user):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': user.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['email'] == user.email
        user.refresh_from_db()
        assert user.last_login is not None

    def test_login_starts_session(self, api_client, user):
        url = reverse('accounts:login')
        api_client.post(url, {'email': user.email, 'password': 'TestPass123!'})

        response = api_client.get(reverse('accounts:current-user'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email

    def test_login_case_insensitive_email(self, api_client, user):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': 'TestUser@Example.com', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, api_client, user):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': user.email, 'password': 'WrongPass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_unknown_email(self, api_client, db):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': 'nobody@example.com', 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_account(self, api_client, user_inactive):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': user_inactive.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_login_missing_fields(self, api_client, db):
        url = reverse('accounts:login')
        response = api_client.post(url, {'email': 'not-an-email'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestLogout:

    def test_logout_ends_session(self, api_client, user):
        api_client.post(reverse('accounts:login'), {'email': user.email, 'password': 'TestPass123!'})

        response = api_client.post(reverse('accounts:logout'))
        assert response.status_code == status.HTTP_200_OK

        response = api_client.get(reverse('accounts:current-user'))
        assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)

    def test_logout_requires_authentication(self, api_client, db):
        response = api_client.post(reverse('accounts:logout'))

        assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)


# =============================================================================
# Current User Tests
# =============================================================================

@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/user/"""

    def test_get_current_user(self, authenticated_client, user):
        response = authenticated_client.get(reverse('accounts:current-user'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email
        assert response.data['display_name'] == 'Test User'
        assert response.data['is_premium'] is False
        assert response.data['is_staff'] is False

    def test_premium_member_flagged(self, api_client, premium_user):
        api_client.force_authenticate(user=premium_user)

        response = api_client.get(reverse('accounts:current-user'))

        assert response.data['is_premium'] is True

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('accounts:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_invalid_token_is_unauthorized(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer not-a-valid-token')

        response = api_client.get(reverse('accounts:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
