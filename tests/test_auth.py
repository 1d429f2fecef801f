"""
Tests for login and the admin client.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from baser_client import create_admin_client
from baser_client.api import BaserAdminClient
from baser_client.auth import (
    BaserAuthClient,
    INVALID_CREDENTIALS_MESSAGE,
    NOT_AUTHENTICATED_MESSAGE,
)
from baser_client.exceptions import AuthenticationError

LOGIN_URL = "https://localhost/baser/api/admin/baser-core/users/login.json"
TOKENS = {"access_token": "access-123", "refresh_token": "refresh-456"}


@pytest.fixture
def auth(session):
    """Auth client whose session is mocked."""
    auth = BaserAuthClient(" admin@example.com ", " secret\n")
    auth._session = session
    return auth


class TestLogin:
    """Tests for BaserAuthClient.login."""

    def test_login_stores_access_token(self, auth, session, make_response):
        """Test a successful login keeps the access token."""
        session.post.return_value = make_response(TOKENS)

        auth.login("https://localhost")

        assert auth.token == "access-123"
        assert auth.is_authenticated is True

    def test_login_request(self, auth, session, make_response):
        """Test the login POST carries trimmed credentials."""
        session.post.return_value = make_response(TOKENS)

        auth.login("https://localhost")

        args, kwargs = session.post.call_args
        assert args[0] == LOGIN_URL
        assert kwargs["json"] == {"email": "admin@example.com", "password": "secret"}
        assert kwargs["verify"] is True

    def test_refresh_token_not_kept(self, auth, session, make_response):
        """Test the refresh token is discarded."""
        session.post.return_value = make_response(TOKENS)

        auth.login("https://localhost")

        assert "refresh-456" not in vars(auth).values()

    def test_invalid_credentials(self, auth, session, make_response):
        """Test a 401 raises AuthenticationError and is not retried."""
        session.post.return_value = make_response({"message": "Unauthorized"}, status_code=401)

        with pytest.raises(AuthenticationError) as exc_info:
            auth.login("https://localhost")

        assert str(exc_info.value) == INVALID_CREDENTIALS_MESSAGE
        assert "incorrect" in str(exc_info.value)
        assert session.post.call_count == 1
        assert auth.is_authenticated is False

    def test_other_http_error_propagates(self, auth, session, make_response):
        """Test non-401 failures surface as requests.HTTPError."""
        session.post.return_value = make_response(None, status_code=500)

        with pytest.raises(requests.HTTPError):
            auth.login("https://localhost")

    def test_connection_error_propagates(self, auth, session):
        """Test network errors are not translated."""
        session.post.side_effect = requests.ConnectionError("refused")

        with pytest.raises(requests.ConnectionError):
            auth.login("https://localhost")

    def test_response_without_token(self, auth, session, make_response):
        """Test a 200 without access_token logs in but leaves no token."""
        session.post.return_value = make_response({"refresh_token": "r"})

        auth.login("https://localhost")

        with pytest.raises(AuthenticationError) as exc_info:
            auth.token

        assert str(exc_info.value) == NOT_AUTHENTICATED_MESSAGE

    def test_empty_token_kept(self, auth, session, make_response):
        """Test an empty access_token is stored as given."""
        session.post.return_value = make_response({"access_token": "", "refresh_token": "r"})

        auth.login("https://localhost")

        assert auth.token == ""
        assert auth.is_authenticated is True

    def test_verify_flag(self, session, make_response):
        """Test TLS verification can be disabled."""
        auth = BaserAuthClient("a@example.com", "pw", verify_ssl=False)
        auth._session = session
        session.post.return_value = make_response(TOKENS)

        auth.login("https://localhost")

        assert session.post.call_args.kwargs["verify"] is False


class TestToken:
    """Tests for the token accessor."""

    def test_token_before_login(self):
        """Test reading the token before login fails."""
        auth = BaserAuthClient("admin@example.com", "secret")

        with pytest.raises(AuthenticationError) as exc_info:
            auth.token

        assert str(exc_info.value) == NOT_AUTHENTICATED_MESSAGE
        assert auth.is_authenticated is False


class TestAdminClient:
    """Tests for BaserAdminClient and create_admin_client."""

    def test_create_logs_in(self, make_response):
        """Test create performs login before returning."""
        with patch.object(BaserAuthClient, "login") as mock_login:
            client = BaserAdminClient.create("https://localhost", "admin@example.com", "secret")

        mock_login.assert_called_once_with("https://localhost")
        assert isinstance(client, BaserAdminClient)

    def test_token_delegates_to_auth(self):
        """Test the admin client exposes the auth token."""
        auth = MagicMock()
        auth.token = "access-123"

        client = BaserAdminClient("https://localhost", auth)

        assert client.token == "access-123"

    def test_create_admin_client_failure(self):
        """Test a rejected login surfaces from the factory."""
        with patch.object(
            BaserAuthClient, "login",
            side_effect=AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
        ):
            with pytest.raises(AuthenticationError):
                create_admin_client("https://localhost", "admin@example.com", "wrong")

    def test_read_endpoints_stay_anonymous(self, session, make_response):
        """Test inherited endpoints send no Authorization header."""
        auth = MagicMock()
        auth.token = "access-123"
        client = BaserAdminClient("https://localhost", auth)
        client._http._session = session
        session.request.return_value = make_response({"contents": []})

        client.get_contents()

        assert "Authorization" not in session.request.call_args.kwargs["headers"]

    def test_close_closes_auth(self):
        """Test closing the admin client closes the auth session too."""
        auth = MagicMock()
        client = BaserAdminClient("https://localhost", auth)

        with client:
            pass

        auth.close.assert_called_once()
