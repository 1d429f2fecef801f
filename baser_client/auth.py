"""
Authentication module for baser-client.

Logs in with email and password to obtain an access token for the
admin API.
"""

import logging
from typing import Optional

import requests

from . import __version__
from .exceptions import AuthenticationError
from .models import TokenPair

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Account name or password is incorrect."
NOT_AUTHENTICATED_MESSAGE = "Not authenticated. Please log in."


class BaserAuthClient:
    """
    Authentication client for obtaining an access token.

    The token is kept in memory for the lifetime of the instance. The
    refresh token returned by the server is not stored, and expired
    tokens are not renewed.
    """

    LOGIN_PATH = "/baser/api/admin/baser-core/users/login.json"

    def __init__(self, email: str, password: str, verify_ssl: bool = True):
        """
        Initialize authentication client.

        Args:
            email: Login email (surrounding whitespace is stripped)
            password: Login password (surrounding whitespace is stripped)
            verify_ssl: Verify TLS certificates
        """
        self._email = email.strip()
        self._password = password.strip()
        self._verify_ssl = verify_ssl
        self._access_token: Optional[str] = None
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """Get or create HTTP session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({
                "User-Agent": f"baser-client/{__version__}",
                "Accept": "application/json",
                "Content-Type": "application/json",
            })
        return self._session

    def login(self, domain: str) -> None:
        """
        Authenticate against ``domain`` and store the access token.

        Args:
            domain: Server address, e.g. ``https://example.com``

        Raises:
            AuthenticationError: If the server rejects the credentials (401)
            requests.HTTPError: On any other non-2xx response
            requests.RequestException: On connection failures
        """
        url = f"{domain.rstrip('/')}{self.LOGIN_PATH}"
        logger.debug(f"Logging in at {url}")

        response = self.session.post(
            url,
            json={
                "email": self._email,
                "password": self._password,
            },
            verify=self._verify_ssl,
        )

        if response.status_code == 401:
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        response.raise_for_status()

        data: TokenPair = response.json()
        self._access_token = data.get("access_token") if isinstance(data, dict) else None
        logger.info("Login successful")

    @property
    def is_authenticated(self) -> bool:
        """Check whether a token has been obtained."""
        return self._access_token is not None

    @property
    def token(self) -> str:
        """
        The access token from the last successful login.

        Raises:
            AuthenticationError: If ``login`` has not succeeded yet
        """
        if self._access_token is None:
            raise AuthenticationError(NOT_AUTHENTICATED_MESSAGE)
        return self._access_token

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "BaserAuthClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
