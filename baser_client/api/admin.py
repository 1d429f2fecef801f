"""
Admin client - the read endpoints plus an authenticated token.
"""

import logging

from ..auth import BaserAuthClient
from .client import BaserClient

logger = logging.getLogger(__name__)


class BaserAdminClient(BaserClient):
    """
    Client that has logged in to the admin API.

    The read endpoints stay anonymous. Admin endpoints are not wrapped;
    send them through ``request`` with ``token=client.token``.
    """

    def __init__(self, domain: str, auth: BaserAuthClient, verify_ssl: bool = True):
        """
        Initialize the admin client.

        Use ``create`` to log in and build the client in one step.

        Args:
            domain: Server address
            auth: Auth client that has already logged in
            verify_ssl: Verify TLS certificates
        """
        super().__init__(domain, verify_ssl)
        self._auth = auth

    @classmethod
    def create(
        cls,
        domain: str,
        email: str,
        password: str,
        verify_ssl: bool = True,
    ) -> "BaserAdminClient":
        """
        Log in and return a ready client.

        Raises:
            AuthenticationError: If the credentials are rejected
            requests.RequestException: On any other login failure
        """
        auth = BaserAuthClient(email, password, verify_ssl)
        try:
            auth.login(domain)
        except Exception:
            auth.close()
            raise

        logger.debug(f"Admin client ready for {domain}")
        return cls(domain, auth, verify_ssl)

    @property
    def token(self) -> str:
        """The access token obtained at login."""
        return self._auth.token

    def close(self) -> None:
        """Close the HTTP sessions."""
        super().close()
        self._auth.close()

    def __enter__(self) -> "BaserAdminClient":
        return self


def create_admin_client(
    domain: str,
    email: str,
    password: str,
    verify_ssl: bool = True,
) -> BaserAdminClient:
    """
    Log in and create an admin client.

    Args:
        domain: Server address
        email: Login email
        password: Login password
        verify_ssl: Verify TLS certificates

    Returns:
        BaserAdminClient instance
    """
    return BaserAdminClient.create(domain, email, password, verify_ssl)
