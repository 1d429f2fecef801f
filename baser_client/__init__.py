"""
baser-client - Python SDK for the baserCMS Web API.

Usage:
    from baser_client import create_client, create_admin_client

    client = create_client("https://example.com")
    contents = client.get_contents(status="publish")

    admin = create_admin_client("https://example.com", "admin@example.com", "secret")
    token = admin.token
"""

__version__ = "0.1.0"
__prog_name__ = "baser"

from .api import (  # noqa: E402
    BaserClient,
    BaserAdminClient,
    create_client,
    create_admin_client,
)
from .auth import BaserAuthClient  # noqa: E402
from .exceptions import (  # noqa: E402
    BaserError,
    AuthenticationError,
    ResponseFormatError,
    ConfigurationError,
)

__all__ = [
    "__version__",
    "BaserClient",
    "BaserAdminClient",
    "BaserAuthClient",
    "create_client",
    "create_admin_client",
    "BaserError",
    "AuthenticationError",
    "ResponseFormatError",
    "ConfigurationError",
]
