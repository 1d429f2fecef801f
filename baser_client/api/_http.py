"""
Base HTTP client for the baserCMS Web API.

Handles session management, the optional Authorization header and
envelope unwrapping. Transport errors are propagated unchanged.
"""

import logging
from typing import Optional, Dict, Any

import requests

from .. import __version__
from ..exceptions import ResponseFormatError

logger = logging.getLogger(__name__)


def compact_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """Drop parameters whose value is None."""
    return {k: v for k, v in params.items() if v is not None}


class HTTPClient:
    """
    Base HTTP client for a baserCMS server.

    Handles:
    - Session management
    - Authorization header (only when a token is given)
    - Envelope field extraction

    No retries and no timeout are configured; the transport defaults apply.
    """

    def __init__(self, domain: str, verify_ssl: bool = True):
        """
        Initialize the HTTP client.

        Args:
            domain: Server address, e.g. ``https://example.com``
            verify_ssl: Verify TLS certificates (disable for self-signed dev servers)
        """
        self._domain = domain.rstrip("/")
        self._verify_ssl = verify_ssl
        self._session: Optional[requests.Session] = None

    @property
    def domain(self) -> str:
        """Server address requests are sent to."""
        return self._domain

    @property
    def verify_ssl(self) -> bool:
        """Whether TLS certificates are verified."""
        return self._verify_ssl

    @property
    def session(self) -> requests.Session:
        """Get or create the HTTP session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({
                "User-Agent": f"baser-client/{__version__}",
                "Accept": "application/json",
            })

        return self._session

    def _get_headers(self, token: Optional[str] = None) -> Dict[str, str]:
        """Get request headers; the token is sent verbatim."""
        headers = {}

        if token:
            headers["Authorization"] = token

        return headers

    def request(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        method: str = "GET",
        token: Optional[str] = None,
    ) -> Any:
        """
        Make an API request.

        Args:
            path: Endpoint path starting with ``/``, appended to the domain
            params: Query parameters for GET, JSON body for other methods
            method: HTTP method
            token: Access token for the Authorization header

        Returns:
            Decoded JSON body

        Raises:
            requests.HTTPError: On a non-2xx response
            requests.RequestException: On connection failures
        """
        method = method.upper()
        url = f"{self._domain}{path}"

        if params:
            params = compact_params(params)

        query = params if method == "GET" else None
        body = params if method != "GET" else None

        logger.debug(f"Request: {method} {url}")

        response = self.session.request(
            method=method,
            url=url,
            params=query,
            json=body,
            headers=self._get_headers(token),
            verify=self._verify_ssl,
        )

        logger.debug(f"Response: {response.status_code}")

        response.raise_for_status()
        return response.json()

    def get_field(
        self,
        field: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        GET an endpoint and return the named field of its envelope.

        Args:
            field: Envelope key, e.g. ``contents``
            path: Endpoint path
            params: Filter parameters

        Raises:
            ResponseFormatError: If the response has no such field
        """
        payload = self.request(path, params)

        if not isinstance(payload, dict) or field not in payload:
            raise ResponseFormatError(
                f"Response from {path} has no '{field}' field",
                field=field,
                details=str(payload)[:200],
            )

        return payload[field]

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
