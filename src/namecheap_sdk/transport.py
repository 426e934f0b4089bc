"""
HTTP transport for the Namecheap API.

The client talks to the network only through a Transport: one synchronous
``send`` that returns the body, the HTTP status and a transport error text
instead of raising.
"""

from typing import Mapping, Optional, Protocol

import httpx

from . import __version__
from .enums import HttpMethod
from .exceptions import TransportError
from .models import TransportResult


DEFAULT_USER_AGENT = f"namecheap-sdk/{__version__}"


class Transport(Protocol):
    """Anything able to perform one HTTP exchange."""

    def send(
        self,
        method: HttpMethod,
        url: str,
        params: Mapping[str, str],
    ) -> TransportResult:
        ...


class HttpTransport:
    """
    httpx based transport with TLS verification.

    GET requests carry the parameters in the query string, POST requests
    as a form body. Failures are reported in ``TransportResult.transport_error``.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        verify: bool = True,
        user_agent: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            verify: Verify TLS certificates
            user_agent: User-Agent header value
            client: Preconfigured httpx client (its settings take precedence)
        """
        self._timeout = timeout
        self._client = client or httpx.Client(
            verify=verify,
            timeout=httpx.Timeout(timeout),
            headers={"User-Agent": user_agent or DEFAULT_USER_AGENT},
        )

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def send(
        self,
        method: HttpMethod,
        url: str,
        params: Mapping[str, str],
    ) -> TransportResult:
        """
        Perform one request.

        Args:
            method: GET or POST
            url: Endpoint URL
            params: Flat string parameter map

        Returns:
            TransportResult; ``http_status`` is 0 when no response arrived
        """
        try:
            response = self._perform(method, url, params)
        except TransportError as e:
            return TransportResult(body="", http_status=0, transport_error=e.message)

        return TransportResult(
            body=response.text,
            http_status=response.status_code,
            content=response.content,
        )

    def _perform(
        self,
        method: HttpMethod,
        url: str,
        params: Mapping[str, str],
    ) -> httpx.Response:
        try:
            if method is HttpMethod.POST:
                return self._client.post(url, data=dict(params))
            return self._client.get(url, params=dict(params))
        except httpx.TimeoutException as e:
            raise TransportError(
                code="timeout",
                message=f"Request timed out after {self._timeout}s",
                details={"url": url},
            ) from e
        except httpx.ConnectError as e:
            raise TransportError(
                code="network_error",
                message=f"Connection error: {e}",
                details={"url": url},
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(
                code="network_error",
                message=f"HTTP error: {e}",
                details={"url": url},
            ) from e

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()
