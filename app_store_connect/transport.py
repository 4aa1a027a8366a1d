"""HTTP transport for App Store Connect requests.

Wraps a ``requests.Session`` so that TLS verification, timeouts and body
parsing are configured in one place. The transport knows nothing about
JSON:API or authentication policy; it sends what it is given and hands back
the status code and parsed body.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import requests

from app_store_connect.errors import TransportError

if TYPE_CHECKING:
    from requests.auth import AuthBase

    from app_store_connect.config import Config

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = frozenset({"GET", "POST", "PATCH", "PUT", "DELETE"})


@dataclass(frozen=True)
class HttpResponse:
    """Status code and parsed body of a completed request."""

    status: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def parse_body(text: str | None) -> Any:
    """Parse a response body.

    Empty bodies become ``{}`` and bodies that are not JSON are wrapped as
    ``{"raw": text}`` so callers always get a mapping back for those cases.
    """
    if not text or not text.strip():
        return {}
    try:
        return json.loads(text)
    except ValueError:
        return {"raw": text}


class HttpTransport:
    """Synchronous HTTPS transport.

    TLS verification is explicit: ``verify_ssl=False`` disables certificate
    checks entirely, ``ca_bundle`` points at a custom CA file.
    """

    def __init__(
        self,
        verify_ssl: bool = True,
        ca_bundle: str | None = None,
        timeout: float = 60.0,
        session: requests.Session | None = None,
    ) -> None:
        self.session = session or requests.Session()
        self.session.verify = (ca_bundle or True) if verify_ssl else False
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: Config) -> HttpTransport:
        """Build a transport from the TLS and timeout settings of a config.

        Args:
            config: Client configuration

        Returns:
            A transport with its own requests session
        """
        return cls(
            verify_ssl=config.verify_ssl,
            ca_bundle=config.ca_bundle,
            timeout=config.request_timeout,
        )

    def execute(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        data: bytes | None = None,
        auth: AuthBase | None = None,
    ) -> HttpResponse:
        """Send one request.

        Args:
            method: HTTP verb (GET, POST, PATCH, PUT or DELETE)
            url: Full URL for the request
            headers: Extra request headers
            params: Optional query parameters
            json_body: Body serialized as JSON
            data: Raw body bytes (asset uploads)
            auth: requests auth hook, e.g. the JWT authenticator

        Returns:
            Status code and parsed body

        Raises:
            ValueError: If the method is not supported
            TransportError: If no HTTP response was received
        """
        verb = method.upper()
        if verb not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        logger.debug(f"{verb} {url}")

        try:
            response = self.session.request(
                verb,
                url,
                headers=headers,
                params=params,
                json=json_body,
                data=data,
                auth=auth,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}") from e

        return HttpResponse(status=response.status_code, body=parse_body(response.text))

    def close(self) -> None:
        """Close the underlying requests session."""
        self.session.close()
