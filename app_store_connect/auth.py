"""JWT authentication for App Store Connect API.

This module handles JWT token generation using ES256 algorithm
for authenticating with the App Store Connect API.
"""

from __future__ import annotations

import logging
import sys
import time
from typing import TYPE_CHECKING

import jwt
from cryptography.exceptions import UnsupportedAlgorithm
from requests.auth import AuthBase

from app_store_connect.errors import ConfigurationError

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

if TYPE_CHECKING:
    from requests import PreparedRequest

    from app_store_connect.config import Config

logger = logging.getLogger(__name__)

AUDIENCE = "appstoreconnect-v1"
TOKEN_LIFETIME = 20 * 60
REFRESH_MARGIN = 60


class JWTAuthenticator(AuthBase):
    """Authenticator for App Store Connect API using JWT tokens.

    Generates JWT tokens signed with ES256 algorithm for API authentication.
    Tokens are valid for 20 minutes and reused until a minute before expiry.
    """

    def __init__(
        self,
        issuer_id: str,
        key_id: str,
        private_key: str,
    ) -> None:
        """Initialize JWT authenticator.

        Args:
            issuer_id: App Store Connect API Issuer ID
            key_id: App Store Connect API Key ID
            private_key: Private key in PEM format for signing
        """
        self.issuer_id = issuer_id
        self.key_id = key_id
        self.private_key = private_key
        self._token: str | None = None
        self._token_expires_at: float = 0

    @classmethod
    def from_config(cls, config: Config) -> JWTAuthenticator:
        """Build an authenticator from validated configuration.

        Reads the ``.p8`` key file and signs a first token so that a bad key
        surfaces here rather than on the first request.

        Raises:
            ConfigurationError: If the key file cannot be read or is not an
                EC private key
        """
        config.validate()
        try:
            private_key = config.key_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"Private key file not readable: {config.private_key_path} ({e})"
            ) from e

        authenticator = cls(
            issuer_id=str(config.issuer_id),
            key_id=str(config.key_id),
            private_key=private_key,
        )
        authenticator.get_token()
        return authenticator

    def get_token(self) -> str:
        """Get valid JWT token, generating new one if expired.

        Returns:
            Valid JWT token string
        """
        if self._token and time.time() < (self._token_expires_at - REFRESH_MARGIN):
            return self._token

        self._token = self._generate_token()
        return self._token

    def _generate_token(self) -> str:
        """Generate new JWT token.

        Returns:
            Signed JWT token

        Raises:
            ConfigurationError: If the private key cannot sign ES256
        """
        now = int(time.time())

        payload = {
            "iss": self.issuer_id,
            "iat": now,
            "exp": now + TOKEN_LIFETIME,
            "aud": AUDIENCE,
        }

        headers = {
            "kid": self.key_id,
            "alg": "ES256",
            "typ": "JWT",
        }

        try:
            token = jwt.encode(
                payload,
                self.private_key,
                algorithm="ES256",
                headers=headers,
            )
        except (ValueError, TypeError, UnsupportedAlgorithm, jwt.PyJWTError) as e:
            raise ConfigurationError(f"Invalid private key for ES256 signing: {e}") from e

        self._token_expires_at = float(now + TOKEN_LIFETIME)

        logger.debug("Generated new JWT token (expires in 20 minutes)")

        return token

    @override
    def __call__(self, request: PreparedRequest) -> PreparedRequest:
        """Add JWT token to request headers.

        Args:
            request: HTTP request object

        Returns:
            Modified request with Authorization header
        """
        request.headers["Authorization"] = f"Bearer {self.get_token()}"
        return request
