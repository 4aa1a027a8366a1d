"""Client and command-line tool for Apple's App Store Connect API."""

from __future__ import annotations

from app_store_connect.config import Config
from app_store_connect.errors import (
    ApiError,
    AppStoreConnectError,
    ConfigurationError,
    ForbiddenError,
    NotFoundError,
    RateLimitedError,
    SessionRequiredError,
    TransportError,
    UnauthorizedError,
    UploadError,
)
from app_store_connect.resources import AppStoreConnect

__all__ = [
    "ApiError",
    "AppStoreConnect",
    "AppStoreConnectError",
    "Config",
    "ConfigurationError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitedError",
    "SessionRequiredError",
    "TransportError",
    "UnauthorizedError",
    "UploadError",
]
__version__ = "0.1.0"
