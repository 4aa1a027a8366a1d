"""Error types for the App Store Connect client.

Two kinds of failure reach callers:
- ConfigurationError: bad or missing credentials, raised before any request
- ApiError: anything that went wrong talking to Apple, classified by status
"""

from __future__ import annotations

from typing import Any


class AppStoreConnectError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(AppStoreConnectError):
    """Raised when credentials or settings are missing or unusable."""


class ApiError(AppStoreConnectError):
    """Raised when an App Store Connect request fails.

    Attributes:
        status: HTTP status (or JSON:API error status) that triggered the error
        path: API path that was requested
        detail: Upstream detail message, when Apple supplied one
    """

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        path: str | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.path = path
        self.detail = detail


class UnauthorizedError(ApiError):
    """HTTP 401."""


class ForbiddenError(ApiError):
    """HTTP 403."""


class NotFoundError(ApiError):
    """HTTP 404."""


class RateLimitedError(ApiError):
    """HTTP 429."""


class TransportError(ApiError):
    """The request never produced an HTTP response (DNS, TLS, timeout...)."""


class UploadError(ApiError):
    """An asset upload part was rejected by the upload host."""


class SessionRequiredError(ForbiddenError):
    """The Resolution Center refused bearer auth and no web session is set."""


SESSION_REQUIRED_MESSAGE = (
    "Resolution Center requires session authentication. "
    "Run 'fastlane spaceauth -u YOUR_APPLE_ID' and set the FASTLANE_SESSION "
    "environment variable (or save it with 'asc session --save -')."
)


def first_error(body: Any) -> dict[str, Any] | None:
    """Return the first JSON:API error object in a response body, if any."""
    if not isinstance(body, dict):
        return None
    errors = body.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        return errors[0]
    return None


def error_detail(body: Any, status: int) -> str:
    """Extract a human-readable detail from a JSON:API error body.

    Args:
        body: Parsed response body
        status: HTTP status used when the body carries no error object

    Returns:
        The first error's ``detail``, else its ``title``, else ``HTTP <status>``
    """
    error = first_error(body)
    if error is None:
        return f"HTTP {status}"
    return error.get("detail") or error.get("title") or "Unknown error"


def classify_error(status: int, body: Any, path: str) -> ApiError:
    """Map an HTTP status and response body to a typed ApiError.

    Pure function: it builds the error but does not raise it, so repeated
    calls with the same input give an equal result.

    Args:
        status: HTTP status (or the status of the first JSON:API error)
        body: Parsed response body
        path: Requested API path, included in not-found messages

    Returns:
        ApiError subclass instance describing the failure
    """
    detail = error_detail(body, status)
    kwargs = {"status": status, "path": path, "detail": detail}

    if status == 401:
        return UnauthorizedError(
            "Unauthorized - check your API key credentials", **kwargs
        )
    if status == 403:
        return ForbiddenError(
            "Forbidden - your API key may not have the required permissions",
            **kwargs,
        )
    if status == 404:
        return NotFoundError(f"Not found - resource doesn't exist: {path}", **kwargs)
    if status == 429:
        return RateLimitedError("Rate limited - too many requests", **kwargs)
    return ApiError(f"API error ({status}): {detail}", **kwargs)


def error_status(body: Any, fallback: int) -> int:
    """Status of the first JSON:API error, or ``fallback`` when it has none."""
    error = first_error(body)
    if error is None:
        return fallback
    try:
        return int(error.get("status") or fallback)
    except (TypeError, ValueError):
        return fallback
