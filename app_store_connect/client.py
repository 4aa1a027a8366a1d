"""REST client handling for App Store Connect API.

This module contains the base client with the request pipeline every
resource method goes through: authentication, HTTP execution, response
parsing and error classification. It also holds the two special paths,
Resolution Center requests over the IRIS API and multipart asset uploads.
"""

from __future__ import annotations

import base64
import hashlib
import logging
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any

from app_store_connect.auth import JWTAuthenticator
from app_store_connect.config import Config
from app_store_connect.errors import (
    SESSION_REQUIRED_MESSAGE,
    SessionRequiredError,
    TransportError,
    UploadError,
    classify_error,
    error_status,
    first_error,
)
from app_store_connect.jsonapi import Document, Resource
from app_store_connect.session import WebSession
from app_store_connect.transport import HttpResponse, HttpTransport

if TYPE_CHECKING:
    import os

logger = logging.getLogger(__name__)

IRIS_URL = "https://appstoreconnect.apple.com/iris/v1"

RETRIABLE_UPLOAD_STATUSES = frozenset({408, 429})


class AppStoreConnectClient:
    """Base client for App Store Connect API.

    Construction validates the configuration and signs a first token, so a
    missing credential or broken key fails here, before any request is made.

    Args:
        config: Credentials and settings; read from the environment if omitted
        transport: HTTP transport, built from ``config`` if omitted
        session: Web session for Resolution Center requests, loaded from
            ``FASTLANE_SESSION`` or the session file if omitted
        authenticator: JWT authenticator, built from ``config`` if omitted
    """

    iris_url = IRIS_URL

    def __init__(
        self,
        config: Config | None = None,
        *,
        transport: HttpTransport | None = None,
        session: WebSession | None = None,
        authenticator: JWTAuthenticator | None = None,
    ) -> None:
        self.config = config or Config.from_env()
        self.authenticator = authenticator or JWTAuthenticator.from_config(self.config)
        self.transport = transport or HttpTransport.from_config(self.config)
        self.session = session if session is not None else WebSession()

    def __enter__(self) -> AppStoreConnectClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.transport.close()

    @property
    def url_base(self) -> str:
        return self.config.api_url.rstrip("/")

    @property
    def app_id(self) -> str | None:
        return self.config.app_id

    @property
    def session_available(self) -> bool:
        """Whether Resolution Center requests can use web session cookies."""
        return self.session.valid

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Make an authenticated request to the public API.

        Args:
            method: HTTP verb
            path: Path below the API base URL, or an absolute URL (as found
                in pagination links)
            params: Optional query parameters
            body: Optional JSON body

        Returns:
            Parsed JSON:API response body

        Raises:
            ApiError: If the response status is an error or the body carries
                a JSON:API ``errors`` array
        """
        url = path if path.startswith(("http://", "https://")) else f"{self.url_base}{path}"

        response = self.transport.execute(
            method,
            url,
            headers={"Content-Type": "application/json"},
            params=params or None,
            json_body=body,
            auth=self.authenticator,
        )

        return self._handle_response(response, path)

    def get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self.request("GET", path, params=params)

    def post(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        return self.request("POST", path, body=body)

    def patch(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        return self.request("PATCH", path, body=body)

    def delete(self, path: str, body: dict[str, Any] | None = None) -> dict[str, Any]:
        return self.request("DELETE", path, body=body)

    def get_document(self, path: str, params: dict[str, Any] | None = None) -> Document:
        return Document.parse(self.get(path, params=params))

    def get_all(self, path: str, params: dict[str, Any] | None = None) -> Document:
        """GET every page of a collection by following ``links.next``.

        Query parameters are only sent with the first request; next links
        already carry them.

        Returns:
            Document holding the resources and side-loads of all pages
        """
        data: list[Resource] = []
        included: list[Resource] = []
        meta: dict[str, Any] = {}
        next_path: str | None = path

        while next_path:
            page = self.get_document(next_path, params=params)
            params = None
            data.extend(page.resources())
            included.extend(page.included)
            meta = page.meta
            next_path = page.next_url

        return Document(data=data, included=included, meta=meta)

    def iris_get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GET from Apple's internal IRIS API (Resolution Center).

        Uses web session cookies when available and falls back to the API
        key token otherwise, which Apple usually refuses.

        Raises:
            SessionRequiredError: If the request is refused and no web
                session is configured
            ApiError: For any other failure
        """
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        auth = None
        if self.session.valid:
            headers["Cookie"] = self.session.cookie_header
        else:
            auth = self.authenticator

        response = self.transport.execute(
            "GET",
            f"{self.iris_url}{path}",
            headers=headers,
            params=params or None,
            auth=auth,
        )

        if response.status in (401, 403) and not self.session.valid:
            raise SessionRequiredError(
                SESSION_REQUIRED_MESSAGE,
                status=response.status,
                path=path,
            )

        return self._handle_response(response, path)

    def upload_asset(
        self,
        resource_type: str,
        relationship: str,
        parent_type: str,
        parent_id: str,
        file_path: str | os.PathLike[str],
    ) -> Resource:
        """Upload a file through Apple's reserve / upload / commit flow.

        1. Reserve: create the asset resource with name, size and checksum
        2. Upload: send each ``uploadOperations`` part to its signed URL
        3. Commit: mark the asset ``uploaded`` so Apple starts processing

        Args:
            resource_type: Asset resource type, e.g. ``appScreenshots``
            relationship: Name of the relationship to the parent resource
            parent_type: Parent resource type, e.g. ``appScreenshotSets``
            parent_id: Parent resource ID
            file_path: File to upload

        Returns:
            The committed asset resource

        Raises:
            ApiError: If reservation or commit fails
            UploadError: If the file cannot be read or a part is rejected
                after all retries
        """
        path = Path(file_path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise UploadError(f"Could not read {path}: {e}", path=str(path)) from e
        checksum = base64.b64encode(hashlib.md5(data).digest()).decode("ascii")

        logger.info(f"Reserving {resource_type} upload for {path.name} ({len(data)} bytes)")
        reservation = Document.parse(
            self.post(
                f"/{resource_type}",
                body={
                    "data": {
                        "type": resource_type,
                        "attributes": {
                            "fileName": path.name,
                            "fileSize": len(data),
                            "sourceFileChecksum": checksum,
                        },
                        "relationships": {
                            relationship: {
                                "data": {"type": parent_type, "id": parent_id},
                            },
                        },
                    }
                },
            )
        )
        asset = reservation.first()
        if asset is None:
            raise UploadError(f"Upload reservation for {path.name} returned no resource")

        operations = asset.attribute("uploadOperations") or []
        for operation in operations:
            self.upload_part(operation, data)

        logger.info(f"Committing {resource_type} {asset.id}")
        committed = Document.parse(
            self.patch(
                f"/{resource_type}/{asset.id}",
                body={
                    "data": {
                        "type": resource_type,
                        "id": asset.id,
                        "attributes": {
                            "uploaded": True,
                            "sourceFileChecksum": checksum,
                        },
                    }
                },
            )
        )
        return committed.first() or asset

    def upload_part(self, operation: dict[str, Any], data: bytes) -> None:
        """Send one upload operation, retrying transient failures.

        Network errors, 408, 429 and 5xx responses are retried up to
        ``config.upload_retries`` times, sleeping ``upload_retry_sleep``
        seconds between attempts. Other statuses fail immediately.
        """
        offset = int(operation.get("offset") or 0)
        length = int(operation.get("length") or len(data) - offset)
        chunk = data[offset:offset + length]
        headers = {
            header["name"]: header["value"]
            for header in operation.get("requestHeaders") or []
        }
        method = operation.get("method") or "PUT"
        url = operation["url"]

        retries = max(self.config.upload_retries, 0)
        attempt = 0

        while True:
            attempt += 1
            try:
                response = self.transport.execute(method, url, headers=headers, data=chunk)
            except TransportError as e:
                if attempt > retries:
                    raise
                logger.warning(f"Upload part at offset {offset} failed: {e} (retry {attempt}/{retries})")
                time.sleep(self.config.upload_retry_sleep)
                continue

            if response.ok:
                return

            error = UploadError(
                f"Upload failed: {response.status}",
                status=response.status,
                path=url,
            )
            if not _retriable_upload_status(response.status) or attempt > retries:
                raise error
            logger.warning(
                f"Upload part at offset {offset} got HTTP {response.status} (retry {attempt}/{retries})"
            )
            time.sleep(self.config.upload_retry_sleep)

    def _handle_response(self, response: HttpResponse, path: str) -> dict[str, Any]:
        body = response.body

        if response.status >= 400:
            raise classify_error(response.status, body, path)

        if first_error(body) is not None:
            raise classify_error(error_status(body, response.status), body, path)

        if not isinstance(body, dict):
            return {"data": body}
        return body


def _retriable_upload_status(status: int) -> bool:
    return status >= 500 or status in RETRIABLE_UPLOAD_STATUSES
