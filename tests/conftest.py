"""Shared fixtures: a throwaway P-256 key, configuration and fake transport."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from app_store_connect.config import Config
from app_store_connect.resources import AppStoreConnect
from app_store_connect.session import WebSession
from app_store_connect.transport import HttpResponse, HttpTransport

ISSUER_ID = "57246542-96fe-1a63-e053-0824d011072a"
KEY_ID = "2X9R4HXF34"
APP_ID = "1234567890"


@pytest.fixture(scope="session")
def ec_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def key_file(tmp_path, ec_key):
    """A PKCS#8 ``.p8`` file, as downloaded from App Store Connect."""
    path = tmp_path / "AuthKey.p8"
    path.write_bytes(
        ec_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    return path


@pytest.fixture
def config(key_file):
    return Config(
        key_id=KEY_ID,
        issuer_id=ISSUER_ID,
        private_key_path=str(key_file),
        app_id=APP_ID,
        upload_retry_sleep=0,
    )


@pytest.fixture
def web_session(tmp_path):
    """An empty session isolated from FASTLANE_SESSION and the home directory."""
    return WebSession(session_file=tmp_path / "session", environ={})


@pytest.fixture
def transport():
    fake = MagicMock(spec=HttpTransport)
    fake.execute.return_value = HttpResponse(200, {"data": []})
    return fake


@pytest.fixture
def client(config, transport, web_session):
    return AppStoreConnect(config, transport=transport, session=web_session)


def resource(type_, id_, **attributes):
    return {"type": type_, "id": id_, "attributes": attributes}


def respond(transport, *bodies, status=200):
    """Queue successive responses on the fake transport."""
    transport.execute.side_effect = [
        body if isinstance(body, HttpResponse) else HttpResponse(status, body)
        for body in bodies
    ]
