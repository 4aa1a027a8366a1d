"""Client configuration.

Credentials come from the environment (optionally seeded from a ``.env``
file) or are passed explicitly. A Config is immutable; build a new one to
change settings.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path

from dotenv import load_dotenv

from app_store_connect.errors import ConfigurationError

DEFAULT_API_URL = "https://api.appstoreconnect.apple.com/v1"
ENV_PREFIX = "APP_STORE_CONNECT_"

REQUIRED_ENV_KEYS = {
    "key_id": "APP_STORE_CONNECT_KEY_ID",
    "issuer_id": "APP_STORE_CONNECT_ISSUER_ID",
    "private_key_path": "APP_STORE_CONNECT_PRIVATE_KEY_PATH",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True)
class Config:
    """Credentials and transport settings for one client instance."""

    key_id: str | None = None
    issuer_id: str | None = None
    private_key_path: str | None = None
    app_id: str | None = None
    bundle_id: str | None = None
    api_url: str = DEFAULT_API_URL
    verify_ssl: bool = True
    ca_bundle: str | None = None
    request_timeout: float = 60.0
    upload_retries: int = 3
    upload_retry_sleep: float = 1.0

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        env_file: str | os.PathLike[str] | None = ".env",
        **overrides: object,
    ) -> Config:
        """Build a Config from environment variables.

        When ``environ`` is omitted the process environment is used, after
        loading ``env_file`` with python-dotenv. Variables already set in the
        environment win over the file.

        Args:
            environ: Mapping to read instead of ``os.environ``
            env_file: Optional ``.env`` file to load first
            **overrides: Field values that take precedence over the environment

        Returns:
            New Config instance

        Raises:
            ConfigurationError: If a numeric or boolean variable is malformed
        """
        if environ is None:
            if env_file and Path(env_file).is_file():
                load_dotenv(env_file, override=False)
            environ = os.environ

        values: dict[str, object] = {}
        for field in fields(cls):
            name = f"{ENV_PREFIX}{field.name.upper()}"
            if field.name == "request_timeout":
                name = f"{ENV_PREFIX}TIMEOUT"
            raw = environ.get(name)
            if raw is None or raw == "":
                continue
            values[field.name] = _coerce(name, raw, field.type)

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def missing_keys(self) -> list[str]:
        """Names of the required environment variables that are blank."""
        return [
            env_name
            for attr, env_name in REQUIRED_ENV_KEYS.items()
            if _blank(getattr(self, attr))
        ]

    def is_valid(self) -> bool:
        return not self.missing_keys()

    def validate(self) -> None:
        """Check credentials without touching the network.

        Raises:
            ConfigurationError: If a required value is blank or the private
                key file is missing or unreadable
        """
        missing = self.missing_keys()
        if missing:
            raise ConfigurationError(f"Missing configuration: {', '.join(missing)}")

        key_path = self.key_path
        if not key_path.is_file():
            raise ConfigurationError(f"Private key file not found: {self.private_key_path}")
        if not os.access(key_path, os.R_OK):
            raise ConfigurationError(f"Private key file not readable: {self.private_key_path}")

    @property
    def key_path(self) -> Path:
        return Path(self.private_key_path or "").expanduser()

    def require_app_id(self, app_id: str | None = None) -> str:
        """Return ``app_id`` or the configured one.

        Raises:
            ConfigurationError: If neither is set
        """
        resolved = app_id or self.app_id
        if _blank(resolved):
            raise ConfigurationError("Missing configuration: APP_STORE_CONNECT_APP_ID")
        return str(resolved)


def _coerce(name: str, raw: str, annotation: object) -> object:
    """Convert an environment string to the field's declared type."""
    kind = str(annotation)
    raw = raw.strip()
    try:
        if kind == "bool":
            lowered = raw.lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise ValueError(raw)
        if kind == "int":
            return int(raw)
        if kind == "float":
            return float(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid value for {name}: {raw!r}") from None
    return raw
