"""Web session cookies for the Resolution Center.

App Review rejection messages live behind Apple's internal IRIS API, which
does not accept API-key JWTs. Access needs the cookies of a signed-in web
session, obtained out of band with fastlane:

    fastlane spaceauth -u you@example.com
    export FASTLANE_SESSION="..."

The session is read from ``FASTLANE_SESSION`` first, then from a cached file
in the user's home directory.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

SESSION_ENV_VAR = "FASTLANE_SESSION"
SESSION_FILE = Path("~/.app_store_connect_session")
AUTH_COOKIE = "myacinfo"

COOKIE_ATTRIBUTES = frozenset(
    {"path", "domain", "expires", "max-age", "secure", "httponly", "samesite"}
)


class WebSession:
    """Cookie jar parsed from a fastlane session string.

    Args:
        session_data: Raw session string; when omitted it is loaded from the
            environment or the session file
        session_file: Location of the cached session file
        environ: Environment mapping to read ``FASTLANE_SESSION`` from
    """

    def __init__(
        self,
        session_data: str | None = None,
        session_file: str | os.PathLike[str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.session_file = Path(session_file or SESSION_FILE).expanduser()
        self._environ = os.environ if environ is None else environ
        self.cookies: dict[str, str] = {}

        if session_data is None:
            self.load()
        else:
            self.parse(session_data)

    @property
    def valid(self) -> bool:
        """True when the jar holds Apple's web auth cookie."""
        return AUTH_COOKIE in self.cookies

    @property
    def cookie_header(self) -> str:
        return "; ".join(f"{name}={value}" for name, value in self.cookies.items())

    def load(self) -> None:
        session_data = self._environ.get(SESSION_ENV_VAR)
        if session_data:
            logger.debug(f"Loading web session from {SESSION_ENV_VAR}")
        else:
            session_data = self._read_session_file()

        if session_data:
            self.parse(session_data)

    def save(self, session_data: str) -> Path:
        """Persist raw session data for reuse and load its cookies.

        The file is created with owner-only permissions.

        Returns:
            Path of the written session file
        """
        self.session_file.parent.mkdir(parents=True, exist_ok=True)
        self.session_file.write_text(session_data, encoding="utf-8")
        self.session_file.chmod(0o600)

        self.cookies = {}
        self.parse(session_data)
        return self.session_file

    def clear(self) -> None:
        self.cookies = {}
        self.session_file.unlink(missing_ok=True)

    def parse(self, session_data: str) -> None:
        """Parse any of the accepted session formats into ``cookies``.

        Accepted formats:
        - YAML list of cookie strings
        - fastlane's YAML dump of ``HTTP::Cookie`` objects
        - a raw ``name=value; name2=value2`` cookie string
        """
        try:
            parsed = yaml.safe_load(session_data)
        except yaml.YAMLError:
            # Ruby object tags are not loadable with safe_load.
            if not self._parse_fastlane_cookies(session_data):
                self._parse_cookie_string(session_data)
            return

        if isinstance(parsed, list):
            for item in parsed:
                self._parse_cookie_string(str(item))
        elif isinstance(parsed, str):
            self._parse_cookie_string(parsed)
        else:
            self._parse_cookie_string(session_data)

    def _read_session_file(self) -> str | None:
        if not self.session_file.is_file():
            return None
        try:
            logger.debug(f"Loading web session from {self.session_file}")
            return self.session_file.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not read session file {self.session_file}: {e}")
            return None

    def _parse_fastlane_cookies(self, session_data: str) -> int:
        """Pull name/value pairs out of an ``HTTP::Cookie`` YAML dump.

        Returns:
            Number of cookies found
        """
        current_name = None
        found = 0

        for raw_line in session_data.splitlines():
            line = raw_line.strip()

            if line.startswith("name:"):
                current_name = _unquote(line[len("name:"):].strip())
            elif line.startswith("value:") and current_name:
                self.cookies[current_name] = _unquote(line[len("value:"):].strip())
                current_name = None
                found += 1

        return found

    def _parse_cookie_string(self, cookie_str: str) -> None:
        if not cookie_str:
            return

        for part in cookie_str.split(";"):
            part = part.strip()
            if "=" not in part:
                continue

            name, value = part.split("=", 1)
            name = name.strip()
            if not name or name.lower() in COOKIE_ATTRIBUTES:
                continue

            self.cookies[name] = value.strip()


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value
