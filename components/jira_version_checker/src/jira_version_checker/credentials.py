"""Loads the Jira user/password pair from a local JSON file.

Expected file content::

    {"user": "jdoe", "password": "secret"}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from version_checker_interface.client import IssueTrackerError

logger = logging.getLogger(__name__)


class CredentialsError(IssueTrackerError):
    """Raised when the credentials file cannot be read or has the wrong shape."""


@dataclass(frozen=True)
class Credentials:
    user: str
    password: str

    #keep the password out of tracebacks and debug output
    def __repr__(self) -> str:
        return f"Credentials(user={self.user!r}, password='***')"


def load_credentials(path: str | Path) -> Credentials:
    """Read and decode the credentials file.

    Missing keys decode to empty strings, unknown keys are ignored.

    Raises:
        CredentialsError: If the file is missing, unreadable, not JSON, or not an
            object of string values.
    """
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise CredentialsError(f"Error opening credentials file {path}: {exc}") from exc

    try:
        #json.loads decodes the raw bytes, undecodable input raises UnicodeDecodeError (a ValueError)
        data = json.loads(content)
    except ValueError as exc:
        raise CredentialsError(f"Error parsing credentials file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise CredentialsError(f"Error parsing credentials file {path}: expected a JSON object")

    values: dict[str, str] = {}
    for name in ("user", "password"):
        value = data.get(name)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise CredentialsError(f"Error parsing credentials file {path}: '{name}' must be a string")
        values[name] = value

    logger.debug("Loaded credentials from %s", path)
    return Credentials(values["user"], values["password"])
