"""Constants and settings for the Jira version checker."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://jira.despegar.com"
API_PREFIX = "/rest/api/2"

#custom field where the team attaches the test evidence of an issue
EVIDENCE_FIELD = "customfield_17840"

DEFAULT_CREDENTIALS_PATH = "credentials.json"

LOG_LEVEL_ENV = "VERSION_CHECKER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Everything a run needs besides the command line arguments."""

    base_url: str = DEFAULT_BASE_URL
    evidence_field: str = EVIDENCE_FIELD
    credentials_path: str = DEFAULT_CREDENTIALS_PATH

    @property
    def browse_base(self) -> str:
        return f"{self.base_url.rstrip('/')}/browse/"

    @property
    def search_fields(self) -> str:
        return ",".join(["summary", "status", "fixVersions", "reporter", "assignee", self.evidence_field])


def get_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "").strip() or DEFAULT_LOG_LEVEL
