"""
Authentication
--------------
Basic auth with the user/password pair from the credentials file
(see jira_version_checker.credentials). Every request goes through one
requests.Session that carries the auth.

Search
------
One GET to /rest/api/2/search with a JQL filter on project and fix version.
No pagination, no retry, any failure ends the run.

Dependencies:
    uv add requests

"""
from __future__ import annotations

import logging
from typing import Any

import requests
from requests.auth import HTTPBasicAuth

from jira_version_checker.config import API_PREFIX, Settings
from jira_version_checker.credentials import Credentials
from jira_version_checker.jira_issue import ResponseDecodeError, decode_search_response, to_issue
from version_checker_interface.client import IssueTrackerClient, IssueTrackerError
from version_checker_interface.issue import IssueList

logger = logging.getLogger(__name__)

# Jira wants the spaces of the JQL already escaped, the rest goes as-is
_JQL_AND = "%20AND%20"


class JiraError(IssueTrackerError):
    """Raised when the Jira API returns an unexpected response."""


class JiraConnectionError(IssueTrackerError):
    """Raised when the request never got a response."""


# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------

class JiraClient(IssueTrackerClient):
    """
    Args:
        credentials: user/password loaded from the credentials file
        settings:    Jira host and evidence field, defaults point at the team's Jira
    """

    def __init__(self, credentials: Credentials, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._base_url = self._settings.base_url.rstrip("/")
        self._session = requests.Session()
        #bytes so requests does not fall back to latin-1 for non-ASCII credentials
        self._session.auth = HTTPBasicAuth(
            credentials.user.encode("utf-8"), credentials.password.encode("utf-8"),
        )
        self._session.headers.update({"Accept": "application/json"})

    # ------------------------------------------------------------------
    # Request building
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self._base_url}{API_PREFIX}{path}"

    def search_url(self, project: str, version: str) -> str:
        """Return the search URL for a project and fix version."""
        jql = f"project={project}{_JQL_AND}fixVersion={version}"
        return self._url(f"/search/?jql={jql}&fields={self._settings.search_fields}")

    def build_search_request(self, project: str, version: str) -> requests.PreparedRequest:
        """Build the authenticated GET, session auth and headers already merged in."""
        request = requests.Request("GET", self.search_url(project, version))
        return self._session.prepare_request(request)

    # ------------------------------------------------------------------
    # Internal HTTP helpers
    # ------------------------------------------------------------------

    def _send(self, request: requests.PreparedRequest) -> requests.Response:
        logger.debug("GET %s", request.url)
        #proxies and CA bundle from the environment, as session.get would apply them
        send_kwargs = self._session.merge_environment_settings(request.url, {}, None, None, None)
        try:
            response = self._session.send(request, **send_kwargs)
        except requests.RequestException as exc:
            raise JiraConnectionError(f"Error performing request: {exc}") from exc
        logger.debug("Jira answered %s", response.status_code)
        self._raise_for_status(response)
        return response

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        #anything but a plain 200 means the search did not run
        if response.status_code != 200:
            try:
                detail = response.json()
            except ValueError:
                detail = response.text
            raise JiraError(f"Jira API error {response.status_code}: {detail}")

    @staticmethod
    def _read_json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ResponseDecodeError(f"Error parsing response body: {exc}") from exc

    # ------------------------------------------------------------------
    # IssueTrackerClient contract
    # ------------------------------------------------------------------

    def get_version_issues(self, project: str, version: str) -> IssueList:
        """Fetch the issues of a project/fix version and map them to Issues."""
        response = self._send(self.build_search_request(project, version))
        dtos = decode_search_response(self._read_json(response), self._settings.evidence_field)
        logger.debug("Decoded %d issues for %s %s", len(dtos), project, version)
        browse_base = self._settings.browse_base
        return [to_issue(dto, browse_base) for dto in dtos]
