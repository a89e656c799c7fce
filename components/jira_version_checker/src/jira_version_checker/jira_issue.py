"""Jira issue wire types and their mapping to the Issue contract."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from version_checker_interface.client import IssueTrackerError
from version_checker_interface.issue import Issue

from jira_version_checker.config import EVIDENCE_FIELD


class ResponseDecodeError(IssueTrackerError):
    """Raised when a Jira response body does not have the expected shape."""


# ---------------------------------------------------------------------------
# Wire shapes, mirror the JSON returned by /search
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class IssueUser:
    display_name: str = ""


@dataclass(frozen=True)
class IssueStatus:
    description: str = ""


@dataclass(frozen=True)
class IssueFields:
    summary: str = ""
    reporter: IssueUser = field(default_factory=IssueUser)
    assignee: IssueUser = field(default_factory=IssueUser)
    status: IssueStatus = field(default_factory=IssueStatus)
    evidence: str = ""


@dataclass(frozen=True)
class IssueDTO:
    key: str = ""
    fields: IssueFields = field(default_factory=IssueFields)


# ---------------------------------------------------------------------------
# Decoding helpers
# ---------------------------------------------------------------------------

def _string(raw: dict, name: str) -> str:
    #absent and null both decode to an empty string
    value = raw.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ResponseDecodeError(f"Field '{name}' should be a string, got {type(value).__name__}")
    return value


def _object(raw: dict, name: str) -> dict:
    #Jira sends null for an unassigned issue, treat it like an empty object
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ResponseDecodeError(f"Field '{name}' should be an object, got {type(value).__name__}")
    return value


def decode_issue(raw: Any, evidence_field: str = EVIDENCE_FIELD) -> IssueDTO:
    """Decode one element of the ``issues`` array."""
    if not isinstance(raw, dict):
        raise ResponseDecodeError(f"Issue entry should be an object, got {type(raw).__name__}")

    fields = _object(raw, "fields")
    return IssueDTO(
        key=_string(raw, "key"),
        fields=IssueFields(
            summary=_string(fields, "summary"),
            reporter=IssueUser(_string(_object(fields, "reporter"), "displayName")),
            assignee=IssueUser(_string(_object(fields, "assignee"), "displayName")),
            status=IssueStatus(_string(_object(fields, "status"), "description")),
            evidence=_string(fields, evidence_field),
        ),
    )


def decode_search_response(payload: Any, evidence_field: str = EVIDENCE_FIELD) -> list[IssueDTO]:
    """Decode the parsed body of a search response into DTOs, keeping their order.

    Unknown fields are ignored. A missing ``issues`` array means no issues.

    Raises:
        ResponseDecodeError: If the payload is not an object or ``issues`` is not a
            list of objects.
    """
    if not isinstance(payload, dict):
        raise ResponseDecodeError(f"Search response should be an object, got {type(payload).__name__}")

    issues = payload.get("issues")
    if issues is None:
        return []
    if not isinstance(issues, list):
        raise ResponseDecodeError(f"Field 'issues' should be a list, got {type(issues).__name__}")

    return [decode_issue(raw, evidence_field) for raw in issues]


# ---------------------------------------------------------------------------
# DTO -> Issue
# ---------------------------------------------------------------------------

def to_issue(dto: IssueDTO, browse_base: str) -> Issue:
    """Flatten a Jira DTO into an Issue.

    Pure and total: no I/O, and every DTO maps to an Issue.

    Args:
        dto:         The decoded Jira issue.
        browse_base: Prefix of the issue web page (e.g. 'https://myorg.atlassian.net/browse/').

    """
    return Issue(
        key=dto.key,
        summary=dto.fields.summary,
        url=browse_base + dto.key,
        reporter=dto.fields.reporter.display_name,
        assignee=dto.fields.assignee.display_name,
        status=dto.fields.status.description,
        evidence_completed=dto.fields.evidence != "",
    )
