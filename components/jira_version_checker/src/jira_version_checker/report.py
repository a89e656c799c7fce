"""Plain text report of the issues of a version.

Formatting functions are pure and return lines, printing is kept apart so the
same list always renders the same text.
"""

from __future__ import annotations

import sys
from typing import TextIO

from version_checker_interface.issue import Issue, IssueList

NO_ISSUES = "No issues found!"
MISSING_EVIDENCE_HEADER = "Issues con evidencia incompleta:"

YELLOW = "\033[33m"
GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"


def _paint(text: str, color: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"{color}{text}{RESET}"


def evidence_label(issue: Issue, color: bool = False) -> str:
    if issue.evidence_completed:
        return _paint("Completa", GREEN, color)
    return _paint("Incompleta", RED, color)


def format_issue(issue: Issue, color: bool = False) -> list[str]:
    return [
        f"- [{_paint(issue.key, YELLOW, color)}] {issue.summary}",
        f"\t- {issue.url}",
        f"\t- Informador: {issue.reporter}",
        f"\t- Responsable: {issue.assignee}",
        f"\t- Status: {issue.status}",
        f"\t- Evidencia: {evidence_label(issue, color)}",
    ]


def format_issue_list(issues: IssueList, color: bool = False) -> list[str]:
    """Full listing, or the single no-issues notice."""
    if not issues:
        return [NO_ISSUES]
    lines: list[str] = []
    for issue in issues:
        lines.extend(format_issue(issue, color))
    return lines


def missing_evidence(issues: IssueList) -> IssueList:
    return [issue for issue in issues if not issue.evidence_completed]


def format_missing_evidence(issues: IssueList, color: bool = False) -> list[str]:
    """Header plus one line per issue without evidence, nothing when all have it."""
    pending = missing_evidence(issues)
    if not pending:
        return []
    return [MISSING_EVIDENCE_HEADER] + [
        f"- [{_paint(issue.key, YELLOW, color)}] {issue.url}" for issue in pending
    ]


def format_report(issues: IssueList, color: bool = False) -> list[str]:
    lines = format_issue_list(issues, color)
    #an empty version stops at the notice, the evidence section is skipped
    if not issues:
        return lines
    gaps = format_missing_evidence(issues, color)
    if gaps:
        lines = lines + [""] + gaps
    return lines


def print_report(issues: IssueList, stream: TextIO | None = None, color: bool | None = None) -> None:
    """Write the report to ``stream`` (stdout by default).

    Colors default to on only when the stream is a terminal.
    """
    if stream is None:
        stream = sys.stdout
    if color is None:
        color = stream.isatty()
    for line in format_report(issues, color):
        print(line, file=stream)
