"""Tracker-neutral contract for listing the issues of a release."""

from version_checker_interface.client import IssueTrackerClient, IssueTrackerError
from version_checker_interface.issue import Issue, IssueList

__all__ = ["Issue", "IssueList", "IssueTrackerClient", "IssueTrackerError"]
