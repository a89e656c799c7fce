"""Jira implementation of the version checker."""

from jira_version_checker.cli import main
from jira_version_checker.jira_impl import JiraClient

__all__ = ["JiraClient", "main"]
