"""Command line entry point: ``version-checker <project> <version>``."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from jira_version_checker.config import Settings, get_log_level
from jira_version_checker.credentials import load_credentials
from jira_version_checker.jira_impl import JiraClient
from jira_version_checker.logging_config import configure_logging
from jira_version_checker.report import print_report
from version_checker_interface.client import IssueTrackerError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="version-checker",
        description="List the Jira issues of a project fix version and flag the ones missing evidence",
    )
    parser.add_argument("project", help="Jira project key, e.g. 'PROJ'")
    parser.add_argument("version", help="Fix version name, e.g. '1.4.0'")
    return parser


def run(project: str, version: str, settings: Settings | None = None) -> None:
    """Load credentials, query Jira and print the report.

    Raises:
        IssueTrackerError: On any failure, nothing is printed in that case.
    """
    settings = settings or Settings()
    #credentials first, a bad file must stop the run before any request
    credentials = load_credentials(settings.credentials_path)
    client = JiraClient(credentials, settings)
    issues = client.get_version_issues(project, version)
    print_report(issues)


def main(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    # argparse exits with status 2 on a missing argument
    args = build_parser().parse_args(argv)
    configure_logging(get_log_level())

    try:
        run(args.project, args.version, settings)
    except IssueTrackerError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
