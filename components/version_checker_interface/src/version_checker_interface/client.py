"""Core client contract definitions."""

from abc import ABC, abstractmethod

from version_checker_interface.issue import IssueList

__all__ = ["IssueTrackerClient", "IssueTrackerError"]


class IssueTrackerError(Exception):
    """Base exception for every failure that ends a run.

    Implementations raise subclasses of this and let them travel up to the
    command line entry point, which is the only place that turns them into an
    exit status.
    """


class IssueTrackerClient(ABC):
    """Fetches the issues planned for a release."""

    @abstractmethod
    def get_version_issues(self, project: str, version: str) -> IssueList:
        """Get the issues of a project that carry a fix version."""
        """Args:
            project: Project identifier as the tracker knows it (e.g. 'PROJ')
            version: Release/fix version name (e.g. '1.4.0')

        Notes on usage:
            Makes a single request. Order of the returned list is the order the tracker
            answered with.

        Returns:
            The matching issues, already mapped to Issue records

        Raises:
            IssueTrackerError: On any failure, there are no partial results

        """
        raise NotImplementedError
