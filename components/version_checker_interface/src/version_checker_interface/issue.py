"""Issue contract - Core issue representation."""

from dataclasses import dataclass

__all__ = ["Issue", "IssueList"]


@dataclass(frozen=True)
#frozen so a record built from the API cannot drift while the report is printed
class Issue:
    """Display-ready issue, flattened from whatever shape the tracker returns.

    Notes on usage:
        Implementations build these through their own mapping function, never by
        handing the raw API payload around.
    """

    key: str
    summary: str
    url: str
    reporter: str
    assignee: str
    status: str
    evidence_completed: bool

    #equivalent to Javas .toString()
    def __repr__(self) -> str:
        return f"<Issue key={self.key!r} status={self.status!r} evidence={self.evidence_completed}>"


#order is the order the tracker returned, only relevant for display
IssueList = list[Issue]
