"""Immutable records produced by the activity pipeline"""

import dataclasses
from datetime import datetime
from typing import Optional, Union

from gh_activity.config import SHORT_SHA_LENGTH


@dataclasses.dataclass(frozen=True)
class Commit:
    sha: str
    message: str = dataclasses.field(default="", compare=False)
    author_login: Optional[str] = dataclasses.field(default=None, compare=False)

    @property
    def short_sha(self) -> str:
        return self.sha[:SHORT_SHA_LENGTH]

    @property
    def summary(self) -> str:
        """First line of the commit message"""
        return self.message.splitlines()[0] if self.message else ""

    def is_authored_by(self, login: str) -> bool:
        # GitHub logins are case-insensitive
        return self.author_login is not None and self.author_login.lower() == login.lower()

    @classmethod
    def from_api(cls, item: dict) -> "Commit":
        author = item.get("author") or {}
        return cls(
            sha=item["sha"],
            message=(item.get("commit") or {}).get("message") or "",
            author_login=author.get("login"),
        )


@dataclasses.dataclass(frozen=True)
class PullRequest:
    number: int
    id: Optional[int] = None
    title: Optional[str] = dataclasses.field(default=None, compare=False)
    author_login: Optional[str] = dataclasses.field(default=None, compare=False)
    state: Optional[str] = dataclasses.field(default=None, compare=False)

    @classmethod
    def from_api(cls, item: dict) -> "PullRequest":
        user = item.get("user") or {}
        return cls(
            number=item["number"],
            id=item.get("id"),
            title=item.get("title"),
            author_login=user.get("login"),
            state=item.get("state"),
        )


@dataclasses.dataclass(frozen=True)
class SingleCommit:
    """A commit that is not part of any pull request"""

    commit: Commit


@dataclasses.dataclass(frozen=True)
class PullRequestActivity:
    """
    A pull request together with its full commit set.

    acting_user is the login the report is generated for; only that user's
    commits are credited when rendering. trigger is the user's commit that
    led to this pull request and takes no part in equality, so the same pull
    request reached from two adjacent commits collapses into one entry.
    """

    pull: PullRequest
    commits: tuple
    acting_user: str
    trigger: Optional[Commit] = dataclasses.field(default=None, compare=False)

    @property
    def own_commits(self) -> list:
        return [c for c in self.commits if c.is_authored_by(self.acting_user)]

    @property
    def title(self) -> str:
        if self.pull.title:
            return self.pull.title
        if self.trigger is not None:
            return self.trigger.summary
        if self.commits:
            return self.commits[0].summary
        return ""


ActivityEntry = Union[SingleCommit, PullRequestActivity]


@dataclasses.dataclass(frozen=True)
class RepositoryActivity:
    repository: str
    entries: tuple = ()
    error: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclasses.dataclass
class ContributionReport:
    """Per-repository activity for one user, organization and window"""

    organization: str
    user: str
    since: datetime
    until: datetime
    dispatched: list = dataclasses.field(default_factory=list)
    results: dict = dataclasses.field(default_factory=dict)  # repository name -> RepositoryActivity

    @property
    def is_complete(self) -> bool:
        return len(self.results) == len(self.dispatched)

    def active(self) -> list:
        """Repositories with at least one entry, in dispatch order"""
        return [
            self.results[name] for name in self.dispatched
            if name in self.results and not self.results[name].is_empty
        ]

    def failures(self) -> list:
        return [
            self.results[name] for name in self.dispatched
            if name in self.results and self.results[name].failed
        ]
