"""Build one repository's activity listing for a user"""

import sys
from datetime import datetime

from gh_activity.github import (
    GitHubAPIError,
    list_pull_request_commits,
    list_pull_requests_for_commit,
    list_user_commits,
)
from gh_activity.models import PullRequestActivity, RepositoryActivity, SingleCommit


def dedupe_adjacent(entries: list) -> list:
    """
    Collapse runs of equal entries into one

    Only neighbours are compared, so [a, a, b] becomes [a, b] while
    [a, b, a] is left as is.
    """
    result = []
    for entry in entries:
        if result and result[-1] == entry:
            continue
        result.append(entry)
    return result


def build_repository_activity(client, owner: str, repo_name: str, user: str,
                              since: datetime, until: datetime) -> RepositoryActivity:
    """
    Walk a user's commits in one repository and group them into activity entries

    Runs strictly sequentially: commits -> pull requests per commit ->
    commits per pull request. A failure to list the user's commits yields an
    empty activity; failures further down propagate to the caller.

    Returns:
        RepositoryActivity with entries in commit fetch order
    """
    try:
        commits = list_user_commits(client, owner, repo_name, user, since, until)
    except GitHubAPIError as e:
        print(f"Error fetching commits for {owner}/{repo_name}: {e}", file=sys.stderr)
        return RepositoryActivity(repository=repo_name)

    entries = []
    for commit in commits:
        pulls = list_pull_requests_for_commit(client, owner, repo_name, commit.sha)

        if not pulls:
            entries.append(SingleCommit(commit))
            continue

        for pull in pulls:
            pull_commits = list_pull_request_commits(client, owner, repo_name, pull.number)
            entries.append(PullRequestActivity(
                pull=pull,
                commits=tuple(pull_commits),
                acting_user=user,
                trigger=commit
            ))

    return RepositoryActivity(repository=repo_name, entries=tuple(dedupe_adjacent(entries)))
