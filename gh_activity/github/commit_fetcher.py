"""Fetch a user's commits from a GitHub repository"""

from datetime import datetime, timezone

from gh_activity.config import PAGE_SIZE
from gh_activity.models import Commit


def _iso(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def list_user_commits(client, owner: str, repo_name: str, author: str,
                      since: datetime, until: datetime) -> list:
    """
    Fetch commits authored by a user within [since, until)

    GitHub's until bound is inclusive, so a commit stamped exactly at
    `until` is dropped here when the API reports its date.

    Args:
        client: GitHubClient
        owner: Organization login
        repo_name: Repository name
        author: GitHub login of the commit author
        since: Inclusive lower bound (UTC)
        until: Exclusive upper bound (UTC)

    Returns:
        List of Commit objects in API order (newest first)
    """
    params = {
        "author": author,
        "since": _iso(since),
        "until": _iso(until),
        "per_page": PAGE_SIZE
    }
    items = client.paginate(f"/repos/{owner}/{repo_name}/commits", params)

    upper = _iso(until)
    commits = []
    for item in items:
        committed = ((item.get("commit") or {}).get("committer") or {}).get("date")
        if committed == upper:
            continue
        commits.append(Commit.from_api(item))

    return commits
