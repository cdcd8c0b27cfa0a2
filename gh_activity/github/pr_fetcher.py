"""Resolve commits to pull requests and pull requests to their commits"""

from gh_activity.config import PAGE_SIZE
from gh_activity.models import Commit, PullRequest


def list_pull_requests_for_commit(client, owner: str, repo_name: str, sha: str) -> list:
    """
    Get the pull requests that contain a commit

    An empty list is the normal answer for a commit pushed straight to a
    branch.
    """
    items = client.paginate(
        f"/repos/{owner}/{repo_name}/commits/{sha}/pulls",
        {"per_page": PAGE_SIZE}
    )
    return [PullRequest.from_api(item) for item in items]


def list_pull_request_commits(client, owner: str, repo_name: str, number: int) -> list:
    """Get every commit of a pull request, across all pages"""
    items = client.paginate(
        f"/repos/{owner}/{repo_name}/pulls/{number}/commits",
        {"per_page": PAGE_SIZE}
    )
    return [Commit.from_api(item) for item in items]
