"""List repositories of a GitHub organization"""

from gh_activity.config import PAGE_SIZE


def list_organization_repositories(client, org_name: str) -> list:
    """
    Get all repositories in an organization, most recently pushed first

    Any failed page raises GitHubAPIError; there is nothing to report
    without the repository list.

    Returns:
        List of repository names
    """
    params = {
        "sort": "pushed",
        "direction": "desc",
        "per_page": PAGE_SIZE
    }
    repos = client.paginate(f"/orgs/{org_name}/repos", params)
    return [repo["name"] for repo in repos]
