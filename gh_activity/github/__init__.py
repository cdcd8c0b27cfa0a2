"""GitHub REST access: client and fetchers"""

from .client import GitHubAPIError, GitHubClient
from .repo_fetcher import list_organization_repositories
from .commit_fetcher import list_user_commits
from .pr_fetcher import list_pull_requests_for_commit, list_pull_request_commits
