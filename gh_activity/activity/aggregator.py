"""Fan the activity builder out across an organization's repositories"""

import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime

from gh_activity.activity.builder import build_repository_activity
from gh_activity.models import ContributionReport, RepositoryActivity


def collect_activity(client, owner: str, repositories: list, user: str,
                     since: datetime, until: datetime, max_workers: int = None,
                     builder=build_repository_activity) -> ContributionReport:
    """
    Build activity for every repository concurrently and wait for all of them

    One task is submitted per repository. Results are gathered as they
    finish, in any order, until every dispatched repository has reported.
    A task that raises still reports: its repository is recorded with the
    error and no entries.

    Args:
        client: Shared GitHubClient
        owner: Organization login
        repositories: Repository names in dispatch order
        user: Login the report is generated for
        since: Inclusive window start (UTC)
        until: Exclusive window end (UTC)
        max_workers: Thread cap; defaults to one thread per repository
        builder: Per-repository task, build_repository_activity unless overridden

    Returns:
        ContributionReport holding exactly one result per repository
    """
    report = ContributionReport(
        organization=owner,
        user=user,
        since=since,
        until=until,
        dispatched=list(repositories)
    )

    if not report.dispatched:
        return report

    workers = max_workers or len(report.dispatched)

    with ThreadPoolExecutor(max_workers=workers) as ex:
        futs = {
            ex.submit(builder, client, owner, repo_name, user, since, until): repo_name
            for repo_name in report.dispatched
        }

        # Only this thread writes to report.results
        for fut in as_completed(futs):
            repo_name = futs[fut]
            try:
                activity = fut.result()
            except Exception as e:
                print(f"Error collecting activity for {owner}/{repo_name}: {e}", file=sys.stderr)
                activity = RepositoryActivity(repository=repo_name, error=str(e) or type(e).__name__)
            report.results[repo_name] = activity

    return report
