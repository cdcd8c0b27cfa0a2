"""Render contribution reports as text or JSON"""

import json
from datetime import datetime
from pathlib import Path

from gh_activity.config import DATE_FORMAT, REPORT_HEADING
from gh_activity.models import (
    ContributionReport,
    PullRequestActivity,
    RepositoryActivity,
    SingleCommit,
)


def render_entry(entry) -> str:
    """
    Render one activity entry as a single line

    Bare commits read "<message>: (<sha>)"; pull requests read
    "#<number>: <title> (<sha>, <sha>, ...)" listing only the acting
    user's commits.
    """
    if isinstance(entry, SingleCommit):
        return f"{entry.commit.summary}: ({entry.commit.short_sha})"

    if isinstance(entry, PullRequestActivity):
        shas = ", ".join(c.short_sha for c in entry.own_commits)
        return f"#{entry.pull.number}: {entry.title} ({shas})"

    raise TypeError(f"Unknown activity entry: {entry!r}")


def render_activity(activity: RepositoryActivity) -> str:
    lines = [f'{REPORT_HEADING} "{activity.repository}":']
    lines.extend(render_entry(entry) for entry in activity.entries)
    return "\n".join(lines) + "\n\n"


def render_report(report: ContributionReport) -> str:
    """Render every repository with activity, newest-pushed first"""
    return "".join(render_activity(activity) for activity in report.active())


def render_header(user: str, owner: str, since: datetime, until: datetime) -> str:
    return (
        f"Fetching activities for user: '{user}' in '{owner}' organization "
        f"({since.strftime(DATE_FORMAT)} - {until.strftime(DATE_FORMAT)})"
    )


def _commit_dict(commit) -> dict:
    return {
        "sha": commit.sha,
        "message": commit.message,
        "author": commit.author_login,
    }


def _entry_dict(entry) -> dict:
    if isinstance(entry, SingleCommit):
        return {"type": "commit", **_commit_dict(entry.commit)}

    return {
        "type": "pull_request",
        "number": entry.pull.number,
        "title": entry.title,
        "author": entry.pull.author_login,
        "state": entry.pull.state,
        "commits": [_commit_dict(c) for c in entry.own_commits],
    }


def report_to_dict(report: ContributionReport) -> dict:
    """Convert a report into JSON-serializable data"""
    return {
        "generated_at": datetime.now().isoformat(),
        "organization": report.organization,
        "user": report.user,
        "since": report.since.isoformat(),
        "until": report.until.isoformat(),
        "repositories_scanned": len(report.dispatched),
        "repositories": [
            {
                "name": activity.repository,
                "entries": [_entry_dict(entry) for entry in activity.entries]
            }
            for activity in report.active()
        ],
        "failed": [
            {"name": activity.repository, "error": activity.error}
            for activity in report.failures()
        ]
    }


class ReportExporter:
    """Writes a contribution report in the requested format"""

    def __init__(self, report: ContributionReport, format: str = "text"):
        self.report = report
        self.format = format

    def render(self) -> str:
        if self.format == "json":
            return json.dumps(report_to_dict(self.report), indent=2, ensure_ascii=False) + "\n"
        return render_report(self.report)

    def export(self, output_path: str = None, stream=None) -> str:
        """
        Write the rendered report to a file, or to a stream when no path is given

        Returns:
            Path of the written file, or None when written to the stream
        """
        content = self.render()

        if output_path is None:
            stream.write(content)
            return None

        filename = Path(output_path)
        filename.parent.mkdir(parents=True, exist_ok=True)
        with open(filename, "w", encoding="utf-8") as f:
            f.write(content)

        return str(filename)
