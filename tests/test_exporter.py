"""Tests for report rendering and export"""

import io
import json
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path

from gh_activity.exporter import (
    ReportExporter,
    render_activity,
    render_entry,
    render_header,
    render_report,
    report_to_dict,
)
from gh_activity.models import (
    Commit,
    ContributionReport,
    PullRequest,
    PullRequestActivity,
    RepositoryActivity,
    SingleCommit,
)

SINCE = datetime(2024, 3, 1, tzinfo=timezone.utc)
UNTIL = datetime(2024, 4, 1, tzinfo=timezone.utc)


def make_report(results: list) -> ContributionReport:
    report = ContributionReport(
        organization="acme", user="U", since=SINCE, until=UNTIL,
        dispatched=[a.repository for a in results]
    )
    for activity in results:
        report.results[activity.repository] = activity
    return report


class TestRenderEntry(unittest.TestCase):

    def test_single_commit(self):
        entry = SingleCommit(Commit("0123456789abcdef", "Fix typo", "U"))
        self.assertEqual(render_entry(entry), "Fix typo: (0123456)")

    def test_single_commit_uses_first_line(self):
        entry = SingleCommit(Commit("0123456789abcdef", "Fix typo\n\nLong body", "U"))
        self.assertEqual(render_entry(entry), "Fix typo: (0123456)")

    def test_pull_request_lists_only_acting_user_commits(self):
        """Test other authors' commits are not credited"""
        entry = PullRequestActivity(
            pull=PullRequest(42, title="Add search"),
            commits=(Commit("a" * 40, "one", "U"), Commit("b" * 40, "two", "V")),
            acting_user="U"
        )

        self.assertEqual(render_entry(entry), "#42: Add search (aaaaaaa)")

    def test_pull_request_commit_without_author_is_skipped(self):
        entry = PullRequestActivity(
            pull=PullRequest(3, title="Chore"),
            commits=(Commit("a" * 40, "one", None), Commit("c" * 40, "two", "u")),
            acting_user="U"
        )

        self.assertEqual(render_entry(entry), "#3: Chore (ccccccc)")

    def test_pull_request_title_falls_back_to_trigger_message(self):
        trigger = Commit("d" * 40, "Refactor parser", "U")
        entry = PullRequestActivity(
            pull=PullRequest(8, title=None),
            commits=(Commit("e" * 40, "Earlier work", "U"), trigger),
            acting_user="U",
            trigger=trigger
        )

        self.assertEqual(render_entry(entry), "#8: Refactor parser (eeeeeee, ddddddd)")

    def test_unknown_entry_rejected(self):
        with self.assertRaises(TypeError):
            render_entry("not an entry")


class TestRenderReport(unittest.TestCase):

    def test_render_activity_block(self):
        activity = RepositoryActivity("api", (SingleCommit(Commit("f" * 40, "Init", "U")),))

        self.assertEqual(
            render_activity(activity),
            'Kontrybucja do repozytorium kodu "api":\nInit: (fffffff)\n\n'
        )

    def test_empty_repositories_are_skipped(self):
        """Test three repositories, one empty, render as two blocks"""
        report = make_report([
            RepositoryActivity("one", (SingleCommit(Commit("1" * 40, "a", "U")),)),
            RepositoryActivity("two"),
            RepositoryActivity("three", (SingleCommit(Commit("3" * 40, "c", "U")),)),
        ])

        text = render_report(report)

        self.assertEqual(text.count("Kontrybucja do repozytorium kodu"), 2)
        self.assertNotIn('"two"', text)
        self.assertLess(text.index('"one"'), text.index('"three"'))

    def test_header(self):
        self.assertEqual(
            render_header("U", "acme", SINCE, UNTIL),
            "Fetching activities for user: 'U' in 'acme' organization (2024-03-01 - 2024-04-01)"
        )


class TestReportExporter(unittest.TestCase):

    def setUp(self):
        self.report = make_report([
            RepositoryActivity("one", (
                PullRequestActivity(
                    pull=PullRequest(1, title="Feature", author_login="U", state="closed"),
                    commits=(Commit("a" * 40, "a", "U"), Commit("b" * 40, "b", "V")),
                    acting_user="U"
                ),
            )),
            RepositoryActivity("two", error="upstream returned 500"),
        ])

    def test_report_to_dict(self):
        data = report_to_dict(self.report)

        self.assertEqual(data["organization"], "acme")
        self.assertEqual(data["repositories_scanned"], 2)
        self.assertEqual(len(data["repositories"]), 1)
        entry = data["repositories"][0]["entries"][0]
        self.assertEqual(entry["type"], "pull_request")
        self.assertEqual([c["sha"] for c in entry["commits"]], ["a" * 40])
        self.assertEqual(data["failed"], [{"name": "two", "error": "upstream returned 500"}])

    def test_export_json_to_stream(self):
        stream = io.StringIO()

        result = ReportExporter(self.report, format="json").export(stream=stream)

        self.assertIsNone(result)
        self.assertEqual(json.loads(stream.getvalue())["user"], "U")

    def test_export_text_to_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "reports" / "march.txt"

            result = ReportExporter(self.report).export(str(path))

            self.assertEqual(result, str(path))
            self.assertIn("#1: Feature (aaaaaaa)", path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
