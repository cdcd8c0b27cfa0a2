"""Command-line entry point for the contribution report"""

import argparse
import sys
from datetime import date

from gh_activity import __version__
from gh_activity.activity import collect_activity
from gh_activity.config import (
    DEFAULT_ORGANIZATION,
    ConfigurationError,
    date_window,
    month_window,
    resolve_token,
)
from gh_activity.exporter import ReportExporter, render_header
from gh_activity.github import GitHubAPIError, GitHubClient, list_organization_repositories


def build_parser() -> argparse.ArgumentParser:
    today = date.today()

    parser = argparse.ArgumentParser(
        description="List a user's commits and pull requests across an organization's repositories"
    )
    parser.add_argument("-y", "--year", type=int, default=today.year,
                        help="Year of the reported month (default: current year)")
    parser.add_argument("-m", "--month", type=int, default=today.month,
                        help="Reported month, 1-12 (default: current month)")
    parser.add_argument("--since", help="Start date YYYY-MM-DD, inclusive (overrides --year/--month)")
    parser.add_argument("--until", help="End date YYYY-MM-DD, exclusive (requires --since)")
    parser.add_argument("--owner", default=DEFAULT_ORGANIZATION,
                        help=f"GitHub organization (default: {DEFAULT_ORGANIZATION})")
    parser.add_argument("-U", "--user", required=True, help="GitHub login to report on")
    parser.add_argument("--gh-token", help="GitHub token (default: GH_TOKEN environment variable)")
    parser.add_argument("--max-workers", type=int,
                        help="Cap on concurrent repositories (default: one per repository)")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Report format")
    parser.add_argument("--output", help="Write the report to this file instead of stdout")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_window(args) -> tuple:
    if args.since or args.until:
        if not (args.since and args.until):
            raise ConfigurationError("--since and --until must be given together")
        return date_window(args.since, args.until)
    return month_window(args.year, args.month)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        since, until = resolve_window(args)
        token = resolve_token(args.gh_token)
        if args.max_workers is not None and args.max_workers < 1:
            raise ConfigurationError("--max-workers must be at least 1")
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return 1

    # JSON on stdout must stay parseable
    header_stream = sys.stderr if args.format == "json" and not args.output else sys.stdout
    print(render_header(args.user, args.owner, since, until), file=header_stream)

    client = GitHubClient(token)

    try:
        repositories = list_organization_repositories(client, args.owner)
    except GitHubAPIError as e:
        print(f"Error listing repositories of {args.owner}: {e}", file=sys.stderr)
        return 1

    report = collect_activity(
        client,
        args.owner,
        repositories,
        args.user,
        since,
        until,
        max_workers=args.max_workers
    )

    exporter = ReportExporter(report, format=args.format)
    written = exporter.export(args.output, stream=sys.stdout)
    if written:
        print(f"Exported report to {written}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
