"""Centralized configuration for the activity reporter"""

import os
from datetime import date, datetime, timezone

from dotenv import load_dotenv

load_dotenv()


class ConfigurationError(ValueError):
    """Missing credential or unusable reporting window"""


# =============================================================================
# GitHub Configuration
# =============================================================================

# API
GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
PAGE_SIZE = 100
REQUEST_TIMEOUT = 30  # seconds, per request

# Organization scanned when --owner is not given
DEFAULT_ORGANIZATION = "restaumatic"

# Credentials, checked in order
TOKEN_ENV_VARS = ("GH_TOKEN", "GITHUB_TOKEN")


# =============================================================================
# Report Configuration
# =============================================================================

REPORT_HEADING = "Kontrybucja do repozytorium kodu"
SHORT_SHA_LENGTH = 7
DATE_FORMAT = "%Y-%m-%d"


def resolve_token(explicit: str = None) -> str:
    """Return the token given on the command line, else the one from the environment"""
    if explicit:
        return explicit

    for name in TOKEN_ENV_VARS:
        token = os.getenv(name)
        if token:
            return token

    raise ConfigurationError(
        "GH_TOKEN is not provided as a command-line argument or environment variable"
    )


def _utc_midnight(day: date) -> datetime:
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


def month_window(year: int, month: int) -> tuple:
    """
    Build the [since, until) window covering one calendar month

    Args:
        year: Calendar year
        month: Month number, 1-12

    Returns:
        Tuple of UTC datetimes: midnight of the 1st of the month and
        midnight of the 1st of the following month
    """
    if not 1 <= month <= 12:
        raise ConfigurationError(f"Invalid month: {month}")

    try:
        since = date(year, month, 1)
        if month == 12:
            until = date(year + 1, 1, 1)
        else:
            until = date(year, month + 1, 1)
    except (ValueError, OverflowError) as e:
        raise ConfigurationError(f"Invalid year/month {year}-{month}: {e}") from e

    return _utc_midnight(since), _utc_midnight(until)


def parse_day(value: str) -> date:
    """Parse a YYYY-MM-DD argument"""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid date '{value}', expected YYYY-MM-DD") from e


def date_window(since: str, until: str) -> tuple:
    """Build an explicit [since, until) window from two YYYY-MM-DD strings"""
    start = parse_day(since)
    end = parse_day(until)

    if end <= start:
        raise ConfigurationError(f"--until ({until}) must be after --since ({since})")

    return _utc_midnight(start), _utc_midnight(end)
