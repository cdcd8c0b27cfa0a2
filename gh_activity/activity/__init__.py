"""Per-repository activity building and organization-wide aggregation"""

from .builder import build_repository_activity, dedupe_adjacent
from .aggregator import collect_activity
