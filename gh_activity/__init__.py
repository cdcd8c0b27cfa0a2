"""Per-user contribution reports across a GitHub organization"""

__version__ = "0.1.0"
