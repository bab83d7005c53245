"""PHP QA release table and derived download/report metadata."""

__version__ = "0.1.0"
