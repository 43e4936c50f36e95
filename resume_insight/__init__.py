"""resume-insight: rule-based resume extraction and scoring."""

__version__ = "0.1.0"
