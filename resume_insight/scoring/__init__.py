"""Resume quality scoring.

This module maps an extracted resume profile (plus its source text) to an
integer quality score in [0, 100] used for ranking and display.

Public API:
    - ResumeScorer: Main scoring service
    - score_profile / score_breakdown: Pure scoring functions
    - ScoreBreakdown: Per-component points
    - RandomSource / FixedRandomSource: Injectable sources for the random offset
    - ScoringConfig: Configuration settings
"""

from resume_insight.scoring.config import (
    ScoringConfig,
    get_scoring_config,
    reset_scoring_config,
)
from resume_insight.scoring.models import ScoreBreakdown
from resume_insight.scoring.random_source import (
    FixedRandomSource,
    RandomSource,
    create_random_source,
)
from resume_insight.scoring.service import ResumeScorer, score_breakdown, score_profile

__all__ = [
    "ResumeScorer",
    "score_profile",
    "score_breakdown",
    "ScoreBreakdown",
    "RandomSource",
    "FixedRandomSource",
    "create_random_source",
    "ScoringConfig",
    "get_scoring_config",
    "reset_scoring_config",
]
