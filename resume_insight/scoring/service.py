"""Resume scoring service implementation.

The score is an additive point budget over the extracted profile, with each
component capped independently:

    skills            2.5 per skill, up to 30
    projects          5 per project line, up to 25
    experience        2.5 per year, up to 20
    education         15 phd/doctorate, 12 master, 10 bachelor, 7 other, 0 none
    contact           5 for an email, 5 for a phone
    content depth     5 when the text exceeds 2000 chars, else 3 above 1000
    work experience   2 per role line, up to 8

A uniform random offset in [-jitter, +jitter] is then added so that
near-identical resumes do not tie, and the sum is rounded and clamped to
[0, 100].
"""

from __future__ import annotations

import logging

from resume_insight.extractor.models import ResumeProfile
from resume_insight.scoring.config import ScoringConfig, get_scoring_config
from resume_insight.scoring.models import (
    EXPERIENCE_CAP,
    PROJECTS_CAP,
    SKILLS_CAP,
    WORK_EXPERIENCE_CAP,
    ScoreBreakdown,
)
from resume_insight.scoring.random_source import RandomSource, create_random_source

logger = logging.getLogger(__name__)

DEFAULT_JITTER = 5.0

POINTS_PER_SKILL = 2.5
POINTS_PER_PROJECT = 5.0
POINTS_PER_YEAR = 2.5
POINTS_PER_ROLE = 2.0
POINTS_PER_CONTACT_FIELD = 5.0

# (minimum length exclusive, points), highest threshold first
CONTENT_DEPTH_THRESHOLDS = ((2000, 5.0), (1000, 3.0))


def capped_points(count: int, per_item: float, cap: float) -> float:
    """Points for `count` items at `per_item` each, saturating at `cap`.

    The count is capped before multiplying, so arbitrarily large integers
    never reach float conversion.
    """
    return min(count, cap / per_item) * per_item


def education_points(profile: ResumeProfile) -> float:
    """Points for the highest degree named on the education line."""
    if not profile.has_education:
        return 0.0

    education = profile.education.lower()
    if "phd" in education or "doctorate" in education:
        return 15.0
    if "master" in education:
        return 12.0
    if "bachelor" in education:
        return 10.0
    return 7.0


def contact_points(profile: ResumeProfile) -> float:
    points = 0.0
    if profile.contact_info.email:
        points += POINTS_PER_CONTACT_FIELD
    if profile.contact_info.phone:
        points += POINTS_PER_CONTACT_FIELD
    return points


def content_depth_points(text: str) -> float:
    """Bonus for the highest length threshold the text exceeds."""
    length = len(text or "")
    for threshold, points in CONTENT_DEPTH_THRESHOLDS:
        if length > threshold:
            return points
    return 0.0


def score_breakdown(
    profile: ResumeProfile,
    text: str = "",
    *,
    random_source: RandomSource | None = None,
    jitter: float = DEFAULT_JITTER,
) -> ScoreBreakdown:
    """Compute per-component points for a profile.

    Args:
        profile: Extracted resume profile (not modified).
        text: Source text the profile was built from; only its length is used.
        random_source: Source for the random offset. A fresh unseeded
            `random.Random` is used when omitted.
        jitter: Half-width of the random offset; 0 skips the draw entirely.

    Returns:
        The score breakdown; `breakdown.total` is the final score.
    """
    offset = 0.0
    if jitter > 0:
        source = random_source if random_source is not None else create_random_source()
        offset = source.uniform(-jitter, jitter)

    return ScoreBreakdown(
        skills=capped_points(len(profile.skills), POINTS_PER_SKILL, SKILLS_CAP),
        projects=capped_points(len(profile.projects), POINTS_PER_PROJECT, PROJECTS_CAP),
        experience=capped_points(profile.experience, POINTS_PER_YEAR, EXPERIENCE_CAP),
        education=education_points(profile),
        contact=contact_points(profile),
        content_depth=content_depth_points(text),
        work_experience=capped_points(
            len(profile.work_experience), POINTS_PER_ROLE, WORK_EXPERIENCE_CAP
        ),
        jitter=offset,
    )


def score_profile(
    profile: ResumeProfile,
    text: str = "",
    *,
    random_source: RandomSource | None = None,
    jitter: float = DEFAULT_JITTER,
) -> int:
    """Return the final integer score in [0, 100] for a profile."""
    return score_breakdown(
        profile, text, random_source=random_source, jitter=jitter
    ).total


class ResumeScorer:
    """Service for scoring extracted resume profiles."""

    def __init__(
        self,
        config: ScoringConfig | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self.config = config or get_scoring_config()
        if random_source is None:
            random_source = create_random_source(self.config.seed)
        self.random_source = random_source

    def breakdown(self, profile: ResumeProfile, text: str | None = "") -> ScoreBreakdown:
        """Compute the per-component breakdown for a profile."""
        result = score_breakdown(
            profile,
            text or "",
            random_source=self.random_source,
            jitter=self.config.jitter,
        )
        logger.debug(
            f"Scored profile: base={result.base_total:.1f} "
            f"jitter={result.jitter:+.2f} total={result.total}"
        )
        return result

    def score(self, profile: ResumeProfile, text: str | None = "") -> int:
        """Return the final integer score in [0, 100] for a profile."""
        return self.breakdown(profile, text).total
