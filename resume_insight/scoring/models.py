"""Data models for the Resume Scorer."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass

MIN_SCORE = 0
MAX_SCORE = 100

# Per-component caps, in points
SKILLS_CAP = 30.0
PROJECTS_CAP = 25.0
EXPERIENCE_CAP = 20.0
EDUCATION_CAP = 15.0
CONTACT_CAP = 10.0
CONTENT_DEPTH_CAP = 5.0
WORK_EXPERIENCE_CAP = 8.0


def clamp_score(value: float) -> int:
    """Round half up to the nearest integer and clamp to [0, 100]."""
    return max(MIN_SCORE, min(math.floor(value + 0.5), MAX_SCORE))


@dataclass
class ScoreBreakdown:
    """Points awarded per component for one resume."""

    skills: float = 0.0
    projects: float = 0.0
    experience: float = 0.0
    education: float = 0.0
    contact: float = 0.0
    content_depth: float = 0.0
    work_experience: float = 0.0
    jitter: float = 0.0

    def __post_init__(self) -> None:
        caps = {
            "skills": SKILLS_CAP,
            "projects": PROJECTS_CAP,
            "experience": EXPERIENCE_CAP,
            "education": EDUCATION_CAP,
            "contact": CONTACT_CAP,
            "content_depth": CONTENT_DEPTH_CAP,
            "work_experience": WORK_EXPERIENCE_CAP,
        }
        for name, cap in caps.items():
            value = getattr(self, name)
            if not (0.0 <= value <= cap):
                raise ValueError(f"{name} must be between 0 and {cap} (got {value})")

    @property
    def base_total(self) -> float:
        """Sum of all components except the random offset."""
        return (
            self.skills
            + self.projects
            + self.experience
            + self.education
            + self.contact
            + self.content_depth
            + self.work_experience
        )

    @property
    def total(self) -> int:
        """Final score: rounded, clamped sum including the random offset."""
        return clamp_score(self.base_total + self.jitter)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["base_total"] = self.base_total
        data["total"] = self.total
        return data
