"""Analysis result models."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from resume_insight.extractor.models import ResumeProfile
from resume_insight.scoring.models import ScoreBreakdown


class AnalysisStatus(str, Enum):
    """Processing status for a single document."""

    COMPLETED = "completed"
    FAILED = "failed"


class ResumeAnalysis(BaseModel):
    """Outcome of analyzing one document.

    A FAILED analysis means the document could not be turned into text; it
    never reached the extractor or the scorer, so it has no profile.
    """

    name: str
    status: AnalysisStatus
    score: int = Field(default=0, ge=0, le=100)
    profile: ResumeProfile | None = None
    breakdown: dict[str, float] | None = None
    text_length: int = Field(default=0, ge=0)
    error: str | None = None
    analyzed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @model_validator(mode="after")
    def validate_status_fields(self) -> ResumeAnalysis:
        if self.status == AnalysisStatus.COMPLETED:
            if self.profile is None:
                raise ValueError("profile is required when status is completed")
            if self.error is not None:
                raise ValueError("error must be None when status is completed")
        elif self.error is None:
            raise ValueError("error is required when status is failed")
        return self

    @classmethod
    def completed(
        cls,
        name: str,
        profile: ResumeProfile,
        breakdown: ScoreBreakdown,
        text_length: int,
    ) -> ResumeAnalysis:
        return cls(
            name=name,
            status=AnalysisStatus.COMPLETED,
            score=breakdown.total,
            profile=profile,
            breakdown=breakdown.to_dict(),
            text_length=text_length,
        )

    @classmethod
    def failed(cls, name: str, error: str) -> ResumeAnalysis:
        return cls(name=name, status=AnalysisStatus.FAILED, error=error)

    @property
    def succeeded(self) -> bool:
        return self.status == AnalysisStatus.COMPLETED

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation."""
        return self.model_dump(mode="json")

    def save_json(self, path: str | Path) -> None:
        """Save the analysis as JSON on disk."""
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")


class SkillCount(BaseModel):
    """How many analyzed resumes mention a skill."""

    skill: str
    count: int = Field(ge=1)
    category: str


class BatchSummary(BaseModel):
    """Aggregate view over a batch of analyses."""

    processed: int = Field(default=0, ge=0)
    completed: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    average_score: int = Field(default=0, ge=0, le=100)
    unique_skills: int = Field(default=0, ge=0)
    top_skills: list[SkillCount] = Field(default_factory=list)

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation."""
        return self.model_dump(mode="json")
