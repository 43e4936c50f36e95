"""Data models for the Resume Extractor."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Placeholder education value when no line mentions an education keyword
NOT_SPECIFIED = "Not specified"

MAX_PROJECTS = 5
MAX_WORK_EXPERIENCE = 3


class ContactInfo(BaseModel):
    """Contact fields found in a resume.

    Presence is what matters here; values are heuristic shape matches and
    are not validated as deliverable addresses or dialable numbers.
    """

    model_config = ConfigDict(frozen=True)

    email: str | None = Field(default=None, description="First email-shaped token")
    phone: str | None = Field(default=None, description="First phone-shaped token")
    location: str | None = Field(
        default=None, description="Reserved; not populated by the extractor"
    )


class ResumeProfile(BaseModel):
    """Structured signals extracted from one resume's raw text.

    Instances are immutable: built once by the extractor, read by the scorer
    and then handed to the presentation layer.

    Attributes:
        skills: Canonical skill names, each at most once.
        projects: Candidate project description lines in document order.
        experience: Years of experience stated in the text.
        education: Last line mentioning an education keyword, or "Not specified".
        contact_info: Email and phone, when present.
        work_experience: Lines naming job titles/roles in document order.
        certifications: Reserved for future extraction; always empty.
    """

    model_config = ConfigDict(frozen=True)

    skills: tuple[str, ...] = Field(default=(), description="Detected skills")
    projects: tuple[str, ...] = Field(
        default=(), max_length=MAX_PROJECTS, description="Project description lines"
    )
    experience: int = Field(default=0, ge=0, description="Years of experience")
    education: str = Field(default=NOT_SPECIFIED, description="Education line")
    contact_info: ContactInfo = Field(
        default_factory=ContactInfo, description="Contact details"
    )
    work_experience: tuple[str, ...] = Field(
        default=(), max_length=MAX_WORK_EXPERIENCE, description="Job title lines"
    )
    certifications: tuple[str, ...] = Field(
        default=(), description="Certifications (reserved)"
    )

    @field_validator("skills")
    @classmethod
    def validate_unique_skills(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject profiles that list the same skill twice."""
        if len(set(v)) != len(v):
            raise ValueError("skills must not contain duplicates")
        return v

    @property
    def has_education(self) -> bool:
        return self.education != NOT_SPECIFIED

    def to_dict(self) -> dict:
        """Serialize the profile to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> ResumeProfile:
        """Deserialize a profile from a dictionary."""
        return cls.model_validate(data)
