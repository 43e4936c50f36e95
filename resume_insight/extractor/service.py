"""Resume extraction service.

Turns already-decoded document text into a `ResumeProfile` using keyword and
pattern heuristics. Every string is valid input: text without any
recognizable signal yields the all-default profile rather than an error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from resume_insight.extractor.config import ExtractorConfig, get_extractor_config
from resume_insight.extractor.models import (
    MAX_PROJECTS,
    MAX_WORK_EXPERIENCE,
    NOT_SPECIFIED,
    ContactInfo,
    ResumeProfile,
)
from resume_insight.extractor.skills import SkillTable, load_skill_table

logger = logging.getLogger(__name__)

PROJECT_KEYWORDS = ("project", "built", "developed")
EDUCATION_KEYWORDS = ("bachelor", "master", "phd", "degree", "university", "college")
ROLE_KEYWORDS = ("developer", "engineer", "analyst", "manager")

# Exclusive line length bounds
PROJECT_LINE_LENGTH = (20, 100)
ROLE_LINE_LENGTH = (10, 80)

# Stated experience above this saturates
MAX_EXPERIENCE_YEARS = 999_999

EXPERIENCE_RE = re.compile(
    r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s*)?(?:experience|exp)", re.IGNORECASE
)
EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
# Horizontal whitespace only, so a number never runs into the next line
PHONE_RE = re.compile(r"\+?[1-9]?[\d \t\-()]{10,}")


def split_lines(text: str) -> list[str]:
    """Split text on newlines into trimmed, non-empty lines.

    Only a line feed ends a line. Form feeds and other separators stay
    inside the line and are trimmed only at its ends.
    """
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


def _contains_any(line: str, keywords: Iterable[str]) -> bool:
    lowered = line.lower()
    return any(keyword in lowered for keyword in keywords)


def _select_lines(
    lines: list[str],
    keywords: Iterable[str],
    bounds: tuple[int, int],
    limit: int,
) -> list[str]:
    keywords = tuple(keywords)
    low, high = bounds
    selected = [
        line
        for line in lines
        if _contains_any(line, keywords) and low < len(line) < high
    ]
    return selected[:limit]


def extract_skills(text: str, skill_table: SkillTable) -> list[str]:
    """Return table skills that occur anywhere in the text.

    Matching is a case-insensitive substring search over the whole text, so
    "Java" is also found inside "JavaScript".
    """
    lowered = (text or "").lower()
    return [skill for skill in skill_table.names if skill.lower() in lowered]


def extract_projects(lines: list[str]) -> list[str]:
    """Return up to five lines that read like project descriptions."""
    return _select_lines(lines, PROJECT_KEYWORDS, PROJECT_LINE_LENGTH, MAX_PROJECTS)


def extract_experience_years(text: str) -> int:
    """Return the first stated number of years of experience, or 0.

    Figures above `MAX_EXPERIENCE_YEARS` are reported as that maximum.
    """
    match = EXPERIENCE_RE.search(text or "")
    if match is None:
        return 0
    digits = match.group(1).lstrip("0") or "0"
    if len(digits) > len(str(MAX_EXPERIENCE_YEARS)):
        return MAX_EXPERIENCE_YEARS
    return min(int(digits), MAX_EXPERIENCE_YEARS)


def extract_education(lines: list[str]) -> str:
    """Return the last line mentioning an education keyword."""
    education = NOT_SPECIFIED
    for line in lines:
        if _contains_any(line, EDUCATION_KEYWORDS):
            education = line
    return education


def extract_contact_info(text: str) -> ContactInfo:
    """Find the first email-shaped and phone-shaped tokens in the text."""
    text = text or ""

    email_match = EMAIL_RE.search(text)
    email = email_match.group(0) if email_match else None

    phone = None
    for match in PHONE_RE.finditer(text):
        # Trimmed token must still be phone-shaped and hold at least one digit
        candidate = match.group(0).strip()
        if PHONE_RE.fullmatch(candidate) and any(ch.isdigit() for ch in candidate):
            phone = candidate
            break

    return ContactInfo(email=email, phone=phone)


def extract_work_experience(lines: list[str]) -> list[str]:
    """Return up to three lines that name a job title or role."""
    return _select_lines(lines, ROLE_KEYWORDS, ROLE_LINE_LENGTH, MAX_WORK_EXPERIENCE)


def extract_profile(
    text: str | None, skill_table: SkillTable | None = None
) -> ResumeProfile:
    """Build a `ResumeProfile` from raw resume text.

    Args:
        text: Decoded document text. None and whitespace-only text are
            treated as an empty document.
        skill_table: Reference skills to detect; defaults to the bundled table.

    Returns:
        The extracted profile. Never raises for string input.
    """
    text = text or ""
    table = skill_table if skill_table is not None else load_skill_table()
    lines = split_lines(text)

    return ResumeProfile(
        skills=extract_skills(text, table),
        projects=extract_projects(lines),
        experience=extract_experience_years(text),
        education=extract_education(lines),
        contact_info=extract_contact_info(text),
        work_experience=extract_work_experience(lines),
        certifications=[],
    )


class ResumeExtractor:
    """Service for extracting structured profiles from resume text.

    Attributes:
        config: Extractor configuration settings.
        skill_table: Reference skills used for detection.
    """

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        skill_table: SkillTable | None = None,
    ) -> None:
        """Initialize the ResumeExtractor.

        Args:
            config: Extractor configuration. If not provided, uses default.
            skill_table: Skill table override. If not provided, the table
                named by `config.skills_path` (or the bundled one) is loaded.
        """
        self.config = config or get_extractor_config()
        if skill_table is None:
            skill_table = load_skill_table(self.config.skills_path)
        self.skill_table = skill_table

    def extract(self, text: str | None) -> ResumeProfile:
        """Extract a profile from a single document's text."""
        profile = extract_profile(text, self.skill_table)
        logger.debug(
            f"Extracted profile: skills={len(profile.skills)} "
            f"projects={len(profile.projects)} experience={profile.experience} "
            f"work_experience={len(profile.work_experience)} "
            f"education={'yes' if profile.has_education else 'no'}"
        )
        return profile
