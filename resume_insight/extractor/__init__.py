"""Resume text extraction.

This module derives a structured profile (skills, projects, experience,
education, contact info, work-experience lines) from decoded resume text
using keyword and pattern heuristics.

Public API:
    - ResumeExtractor: Main service class for extraction
    - extract_profile: Pure text -> ResumeProfile function
    - ResumeProfile: Pydantic model for extracted resume data
    - SkillTable: Reference skill -> category table
    - ExtractorConfig: Configuration settings for the extractor
    - get_extractor_config: Get the extractor configuration singleton
"""

from resume_insight.extractor.config import (
    ExtractorConfig,
    get_extractor_config,
    reset_extractor_config,
)
from resume_insight.extractor.models import NOT_SPECIFIED, ContactInfo, ResumeProfile
from resume_insight.extractor.service import ResumeExtractor, extract_profile
from resume_insight.extractor.skills import SkillTable, load_skill_table

__all__ = [
    "ResumeExtractor",
    "extract_profile",
    "ResumeProfile",
    "ContactInfo",
    "NOT_SPECIFIED",
    "SkillTable",
    "load_skill_table",
    "ExtractorConfig",
    "get_extractor_config",
    "reset_extractor_config",
]
