"""Per-document analysis: decode, extract, score.

Public API:
    - AnalysisService: Runs extraction and scoring over texts and files
    - ResumeAnalysis: Result for one document
    - BatchSummary: Aggregate scores and skill counts for a batch
    - summarize: Build a BatchSummary from analyses
"""

from resume_insight.analysis.models import (
    AnalysisStatus,
    BatchSummary,
    ResumeAnalysis,
    SkillCount,
)
from resume_insight.analysis.service import (
    AnalysisService,
    DocumentReadError,
    read_document_text,
    summarize,
)

__all__ = [
    "AnalysisService",
    "AnalysisStatus",
    "ResumeAnalysis",
    "BatchSummary",
    "SkillCount",
    "DocumentReadError",
    "read_document_text",
    "summarize",
]
