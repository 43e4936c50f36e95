"""Document analysis service.

Runs the extractor and the scorer over one document at a time. Turning a
file into text belongs to the decoding collaborator; here only plain UTF-8
text files are read. Any document that cannot be read is reported as a
FAILED analysis and skips extraction and scoring entirely.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from resume_insight.analysis.models import (
    BatchSummary,
    ResumeAnalysis,
    SkillCount,
)
from resume_insight.config.settings import Settings, get_settings
from resume_insight.extractor.service import ResumeExtractor
from resume_insight.extractor.skills import SkillTable
from resume_insight.scoring.models import clamp_score
from resume_insight.scoring.service import ResumeScorer

logger = logging.getLogger(__name__)

# Binary formats need a dedicated decoder upstream
UNSUPPORTED_SUFFIXES = frozenset({".pdf", ".doc", ".docx", ".rtf", ".odt"})

TOP_SKILLS_LIMIT = 10


class DocumentReadError(Exception):
    """Raised when a document cannot be turned into text."""


def read_document_text(path: Path | str) -> str:
    """Read a plain-text document.

    Raises:
        DocumentReadError: If the file is missing, unreadable, a binary
            format, or not valid UTF-8.
    """
    document_path = Path(path)
    suffix = document_path.suffix.lower()
    if suffix in UNSUPPORTED_SUFFIXES:
        raise DocumentReadError(
            f"Unsupported document type '{suffix}': convert {document_path.name} to text first"
        )

    try:
        return document_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DocumentReadError(f"Document not found: {document_path}") from e
    except UnicodeDecodeError as e:
        raise DocumentReadError(
            f"Document is not valid UTF-8 text: {document_path}"
        ) from e
    except OSError as e:
        raise DocumentReadError(f"Failed to read {document_path}: {e}") from e


class AnalysisService:
    """Service that extracts and scores resumes, one document per call."""

    def __init__(
        self,
        settings: Settings | None = None,
        extractor: ResumeExtractor | None = None,
        scorer: ResumeScorer | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.extractor = extractor or ResumeExtractor()
        self.scorer = scorer or ResumeScorer()

    @property
    def skill_table(self) -> SkillTable:
        return self.extractor.skill_table

    def analyze_text(self, text: str | None, name: str = "document") -> ResumeAnalysis:
        """Extract and score already-decoded document text."""
        text = text or ""
        limit = self.settings.max_text_chars
        if len(text) > limit:
            logger.info(f"Truncating {name} from {len(text)} to {limit} characters")
            text = text[:limit]

        profile = self.extractor.extract(text)
        breakdown = self.scorer.breakdown(profile, text)
        logger.info(
            f"Analyzed {name}: score={breakdown.total} skills={len(profile.skills)} "
            f"projects={len(profile.projects)} experience={profile.experience}"
        )
        return ResumeAnalysis.completed(
            name=name,
            profile=profile,
            breakdown=breakdown,
            text_length=len(text),
        )

    def analyze_file(self, path: Path | str) -> ResumeAnalysis:
        """Read, extract and score a single document file."""
        document_path = Path(path)
        try:
            text = read_document_text(document_path)
        except DocumentReadError as e:
            logger.warning(f"Skipping {document_path.name}: {e}")
            return ResumeAnalysis.failed(name=document_path.name, error=str(e))

        return self.analyze_text(text, name=document_path.name)

    def analyze_batch(self, paths: Iterable[Path | str]) -> list[ResumeAnalysis]:
        """Analyze each document independently; failures do not stop the batch."""
        results = [self.analyze_file(path) for path in paths]
        failed = sum(1 for result in results if not result.succeeded)
        logger.info(f"Batch complete: processed={len(results)} failed={failed}")
        return results

    def summarize(self, analyses: list[ResumeAnalysis]) -> BatchSummary:
        return summarize(analyses, self.skill_table)


def summarize(
    analyses: list[ResumeAnalysis],
    skill_table: SkillTable,
    top_n: int = TOP_SKILLS_LIMIT,
) -> BatchSummary:
    """Aggregate scores and skill frequencies over completed analyses."""
    completed = [a for a in analyses if a.succeeded and a.profile is not None]

    average = 0
    if completed:
        average = clamp_score(sum(a.score for a in completed) / len(completed))

    # Counter keeps first-seen order among equal counts
    counts: Counter[str] = Counter()
    for analysis in completed:
        counts.update(analysis.profile.skills)

    top_skills = [
        SkillCount(skill=skill, count=count, category=skill_table.category_for(skill))
        for skill, count in counts.most_common(top_n)
    ]

    return BatchSummary(
        processed=len(analyses),
        completed=len(completed),
        failed=len(analyses) - len(completed),
        average_score=average,
        unique_skills=len(counts),
        top_skills=top_skills,
    )
