"""Pytest configuration and shared fixtures."""

import pytest

_ENV_VARS = (
    "LOG_LEVEL",
    "MAX_TEXT_CHARS",
    "OUTPUT_FORMAT",
    "EXTRACTOR_SKILLS_PATH",
    "SCORING_JITTER",
    "SCORING_SEED",
)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Keep host environment variables and cached singletons out of tests."""
    from resume_insight.config.settings import reset_settings
    from resume_insight.extractor.config import reset_extractor_config
    from resume_insight.scoring.config import reset_scoring_config
    from resume_insight.utils.logging import reset_logging

    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)

    reset_settings()
    reset_extractor_config()
    reset_scoring_config()
    reset_logging()
    yield
    reset_settings()
    reset_extractor_config()
    reset_scoring_config()
    reset_logging()


@pytest.fixture
def sample_resume_text() -> str:
    """A small but complete plain-text resume."""
    return "\n".join(
        [
            "Jane Doe",
            "Senior Software Engineer",
            "jane.doe@example.com | +1 (555) 123-4567",
            "Summary: 6+ years of experience building web platforms with Python and React.",
            "Skills: Python, Django, PostgreSQL, Docker, TypeScript",
            "",
            "Experience",
            "Senior Software Engineer at Acme Corp",
            "Built a real-time analytics dashboard used by 200 customers",
            "Developed a payment reconciliation service in Python",
            "Data Analyst at Initech",
            "",
            "Education",
            "B.S. Computer Science, State College",
            "Master of Science in Computer Science, Example University",
        ]
    )


@pytest.fixture
def zero_random():
    """Random source that pins the score offset to zero."""
    from resume_insight.scoring.random_source import FixedRandomSource

    return FixedRandomSource(0.0)
