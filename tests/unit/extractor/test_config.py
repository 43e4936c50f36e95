"""Tests for extractor configuration."""

from pathlib import Path


class TestExtractorConfig:
    """Test ExtractorConfig settings."""

    def test_extractor_config_has_defaults(self):
        """ExtractorConfig should default to the bundled skill table."""
        from resume_insight.extractor.config import ExtractorConfig

        config = ExtractorConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.skills_path is None

    def test_extractor_config_reads_from_environment_variables(self, monkeypatch):
        """ExtractorConfig should read EXTRACTOR_ prefixed variables."""
        from resume_insight.extractor.config import ExtractorConfig

        monkeypatch.setenv("EXTRACTOR_SKILLS_PATH", "config/skills.yaml")

        config = ExtractorConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.skills_path == Path("config/skills.yaml")

    def test_get_extractor_config_is_a_singleton(self):
        """get_extractor_config should cache until reset."""
        from resume_insight.extractor.config import (
            get_extractor_config,
            reset_extractor_config,
        )

        first = get_extractor_config()
        assert get_extractor_config() is first

        reset_extractor_config()
        assert get_extractor_config() is not first
