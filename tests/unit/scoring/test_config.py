"""Tests for scoring configuration."""

import pytest


class TestScoringConfig:
    """Test ScoringConfig settings."""

    def test_scoring_config_has_defaults(self):
        """ScoringConfig should load with sensible defaults."""
        from resume_insight.scoring.config import ScoringConfig

        config = ScoringConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.jitter == 5.0
        assert config.seed is None

    def test_scoring_config_reads_from_environment_variables(self, monkeypatch):
        """ScoringConfig should read from environment variables."""
        from resume_insight.scoring.config import ScoringConfig

        monkeypatch.setenv("SCORING_JITTER", "0")
        monkeypatch.setenv("SCORING_SEED", "1234")

        config = ScoringConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.jitter == 0.0
        assert config.seed == 1234

    @pytest.mark.parametrize("jitter", [-1.0, 51.0])
    def test_scoring_config_rejects_out_of_range_jitter(self, jitter):
        """Jitter must be between 0 and 50."""
        from pydantic import ValidationError

        from resume_insight.scoring.config import ScoringConfig

        with pytest.raises(ValidationError):
            ScoringConfig(_env_file=None, jitter=jitter)  # type: ignore[call-arg]

    def test_get_scoring_config_is_a_singleton(self):
        """get_scoring_config should cache until reset."""
        from resume_insight.scoring.config import get_scoring_config, reset_scoring_config

        first = get_scoring_config()
        assert get_scoring_config() is first

        reset_scoring_config()
        assert get_scoring_config() is not first
