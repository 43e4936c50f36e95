"""Tests for scoring data models."""

import pytest


class TestClampScore:
    """Test clamp_score."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(-12.0, 0), (0.4, 0), (0.5, 1), (2.5, 3), (49.49, 49), (99.5, 100), (140.0, 100)],
    )
    def test_clamp_score(self, value, expected):
        """Values should round half up and stay within [0, 100]."""
        from resume_insight.scoring.models import clamp_score

        assert clamp_score(value) == expected


class TestScoreBreakdown:
    """Test ScoreBreakdown."""

    def test_totals(self):
        """base_total excludes the offset, total includes it."""
        from resume_insight.scoring.models import ScoreBreakdown

        breakdown = ScoreBreakdown(
            skills=10.0,
            projects=5.0,
            experience=7.5,
            education=12.0,
            contact=5.0,
            content_depth=3.0,
            work_experience=4.0,
            jitter=-2.2,
        )

        assert breakdown.base_total == 46.5
        assert breakdown.total == 44

    def test_component_above_cap_is_rejected(self):
        """Components beyond their caps should fail validation."""
        from resume_insight.scoring.models import ScoreBreakdown

        with pytest.raises(ValueError, match="skills"):
            ScoreBreakdown(skills=31.0)

        with pytest.raises(ValueError, match="work_experience"):
            ScoreBreakdown(work_experience=10.0)

    def test_negative_component_is_rejected(self):
        """Components must not be negative."""
        from resume_insight.scoring.models import ScoreBreakdown

        with pytest.raises(ValueError, match="education"):
            ScoreBreakdown(education=-1.0)

    def test_to_dict_includes_totals(self):
        """to_dict should include the component values and both totals."""
        from resume_insight.scoring.models import ScoreBreakdown

        data = ScoreBreakdown(skills=5.0, contact=10.0).to_dict()

        assert data["skills"] == 5.0
        assert data["jitter"] == 0.0
        assert data["base_total"] == 15.0
        assert data["total"] == 15
