"""Tests for skill table loading."""

import json

import pytest


class TestBundledSkillTable:
    """Test the bundled reference table."""

    def test_bundled_table_loads(self):
        """The bundled table should load with every reference skill."""
        from resume_insight.extractor.skills import get_default_skill_table

        table = get_default_skill_table()

        assert len(table) == 48
        assert table.names[:3] == ["JavaScript", "TypeScript", "React"]
        assert "C++" in table
        assert "C#" in table
        assert "Power BI" in table

    def test_bundled_categories(self):
        """Dashboard categories should be mapped, others fall back to Other."""
        from resume_insight.extractor.skills import get_default_skill_table

        table = get_default_skill_table()

        assert table.category_for("React") == "Frontend"
        assert table.category_for("Python") == "Backend"
        assert table.category_for("MongoDB") == "Database"
        assert table.category_for("Kubernetes") == "DevOps"
        assert table.category_for("Redis") == "Other"
        assert table.category_for("COBOL") == "Other"

    def test_load_skill_table_without_path_returns_bundled_table(self):
        """load_skill_table(None) should return the bundled table."""
        from resume_insight.extractor.skills import (
            get_default_skill_table,
            load_skill_table,
        )

        assert load_skill_table() is get_default_skill_table()


class TestSkillTableFromFile:
    """Test SkillTable.from_file."""

    def test_loads_yaml_mapping(self, tmp_path):
        """A YAML mapping should load in file order."""
        from resume_insight.extractor.skills import SkillTable

        path = tmp_path / "skills.yaml"
        path.write_text("skills:\n  Elixir: Backend\n  Svelte: Frontend\n", encoding="utf-8")

        table = SkillTable.from_file(path)

        assert table.names == ["Elixir", "Svelte"]
        assert table.category_for("Svelte") == "Frontend"

    def test_loads_bare_json_mapping(self, tmp_path):
        """A JSON mapping without the skills key should load."""
        from resume_insight.extractor.skills import SkillTable

        path = tmp_path / "skills.json"
        path.write_text(json.dumps({"Scala": "Backend"}), encoding="utf-8")

        table = SkillTable.from_file(path)

        assert table.to_dict() == {"Scala": "Backend"}

    def test_null_category_defaults_to_other(self, tmp_path):
        """Skills without a category should be grouped under Other."""
        from resume_insight.extractor.skills import SkillTable

        path = tmp_path / "skills.yaml"
        path.write_text("skills:\n  Zig:\n", encoding="utf-8")

        assert SkillTable.from_file(path).category_for("Zig") == "Other"

    def test_missing_file_raises(self, tmp_path):
        """A missing table file should raise FileNotFoundError."""
        from resume_insight.extractor.skills import SkillTable

        with pytest.raises(FileNotFoundError):
            SkillTable.from_file(tmp_path / "missing.yaml")

    def test_invalid_yaml_raises_value_error(self, tmp_path):
        """Unparseable YAML should raise ValueError."""
        from resume_insight.extractor.skills import SkillTable

        path = tmp_path / "skills.yaml"
        path.write_text("skills: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            SkillTable.from_file(path)

    def test_list_instead_of_mapping_raises(self, tmp_path):
        """A list of skills without categories is not a valid table."""
        from resume_insight.extractor.skills import SkillTable

        path = tmp_path / "skills.yaml"
        path.write_text("skills:\n  - Python\n  - Go\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            SkillTable.from_file(path)

    def test_case_insensitive_duplicates_raise(self):
        """Two entries differing only by case should be rejected."""
        from resume_insight.extractor.skills import SkillTable

        with pytest.raises(ValueError, match="Duplicate"):
            SkillTable({"React": "Frontend", "react": "Frontend"})
