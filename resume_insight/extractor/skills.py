"""Reference skill table loading.

The table maps each canonical skill name to the category the dashboard
groups it under. It is data, not behavior: extending detection means editing
`data/skills.yaml` (or pointing `EXTRACTOR_SKILLS_PATH` at another file).
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from pathlib import Path

import yaml

DEFAULT_SKILLS_PATH = Path(__file__).resolve().parent / "data" / "skills.yaml"
DEFAULT_CATEGORY = "Other"


class SkillTable:
    """Ordered mapping of canonical skill name to category."""

    def __init__(self, categories: Mapping[str, str | None]) -> None:
        self._categories: dict[str, str] = {}
        seen: set[str] = set()

        for name, category in categories.items():
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f"Skill names must be non-empty strings (got {name!r})")
            if category is not None and not isinstance(category, str):
                raise ValueError(
                    f"Category for {name!r} must be a string (got {category!r})"
                )

            canonical = name.strip()
            key = canonical.lower()
            if key in seen:
                raise ValueError(f"Duplicate skill in table: {canonical}")
            seen.add(key)

            self._categories[canonical] = (category or "").strip() or DEFAULT_CATEGORY

    @property
    def names(self) -> list[str]:
        """Canonical skill names in detection order."""
        return list(self._categories)

    def category_for(self, skill: str) -> str:
        """Return the category for a skill, or 'Other' when unmapped."""
        return self._categories.get(skill, DEFAULT_CATEGORY)

    def to_dict(self) -> dict[str, str]:
        return dict(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __contains__(self, skill: object) -> bool:
        return skill in self._categories

    @classmethod
    def from_file(cls, path: Path | str) -> SkillTable:
        """Load a skill table from a YAML or JSON file.

        The file holds either a top-level ``skills`` mapping or the mapping
        itself. Categories may be null, in which case the skill is 'Other'.
        """
        table_path = Path(path)
        if not table_path.exists():
            raise FileNotFoundError(f"Skill table not found: {table_path}")

        raw = table_path.read_text(encoding="utf-8")
        if table_path.suffix.lower() == ".json":
            try:
                data = json.loads(raw)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON skill table: {table_path}") from e
        else:
            try:
                data = yaml.safe_load(raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML skill table: {table_path}") from e

        if isinstance(data, dict) and "skills" in data:
            data = data["skills"]
        if not isinstance(data, dict) or not data:
            raise ValueError(
                f"Skill table must be a non-empty mapping of skill -> category: {table_path}"
            )
        return cls(data)


_default_table: SkillTable | None = None


def get_default_skill_table() -> SkillTable:
    """Get the bundled reference skill table (loaded once)."""
    global _default_table
    if _default_table is None:
        _default_table = SkillTable.from_file(DEFAULT_SKILLS_PATH)
    return _default_table


def load_skill_table(path: Path | str | None = None) -> SkillTable:
    """Load the skill table at `path`, or the bundled table when None."""
    if path is None:
        return get_default_skill_table()
    return SkillTable.from_file(path)
