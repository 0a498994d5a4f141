"""Skill normalization and taxonomy expansion.

A declared skill implies related skills (a framework implies its language,
a database engine implies SQL). The taxonomy is a static YAML table loaded
once and shared read-only between requests.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

import yaml

from config import settings

logger = logging.getLogger(__name__)

DEFAULT_TAXONOMY_PATH = Path(__file__).parent / "data" / "skill_taxonomy.yaml"

# Non-technical competencies: half weight, never satisfy the relevance gate
SOFT_SKILLS: frozenset[str] = frozenset({
    "communication",
    "teamwork",
    "self-study",
    "problem-solving",
    "reading",
    "technical document comprehension ability",
    "analytical thinking",
    "compliance knowledge",
    "customer service",
})

# Substituted when a profile declares no skills at all
FALLBACK_SKILLS: tuple[str, ...] = ("communication", "teamwork")

_taxonomy: Mapping[str, tuple[str, ...]] | None = None


def normalize(value: str) -> str:
    """Lower-case and trim a skill, requirement or word."""
    return value.lower().strip()


def is_soft_skill(skill: str) -> bool:
    return normalize(skill) in SOFT_SKILLS


def load_taxonomy(path: str | Path) -> Mapping[str, tuple[str, ...]]:
    """Read a taxonomy YAML file into an immutable mapping.

    Keys and related skills are normalized; blank entries are dropped.
    """
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Skill taxonomy must be a mapping, got {type(raw).__name__}")

    table: dict[str, tuple[str, ...]] = {}
    for skill, related in raw.items():
        key = normalize(str(skill))
        if not key:
            continue
        values = [normalize(str(r)) for r in (related or [])]
        table[key] = tuple(v for v in values if v)

    logger.info("Loaded skill taxonomy with %d entries from %s", len(table), path)
    return MappingProxyType(table)


def get_taxonomy() -> Mapping[str, tuple[str, ...]]:
    """Return the process-wide taxonomy, loading it on first call."""
    global _taxonomy
    if _taxonomy is None:
        _taxonomy = load_taxonomy(settings.skill_taxonomy_path or DEFAULT_TAXONOMY_PATH)
    return _taxonomy


@dataclass(frozen=True)
class ExpandedSkills:
    """Deduplicated skills in first-seen order, soft skills flagged."""
    skills: tuple[str, ...]
    soft: frozenset[str]

    def __iter__(self):
        return iter(self.skills)

    def __len__(self) -> int:
        return len(self.skills)

    def is_soft(self, skill: str) -> bool:
        return skill in self.soft


def expand_skills(
    skills: Iterable[str] | None,
    taxonomy: Mapping[str, tuple[str, ...]] | None = None,
) -> ExpandedSkills:
    """Expand declared skills with the related skills they imply.

    Each skill is followed by its taxonomy entries; duplicates keep their
    first position. Soft skills are kept but not expanded. An empty skill
    list is replaced by FALLBACK_SKILLS.
    """
    if taxonomy is None:
        taxonomy = get_taxonomy()

    declared = [s for s in (normalize(skill) for skill in (skills or [])) if s]
    if not declared:
        declared = list(FALLBACK_SKILLS)

    expanded: dict[str, None] = {}
    for skill in declared:
        expanded.setdefault(skill)
        if skill in SOFT_SKILLS:
            continue
        for related in taxonomy.get(skill, ()):
            expanded.setdefault(related)

    ordered = tuple(expanded)
    return ExpandedSkills(
        skills=ordered,
        soft=frozenset(s for s in ordered if s in SOFT_SKILLS),
    )
