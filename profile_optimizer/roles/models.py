"""Target role data model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TargetRole:
    """A role-specific keyword rubric.

    Keyword tiers are ordered most-important first. A keyword listed in two
    tiers is matched (and counted) in both.
    """

    name: str
    description: str = ""
    tier1_keywords: tuple[str, ...] = ()
    tier2_keywords: tuple[str, ...] = ()
    tier3_keywords: tuple[str, ...] = ()
    recommended_skills: tuple[str, ...] = ()
    headline_examples: tuple[str, ...] = ()

    def __post_init__(self):
        for attr in (
            "tier1_keywords",
            "tier2_keywords",
            "tier3_keywords",
            "recommended_skills",
            "headline_examples",
        ):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def all_keywords(self) -> tuple[str, ...]:
        return self.tier1_keywords + self.tier2_keywords + self.tier3_keywords

    @property
    def keyword_count(self) -> int:
        return len(self.all_keywords)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "TargetRole":
        name = str(raw.get("name", "") or "").strip()
        if not name:
            raise ValueError(f"Role definition is missing a name: {raw!r}")
        return cls(
            name=name,
            description=str(raw.get("description", "") or ""),
            tier1_keywords=tuple(str(k) for k in raw.get("tier1_keywords") or []),
            tier2_keywords=tuple(str(k) for k in raw.get("tier2_keywords") or []),
            tier3_keywords=tuple(str(k) for k in raw.get("tier3_keywords") or []),
            recommended_skills=tuple(str(s) for s in raw.get("recommended_skills") or []),
            headline_examples=tuple(str(h) for h in raw.get("headline_examples") or []),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "tier1_keywords": list(self.tier1_keywords),
            "tier2_keywords": list(self.tier2_keywords),
            "tier3_keywords": list(self.tier3_keywords),
            "recommended_skills": list(self.recommended_skills),
            "headline_examples": list(self.headline_examples),
        }
