"""Analysis result data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

HEADLINE = "Headline"
ABOUT = "About Section"
EXPERIENCE = "Experience"
SKILLS = "Skills"
COMPLETENESS = "Profile Completeness"
ENGAGEMENT = "Engagement Signals"

SECTION_NAMES = (HEADLINE, ABOUT, EXPERIENCE, SKILLS, COMPLETENESS, ENGAGEMENT)


class Severity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"
    POSITIVE = "positive"


@dataclass(frozen=True)
class Finding:
    """One rule's verdict. ``fix`` is set only when an action is recommended."""

    severity: Severity
    message: str
    fix: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "severity", Severity(self.severity))

    def to_dict(self) -> dict:
        d: dict[str, Any] = {"severity": self.severity.value, "message": self.message}
        if self.fix is not None:
            d["fix"] = self.fix
        return d

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Finding":
        return cls(
            severity=Severity(raw["severity"]),
            message=raw.get("message", ""),
            fix=raw.get("fix"),
        )


@dataclass(frozen=True)
class SectionScore:
    name: str
    score: int
    findings: tuple[Finding, ...] = ()
    max_score: int = 100

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "score": self.score,
            "max_score": self.max_score,
            "findings": [f.to_dict() for f in self.findings],
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "SectionScore":
        return cls(
            name=raw["name"],
            score=int(raw.get("score", 0)),
            max_score=int(raw.get("max_score", 100)),
            findings=tuple(Finding.from_dict(f) for f in raw.get("findings", [])),
        )


@dataclass(frozen=True)
class KeywordCoverage:
    tier1_found: tuple[str, ...] = ()
    tier1_missing: tuple[str, ...] = ()
    tier2_found: tuple[str, ...] = ()
    tier2_missing: tuple[str, ...] = ()
    tier3_found: tuple[str, ...] = ()
    tier3_missing: tuple[str, ...] = ()
    coverage_pct: float = 0.0

    @property
    def found_count(self) -> int:
        return len(self.tier1_found) + len(self.tier2_found) + len(self.tier3_found)

    @property
    def missing_count(self) -> int:
        return len(self.tier1_missing) + len(self.tier2_missing) + len(self.tier3_missing)

    def to_dict(self) -> dict:
        return {
            "tier1_found": list(self.tier1_found),
            "tier1_missing": list(self.tier1_missing),
            "tier2_found": list(self.tier2_found),
            "tier2_missing": list(self.tier2_missing),
            "tier3_found": list(self.tier3_found),
            "tier3_missing": list(self.tier3_missing),
            "coverage_pct": self.coverage_pct,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "KeywordCoverage":
        return cls(
            tier1_found=tuple(raw.get("tier1_found", [])),
            tier1_missing=tuple(raw.get("tier1_missing", [])),
            tier2_found=tuple(raw.get("tier2_found", [])),
            tier2_missing=tuple(raw.get("tier2_missing", [])),
            tier3_found=tuple(raw.get("tier3_found", [])),
            tier3_missing=tuple(raw.get("tier3_missing", [])),
            coverage_pct=float(raw.get("coverage_pct", 0.0)),
        )


@dataclass(frozen=True)
class AnalysisReport:
    profile_name: str
    target_role: str
    overall_score: int
    sections: tuple[SectionScore, ...]
    keyword_coverage: KeywordCoverage = field(default_factory=KeywordCoverage)
    top_recommendations: tuple[str, ...] = ()

    def section(self, name: str) -> Optional[SectionScore]:
        for s in self.sections:
            if s.name == name:
                return s
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "profile_name": self.profile_name,
            "target_role": self.target_role,
            "overall_score": self.overall_score,
            "sections": [s.to_dict() for s in self.sections],
            "keyword_coverage": self.keyword_coverage.to_dict(),
            "top_recommendations": list(self.top_recommendations),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "AnalysisReport":
        """Rebuild a saved report (e.g. a snapshot written with to_dict)."""
        return cls(
            profile_name=raw.get("profile_name", ""),
            target_role=raw.get("target_role", ""),
            overall_score=int(raw.get("overall_score", 0)),
            sections=tuple(SectionScore.from_dict(s) for s in raw.get("sections", [])),
            keyword_coverage=KeywordCoverage.from_dict(raw.get("keyword_coverage", {})),
            top_recommendations=tuple(raw.get("top_recommendations", [])),
        )
