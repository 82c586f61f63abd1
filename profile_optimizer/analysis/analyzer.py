"""Core analysis engine: runs every section analyzer and aggregates the report.

Pure and synchronous. The same (profile, role) always yields the same report.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from profile_optimizer.analysis.keywords import analyze_keywords
from profile_optimizer.analysis.models import (
    ABOUT,
    COMPLETENESS,
    ENGAGEMENT,
    EXPERIENCE,
    HEADLINE,
    SKILLS,
    AnalysisReport,
    SectionScore,
    Severity,
)
from profile_optimizer.analysis.sections.about import analyze_about
from profile_optimizer.analysis.sections.completeness import analyze_completeness
from profile_optimizer.analysis.sections.engagement import analyze_engagement
from profile_optimizer.analysis.sections.experience import analyze_experience
from profile_optimizer.analysis.sections.headline import analyze_headline
from profile_optimizer.analysis.sections.skills import analyze_skills
from profile_optimizer.profile.models import Profile
from profile_optimizer.roles.models import TargetRole
from profile_optimizer.utils.text_processing import js_round

logger = logging.getLogger("profile_optimizer.analysis")

# Section weights (sum to 1.0)
SECTION_WEIGHTS = {
    HEADLINE: 0.20,
    ABOUT: 0.20,
    EXPERIENCE: 0.20,
    SKILLS: 0.15,
    COMPLETENESS: 0.10,
    ENGAGEMENT: 0.15,
}
DEFAULT_WEIGHT = 0.10

MAX_RECOMMENDATIONS = 10

SECTION_ANALYZERS = (
    analyze_headline,
    analyze_about,
    analyze_experience,
    analyze_skills,
    analyze_completeness,
    analyze_engagement,
)


def overall_score(sections: tuple[SectionScore, ...]) -> int:
    """Weighted sum of section scores, rounded half up once at the end."""
    total = 0.0
    for section in sections:
        total += section.score * SECTION_WEIGHTS.get(section.name, DEFAULT_WEIGHT)
    return js_round(total)


def top_recommendations(
    sections: tuple[SectionScore, ...],
    limit: int = MAX_RECOMMENDATIONS,
) -> list[str]:
    """Every critical fix first, then warning fixes until the limit is reached."""
    recs = []
    for section in sections:
        for finding in section.findings:
            if finding.severity == Severity.CRITICAL and finding.fix:
                recs.append(f"[{section.name}] {finding.fix}")

    for section in sections:
        for finding in section.findings:
            if finding.severity == Severity.WARNING and finding.fix and len(recs) < limit:
                recs.append(f"[{section.name}] {finding.fix}")

    return recs[:limit]


def analyze_profile(profile: Profile, role: TargetRole) -> AnalysisReport:
    """Score a profile against a target role rubric."""
    sections = tuple(analyze(profile, role) for analyze in SECTION_ANALYZERS)
    coverage = analyze_keywords(profile, role)
    score = overall_score(sections)

    logger.debug(
        "Scored %s against %s: %d (keyword coverage %.1f%%)",
        profile.name or "Unknown",
        role.name,
        score,
        coverage.coverage_pct,
    )

    return AnalysisReport(
        profile_name=profile.name or "Unknown",
        target_role=role.name,
        overall_score=score,
        sections=sections,
        keyword_coverage=coverage,
        top_recommendations=tuple(top_recommendations(sections)),
    )


@dataclass(frozen=True)
class ScoreDelta:
    """Change in scores between a saved snapshot and a fresh report."""

    overall: int
    sections: dict[str, int] = field(default_factory=dict)

    @property
    def improved(self) -> bool:
        return self.overall > 0


def score_delta(report: AnalysisReport, snapshot: Optional[AnalysisReport]) -> Optional[ScoreDelta]:
    """Compare a report to a snapshot. Sections missing from either side are skipped."""
    if snapshot is None:
        return None
    sections = {}
    for section in report.sections:
        previous = snapshot.section(section.name)
        if previous is not None:
            sections[section.name] = section.score - previous.score
    return ScoreDelta(overall=report.overall_score - snapshot.overall_score, sections=sections)
