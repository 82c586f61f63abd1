"""Rule folding shared by the section analyzers.

A rule is a pure function ``(profile, role) -> RuleOutcome | None``. Section
scores are the base score plus every rule's delta, clamped once at the end so
penalties compound.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional

from profile_optimizer.analysis.models import Finding, SectionScore, Severity
from profile_optimizer.profile.models import Profile
from profile_optimizer.roles.models import TargetRole

MAX_SCORE = 100


@dataclass(frozen=True)
class RuleOutcome:
    delta: int = 0
    finding: Optional[Finding] = None


Rule = Callable[[Profile, TargetRole], Optional[RuleOutcome]]


def outcome(
    delta: int,
    severity: Severity,
    message: str,
    fix: Optional[str] = None,
) -> RuleOutcome:
    return RuleOutcome(delta=delta, finding=Finding(severity=severity, message=message, fix=fix))


def clamp(score: int) -> int:
    return max(0, min(MAX_SCORE, score))


def score_section(
    name: str,
    rules: Sequence[Rule],
    profile: Profile,
    role: TargetRole,
    base: int = MAX_SCORE,
) -> SectionScore:
    """Fold rules left over the base score and collect findings in rule order."""
    score = base
    findings = []
    for rule in rules:
        result = rule(profile, role)
        if result is None:
            continue
        score += result.delta
        if result.finding is not None:
            findings.append(result.finding)
    return SectionScore(name=name, score=clamp(score), findings=tuple(findings))


def missing_section(name: str, message: str, fix: str) -> SectionScore:
    """Result for a section whose primary field is empty."""
    return SectionScore(
        name=name,
        score=0,
        findings=(Finding(severity=Severity.CRITICAL, message=message, fix=fix),),
    )
