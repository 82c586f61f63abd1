"""Skills rules: count against the 50-skill limit and recommended-skill alignment."""

from typing import Optional

from profile_optimizer.analysis.models import SKILLS, SectionScore, Severity
from profile_optimizer.analysis.rules import RuleOutcome, missing_section, outcome, score_section
from profile_optimizer.profile.models import Profile
from profile_optimizer.roles.models import TargetRole
from profile_optimizer.utils.text_processing import js_round

SKILLS_LIMIT = 50


def count_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    count = len(profile.skills)
    remaining = SKILLS_LIMIT - count
    if count < 10:
        return outcome(
            -30,
            Severity.CRITICAL,
            f"Only {count} skills listed (max {SKILLS_LIMIT})",
            f"Add {remaining} more skills to maximize recruiter search matches",
        )
    if count < 30:
        return outcome(
            -15,
            Severity.WARNING,
            f"{count} skills listed (max {SKILLS_LIMIT})",
            f"Add {remaining} more skills for better coverage",
        )
    if count >= 40:
        return outcome(0, Severity.POSITIVE, f"Strong skills count: {count}/{SKILLS_LIMIT}")
    return None


def recommended_skills_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    recommended = role.recommended_skills
    if not recommended:
        return None

    # Exact match, case-insensitive; no substring matching for skills.
    have = {s.lower() for s in profile.skills}
    missing = [s for s in recommended if s.lower() not in have]
    matched = len(recommended) - len(missing)
    ratio = matched / len(recommended)
    summary = f"{matched}/{len(recommended)}"
    pct = js_round(ratio * 100)

    if ratio < 0.3:
        return outcome(
            -20,
            Severity.CRITICAL,
            f"Only {summary} recommended skills present ({pct}%)",
            "Add these critical skills: " + ", ".join(missing[:5]),
        )
    if ratio < 0.6:
        return outcome(
            -10,
            Severity.WARNING,
            f"{summary} recommended skills present ({pct}%)",
            "Consider adding: " + ", ".join(missing[:5]),
        )
    return outcome(
        0,
        Severity.POSITIVE,
        f"Strong skill alignment: {summary} recommended skills ({pct}%)",
    )


SKILLS_RULES = (count_rule, recommended_skills_rule)


def analyze_skills(profile: Profile, role: TargetRole) -> SectionScore:
    if not profile.skills:
        return missing_section(
            SKILLS,
            "No skills listed",
            "Add all 50 skills (profiles with 5+ skills get 17x more views)",
        )
    return score_section(SKILLS, SKILLS_RULES, profile, role)
