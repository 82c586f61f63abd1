"""Experience rules: entry count, description depth, metrics, keyword presence."""

from typing import Optional

from profile_optimizer.analysis.models import EXPERIENCE, SectionScore, Severity
from profile_optimizer.analysis.rules import RuleOutcome, missing_section, outcome, score_section
from profile_optimizer.profile.models import ExperienceEntry, Profile
from profile_optimizer.roles.models import TargetRole
from profile_optimizer.utils.text_processing import (
    EXPERIENCE_METRIC_PATTERN,
    count_keywords,
    count_metrics,
    js_length,
    js_round,
)

MIN_ENTRIES = 3
MIN_DESCRIPTION_LENGTH = 50


def _is_minimal(entry: ExperienceEntry) -> bool:
    return js_length(entry.description) < MIN_DESCRIPTION_LENGTH


def total_metrics(entries: tuple[ExperienceEntry, ...]) -> int:
    """Quantified results across all entries. Minimal descriptions contribute none."""
    return sum(
        count_metrics(e.description, EXPERIENCE_METRIC_PATTERN)
        for e in entries
        if not _is_minimal(e)
    )


def entry_count_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    count = len(profile.experience)
    if count >= MIN_ENTRIES:
        return None
    return outcome(
        -10,
        Severity.WARNING,
        f"Only {count} experience entries",
        "Add more experience entries for better search indexing",
    )


def description_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    minimal = sum(1 for e in profile.experience if _is_minimal(e))
    if minimal == 0:
        return None
    return outcome(
        -10 * minimal,
        Severity.CRITICAL,
        f"{minimal} experience entries have no/minimal description",
        "Add detailed descriptions with quantified achievements to every role",
    )


def quantification_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    metrics = total_metrics(profile.experience)
    entries = len(profile.experience)
    if metrics == 0:
        return outcome(
            -25,
            Severity.CRITICAL,
            "No quantified results across all experience entries",
            "Add $ amounts, %, team sizes, and timeframes to every bullet point",
        )
    if metrics < entries * 2:
        return outcome(
            -10,
            Severity.WARNING,
            f"Low quantification density ({metrics} metrics across {entries} roles)",
            "Aim for 3-5 quantified bullets per role",
        )
    return outcome(0, Severity.POSITIVE, f"Strong quantification: {metrics} metrics across experience")


def keyword_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    keywords = role.all_keywords
    if not keywords:
        return None

    text = " ".join(f"{e.description} {e.title}" for e in profile.experience)
    found = count_keywords(text, keywords)
    pct = js_round(found / len(keywords) * 100)
    if found / len(keywords) < 0.3:
        return outcome(
            -15,
            Severity.WARNING,
            f"Low keyword presence in experience: {found}/{len(keywords)} ({pct}%)",
            "Weave target keywords into experience descriptions",
        )
    return outcome(0, Severity.POSITIVE, f"Good keyword coverage in experience: {pct}%")


EXPERIENCE_RULES = (
    entry_count_rule,
    description_rule,
    quantification_rule,
    keyword_rule,
)


def analyze_experience(profile: Profile, role: TargetRole) -> SectionScore:
    if not profile.experience:
        return missing_section(
            EXPERIENCE,
            "No experience entries",
            "Add at least 3 experience entries with detailed descriptions",
        )
    return score_section(EXPERIENCE, EXPERIENCE_RULES, profile, role)
