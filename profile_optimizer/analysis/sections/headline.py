"""Headline rules: length, Tier 1 keywords, metrics, seniority, credentials, buzzwords."""

from typing import Optional

from profile_optimizer.analysis.models import HEADLINE, SectionScore, Severity
from profile_optimizer.analysis.rules import RuleOutcome, missing_section, outcome, score_section
from profile_optimizer.profile.models import Profile
from profile_optimizer.roles.models import TargetRole
from profile_optimizer.utils.text_processing import (
    HEADLINE_METRIC_PATTERN,
    find_terms,
    js_length,
    js_round,
    partition_keywords,
)

HEADLINE_LIMIT = 220

SENIORITY_TERMS = [
    "svp", "vp", "president", "ceo", "coo", "cfo", "cto", "chief",
    "director", "partner", "head of", "executive",
]

CREDENTIAL_TERMS = [
    "bain", "mckinsey", "bcg", "wharton", "harvard", "stanford", "mba", "cpa", "cfa",
]

BUZZWORDS = [
    "dynamic", "passionate", "innovative", "results-driven", "thought leader",
    "guru", "ninja", "rockstar", "synergy", "leveraging", "paradigm",
]


def length_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    length = js_length(profile.headline)
    usage = length / HEADLINE_LIMIT
    pct = js_round(usage * 100)
    if usage < 0.5:
        return outcome(
            -20,
            Severity.WARNING,
            f"Headline only uses {length}/{HEADLINE_LIMIT} characters ({pct}%)",
            "Use more of the 220-character limit to include additional keywords",
        )
    if usage >= 0.7:
        return outcome(
            0,
            Severity.POSITIVE,
            f"Good headline length: {length}/{HEADLINE_LIMIT} characters ({pct}%)",
        )
    return None


def tier1_keyword_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    total = len(role.tier1_keywords)
    if total == 0:
        return None

    found, missing = partition_keywords(profile.headline, role.tier1_keywords)
    hit_rate = len(found) / total
    if hit_rate < 0.2:
        return outcome(
            -25,
            Severity.CRITICAL,
            f"Only {len(found)}/{total} Tier 1 keywords found in headline",
            "Add priority keywords like: " + ", ".join(missing[:3]),
        )
    if hit_rate < 0.4:
        return outcome(
            -10,
            Severity.WARNING,
            f"{len(found)}/{total} Tier 1 keywords in headline",
            "Consider adding: " + ", ".join(missing[:3]),
        )
    return outcome(
        0,
        Severity.POSITIVE,
        f"Strong keyword presence: {len(found)}/{total} Tier 1 keywords",
    )


def quantification_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    if HEADLINE_METRIC_PATTERN.search(profile.headline) is None:
        return outcome(
            -15,
            Severity.WARNING,
            "No quantified impact in headline",
            "Add a metric like '2x EBITDA' or '$XM revenue' to stop recruiter scroll",
        )
    return outcome(0, Severity.POSITIVE, "Headline includes quantified results (strong scroll-stopper)")


def seniority_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    if find_terms(profile.headline, SENIORITY_TERMS):
        return None
    return outcome(
        -10,
        Severity.WARNING,
        "No seniority signal in headline",
        "Include a title like SVP, VP, Chief, or Partner to signal level",
    )


def credential_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    if not find_terms(profile.headline, CREDENTIAL_TERMS):
        return None
    return outcome(0, Severity.POSITIVE, "Credential signal present (recruiters search for these)")


def buzzword_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    found = find_terms(profile.headline, BUZZWORDS)
    if not found:
        return None
    return outcome(
        -5 * len(found),
        Severity.WARNING,
        f"Generic buzzwords detected: {', '.join(found)}",
        "Replace with specific, quantified achievements",
    )


HEADLINE_RULES = (
    length_rule,
    tier1_keyword_rule,
    quantification_rule,
    seniority_rule,
    credential_rule,
    buzzword_rule,
)


def analyze_headline(profile: Profile, role: TargetRole) -> SectionScore:
    if not profile.headline:
        return missing_section(
            HEADLINE,
            "No headline set",
            "Add a headline using all 220 characters with target keywords",
        )
    return score_section(HEADLINE, HEADLINE_RULES, profile, role)
