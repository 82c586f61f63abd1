"""About section rules."""

from typing import Optional

from profile_optimizer.analysis.models import ABOUT, SectionScore, Severity
from profile_optimizer.analysis.rules import RuleOutcome, missing_section, outcome, score_section
from profile_optimizer.profile.models import Profile
from profile_optimizer.roles.models import TargetRole
from profile_optimizer.utils.text_processing import (
    ABOUT_METRIC_PATTERN,
    count_keywords,
    count_metrics,
    find_terms,
    has_emoji,
    js_length,
    js_round,
)

GENERIC_CTAS = ["let's connect", "feel free to connect", "reach out", "open to new opportunities"]

WEAK_OPENINGS = ["greetings", "hello", "hi there", "welcome to my", "i am a"]


def length_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    length = js_length(profile.about)
    if length < 500:
        return outcome(
            -25,
            Severity.CRITICAL,
            f"About section too short ({length}/2,600 chars)",
            "Expand to at least 1,500 characters to improve search indexing",
        )
    if length < 1500:
        return outcome(
            -10,
            Severity.WARNING,
            f"About section could be longer ({length}/2,600 chars)",
            "Aim for 2,000+ characters to maximize keyword coverage",
        )
    return outcome(0, Severity.POSITIVE, f"Good About length: {length}/2,600 characters")


def quantification_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    metrics = count_metrics(profile.about, ABOUT_METRIC_PATTERN)
    if metrics == 0:
        return outcome(
            -25,
            Severity.CRITICAL,
            "No quantified results in About section",
            "Add specific metrics: revenue, EBITDA, %, team sizes, timeframes",
        )
    if metrics < 3:
        return outcome(
            -10,
            Severity.WARNING,
            f"Only {metrics} quantified metric(s) found",
            "Aim for 5+ metrics (EBITDA, revenue, team size, timeframes, %)",
        )
    return outcome(0, Severity.POSITIVE, f"Strong quantification: {metrics} metrics found")


def keyword_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    priority = role.tier1_keywords + role.tier2_keywords
    if not priority:
        return None

    found = count_keywords(profile.about, priority)
    ratio = found / len(priority)
    summary = f"{found}/{len(priority)} ({js_round(ratio * 100)}%)"
    if ratio < 0.25:
        return outcome(
            -20,
            Severity.CRITICAL,
            f"Low keyword coverage in About: {summary}",
            "Weave in more target keywords naturally throughout the section",
        )
    if ratio < 0.5:
        return outcome(-10, Severity.WARNING, f"Moderate keyword coverage: {summary}")
    return outcome(0, Severity.POSITIVE, f"Strong keyword coverage: {summary}")


def emoji_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    if not has_emoji(profile.about):
        return None
    return outcome(
        -15,
        Severity.WARNING,
        "Emojis detected in About section",
        "Remove emojis. LinkedIn's 2025+ algorithm penalizes template-looking content",
    )


def generic_cta_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    if not find_terms(profile.about, GENERIC_CTAS):
        return None
    return outcome(
        -5,
        Severity.INFO,
        "Generic CTA detected ('Let's connect' etc.)",
        "Remove generic CTAs. Executives don't need them; they signal junior positioning",
    )


def weak_opening_rule(profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
    opening = profile.about.lower().strip()
    if not any(opening.startswith(phrase) for phrase in WEAK_OPENINGS):
        return None
    return outcome(
        -10,
        Severity.WARNING,
        "Weak opening detected",
        "Open with a bold positioning statement or quantified result, not a greeting",
    )


ABOUT_RULES = (
    length_rule,
    quantification_rule,
    keyword_rule,
    emoji_rule,
    generic_cta_rule,
    weak_opening_rule,
)


def analyze_about(profile: Profile, role: TargetRole) -> SectionScore:
    if not profile.about:
        return missing_section(
            ABOUT,
            "No About section",
            "Write a 2,000-2,600 character About section with quantified achievements",
        )
    return score_section(ABOUT, ABOUT_RULES, profile, role)
