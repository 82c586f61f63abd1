"""Role keyword coverage across the whole profile, independent of sections."""

from profile_optimizer.analysis.models import KeywordCoverage
from profile_optimizer.profile.models import Profile
from profile_optimizer.roles.models import TargetRole
from profile_optimizer.utils.text_processing import js_round, partition_keywords


def profile_text(profile: Profile) -> str:
    """Every textual field of the profile joined with spaces."""
    parts = [profile.headline, profile.about]
    parts.extend(f"{e.description} {e.title}" for e in profile.experience)
    parts.extend(profile.skills)
    parts.extend(profile.education)
    return " ".join(parts)


def analyze_keywords(profile: Profile, role: TargetRole) -> KeywordCoverage:
    """Split each tier into found/missing and compute overall coverage (1 decimal)."""
    text = profile_text(profile).lower()

    t1_found, t1_missing = partition_keywords(text, role.tier1_keywords)
    t2_found, t2_missing = partition_keywords(text, role.tier2_keywords)
    t3_found, t3_missing = partition_keywords(text, role.tier3_keywords)

    total = role.keyword_count
    found = len(t1_found) + len(t2_found) + len(t3_found)
    pct = found / total * 100 if total > 0 else 0

    return KeywordCoverage(
        tier1_found=tuple(t1_found),
        tier1_missing=tuple(t1_missing),
        tier2_found=tuple(t2_found),
        tier2_missing=tuple(t2_missing),
        tier3_found=tuple(t3_found),
        tier3_missing=tuple(t3_missing),
        coverage_pct=js_round(pct * 10) / 10,
    )
