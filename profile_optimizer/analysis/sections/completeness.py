"""Profile completeness: ten weighted presence checks, summing to 100."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from profile_optimizer.analysis.models import COMPLETENESS, SectionScore, Severity
from profile_optimizer.analysis.rules import RuleOutcome, outcome, score_section
from profile_optimizer.profile.models import Profile
from profile_optimizer.roles.models import TargetRole


@dataclass(frozen=True)
class PresenceCheck:
    """Award ``points`` when the check passes, otherwise recommend ``fix``."""

    label: str
    points: int
    fix: str
    check: Callable[[Profile], bool]

    def __call__(self, profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
        if self.check(profile):
            return outcome(self.points, Severity.POSITIVE, self.label)
        severity = Severity.CRITICAL if self.points >= 10 else Severity.WARNING
        return outcome(0, severity, f"Missing: {self.label}", self.fix)


COMPLETENESS_CHECKS = (
    PresenceCheck("Headline present", 15, "Add a headline", lambda p: bool(p.headline)),
    PresenceCheck("About section present", 15, "Write an About section", lambda p: bool(p.about)),
    PresenceCheck("Experience listed", 15, "Add experience entries", lambda p: len(p.experience) >= 1),
    PresenceCheck("5+ skills listed", 10, "Add at least 5 skills", lambda p: len(p.skills) >= 5),
    PresenceCheck("Education listed", 5, "Add education", lambda p: len(p.education) >= 1),
    PresenceCheck(
        "Profile photo set",
        15,
        "Add a professional headshot (21x more views)",
        lambda p: p.has_profile_photo,
    ),
    PresenceCheck(
        "Banner image set",
        5,
        "Add an executive-caliber banner image",
        lambda p: p.has_banner,
    ),
    PresenceCheck(
        "Custom URL set",
        5,
        "Set a clean custom URL (linkedin.com/in/yourname)",
        lambda p: p.has_custom_url,
    ),
    PresenceCheck(
        "Profile verified",
        5,
        "Get Blue Check verification (boosts search ranking)",
        lambda p: p.has_verification,
    ),
    # Only the private signal is scored; the visible badge is informational.
    PresenceCheck(
        "Open to Work (private)",
        10,
        "Enable private Open to Work (2x recruiter messages)",
        lambda p: p.open_to_work_private,
    ),
)


def analyze_completeness(profile: Profile, role: TargetRole) -> SectionScore:
    return score_section(COMPLETENESS, COMPLETENESS_CHECKS, profile, role, base=0)
