"""Engagement signals: posting, commenting, featured items, recommendations, network."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from profile_optimizer.analysis.models import ENGAGEMENT, SectionScore, Severity
from profile_optimizer.analysis.rules import RuleOutcome, outcome, score_section
from profile_optimizer.profile.models import Profile
from profile_optimizer.roles.models import TargetRole
from profile_optimizer.utils.text_processing import format_number


@dataclass(frozen=True)
class TieredMetric:
    """Two-threshold metric: full points at ``high``, partial at ``low``, else none.

    Message templates receive the formatted metric value as ``{value}``.
    """

    value: Callable[[Profile], float]
    high: float
    high_points: int
    high_message: str
    low: float
    low_points: int
    low_message: str
    low_fix: str
    none_severity: Severity
    none_message: str
    none_fix: str

    def __call__(self, profile: Profile, role: TargetRole) -> Optional[RuleOutcome]:
        value = self.value(profile)
        shown = format_number(value)
        if value >= self.high:
            return outcome(self.high_points, Severity.POSITIVE, self.high_message.format(value=shown))
        if value >= self.low:
            return outcome(
                self.low_points,
                Severity.INFO,
                self.low_message.format(value=shown),
                self.low_fix,
            )
        return outcome(0, self.none_severity, self.none_message.format(value=shown), self.none_fix)


ENGAGEMENT_METRICS = (
    TieredMetric(
        value=lambda p: p.posts_per_month,
        high=2, high_points=30, high_message="Good posting frequency: {value}/month",
        low=0.5, low_points=15, low_message="Posting {value}/month",
        low_fix="Increase to 2 posts/month for optimal visibility",
        none_severity=Severity.CRITICAL, none_message="Low/no posting activity",
        none_fix="Post 1-2x per month. Active profiles get 40% more recruiter visibility",
    ),
    TieredMetric(
        value=lambda p: p.comments_per_week,
        high=3, high_points=30, high_message="Strong commenting: {value}/week",
        low=1, low_points=15, low_message="Commenting {value}/week",
        low_fix="Increase to 2-3 comments/week (250% boost in profile views)",
        none_severity=Severity.CRITICAL, none_message="No commenting activity",
        none_fix="Comment on 2-3 posts/week with 10+ word substantive comments",
    ),
    TieredMetric(
        value=lambda p: p.featured_items,
        high=3, high_points=15, high_message="{value} featured items",
        low=1, low_points=8, low_message="{value} featured item(s)",
        low_fix="Add 3-4 featured items (articles, case studies, media appearances)",
        none_severity=Severity.WARNING, none_message="No featured items",
        none_fix="Add thought leadership content to Featured section",
    ),
    TieredMetric(
        value=lambda p: p.recommendations_count,
        high=3, high_points=15, high_message="{value} recommendations",
        low=1, low_points=8, low_message="{value} recommendation(s)",
        low_fix="Request 2-3 more recommendations from colleagues/clients",
        none_severity=Severity.WARNING, none_message="No recommendations",
        none_fix="Request 3-5 recommendations (endorsed profiles rank higher)",
    ),
    TieredMetric(
        value=lambda p: p.connections_count,
        high=500, high_points=10, high_message="{value}+ connections",
        low=200, low_points=5, low_message="{value} connections",
        low_fix="Expand network to 500+ (improves search visibility via degree proximity)",
        none_severity=Severity.WARNING, none_message="Low connection count: {value}",
        none_fix="Connect with 10-15 PE professionals weekly",
    ),
)


def analyze_engagement(profile: Profile, role: TargetRole) -> SectionScore:
    return score_section(ENGAGEMENT, ENGAGEMENT_METRICS, profile, role, base=0)
