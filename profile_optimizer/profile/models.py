"""Profile data model."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from profile_optimizer.utils.text_processing import parse_duration_months


def _as_list(value: Any) -> list:
    """A single scalar (e.g. YAML ``skills: Python``) becomes a one-item list."""
    if value is None or value == "":
        return []
    if isinstance(value, (str, int, float)):
        return [value]
    return list(value)


@dataclass(frozen=True)
class ExperienceEntry:
    """One position on the profile. Identified only by its place in the list."""

    title: str = ""
    company: str = ""
    duration_months: int = 0
    description: str = ""
    is_current: bool = False

    @classmethod
    def from_dict(cls, raw: dict[str, Any], today: Optional[date] = None) -> "ExperienceEntry":
        """Build an entry, accepting either duration_months or a free-text duration."""
        months = raw.get("duration_months")
        if months is None:
            months = parse_duration_months(str(raw.get("duration", "")), today=today)
        return cls(
            title=str(raw.get("title", "") or ""),
            company=str(raw.get("company", "") or ""),
            duration_months=max(0, int(months)),
            description=str(raw.get("description", "") or ""),
            is_current=bool(raw.get("is_current", False)),
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "company": self.company,
            "duration_months": self.duration_months,
            "description": self.description,
            "is_current": self.is_current,
        }


@dataclass(frozen=True)
class Profile:
    """A professional profile as scored by the analyzer.

    Every field has an empty/zero default so a partially filled form or an
    incomplete scrape still yields a valid profile.
    """

    name: str = ""
    headline: str = ""
    about: str = ""
    experience: tuple[ExperienceEntry, ...] = ()
    skills: tuple[str, ...] = ()
    education: tuple[str, ...] = ()
    certifications: tuple[str, ...] = ()
    featured_items: int = 0
    recommendations_count: int = 0
    connections_count: int = 0
    has_profile_photo: bool = False
    has_banner: bool = False
    has_custom_url: bool = False
    has_verification: bool = False
    # Tracked for display only; never scored.
    open_to_work: bool = False
    open_to_work_private: bool = False
    posts_per_month: float = 0.0
    comments_per_week: float = 0.0

    def __post_init__(self):
        # Accept lists from callers but store tuples so the profile stays immutable.
        object.__setattr__(self, "experience", tuple(self.experience))
        object.__setattr__(self, "skills", tuple(self.skills))
        object.__setattr__(self, "education", tuple(self.education))
        object.__setattr__(self, "certifications", tuple(self.certifications))

    @property
    def has_content(self) -> bool:
        """True when any of the draftable sections is filled in."""
        return bool(self.headline or self.about or self.experience or self.skills)

    @classmethod
    def from_dict(cls, raw: dict[str, Any], today: Optional[date] = None) -> "Profile":
        """Build a profile from a loosely-typed mapping, defaulting every missing field."""
        return cls(
            name=str(raw.get("name", "") or ""),
            headline=str(raw.get("headline", "") or ""),
            about=str(raw.get("about", "") or ""),
            experience=tuple(
                ExperienceEntry.from_dict(e, today=today) for e in raw.get("experience") or []
            ),
            skills=tuple(str(s) for s in _as_list(raw.get("skills"))),
            education=tuple(str(e) for e in _as_list(raw.get("education"))),
            certifications=tuple(str(c) for c in _as_list(raw.get("certifications"))),
            featured_items=max(0, int(raw.get("featured_items", 0) or 0)),
            recommendations_count=max(0, int(raw.get("recommendations_count", 0) or 0)),
            connections_count=max(0, int(raw.get("connections_count", 0) or 0)),
            has_profile_photo=bool(raw.get("has_profile_photo", False)),
            has_banner=bool(raw.get("has_banner", False)),
            has_custom_url=bool(raw.get("has_custom_url", False)),
            has_verification=bool(raw.get("has_verification", False)),
            open_to_work=bool(raw.get("open_to_work", False)),
            open_to_work_private=bool(raw.get("open_to_work_private", False)),
            posts_per_month=max(0.0, float(raw.get("posts_per_month", 0) or 0)),
            comments_per_week=max(0.0, float(raw.get("comments_per_week", 0) or 0)),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "headline": self.headline,
            "about": self.about,
            "experience": [e.to_dict() for e in self.experience],
            "skills": list(self.skills),
            "education": list(self.education),
            "certifications": list(self.certifications),
            "featured_items": self.featured_items,
            "recommendations_count": self.recommendations_count,
            "connections_count": self.connections_count,
            "has_profile_photo": self.has_profile_photo,
            "has_banner": self.has_banner,
            "has_custom_url": self.has_custom_url,
            "has_verification": self.has_verification,
            "open_to_work": self.open_to_work,
            "open_to_work_private": self.open_to_work_private,
            "posts_per_month": self.posts_per_month,
            "comments_per_week": self.comments_per_week,
        }
