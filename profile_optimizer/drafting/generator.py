"""OpenAI draft generation (optional, requires API key).

Streams the model's text as chunk events and finishes with one complete event
carrying the parsed draft. A draft only changes a profile through apply_draft,
once the user accepts it.
"""

import json
import logging
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from typing import Any, Optional, Union

from profile_optimizer.drafting.prompts import (
    DRAFT_SECTIONS,
    GenerationContext,
    build_regen_prompt,
    build_system_prompt,
    build_user_prompt,
)
from profile_optimizer.profile.models import ExperienceEntry, Profile
from profile_optimizer.roles.models import TargetRole

logger = logging.getLogger("profile_optimizer.drafting")

DEFAULT_APPLY_SECTIONS = ("headline", "about", "skills")


@dataclass(frozen=True)
class ProfileDraft:
    """Generated content. Sections the model did not return stay None."""

    headline: Optional[str] = None
    about: Optional[str] = None
    skills: Optional[tuple[str, ...]] = None
    experience: Optional[tuple[ExperienceEntry, ...]] = None

    def to_dict(self) -> dict:
        d: dict[str, Any] = {}
        if self.headline is not None:
            d["headline"] = self.headline
        if self.about is not None:
            d["about"] = self.about
        if self.skills is not None:
            d["skills"] = list(self.skills)
        if self.experience is not None:
            d["experience"] = [e.to_dict() for e in self.experience]
        return d


@dataclass(frozen=True)
class RegenerateRequest:
    section: str
    guidance: str
    current_value: Union[str, list]


@dataclass(frozen=True)
class DraftEvent:
    type: str  # "chunk" or "complete"
    text: str = ""
    draft: Optional[ProfileDraft] = None


def parse_draft(text: str) -> ProfileDraft:
    """Extract the outermost JSON object from model output."""
    match = re.search(r"\{[\s\S]*\}", text)
    if not match:
        raise ValueError("Failed to parse AI response")

    try:
        raw = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse AI response as JSON: %s", e)
        raise ValueError("Failed to parse AI response") from e

    if not isinstance(raw, dict):
        raise ValueError("Failed to parse AI response")

    skills = raw.get("skills")
    experience = raw.get("experience")
    return ProfileDraft(
        headline=str(raw["headline"]) if raw.get("headline") is not None else None,
        about=str(raw["about"]) if raw.get("about") is not None else None,
        skills=tuple(str(s) for s in skills) if isinstance(skills, list) else None,
        experience=(
            tuple(ExperienceEntry.from_dict(e) for e in experience if isinstance(e, dict))
            if isinstance(experience, list)
            else None
        ),
    )


def apply_draft(
    profile: Profile,
    draft: ProfileDraft,
    sections: Sequence[str] = DEFAULT_APPLY_SECTIONS,
) -> Profile:
    """Return a new profile with the accepted draft sections merged in."""
    updates: dict[str, Any] = {}
    for section in sections:
        if section not in DRAFT_SECTIONS:
            raise ValueError(f"Unknown draft section: {section}")
        value = getattr(draft, section)
        if value is not None:
            updates[section] = value
    return replace(profile, **updates)


def _create_client(api_key: str):
    try:
        from openai import OpenAI
    except ImportError:
        raise ImportError("openai package required for draft generation. Install with: pip install openai")
    return OpenAI(api_key=api_key)


def stream_draft(
    role: TargetRole,
    api_key: str = "",
    context: GenerationContext = GenerationContext(),
    current_profile: Optional[Profile] = None,
    regenerate: Optional[RegenerateRequest] = None,
    model: str = "gpt-4o-mini",
    max_tokens: int = 4096,
    temperature: float = 0.7,
    client=None,
) -> Iterator[DraftEvent]:
    """Stream a full draft, or a single regenerated section.

    Raises on API errors and on unparseable output so callers can report them.
    """
    if client is None:
        client = _create_client(api_key)

    system_prompt = build_system_prompt(role)
    if regenerate is not None:
        user_prompt = build_regen_prompt(regenerate.section, regenerate.guidance, regenerate.current_value)
    else:
        user_prompt = build_user_prompt(context, current_profile)

    logger.info(
        "Requesting %s for role '%s' from %s",
        f"'{regenerate.section}' regeneration" if regenerate else "full draft",
        role.name,
        model,
    )

    try:
        stream = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
            stream=True,
        )

        chunks = []
        for chunk in stream:
            if not chunk.choices:
                continue
            text = chunk.choices[0].delta.content
            if text:
                chunks.append(text)
                yield DraftEvent(type="chunk", text=text)
    except Exception as e:
        logger.warning("Draft generation failed for '%s': %s", role.name, e)
        raise

    full_text = "".join(chunks)
    draft = parse_draft(full_text)
    logger.debug("Draft complete: %d characters, sections %s", len(full_text), list(draft.to_dict()))
    yield DraftEvent(type="complete", text=full_text, draft=draft)


def generate_draft(role: TargetRole, api_key: str = "", **kwargs) -> ProfileDraft:
    """Consume stream_draft and return only the final draft."""
    draft = None
    for event in stream_draft(role, api_key, **kwargs):
        if event.type == "complete":
            draft = event.draft
    if draft is None:
        raise ValueError("Failed to parse AI response")
    return draft
