"""Prompt templates for AI profile drafting.

The system prompt restates the analyzer's rubric so generated drafts score well.
"""

import json
from dataclasses import dataclass
from typing import Optional, Union

from profile_optimizer.profile.models import Profile
from profile_optimizer.roles.models import TargetRole

DRAFT_SECTIONS = ("headline", "about", "skills", "experience")


@dataclass(frozen=True)
class GenerationContext:
    resume_text: str = ""
    notes: str = ""


def build_system_prompt(role: TargetRole) -> str:
    tier1 = ", ".join(role.tier1_keywords)
    tier2 = ", ".join(role.tier2_keywords)
    tier3 = ", ".join(role.tier3_keywords)
    recommended = ", ".join(role.recommended_skills[:20])
    examples = "\n".join(f"- {ex}" for ex in role.headline_examples)

    return f"""You are an expert LinkedIn profile optimizer for senior executives targeting PE (private equity) and transformation roles.

Your job: generate optimized LinkedIn profile content that will score 85+ on our scoring rubric.

## Target Role: {role.name}
{role.description}

## Scoring Rubric (these rules determine the score)

### Headline (20% weight)
- Use ALL 220 characters available (70%+ usage = good)
- Must include Tier 1 keywords (at least 2-3): {tier1}
- Must include quantified impact (e.g., "2x EBITDA", "$XM revenue", "80% lift in 18mo")
- Must include a seniority signal (SVP, VP, CEO, COO, Chief, Partner, Director, Head of)
- Credentials boost score (Bain, McKinsey, BCG, Wharton, Harvard, Stanford, MBA, CPA, CFA)
- NEVER use buzzwords: dynamic, passionate, innovative, results-driven, thought leader, guru, ninja, rockstar, synergy, leveraging, paradigm
- Use | as separator between segments

### About Section (20% weight)
- Target 2,000-2,600 characters (max 2,600)
- Must include 5+ quantified metrics (revenue, EBITDA, %, team sizes, timeframes)
- Must cover 50%+ of Tier 1 + Tier 2 keywords naturally woven in
- Open with a bold positioning statement or quantified result, NOT a greeting
- NO emojis anywhere
- NO generic CTAs ("let's connect", "feel free to reach out", "open to new opportunities")
- NO weak openings ("Greetings", "Hello", "Hi there", "Welcome to my", "I am a")

### Skills (15% weight)
- Suggest exactly 50 skills (LinkedIn max) to maximize recruiter search matches
- Prioritize these recommended skills first: {recommended}
- Then add complementary skills from Tier 1-3 keywords not already covered

### Experience (20% weight)
- Each entry needs: title, company, duration_months, description, is_current
- Each description must be 200+ characters with 3-5 quantified metrics ($, %, team sizes, timeframes)
- Weave target keywords naturally into descriptions
- Include at least 3 experience entries; mark the most recent role as is_current: true

## Keywords to Weave In

**Tier 1 (must-have, highest impact):** {tier1}

**Tier 2 (should-have):** {tier2}

**Tier 3 (nice-to-have):** {tier3}

## Headline Examples for Reference
{examples}

## Output Format
Return ONLY valid JSON matching this exact structure:
{{
  "headline": "string (max 220 chars)",
  "about": "string (1800-2600 chars, use \\n for line breaks)",
  "skills": ["string array, exactly 50 items"],
  "experience": [
    {{
      "title": "string",
      "company": "string",
      "duration_months": number,
      "description": "string (200+ chars with quantified results)",
      "is_current": boolean
    }}
  ]
}}"""


def build_user_prompt(context: GenerationContext, current_profile: Optional[Profile] = None) -> str:
    parts = ["Generate an optimized LinkedIn profile based on the following context."]

    if context.resume_text:
        parts.append(f"\n## Resume Content\n{context.resume_text}")

    if context.notes:
        parts.append(f"\n## Additional Context from User\n{context.notes}")

    if current_profile is not None and current_profile.has_content:
        parts.append("\n## Current Profile (use as seed, improve upon it)")
        if current_profile.name:
            parts.append(f"Name: {current_profile.name}")
        if current_profile.headline:
            parts.append(f"Current Headline: {current_profile.headline}")
        if current_profile.about:
            parts.append(f"Current About: {current_profile.about}")
        if current_profile.experience:
            parts.append("\nCurrent Experience:")
            for exp in current_profile.experience:
                current = ", current" if exp.is_current else ""
                parts.append(
                    f"- {exp.title} at {exp.company} ({exp.duration_months}mo{current}): {exp.description}"
                )
        if current_profile.skills:
            parts.append(f"\nCurrent Skills: {', '.join(current_profile.skills)}")
        if current_profile.education:
            parts.append(f"Education: {', '.join(current_profile.education)}")

    parts.append("\nGenerate the optimized profile now. Return ONLY the JSON object, no markdown fences.")
    return "\n".join(parts)


def build_regen_prompt(section: str, guidance: str, current_value: Union[str, list]) -> str:
    """Prompt to regenerate a single draft section following user guidance."""
    if section not in DRAFT_SECTIONS:
        raise ValueError(f"Unknown draft section: {section} (expected one of {', '.join(DRAFT_SECTIONS)})")

    current = current_value if isinstance(current_value, str) else json.dumps(current_value, indent=2)

    return f"""Regenerate ONLY the "{section}" section of the LinkedIn profile.

Current version:
{current}

User's guidance for regeneration:
{guidance}

Return ONLY valid JSON with a single key "{section}" and the regenerated value. For skills, return a string array. For experience, return an array of objects with {{title, company, duration_months, description, is_current}}. For headline/about, return a string."""
