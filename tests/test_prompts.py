"""Tests for draft prompt builders."""

import pytest

from profile_optimizer.drafting.prompts import (
    GenerationContext,
    build_regen_prompt,
    build_system_prompt,
    build_user_prompt,
)
from profile_optimizer.profile.models import Profile


class TestSystemPrompt:
    def test_includes_role_keywords(self, pe_role):
        prompt = build_system_prompt(pe_role)
        assert "## Target Role: PE Operating Partner" in prompt
        assert "value creation, private equity, operating partner" in prompt
        assert "- SVP Transformation | 2x EBITDA in 10 Months" in prompt
        assert '"headline": "string (max 220 chars)"' in prompt

    def test_recommended_skills_capped_at_20(self, pe_role):
        prompt = build_system_prompt(pe_role)
        assert pe_role.recommended_skills[19] in prompt
        assert "Artificial Intelligence, AI Implementation" not in prompt


class TestUserPrompt:
    def test_context_only(self):
        prompt = build_user_prompt(GenerationContext(resume_text="Resume body", notes="Target healthcare"))
        assert "## Resume Content\nResume body" in prompt
        assert "## Additional Context from User\nTarget healthcare" in prompt
        assert "Current Profile" not in prompt

    def test_empty_profile_not_seeded(self):
        prompt = build_user_prompt(GenerationContext(), Profile(name="Jane"))
        assert "Current Profile" not in prompt

    def test_seeds_current_profile(self, current_profile):
        prompt = build_user_prompt(GenerationContext(), current_profile)
        assert "Name: Thiago Rocha" in prompt
        assert "- SVP Transformation at PE-Backed Lab Services Platform (18mo, current):" in prompt
        assert "Education: MBA, The Wharton School" in prompt
        assert prompt.endswith("no markdown fences.")


class TestRegenPrompt:
    def test_string_section(self):
        prompt = build_regen_prompt("headline", "Shorter please", "Old headline")
        assert 'Regenerate ONLY the "headline" section' in prompt
        assert "Old headline" in prompt
        assert "Shorter please" in prompt

    def test_list_section_serialized(self):
        prompt = build_regen_prompt("skills", "More finance", ["Pricing", "M&A"])
        assert '"Pricing"' in prompt
        assert '"M&A"' in prompt

    def test_unknown_section(self):
        with pytest.raises(ValueError, match="Unknown draft section"):
            build_regen_prompt("hobbies", "", "")
