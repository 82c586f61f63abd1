"""Tests for the profile analyzer."""

from dataclasses import replace

from profile_optimizer.analysis.analyzer import (
    MAX_RECOMMENDATIONS,
    SECTION_WEIGHTS,
    analyze_profile,
    overall_score,
    score_delta,
    top_recommendations,
)
from profile_optimizer.analysis.models import (
    SECTION_NAMES,
    AnalysisReport,
    Finding,
    SectionScore,
    Severity,
)
from profile_optimizer.profile.models import Profile


class TestReferenceProfiles:
    def test_current_profile_scores_37(self, current_profile, pe_role):
        report = analyze_profile(current_profile, pe_role)
        assert report.overall_score == 37

    def test_current_profile_section_scores(self, current_profile, pe_role):
        report = analyze_profile(current_profile, pe_role)
        scores = {s.name: s.score for s in report.sections}
        assert scores == {
            "Headline": 25,
            "About Section": 25,
            "Experience": 50,
            "Skills": 50,
            "Profile Completeness": 80,
            "Engagement Signals": 13,
        }

    def test_optimized_profile_scores_92(self, optimized_profile, pe_role):
        report = analyze_profile(optimized_profile, pe_role)
        assert report.overall_score == 92

    def test_optimized_profile_section_scores(self, optimized_profile, pe_role):
        report = analyze_profile(optimized_profile, pe_role)
        scores = {s.name: s.score for s in report.sections}
        assert scores == {
            "Headline": 80,
            "About Section": 90,
            "Experience": 90,
            "Skills": 100,
            "Profile Completeness": 100,
            "Engagement Signals": 100,
        }

    def test_report_metadata(self, current_profile, pe_role):
        report = analyze_profile(current_profile, pe_role)
        assert report.profile_name == "Thiago Rocha"
        assert report.target_role == "PE Operating Partner"


class TestAnalyzeProfile:
    def test_sections_in_fixed_order(self, current_profile, pe_role):
        report = analyze_profile(current_profile, pe_role)
        assert tuple(s.name for s in report.sections) == SECTION_NAMES

    def test_empty_profile(self, pe_role):
        report = analyze_profile(Profile(), pe_role)
        assert report.profile_name == "Unknown"
        assert report.overall_score == 0
        assert all(s.score == 0 for s in report.sections)
        assert report.keyword_coverage.coverage_pct == 0

    def test_scores_within_bounds(self, current_profile, optimized_profile, pe_role, custom_role):
        for profile in (Profile(), current_profile, optimized_profile):
            for role in (pe_role, custom_role):
                report = analyze_profile(profile, role)
                assert 0 <= report.overall_score <= 100
                for section in report.sections:
                    assert 0 <= section.score <= section.max_score

    def test_deterministic(self, current_profile, pe_role):
        first = analyze_profile(current_profile, pe_role)
        second = analyze_profile(current_profile, pe_role)
        assert first == second

    def test_does_not_mutate_profile(self, current_profile, pe_role):
        before = current_profile.to_dict()
        analyze_profile(current_profile, pe_role)
        assert current_profile.to_dict() == before

    def test_custom_role_skips_keyword_rules(self, current_profile, custom_role):
        report = analyze_profile(current_profile, custom_role)
        headline = report.section("Headline")
        assert not any("Tier 1" in f.message for f in headline.findings)
        skills = report.section("Skills")
        assert not any("recommended skills" in f.message for f in skills.findings)
        assert report.keyword_coverage.coverage_pct == 0

    def test_more_skills_never_lowers_skills_score(self, current_profile, pe_role):
        previous = -1
        for count in range(5, 50, 5):
            skills = tuple(f"Skill {i}" for i in range(count))
            report = analyze_profile(replace(current_profile, skills=skills), pe_role)
            score = report.section("Skills").score
            assert score >= previous
            previous = score


class TestOverallScore:
    def test_weights_sum_to_one(self):
        assert abs(sum(SECTION_WEIGHTS.values()) - 1.0) < 1e-9

    def test_rounds_half_up_once(self):
        sections = tuple(
            SectionScore(name=name, score=score)
            for name, score in zip(SECTION_NAMES, (25, 25, 50, 50, 80, 13))
        )
        # 5 + 5 + 10 + 7.5 + 8 + 1.95 = 37.45
        assert overall_score(sections) == 37

    def test_unknown_section_uses_default_weight(self):
        assert overall_score((SectionScore(name="Other", score=50),)) == 5


class TestTopRecommendations:
    def _section(self, name, *findings):
        return SectionScore(name=name, score=50, findings=tuple(findings))

    def test_critical_before_warning(self):
        sections = (
            self._section("A", Finding(Severity.WARNING, "w", "fix warning")),
            self._section("B", Finding(Severity.CRITICAL, "c", "fix critical")),
        )
        assert top_recommendations(sections) == ["[B] fix critical", "[A] fix warning"]

    def test_skips_findings_without_fix_and_info(self):
        sections = (
            self._section(
                "A",
                Finding(Severity.CRITICAL, "no fix"),
                Finding(Severity.INFO, "info", "info fix"),
                Finding(Severity.POSITIVE, "good"),
            ),
        )
        assert top_recommendations(sections) == []

    def test_limit(self):
        findings = [Finding(Severity.CRITICAL, f"c{i}", f"fix {i}") for i in range(15)]
        sections = (self._section("A", *findings),)
        recs = top_recommendations(sections)
        assert len(recs) == MAX_RECOMMENDATIONS
        assert recs[0] == "[A] fix 0"

    def test_report_recommendations_capped(self, current_profile, pe_role):
        report = analyze_profile(current_profile, pe_role)
        assert 0 < len(report.top_recommendations) <= MAX_RECOMMENDATIONS
        assert all(r.startswith("[") for r in report.top_recommendations)

    def test_warning_pass_stops_at_limit(self):
        findings = [Finding(Severity.CRITICAL, f"c{i}", f"crit {i}") for i in range(4)]
        findings += [Finding(Severity.WARNING, f"w{i}", f"warn {i}") for i in range(8)]
        recs = top_recommendations((self._section("A", *findings),))
        assert len(recs) == MAX_RECOMMENDATIONS
        assert recs[:4] == [f"[A] crit {i}" for i in range(4)]
        assert recs[-1] == "[A] warn 5"
        assert "[A] warn 6" not in recs

    def test_severity_given_as_string(self):
        finding = Finding("critical", "m", "fix it")
        assert finding.severity is Severity.CRITICAL
        assert top_recommendations((self._section("A", finding),)) == ["[A] fix it"]


class TestScoreDelta:
    def test_no_snapshot(self, current_profile, pe_role):
        report = analyze_profile(current_profile, pe_role)
        assert score_delta(report, None) is None

    def test_improvement(self, current_profile, optimized_profile, pe_role):
        before = analyze_profile(current_profile, pe_role)
        after = analyze_profile(optimized_profile, pe_role)
        delta = score_delta(after, before)
        assert delta.overall == 55
        assert delta.improved
        assert delta.sections["Headline"] == 55
        assert delta.sections["Engagement Signals"] == 87

    def test_snapshot_round_trip(self, current_profile, pe_role):
        report = analyze_profile(current_profile, pe_role)
        restored = AnalysisReport.from_dict(report.to_dict())
        assert restored == report
        delta = score_delta(report, restored)
        assert delta.overall == 0
        assert not delta.improved


class TestSurrogates:
    def test_lone_surrogates_do_not_break_scoring(self, current_profile, pe_role):
        profile = replace(
            current_profile,
            headline="\ud800abc | VP Value Creation",
            about=current_profile.about + " cut off \ud83d",
        )
        report = analyze_profile(profile, pe_role)
        assert 0 <= report.overall_score <= 100
        assert report.section("Headline").score > 0
