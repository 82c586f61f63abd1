"""Console and HTML renderings of an analysis report."""

from html import escape
from typing import Optional

from profile_optimizer.analysis.analyzer import score_delta
from profile_optimizer.analysis.grading import letter_grade, score_severity, severity_icon, severity_label
from profile_optimizer.analysis.models import AnalysisReport, KeywordCoverage, SectionScore, Severity


def _signed(delta: int) -> str:
    return f"+{delta}" if delta > 0 else str(delta)


def render_text_report(report: AnalysisReport, snapshot: Optional[AnalysisReport] = None) -> str:
    """Plain-text report for the terminal, with deltas when a snapshot is given."""
    delta = score_delta(report, snapshot)
    lines = [
        f"=== {report.profile_name} -> {report.target_role} ===",
    ]

    overall = f"Overall: {report.overall_score}/100 ({letter_grade(report.overall_score)})"
    if delta is not None and delta.overall != 0:
        overall += f"  [{_signed(delta.overall)} from snapshot]"
    lines.append(overall)
    if delta is not None and delta.overall != 0:
        lines.append("Trend: improving" if delta.improved else "Trend: declining")
    lines.append("")

    lines.append("Sections:")
    for section in report.sections:
        line = f"  {section.name:<22} {section.score:>3}/{section.max_score} ({letter_grade(section.score)})"
        change = delta.sections.get(section.name, 0) if delta is not None else 0
        if change:
            line += f"  [{_signed(change)}]"
        lines.append(line)
        for finding in section.findings:
            lines.append(f"      {severity_icon(finding.severity)} {finding.message}")
    lines.append("")

    coverage = report.keyword_coverage
    lines.append(f"Keyword coverage: {coverage.coverage_pct}% ({letter_grade(coverage.coverage_pct)})")
    for tier, found, missing in _tiers(coverage):
        lines.append(f"  Tier {tier}: {len(found)}/{len(found) + len(missing)} found")
        if missing:
            lines.append(f"    missing: {', '.join(missing)}")
    lines.append("")

    if report.top_recommendations:
        lines.append("Top recommendations:")
        for i, rec in enumerate(report.top_recommendations, 1):
            lines.append(f"  {i}. {rec}")

    return "\n".join(lines).rstrip() + "\n"


def _tiers(coverage: KeywordCoverage):
    return (
        (1, coverage.tier1_found, coverage.tier1_missing),
        (2, coverage.tier2_found, coverage.tier2_missing),
        (3, coverage.tier3_found, coverage.tier3_missing),
    )


BAND_CLASSES = {
    Severity.POSITIVE: "score-high",
    Severity.WARNING: "score-medium",
    Severity.CRITICAL: "score-low",
}


def render_html_report(report: AnalysisReport) -> str:
    """Render a standalone HTML page for the report."""
    section_rows = "\n".join(_render_section(section) for section in report.sections)
    keyword_rows = "\n".join(
        _render_tier(tier, found, missing) for tier, found, missing in _tiers(report.keyword_coverage)
    )
    recs = "\n".join(f"<li>{escape(rec)}</li>" for rec in report.top_recommendations)
    overall_class = BAND_CLASSES[score_severity(report.overall_score)]

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Profile score: {escape(report.profile_name)}</title>
    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background-color: #f5f5f5;
            margin: 0;
            padding: 20px;
            color: #333;
        }}
        .container {{
            max-width: 760px;
            margin: 0 auto;
            background: #fff;
            border-radius: 8px;
            overflow: hidden;
            box-shadow: 0 2px 8px rgba(0,0,0,0.1);
        }}
        .header {{
            background: #0a66c2;
            color: white;
            padding: 24px;
            text-align: center;
        }}
        .header h1 {{ margin: 0; font-size: 22px; font-weight: 600; }}
        .header p {{ margin: 8px 0 0; opacity: 0.9; font-size: 14px; }}
        .content {{ padding: 24px; }}
        .section {{
            border: 1px solid #e0e0e0;
            border-radius: 8px;
            padding: 16px;
            margin-bottom: 16px;
        }}
        .section-header {{
            display: flex;
            justify-content: space-between;
            align-items: center;
        }}
        .section-name {{ font-size: 16px; font-weight: 600; margin: 0; }}
        .score-badge {{
            padding: 4px 10px;
            border-radius: 12px;
            font-size: 12px;
            font-weight: 600;
            white-space: nowrap;
        }}
        .score-high {{ background: #e8f5e9; color: #2e7d32; }}
        .score-medium {{ background: #fff3e0; color: #ef6c00; }}
        .score-low {{ background: #fce4ec; color: #c62828; }}
        .finding {{ font-size: 13px; margin: 6px 0; }}
        .finding-fix {{ color: #777; font-style: italic; }}
        .critical {{ color: #c62828; }}
        .warning {{ color: #ef6c00; }}
        .info {{ color: #1565c0; }}
        .positive {{ color: #2e7d32; }}
        .keywords {{ font-size: 13px; margin: 6px 0; }}
        .found {{ color: #2e7d32; }}
        .missing {{ color: #c62828; }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>{escape(report.profile_name)}</h1>
            <p>Target: {escape(report.target_role)}</p>
            <p><span class="score-badge {overall_class}">{report.overall_score}/100 &middot; {letter_grade(report.overall_score)}</span></p>
        </div>
        <div class="content">
            {section_rows}
            <div class="section">
                <div class="section-header">
                    <h2 class="section-name">Keyword Coverage</h2>
                    <span class="score-badge {BAND_CLASSES[score_severity(report.keyword_coverage.coverage_pct)]}">{report.keyword_coverage.coverage_pct}%</span>
                </div>
                {keyword_rows}
            </div>
            <div class="section">
                <h2 class="section-name">Top Recommendations</h2>
                <ol>
                {recs}
                </ol>
            </div>
        </div>
    </div>
</body>
</html>"""


def _render_section(section: SectionScore) -> str:
    """Render a single section card."""
    score_class = BAND_CLASSES[score_severity(section.score)]
    findings = []
    for finding in section.findings:
        fix_html = ""
        if finding.fix:
            fix_html = f' <span class="finding-fix">{escape(finding.fix)}</span>'
        findings.append(
            f'<div class="finding {finding.severity.value}" title="{severity_label(finding.severity)}">'
            f"{severity_icon(finding.severity)} {escape(finding.message)}{fix_html}</div>"
        )
    findings_html = "\n                ".join(findings)

    return f"""
            <div class="section">
                <div class="section-header">
                    <h2 class="section-name">{escape(section.name)}</h2>
                    <span class="score-badge {score_class}">{section.score}/{section.max_score} &middot; {letter_grade(section.score)}</span>
                </div>
                {findings_html}
            </div>"""


def _render_tier(tier: int, found: tuple[str, ...], missing: tuple[str, ...]) -> str:
    found_html = ", ".join(f'<span class="found">{escape(k)}</span>' for k in found) or "-"
    missing_html = ", ".join(f'<span class="missing">{escape(k)}</span>' for k in missing) or "-"
    return (
        f'<div class="keywords"><strong>Tier {tier}</strong> '
        f"({len(found)}/{len(found) + len(missing)}): {found_html} | missing: {missing_html}</div>"
    )
