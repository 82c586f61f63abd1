"""Score-to-grade and severity display mapping."""

from profile_optimizer.analysis.models import Severity

GRADE_THRESHOLDS = ((90, "A"), (80, "B"), (70, "C"), (60, "D"))

SEVERITY_ICONS = {
    Severity.CRITICAL: "✘",
    Severity.WARNING: "!",
    Severity.INFO: "i",
    Severity.POSITIVE: "✔",
}


def letter_grade(score: float) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return "F"


def score_severity(score: float) -> Severity:
    """Colour band for a score: positive (80+), warning (60+), else critical."""
    if score >= 80:
        return Severity.POSITIVE
    if score >= 60:
        return Severity.WARNING
    return Severity.CRITICAL


def severity_icon(severity: Severity) -> str:
    return SEVERITY_ICONS[severity]


def severity_label(severity: Severity) -> str:
    return severity.value.capitalize()
