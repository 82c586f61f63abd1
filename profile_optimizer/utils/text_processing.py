"""Text matching, metric counting, and number formatting utilities.

Rounding, string length and number formatting use JavaScript semantics
(Math.round, UTF-16 code units, template-literal numbers).
"""

import math
import re
from collections.abc import Sequence
from datetime import date
from typing import Optional

# Metric patterns. Digits are spelled [0-9] because Python's \d also matches
# non-ASCII digits.
HEADLINE_METRIC_PATTERN = re.compile(r"[0-9]+[%xX]|\$[0-9]|[0-9]+\s*(?:mo|month|year|yr)")
ABOUT_METRIC_PATTERN = re.compile(
    r"[0-9]+[%xX]|\$[0-9,.]+[MBK]?|[0-9]+\s*(?:mo|month|year|yr|million|billion)",
    re.IGNORECASE,
)
EXPERIENCE_METRIC_PATTERN = re.compile(
    r"[0-9]+[%xX]|\$[0-9,.]+[MBK]?|[0-9]+\s*(?:mo|month|year|million|billion)",
    re.IGNORECASE,
)

EMOJI_PATTERN = re.compile(
    "[\U0001F300-\U0001F9FF\u2702-\u27B0\U0001FA00-\U0001FA6F\U0001FA70-\U0001FAFF]"
)

MONTH_NAMES = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

DAYS_PER_MONTH = 30.44


def js_round(value: float) -> int:
    """Round half up, like JavaScript's Math.round."""
    return math.floor(value + 0.5)


def js_length(text: str) -> int:
    """Length in UTF-16 code units (astral characters count twice, lone surrogates once)."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def format_number(value: float) -> str:
    """Render a number the way a JS template literal would (2.0 -> '2')."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def contains_keyword(text_lower: str, keyword: str) -> bool:
    """Case-insensitive substring test. No word boundaries: 'ai' matches 'retail'."""
    return keyword.lower() in text_lower


def partition_keywords(text: str, keywords: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split keywords into (found, missing), both in the given keyword order."""
    text_lower = text.lower()
    found = []
    missing = []
    for kw in keywords:
        if contains_keyword(text_lower, kw):
            found.append(kw)
        else:
            missing.append(kw)
    return found, missing


def count_keywords(text: str, keywords: Sequence[str]) -> int:
    found, _ = partition_keywords(text, keywords)
    return len(found)


def find_terms(text: str, terms: list[str]) -> list[str]:
    """Return every term from a lowercase term list present in text."""
    text_lower = text.lower()
    return [term for term in terms if term in text_lower]


def count_metrics(text: str, pattern: re.Pattern = ABOUT_METRIC_PATTERN) -> int:
    """Count non-overlapping quantified results (%, $, x, time units)."""
    return len(pattern.findall(text))


def has_emoji(text: str) -> bool:
    return EMOJI_PATTERN.search(text) is not None


def clean_extracted_text(text: str) -> str:
    """Collapse whitespace left over from PDF extraction."""
    text = re.sub(r"\n{3,}", "\n\n", text)
    text = re.sub(r"[ \t]{2,}", " ", text)
    return text.strip()


def _parse_month_year(text: str) -> Optional[date]:
    match = re.match(r"([A-Za-z]+)\s+([0-9]{4})$", text.strip())
    if not match:
        return None
    month = MONTH_NAMES.get(match.group(1)[:3].lower())
    if month is None:
        return None
    return date(int(match.group(2)), month, 1)


def parse_duration_months(text: str, today: Optional[date] = None) -> int:
    """Parse a LinkedIn duration string into months.

    Handles "1 yr 6 mos", "2 yrs", "8 mos" first. Falls back to a date range
    like "Jan 2020 - Mar 2022" or "Jan 2020 – Present" (minimum 1 month).
    Returns 0 when nothing can be parsed.
    """
    if not text:
        return 0

    months = 0
    yr_match = re.search(r"([0-9]+)\s*yr", text, re.IGNORECASE)
    mo_match = re.search(r"([0-9]+)\s*mo", text, re.IGNORECASE)
    if yr_match:
        months += int(yr_match.group(1)) * 12
    if mo_match:
        months += int(mo_match.group(1))

    if months == 0:
        range_match = re.search(
            r"(\w+\s+[0-9]{4})\s*[-–]\s*(\w+\s+[0-9]{4}|Present)",
            text,
            re.IGNORECASE,
        )
        if range_match:
            start = _parse_month_year(range_match.group(1))
            if range_match.group(2).lower() == "present":
                end = today or date.today()
            else:
                end = _parse_month_year(range_match.group(2))
            if start is not None and end is not None:
                days = (end - start).days
                months = max(1, js_round(days / DAYS_PER_MONTH))

    return months
