"""Load a profile record from a YAML or JSON file (manual entry or scraper export)."""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

import yaml

from profile_optimizer.profile.models import Profile

logger = logging.getLogger("profile_optimizer.profile")


def load_profile(file_path: str, today: Optional[date] = None) -> Profile:
    """Parse a profile file into a fully default-filled Profile."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {file_path}")

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".json":
        raw = json.loads(text) if text.strip() else {}
    elif suffix in (".yaml", ".yml"):
        raw = yaml.safe_load(text) or {}
    else:
        raise ValueError(f"Unsupported profile format: {suffix} (supported: .json, .yaml, .yml)")

    if not isinstance(raw, dict):
        raise ValueError(f"Profile file must contain a mapping of fields: {file_path}")

    profile = Profile.from_dict(raw, today=today)
    logger.info(
        "Loaded profile: %s (%d experience entries, %d skills)",
        profile.name or "Unknown",
        len(profile.experience),
        len(profile.skills),
    )
    return profile
