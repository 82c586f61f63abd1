"""YAML config loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from profile_optimizer.roles.registry import build_registry, load_roles_file


@dataclass
class GenerationConfig:
    model: str = "gpt-4o-mini"
    max_tokens: int = 4096
    temperature: float = 0.7


@dataclass
class ApiKeys:
    openai_api_key: str = ""


@dataclass
class ResumeConfig:
    max_bytes: int = 10 * 1024 * 1024


@dataclass
class AppConfig:
    default_role: str = "PE Operating Partner"
    roles_file: str = ""
    output_format: str = "text"
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    api_keys: ApiKeys = field(default_factory=ApiKeys)
    resume: ResumeConfig = field(default_factory=ResumeConfig)
    log_dir: str = "logs"
    log_level: str = "INFO"


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load and validate configuration from YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and adjust your settings."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    config = AppConfig()

    config.default_role = raw.get("default_role", "PE Operating Partner")
    config.roles_file = raw.get("roles_file", "") or ""
    config.output_format = raw.get("output_format", "text")

    # Generation
    generation_raw = raw.get("generation", {})
    config.generation = GenerationConfig(
        model=generation_raw.get("model", "gpt-4o-mini"),
        max_tokens=generation_raw.get("max_tokens", 4096),
        temperature=generation_raw.get("temperature", 0.7),
    )

    # API keys (env vars take precedence)
    keys_raw = raw.get("api_keys", {})
    config.api_keys = ApiKeys(
        openai_api_key=os.environ.get("OPENAI_API_KEY", keys_raw.get("openai_api_key", "")),
    )

    # Resume upload limits
    resume_raw = raw.get("resume", {})
    config.resume = ResumeConfig(
        max_bytes=resume_raw.get("max_bytes", 10 * 1024 * 1024),
    )

    config.log_dir = raw.get("log_dir", "logs")
    config.log_level = str(raw.get("log_level", "INFO")).upper()

    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    extra_roles = []
    if config.roles_file:
        if not Path(config.roles_file).exists():
            warnings.append(f"Roles file not found: {config.roles_file} - only built-in roles available")
        else:
            try:
                extra_roles = load_roles_file(config.roles_file)
            except ValueError as e:
                warnings.append(f"Roles file is invalid: {e}")

    if config.default_role not in build_registry(extra_roles):
        warnings.append(f"Default role '{config.default_role}' is not a known role")

    if config.output_format not in ("text", "json", "html"):
        warnings.append(f"Unknown output format '{config.output_format}' - using text")

    if not config.api_keys.openai_api_key:
        warnings.append("No OpenAI API key configured - draft generation will be unavailable")

    return warnings
