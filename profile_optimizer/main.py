"""CLI entry point: score a profile against a target role."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from profile_optimizer.analysis.analyzer import analyze_profile
from profile_optimizer.analysis.models import AnalysisReport
from profile_optimizer.config import AppConfig, load_config, validate_config
from profile_optimizer.drafting.generator import apply_draft, stream_draft
from profile_optimizer.drafting.prompts import GenerationContext
from profile_optimizer.profile.loader import load_profile
from profile_optimizer.profile.models import Profile
from profile_optimizer.reporting.templates import render_html_report, render_text_report
from profile_optimizer.roles.models import TargetRole
from profile_optimizer.roles.registry import RoleRegistry, build_registry, load_roles_file, require_role
from profile_optimizer.utils.logging_config import setup_logging

logger = logging.getLogger("profile_optimizer")

DEFAULT_CONFIG_PATH = "config.yaml"


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Profile Optimizer - Score a LinkedIn profile against a target role",
    )
    parser.add_argument(
        "--config", default=None,
        help=f"Path to config file (default: {DEFAULT_CONFIG_PATH} if present)",
    )
    parser.add_argument(
        "--profile",
        help="Profile record to score (.json, .yaml or .yml)",
    )
    parser.add_argument(
        "--role",
        help="Target role name (default: config default_role)",
    )
    parser.add_argument(
        "--list-roles", action="store_true",
        help="List available target roles and exit",
    )
    parser.add_argument(
        "--format", choices=("text", "json", "html"), default=None,
        help="Report format written to stdout (default: config output_format)",
    )
    parser.add_argument(
        "--output",
        help="Also save the report as a JSON snapshot for later --compare",
    )
    parser.add_argument(
        "--compare", metavar="SNAPSHOT",
        help="Show score changes against a previously saved snapshot",
    )
    parser.add_argument(
        "--resume",
        help="Resume file (.pdf, .txt, .md) used as drafting context",
    )
    parser.add_argument(
        "--draft", action="store_true",
        help="Generate an AI draft of headline, about and skills (requires OpenAI key)",
    )
    parser.add_argument(
        "--notes", default="",
        help="Extra context for draft generation",
    )
    args = parser.parse_args(argv)
    if (args.resume or args.notes) and not args.draft:
        parser.error("--resume and --notes are only used with --draft")
    return args


def resolve_config(config_path: Optional[str]) -> AppConfig:
    """Load the named config, or config.yaml if present, else built-in defaults."""
    if config_path:
        return load_config(config_path)
    if Path(DEFAULT_CONFIG_PATH).exists():
        return load_config(DEFAULT_CONFIG_PATH)

    config = AppConfig()
    config.api_keys.openai_api_key = os.environ.get("OPENAI_API_KEY", "")
    return config


def build_role_registry(config: AppConfig) -> RoleRegistry:
    extra_roles = []
    if config.roles_file and Path(config.roles_file).exists():
        extra_roles = load_roles_file(config.roles_file)
    return build_registry(extra_roles)


def print_roles(registry: RoleRegistry):
    print("\n=== Available Target Roles ===")
    for role in registry.list_roles():
        print(f"{role.name} ({role.keyword_count} keywords)")
        if role.description:
            print(f"  {role.description}")
    print()


def load_snapshot(snapshot_path: str) -> AnalysisReport:
    path = Path(snapshot_path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {snapshot_path}")
    with open(path, "r", encoding="utf-8") as f:
        return AnalysisReport.from_dict(json.load(f))


def save_snapshot(report: AnalysisReport, output_path: str):
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(report.to_dict(), f, indent=2)
    logger.info("Saved report snapshot to %s", path)


def render_report(report: AnalysisReport, fmt: str, snapshot: Optional[AnalysisReport] = None) -> str:
    if fmt == "json":
        return json.dumps(report.to_dict(), indent=2) + "\n"
    if fmt == "html":
        return render_html_report(report) + "\n"
    return render_text_report(report, snapshot)


def run_draft(config: AppConfig, role: TargetRole, profile: Profile, report: AnalysisReport,
              resume_path: Optional[str], notes: str):
    """Stream a draft to stderr, then print it and its projected score."""
    if not config.api_keys.openai_api_key:
        raise ValueError("OpenAI API key required for --draft. Set OPENAI_API_KEY or api_keys.openai_api_key")

    resume_text = ""
    if resume_path:
        from profile_optimizer.profile.resume_parser import extract_resume_text
        resume_text = extract_resume_text(resume_path, max_bytes=config.resume.max_bytes)

    context = GenerationContext(resume_text=resume_text, notes=notes)
    draft = None
    for event in stream_draft(
        role,
        api_key=config.api_keys.openai_api_key,
        context=context,
        current_profile=profile,
        model=config.generation.model,
        max_tokens=config.generation.max_tokens,
        temperature=config.generation.temperature,
    ):
        if event.type == "chunk":
            print(event.text, end="", file=sys.stderr, flush=True)
        elif event.type == "complete":
            draft = event.draft
    print(file=sys.stderr)

    if draft is None:
        raise ValueError("Failed to parse AI response")

    projected = analyze_profile(apply_draft(profile, draft), role)
    print("\n=== Draft ===")
    print(json.dumps(draft.to_dict(), indent=2))
    print(f"\nProjected score with draft: {projected.overall_score}/100 (current {report.overall_score}/100)")


def main(argv: Optional[list[str]] = None):
    args = parse_args(argv)

    # Load config
    try:
        config = resolve_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Setup logging
    try:
        setup_logging(config.log_dir, config.log_level)
    except ValueError as e:
        setup_logging(config.log_dir)
        logger.warning("Config: %s - using INFO", e)

    # Validate config and print warnings
    for w in validate_config(config):
        logger.warning("Config: %s", w)

    try:
        registry = build_role_registry(config)

        if args.list_roles:
            print_roles(registry)
            return

        if not args.profile:
            raise ValueError("No profile given. Pass --profile PATH (or --list-roles)")

        role = require_role(registry, args.role or config.default_role)
        profile = load_profile(args.profile)
        report = analyze_profile(profile, role)
        logger.info(
            "Scored %s against '%s': %d/100",
            report.profile_name, report.target_role, report.overall_score,
        )

        snapshot = load_snapshot(args.compare) if args.compare else None
        fmt = args.format or config.output_format
        if fmt not in ("text", "json", "html"):
            fmt = "text"
        sys.stdout.write(render_report(report, fmt, snapshot))

        if args.output:
            save_snapshot(report, args.output)

        if args.draft:
            run_draft(config, role, profile, report, args.resume, args.notes)
    except (FileNotFoundError, ValueError, ImportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error("Run failed: %s: %s", type(e).__name__, e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
