"""Main entry point for resume-insight."""

import argparse
import json
import sys
from pathlib import Path

from resume_insight import __version__
from resume_insight.config.settings import Settings
from resume_insight.utils.logging import configure_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="resume-insight",
        description="resume-insight: rule-based resume extraction and scoring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m resume_insight analyze resume.txt
  python -m resume_insight analyze resumes/*.txt --summary --json
  python -m resume_insight analyze resume.txt --no-jitter
  python -m resume_insight analyze resumes/*.txt --output-dir results/
  python -m resume_insight skills
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="commands",
        description="Available commands",
    )

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Extract and score one or more plain-text resumes",
    )
    analyze_parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Paths to plain-text resume files",
    )
    analyze_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the score offset for reproducible scores (overrides SCORING_SEED)",
    )
    analyze_parser.add_argument(
        "--no-jitter",
        action="store_true",
        help="Disable the random score offset",
    )
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON (overrides OUTPUT_FORMAT)",
    )
    analyze_parser.add_argument(
        "--summary",
        action="store_true",
        help="Also print a batch summary (average score, top skills)",
    )
    analyze_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Also save each analysis as <file name>.json in this directory",
    )

    subparsers.add_parser(
        "skills",
        help="List the reference skills and their categories",
    )

    return parser


def _format_analysis(analysis) -> str:
    if not analysis.succeeded:
        return f"{analysis.name}: FAILED ({analysis.error})"

    profile = analysis.profile
    skills = ", ".join(profile.skills) if profile.skills else "-"
    lines = [
        f"{analysis.name}: score={analysis.score}",
        f"  Skills: {skills}",
        f"  Projects: {len(profile.projects)}",
        f"  Experience: {profile.experience} years",
        f"  Education: {profile.education}",
    ]
    if profile.contact_info.email:
        lines.append(f"  Email: {profile.contact_info.email}")
    if profile.contact_info.phone:
        lines.append(f"  Phone: {profile.contact_info.phone}")
    for role in profile.work_experience:
        lines.append(f"  Role: {role}")
    return "\n".join(lines)


def _format_summary(summary) -> str:
    lines = [
        f"Processed: {summary.processed} "
        f"(completed={summary.completed}, failed={summary.failed})",
        f"Average score: {summary.average_score}",
        f"Unique skills: {summary.unique_skills}",
    ]
    for item in summary.top_skills:
        lines.append(f"  {item.skill} ({item.category}): {item.count}")
    return "\n".join(lines)


def _run_analyze(parsed: argparse.Namespace, settings: Settings) -> int:
    from resume_insight.analysis.service import AnalysisService
    from resume_insight.scoring.config import ScoringConfig
    from resume_insight.scoring.service import ResumeScorer

    if not parsed.files:
        print("Error: at least one resume file is required", file=sys.stderr)
        return 1

    overrides: dict = {}
    if parsed.seed is not None:
        overrides["seed"] = parsed.seed
    if parsed.no_jitter:
        overrides["jitter"] = 0.0
    scoring_config = ScoringConfig(**overrides)

    service = AnalysisService(
        settings=settings,
        scorer=ResumeScorer(config=scoring_config),
    )
    analyses = service.analyze_batch(parsed.files)
    if parsed.output_dir is not None:
        for analysis in analyses:
            analysis.save_json(parsed.output_dir / f"{analysis.name}.json")
    summary = service.summarize(analyses) if parsed.summary else None

    as_json = parsed.json or settings.output_format == "json"
    if as_json:
        payload: dict = {"results": [a.to_dict() for a in analyses]}
        if summary is not None:
            payload["summary"] = summary.to_dict()
        print(json.dumps(payload, indent=2))
    else:
        for analysis in analyses:
            print(_format_analysis(analysis))
        if summary is not None:
            print(_format_summary(summary))

    return 0 if all(a.succeeded for a in analyses) else 1


def _run_skills() -> int:
    from resume_insight.extractor.service import ResumeExtractor

    table = ResumeExtractor().skill_table
    for skill in table:
        print(f"{skill}\t{table.category_for(skill)}")
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.debug(f"resume-insight v{__version__} running '{parsed.mode}'")

    try:
        if parsed.mode == "analyze":
            return _run_analyze(parsed, settings)
        if parsed.mode == "skills":
            return _run_skills()
    except (OSError, ValueError) as e:
        # Bad skill table, invalid settings values or unwritable output
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
