"""Command-line entry point for the job/resume keyword matcher."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from jobmatch.catalog import CatalogError, CatalogStore, validate_job_description
from jobmatch.config.environment import EnvironmentConfig
from jobmatch.config.exceptions import ConfigurationError
from jobmatch.config.loader import load_config, validate_config_file
from jobmatch.config.models import AppConfig
from jobmatch.domain.models import AnalysisRecord
from jobmatch.logging import get_logger
from jobmatch.logging.config import configure_logging
from jobmatch.logging.context import log_context
from jobmatch.matching import (
    KeywordMatcher,
    MatchingError,
    build_analysis_payload,
    format_keyword_list,
    format_match_report,
    format_suggestion_report,
)
from jobmatch.matching.factory import create_matcher
from jobmatch.matching.utils import (
    format_company_listing,
    format_job_listing,
    format_validation_report,
)
from jobmatch.persistence import (
    AnalysisRepository,
    PersistenceError,
    close_database,
    get_session,
    init_database,
)
from jobmatch.utils.timestamps import utc_now

logger = get_logger(__name__, component="cli")


class CommandContext:
    """Everything a command handler needs, built once per invocation."""

    def __init__(
        self,
        args: argparse.Namespace,
        app_config: AppConfig,
        env_config: EnvironmentConfig,
        store: CatalogStore,
        matcher: KeywordMatcher,
    ):
        self.args = args
        self.app_config = app_config
        self.env_config = env_config
        self.store = store
        self.matcher = matcher


def load_runtime_config(
    config_path: Optional[Path],
    log_level_override: Optional[str] = None,
    data_dir_override: Optional[str] = None,
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve overrides.

    Priority for log level and data directory: CLI > environment > config file.

    Args:
        config_path: Path to configuration file (None to search defaults)
        log_level_override: Log level from CLI
        data_dir_override: Catalog directory from CLI

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with overrides applied

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif env_config.log_level:
        # Environment variable already set
        pass
    elif app_config.logging and app_config.logging.level:
        env_config.log_level = app_config.logging.level
    else:
        env_config.log_level = "INFO"

    if data_dir_override:
        env_config.data_dir = data_dir_override
    elif not env_config.data_dir:
        env_config.data_dir = app_config.catalog.data_dir

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobmatch",
        description="Score resumes against job descriptions and suggest missing keywords",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Catalog directory holding companies/ and users/ (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON instead of text",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List companies, or a company's jobs")
    list_parser.add_argument("company", nargs="?", default=None)

    keywords_parser = subparsers.add_parser("keywords", help="Extract keywords from a job")
    keywords_parser.add_argument("company")
    keywords_parser.add_argument("job_id")

    for name, help_text in (
        ("analyze", "Score a user's resume against a job"),
        ("suggest", "Suggest resume improvements for a job"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("user_id")
        sub.add_argument("company")
        sub.add_argument("job_id")
        sub.add_argument(
            "--no-save", action="store_true", help="Do not store the analysis in the database"
        )

    validate_parser = subparsers.add_parser("validate", help="Check a job description file")
    validate_parser.add_argument("company")
    validate_parser.add_argument("job_id")

    check_parser = subparsers.add_parser(
        "check-config", help="Validate a configuration file without running anything"
    )
    check_parser.add_argument("path", type=Path)

    return parser


def cmd_list(ctx: CommandContext) -> int:
    company = ctx.args.company
    if company is None:
        counts = ctx.store.count_jobs_by_company()
        if ctx.args.json:
            print(json.dumps(counts, indent=2))
        else:
            print(format_company_listing(counts))
        return 0

    jobs = ctx.store.list_company_jobs(company)
    if ctx.args.json:
        print(json.dumps([job.model_dump(by_alias=True) for job in jobs], indent=2))
    else:
        print(format_job_listing(company, jobs))
    return 0


def cmd_keywords(ctx: CommandContext) -> int:
    job = ctx.store.load_job_description(ctx.args.company, ctx.args.job_id)
    keywords = ctx.matcher.extract_keywords(job)
    if ctx.args.json:
        print(json.dumps(keywords, indent=2))
    else:
        print(format_keyword_list(keywords, job.title))
    return 0


def cmd_analyze(ctx: CommandContext) -> int:
    args = ctx.args
    resume = ctx.store.load_resume(args.user_id)
    job = ctx.store.load_job_description(args.company, args.job_id)

    result = ctx.matcher.calculate_match_score(resume, job)
    analysis_date = utc_now()
    payload = build_analysis_payload(result, args.company, args.job_id, args.user_id, analysis_date)

    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print(format_match_report(result, job.title, args.company, args.user_id))

    if not args.no_save:
        _save_analysis(ctx, "match", payload, analysis_date)
    return 0


def cmd_suggest(ctx: CommandContext) -> int:
    args = ctx.args
    resume = ctx.store.load_resume(args.user_id)
    job = ctx.store.load_job_description(args.company, args.job_id)

    report = ctx.matcher.generate_resume_suggestions(resume, job)
    analysis_date = utc_now()
    payload = build_analysis_payload(report, args.company, args.job_id, args.user_id, analysis_date)

    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print(format_suggestion_report(report))

    if not args.no_save:
        _save_analysis(ctx, "suggestions", payload, analysis_date)
    return 0


def cmd_validate(ctx: CommandContext) -> int:
    raw = ctx.store.load_raw_job_description(ctx.args.company, ctx.args.job_id)
    report = validate_job_description(raw, ctx.args.job_id, ctx.app_config.validation)
    if ctx.args.json:
        print(json.dumps(report.model_dump(), indent=2))
    else:
        print(format_validation_report(report))
    return 0 if report.is_valid else 1


def cmd_check_config(args: argparse.Namespace) -> int:
    """Validate a config file on its own; runs before any other config is loaded."""
    return 0 if validate_config_file(args.path) else 1


COMMANDS: Dict[str, Callable[[CommandContext], int]] = {
    "list": cmd_list,
    "keywords": cmd_keywords,
    "analyze": cmd_analyze,
    "suggest": cmd_suggest,
    "validate": cmd_validate,
}


def _save_analysis(
    ctx: CommandContext, kind: str, payload: dict, analysis_date: datetime
) -> None:
    """Store an analysis; the database is opened only when something is saved."""
    record = AnalysisRecord(
        company=ctx.args.company,
        job_id=ctx.args.job_id,
        user_id=ctx.args.user_id,
        kind=kind,
        analysis_date=analysis_date,
        payload=payload,
    )

    init_database(ctx.env_config.database_url)
    try:
        with get_session() as session:
            AnalysisRepository(session).save(record)
    finally:
        close_database()

    if not ctx.args.json:
        print(f"\nAnalysis saved ({kind}) for {record.user_id}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the job/resume keyword matcher.

    Returns:
        Exit code (0 for success, 1 for handled errors)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "check-config":
        return cmd_check_config(args)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level, args.data_dir)

        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        store = CatalogStore(env_config.data_dir)
        matcher = create_matcher(app_config.matching)
        ctx = CommandContext(args, app_config, env_config, store, matcher)

        scope = {
            key: getattr(args, key)
            for key in ("company", "job_id", "user_id")
            if getattr(args, key, None)
        }
        with log_context(command=args.command, **scope):
            logger.debug(
                f"Running command {args.command}",
                extra={"event": "cli.command.started", "data_dir": env_config.data_dir},
            )
            exit_code = COMMANDS[args.command](ctx)
            logger.debug(
                f"Command {args.command} finished",
                extra={"event": "cli.command.completed", "exit_code": exit_code},
            )
            return exit_code

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1
    except MatchingError as e:
        print(f"Error: {e.user_message}", file=sys.stderr)
        print(f"  {e}", file=sys.stderr)
        logger.warning(
            f"Matching failed: {e}",
            extra={"event": "cli.matching.failed", "error_type": type(e).__name__},
        )
        return 1
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.warning(
            f"Catalog error: {e}",
            extra={"event": "cli.catalog.failed", "error_type": type(e).__name__},
        )
        return 1
    except PersistenceError as e:
        print(f"Failed to save analysis: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        logger.critical(
            "Unexpected error",
            extra={
                "event": "cli.failed",
                "error_type": type(e).__name__,
                "error": str(e),
            },
            exc_info=True,
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
