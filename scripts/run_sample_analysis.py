#!/usr/bin/env python3
"""Sample analysis harness for end-to-end validation.

Scores every user resume in a catalog against every job description, prints a
summary table, and stores each analysis in a scratch SQLite database. Use it
to eyeball the matcher on real data without going through the CLI one job at a
time.

Usage:
    # Run against the bundled sample catalog
    python scripts/run_sample_analysis.py

    # Another catalog, custom database
    python scripts/run_sample_analysis.py --data-dir ~/catalog --database /tmp/test.db

    # Custom configuration (vocabulary, predicate, aliases)
    python scripts/run_sample_analysis.py --config config.yaml
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from jobmatch.catalog import CatalogError, CatalogStore
from jobmatch.config.loader import load_config
from jobmatch.domain.models import AnalysisRecord
from jobmatch.logging.config import configure_logging
from jobmatch.matching import MatchingError, build_analysis_payload
from jobmatch.matching.factory import create_matcher
from jobmatch.persistence import AnalysisRepository, close_database, get_session, init_database
from jobmatch.utils.timestamps import utc_now


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def print_summary_table(rows):
    """Print a table of (user, company/job, score, matched/total) rows."""
    print_header("Analysis Summary")

    headers = ("User", "Job", "Score", "Matched")
    widths = [max(len(str(row[i])) for row in rows + [headers]) for i in range(len(headers))]

    print("┌" + "┬".join("─" * (w + 2) for w in widths) + "┐")
    print("│ " + " │ ".join(f"{h:<{w}}" for h, w in zip(headers, widths)) + " │")
    print("├" + "┼".join("─" * (w + 2) for w in widths) + "┤")

    for row in rows:
        print("│ " + " │ ".join(f"{str(v):<{w}}" for v, w in zip(row, widths)) + " │")

    print("└" + "┴".join("─" * (w + 2) for w in widths) + "┘")


def main():
    """Main entry point for the sample analysis harness."""
    parser = argparse.ArgumentParser(
        description="Score every catalog resume against every job description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: built-in defaults)",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("samples"),
        help="Catalog directory (default: samples)",
    )
    parser.add_argument(
        "--database",
        type=Path,
        default=Path("data/sample_analysis.db"),
        help="Path to SQLite database (default: data/sample_analysis.db)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)",
    )

    args = parser.parse_args()

    load_dotenv()

    print_header("Job/Resume Keyword Matcher - Sample Analysis Harness")

    print(f"Catalog: {args.data_dir}")
    print(f"Database: {args.database}")
    print(f"Log level: {args.log_level}")

    if not args.data_dir.is_dir():
        print(f"\n❌ Error: Catalog directory not found: {args.data_dir}")
        return 1

    try:
        print("\n📋 Loading configuration...")
        app_config, _ = load_config(args.config)

        configure_logging(
            level=args.log_level,
            format_type=app_config.logging.format,
            environment="validation",
        )

        store = CatalogStore(args.data_dir)
        matcher = create_matcher(app_config.matching)
        print(f"✓ Vocabulary: {len(matcher.vocabulary)} terms, predicate: {app_config.matching.predicate}")

        users = sorted(p.name for p in store.users_path.iterdir() if p.is_dir()) \
            if store.users_path.is_dir() else []
        jobs = [
            (company, summary.job_id)
            for company in store.list_companies()
            for summary in store.list_company_jobs(company)
        ]
        print(f"✓ {len(users)} users, {len(jobs)} job descriptions")

        database_url = f"sqlite:///{args.database.absolute()}"
        print(f"\n💾 Initializing database: {args.database}")
        init_database(database_url)

        print("\n🚀 Scoring...")
        print(f"   Started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

        rows = []
        failures = 0
        with get_session() as session:
            repo = AnalysisRepository(session)
            for user_id in users:
                try:
                    resume = store.load_resume(user_id)
                except (CatalogError, MatchingError) as e:
                    print(f"   ⚠ Skipping user {user_id}: {e}")
                    failures += 1
                    continue

                for company, job_id in jobs:
                    try:
                        job = store.load_job_description(company, job_id)
                        result = matcher.calculate_match_score(resume, job)
                    except (CatalogError, MatchingError) as e:
                        print(f"   ⚠ Skipping {company}/{job_id} for {user_id}: {e}")
                        failures += 1
                        continue

                    analysis_date = utc_now()
                    repo.save(
                        AnalysisRecord(
                            company=company,
                            job_id=job_id,
                            user_id=user_id,
                            kind="match",
                            analysis_date=analysis_date,
                            payload=build_analysis_payload(
                                result, company, job_id, user_id, analysis_date
                            ),
                        )
                    )
                    rows.append(
                        (
                            user_id,
                            f"{company}/{job_id}",
                            f"{result.score}%",
                            f"{result.total_matches}/{result.total_job_keywords}",
                        )
                    )

        print(f"   Completed at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

        if rows:
            print_summary_table(rows)
        else:
            print("\nNo analyses produced.")

        print_header("Output Locations")
        print(f"Database: {args.database.absolute()}")
        print(f"  sqlite3 {args.database.absolute()} 'SELECT user_id, company, job_id, score FROM analyses;'")
        print("\n" + "-" * 80)
        print(f"To clean up: rm {args.database.absolute()}")
        print("-" * 80 + "\n")

        close_database()

        return 1 if failures else 0

    except Exception as e:
        print(f"\n❌ Fatal error: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
