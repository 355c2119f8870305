"""Nightly scheduler — regenerates the coaching recommendations digest.

Usage:
    python -m scheduler.nightly --once      # single run (for cron)
    python -m scheduler.nightly --daemon    # APScheduler loop
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path

from coach_engine.engine import CoachEngine
from coach_engine.exceptions import HistoryLoadError
from coach_engine.serialization import (
    analysis_to_json_dict,
    load_exercise_catalog,
    load_exercise_log,
    load_personal_records,
    to_json_dict,
)

from scheduler.config import (
    CATALOG_PATH,
    HISTORY_PATH,
    NIGHTLY_HOUR,
    NIGHTLY_MINUTE,
    OUTPUT_PATH,
    RECORDS_PATH,
)

logger = logging.getLogger(__name__)


def nightly_job(output_path: Path = OUTPUT_PATH) -> bool:
    """Execute one digest cycle: load history, run the engine, write the JSON digest.

    Returns True when a digest was written.
    """
    logger.info("Starting nightly job")

    # 1. Load inputs
    try:
        log = load_exercise_log(HISTORY_PATH)
        catalog = load_exercise_catalog(CATALOG_PATH)
    except HistoryLoadError as exc:
        logger.error("Failed to load history: %s", exc)
        return False

    try:
        personal_records = load_personal_records(RECORDS_PATH)
    except HistoryLoadError as exc:
        logger.warning("No personal records available, continuing without: %s", exc)
        personal_records = {}

    logger.info(
        "Loaded %d log entries, %d catalog exercises, %d PRs",
        len(log),
        len(catalog),
        len(personal_records),
    )

    # 2. Generate recommendations
    now = datetime.now()
    engine = CoachEngine()
    recommendations, trace = engine.recommend_with_trace(
        log, personal_records, catalog, now=now
    )
    logger.info("Generated %d recommendations (%s)", len(recommendations), trace.ranking_notes)

    # 3. Write the digest
    digest = {
        "generatedAt": now.isoformat(),
        "analysis": analysis_to_json_dict(trace.analysis) if trace.analysis else None,
        "recommendations": [to_json_dict(r) for r in recommendations],
    }
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(digest, f, indent=2)
    except OSError as exc:
        logger.error("Failed to write digest to %s: %s", output_path, exc)
        return False

    logger.info("Nightly job complete, digest written to %s", output_path)
    return True


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = argparse.ArgumentParser(description="Coach engine nightly digest scheduler")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Write one digest and exit")
    group.add_argument("--daemon", action="store_true", help="Regenerate the digest every night")
    parser.add_argument(
        "--output", type=Path, default=OUTPUT_PATH, help=f"Digest path (default: {OUTPUT_PATH})"
    )
    args = parser.parse_args()

    if args.once:
        if not nightly_job(args.output):
            raise SystemExit(1)
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            nightly_job,
            "cron",
            args=[args.output],
            hour=NIGHTLY_HOUR,
            minute=NIGHTLY_MINUTE,
            id="nightly_job",
        )
        logger.info(
            "Scheduler started — nightly job at %02d:%02d",
            NIGHTLY_HOUR,
            NIGHTLY_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
