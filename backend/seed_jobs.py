#!/usr/bin/env python3
"""
Import job postings into the jobs table.

Reads a JSON array of job documents as exported from a job collection
(``Company``, ``Role``, ``City``, ``SkillLevel``, ``KeyResponsibilities`` ...).
Documents carrying a 24-hex ``_id`` (plain or ``{"$oid": ...}``) keep it, so
existing saved-job references stay valid. Already-present ids are skipped.

    python backend/seed_jobs.py jobs.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.app import database  # noqa: E402
from backend.app.repositories.jobs import JobRepository  # noqa: E402
from backend.app.services.job_format import job_fields_from_document  # noqa: E402

logger = logging.getLogger("seed_jobs")


def seed(documents: list[dict], db) -> tuple[int, int]:
    jobs = JobRepository(db)
    added = skipped = 0
    for doc in documents:
        fields = job_fields_from_document(doc)
        if "id" in fields and jobs.exists(fields["id"]):
            skipped += 1
            continue
        jobs.add(**fields)
        added += 1
    return added, skipped


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Import job postings from a JSON export.")
    parser.add_argument("path", type=Path, help="JSON file holding a list of job documents")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    documents = json.loads(args.path.read_text(encoding="utf-8"))
    if not isinstance(documents, list):
        parser.error("expected a JSON array of job documents")

    database.init_db()
    db = database.SessionLocal()
    try:
        added, skipped = seed(documents, db)
    finally:
        db.close()

    logger.info("Imported %d jobs (%d already present)", added, skipped)
    return 0


if __name__ == "__main__":
    sys.exit(main())
