#!/usr/bin/env python3
"""Seed the registry from a YAML file.

Usage:
    python -m scripts.seed_registry [path/to/seed.yaml]

Defaults to config/seed.yaml. Rejected entries are logged and the script
exits non-zero if any entry failed.
"""
import argparse
import logging
import sys
from pathlib import Path

from scripts.bootstrap import Database, settings
from talentmatch.logging_config import setup_logging
from talentmatch.seed import apply_seed, load_seed

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Load and apply a seed file."""
    parser = argparse.ArgumentParser(description="Seed the TalentMatch registry")
    parser.add_argument("seed", nargs="?", type=Path, default=settings.seed_path)
    parser.add_argument("--database-url", default=settings.database_url)
    args = parser.parse_args(argv)

    setup_logging()

    if not args.seed.exists():
        logger.error("Seed file not found: %s", args.seed)
        return 1

    db = Database(args.database_url)
    db.init_db()

    seed = load_seed(args.seed)
    with db.session() as session:
        report = apply_seed(session, seed)

    for section, count in report.created.items():
        logger.info("  %s: %d created", section, count)
    for section, identity, reason in report.failed:
        logger.warning("  %s/%s rejected: %s", section, identity, reason)

    return 1 if report.failed else 0


if __name__ == "__main__":
    sys.exit(main())
