#!/usr/bin/env python3
"""Evaluate one talent/opportunity pair and print the matrix entry.

Usage:
    python -m scripts.score_pair CALLER TALENT_ID OPPORTUNITY_ID [-c CRITERION ...]
"""
import argparse
import logging
import sys

from scripts.bootstrap import Database, settings
from talentmatch.logging_config import setup_logging
from talentmatch.matching.compatibility_service import CompatibilityService
from talentmatch.matching.scorer import get_scorer
from talentmatch.queries import RegistryQueries
from talentmatch.registry.exceptions import RegistryError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a talent/opportunity pair")
    parser.add_argument("caller", help="Identity performing the evaluation")
    parser.add_argument("talent", help="Talent identity")
    parser.add_argument("opportunity", help="Opportunity publisher identity")
    parser.add_argument("-c", "--criterion", action="append", default=[], dest="criteria")
    args = parser.parse_args(argv)

    setup_logging()

    db = Database()
    db.init_db()

    with db.session() as session:
        service = CompatibilityService(session, get_scorer(settings.scoring_engine))
        try:
            outcome = service.evaluate(args.caller, args.talent, args.opportunity, args.criteria)
        except RegistryError as e:
            logger.error("%s: %s", e.kind.value, e)
            return 1

        record = RegistryQueries(session).get_compatibility(args.talent, args.opportunity)
        print(
            f"{outcome.name} {record.talent_identity} -> {record.opportunity_identity}: "
            f"score={record.score} confidence={record.confidence} "
            f"criteria={','.join(record.criteria) or '-'}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
