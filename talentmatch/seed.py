"""Load registry records from a YAML seed file.

Seed format::

    talent:
      - identity: talent-1
        display_name: Ada
        skills: [rust, go]
        location: Lisbon
        narrative: Systems engineer
        experience_level: Senior
    organizations:
      - identity: org-1
        name: Acme
        industry: Software
        jurisdiction: PT
        established_on: 2019-04-01
        contact_info: hello@acme.test
    opportunities:
      - identity: org-1
        title: Backend Engineer
        description: Build the ledger
        location: Remote
        competencies: [rust]
        expires_at: 2027-01-01T00:00:00Z

Every entry goes through the regular services, so seeding obeys the same
uniqueness and validation rules as live traffic.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import yaml
from dateutil import parser as dateutil_parser
from sqlalchemy.orm import Session

from talentmatch.registry.clock import Clock
from talentmatch.registry.exceptions import MalformedInputError, RegistryError
from talentmatch.registry.opportunity_service import OpportunityService
from talentmatch.registry.organization_service import OrganizationService
from talentmatch.registry.talent_service import TalentService

logger = logging.getLogger(__name__)

SECTIONS = ("talent", "organizations", "opportunities")


@dataclass
class SeedReport:
    """Counts of seeded and rejected entries."""

    created: dict[str, int] = field(default_factory=lambda: {s: 0 for s in SECTIONS})
    failed: list[tuple[str, str, str]] = field(default_factory=list)  # (section, identity, reason)

    @property
    def total_created(self) -> int:
        return sum(self.created.values())


def load_seed(path: Path) -> dict[str, list[dict[str, Any]]]:
    """Read a seed file. Missing sections become empty lists."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise MalformedInputError([f"{path}: top level must be a mapping"])

    unknown = sorted(set(raw) - set(SECTIONS))
    if unknown:
        raise MalformedInputError([f"{path}: unknown section '{name}'" for name in unknown])

    return {section: list(raw.get(section) or []) for section in SECTIONS}


def _as_datetime(value: Any) -> Any:
    if isinstance(value, str):
        return dateutil_parser.isoparse(value)
    return value


def _as_date(value: Any) -> Any:
    if isinstance(value, str):
        return dateutil_parser.parse(value).date()
    if isinstance(value, datetime):
        return value.date()
    return value


def apply_seed(
    session: Session,
    seed: dict[str, list[dict[str, Any]]],
    clock: Optional[Clock] = None,
) -> SeedReport:
    """
    Register every seed entry.

    Entries that fail (duplicate identity, bad fields) are logged and
    recorded in the report; the rest still go in.

    Returns:
        SeedReport with per-section counts
    """
    report = SeedReport()
    handlers = {
        "talent": TalentService(session, clock).establish,
        "organizations": OrganizationService(session, clock).establish,
        "opportunities": OpportunityService(session, clock).publish,
    }

    for section in SECTIONS:
        for entry in seed.get(section, []):
            entry = dict(entry)
            identity = entry.pop("identity", None)
            try:
                if "expires_at" in entry:
                    entry["expires_at"] = _as_datetime(entry["expires_at"])
                if "established_on" in entry:
                    entry["established_on"] = _as_date(entry["established_on"])
                handlers[section](identity, **entry)
            # TypeError: missing or extra keys in the seed entry
            except (RegistryError, TypeError, ValueError) as e:
                report.failed.append((section, str(identity), str(e)))
                logger.warning("Skipped %s entry %s: %s", section, identity, e)
            else:
                report.created[section] += 1

    logger.info(
        "Seeded %d records (%d rejected)",
        report.total_created,
        len(report.failed),
    )
    return report
