"""Pytest fixtures for TalentMatch tests."""
import sys
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from talentmatch.matching.compatibility_service import CompatibilityService
from talentmatch.matching.scorer import BaselineScorer
from talentmatch.persistence.models import Base
from talentmatch.queries import RegistryQueries
from talentmatch.registry.clock import FixedClock
from talentmatch.registry.opportunity_service import OpportunityService
from talentmatch.registry.organization_service import OrganizationService
from talentmatch.registry.talent_service import TalentService

NOW = datetime(2026, 10, 17, 12, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh in-memory database for each test."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def clock():
    """Clock pinned to a known instant."""
    return FixedClock(NOW)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def talent_service(test_db, clock):
    return TalentService(test_db, clock)


@pytest.fixture
def opportunity_service(test_db, clock):
    return OpportunityService(test_db, clock)


@pytest.fixture
def organization_service(test_db, clock):
    return OrganizationService(test_db, clock)


@pytest.fixture
def compatibility_service(test_db, clock):
    return CompatibilityService(test_db, BaselineScorer(), clock)


@pytest.fixture
def queries(test_db):
    return RegistryQueries(test_db)


# =============================================================================
# SAMPLE FIELDS
# =============================================================================


@pytest.fixture
def talent_fields():
    """Valid arguments for TalentService.establish (minus identity)."""
    return {
        "display_name": "Ada Lovelace",
        "skills": ["rust", "go"],
        "location": "Lisbon",
        "narrative": "Systems engineer with a taste for ledgers.",
        "experience_level": "Senior",
    }


@pytest.fixture
def opportunity_fields(clock):
    """Valid arguments for OpportunityService.publish (minus identity)."""
    return {
        "title": "Backend Engineer",
        "description": "Build and operate the settlement ledger.",
        "location": "Remote",
        "competencies": ["rust"],
        "expires_at": clock.now() + timedelta(seconds=1000),
    }


@pytest.fixture
def organization_fields():
    """Valid arguments for OrganizationService.establish (minus identity)."""
    return {
        "name": "Acme Cooperative",
        "industry": "Software",
        "jurisdiction": "PT",
        "established_on": date(2019, 4, 1),
        "contact_info": "hello@acme.test",
    }
