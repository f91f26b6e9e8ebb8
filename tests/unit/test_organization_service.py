"""Tests for the organization registry."""
from datetime import date

import pytest

from talentmatch.persistence.models import STANDARD_TIER, UNVERIFIED, as_utc
from talentmatch.registry.exceptions import AlreadyExistsError, MalformedInputError, NotFoundError
from talentmatch.registry.outcomes import Outcome


class TestOrganizationService:
    """Establish / update / dissolve."""

    def test_establish_round_trip(self, organization_service, queries, test_db, organization_fields, clock):
        assert organization_service.establish("org-1", **organization_fields) == Outcome.CREATED
        test_db.expire_all()

        organization = queries.get_organization("org-1")
        assert organization.name == "Acme Cooperative"
        assert organization.established_on == date(2019, 4, 1)
        assert organization.verification_status == UNVERIFIED
        assert organization.tier == STANDARD_TIER
        assert as_utc(organization.registered_at) == clock.now()

    def test_establish_twice_fails(self, organization_service, organization_fields):
        organization_service.establish("org-1", **organization_fields)

        with pytest.raises(AlreadyExistsError):
            organization_service.establish("org-1", **organization_fields)

    def test_contact_info_limit(self, organization_service, organization_fields):
        with pytest.raises(MalformedInputError):
            organization_service.establish(
                "org-1", **{**organization_fields, "contact_info": "c" * 201}
            )

    def test_empty_name_fails(self, organization_service, organization_fields):
        with pytest.raises(MalformedInputError):
            organization_service.establish("org-1", **{**organization_fields, "name": ""})

    def test_update_verification(self, organization_service, queries, organization_fields):
        organization_service.establish("org-1", **organization_fields)

        outcome = organization_service.update("org-1", verification_status="Verified", tier="Premium")

        assert outcome == Outcome.UPDATED
        organization = queries.get_organization("org-1")
        assert organization.verification_status == "Verified"
        assert organization.tier == "Premium"

    def test_update_missing_fails(self, organization_service):
        with pytest.raises(NotFoundError):
            organization_service.update("org-1", tier="Premium")

    def test_dissolve(self, organization_service, queries, organization_fields):
        organization_service.establish("org-1", **organization_fields)

        assert organization_service.dissolve("org-1") == Outcome.DELETED
        assert queries.get_organization("org-1") is None

    def test_dissolve_missing_fails(self, organization_service):
        with pytest.raises(NotFoundError):
            organization_service.dissolve("org-1")
