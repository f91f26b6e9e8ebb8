"""Tests for identity isolation.

Every record is keyed by its owner; one identity's operations must never
touch another identity's record.
"""
import pytest

from talentmatch.registry.exceptions import NotFoundError
from talentmatch.registry.outcomes import Outcome


class TestTalentIsolation:
    """Profiles of different identities are independent."""

    def test_two_identities_each_get_a_profile(self, talent_service, queries, talent_fields):
        assert talent_service.establish("alice", **talent_fields) == Outcome.CREATED
        assert talent_service.establish("bob", **{**talent_fields, "display_name": "Bob"}) == Outcome.CREATED

        assert queries.get_talent("alice").display_name == "Ada Lovelace"
        assert queries.get_talent("bob").display_name == "Bob"

    def test_cannot_deactivate_someone_elses_profile(self, talent_service, queries, talent_fields):
        talent_service.establish("alice", **talent_fields)

        with pytest.raises(NotFoundError):
            talent_service.deactivate("bob")

        assert queries.get_talent("alice") is not None

    def test_update_only_touches_own_profile(self, talent_service, queries, talent_fields):
        talent_service.establish("alice", **talent_fields)
        talent_service.establish("bob", **talent_fields)

        talent_service.update("bob", availability="Busy")

        assert queries.get_talent("alice").availability == "Available"
        assert queries.get_talent("bob").availability == "Busy"


class TestTableIsolation:
    """The three tables are independent even for the same identity."""

    def test_same_identity_in_every_table(
        self,
        talent_service,
        organization_service,
        opportunity_service,
        talent_fields,
        organization_fields,
        opportunity_fields,
    ):
        assert talent_service.establish("carol", **talent_fields) == Outcome.CREATED
        assert organization_service.establish("carol", **organization_fields) == Outcome.CREATED
        assert opportunity_service.publish("carol", **opportunity_fields) == Outcome.CREATED

    def test_terminate_leaves_other_tables(
        self,
        queries,
        organization_service,
        opportunity_service,
        organization_fields,
        opportunity_fields,
    ):
        organization_service.establish("carol", **organization_fields)
        opportunity_service.publish("carol", **opportunity_fields)

        opportunity_service.terminate("carol")

        assert queries.get_organization("carol") is not None
        assert queries.get_opportunity("carol") is None

    def test_identities_are_case_sensitive(self, talent_service, talent_fields):
        talent_service.establish("Dave", **talent_fields)

        assert talent_service.establish("dave", **talent_fields) == Outcome.CREATED
