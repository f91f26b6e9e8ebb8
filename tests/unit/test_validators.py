"""Tests for input validation models."""
from datetime import date, datetime, timedelta, timezone

import pytest

from talentmatch.registry.exceptions import MalformedInputError
from talentmatch.registry.validators import (
    CriteriaInput,
    OpportunityInput,
    OrganizationInput,
    TalentInput,
    parse_input,
    validate_identity,
)


class TestParseInput:
    def test_collects_every_failing_field(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_input(
                TalentInput,
                display_name="",
                skills=[],
                location="Lisbon",
                narrative="",
                experience_level="Senior",
            )

        failed = {message.split(":")[0] for message in exc_info.value.errors}
        assert failed == {"display_name", "skills", "narrative"}

    def test_rejects_unknown_fields(self):
        with pytest.raises(MalformedInputError):
            parse_input(CriteriaInput, criteria=[], weights=[1])

    def test_rejects_non_string_entries(self):
        with pytest.raises(MalformedInputError):
            parse_input(CriteriaInput, criteria=[42])

    def test_list_entry_index_reported(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_input(CriteriaInput, criteria=["ok", "y" * 51])

        assert "entry 1" in str(exc_info.value)


class TestFieldLimits:
    """Size limits from the data model."""

    def test_opportunity_defaults_active(self):
        data = OpportunityInput(
            title="t",
            description="d",
            location="l",
            competencies=["c"],
            expires_at=datetime(2027, 1, 1, tzinfo=timezone.utc),
        )
        assert data.status == "Active"

    def test_opportunity_expiration_normalized_to_utc(self):
        plus_nine = timezone(timedelta(hours=9))
        data = OpportunityInput(
            title="t",
            description="d",
            location="l",
            competencies=["c"],
            expires_at=datetime(2027, 1, 1, 9, tzinfo=plus_nine),
        )

        assert data.expires_at.utcoffset() == timedelta(0)
        assert data.expires_at == datetime(2027, 1, 1, tzinfo=timezone.utc)

    def test_opportunity_competency_cap(self):
        with pytest.raises(MalformedInputError):
            parse_input(
                OpportunityInput,
                title="t",
                description="d",
                location="l",
                competencies=[str(i) for i in range(11)],
                expires_at=datetime(2027, 1, 1, tzinfo=timezone.utc),
            )

    @pytest.mark.parametrize(
        "field,limit",
        [("name", 100), ("industry", 50), ("jurisdiction", 50), ("contact_info", 200), ("tier", 20)],
    )
    def test_organization_limits(self, field, limit):
        fields = {
            "name": "Acme",
            "industry": "Software",
            "jurisdiction": "PT",
            "established_on": date(2019, 4, 1),
            "contact_info": "hello@acme.test",
        }
        assert parse_input(OrganizationInput, **{**fields, field: "x" * limit})
        with pytest.raises(MalformedInputError):
            parse_input(OrganizationInput, **{**fields, field: "x" * (limit + 1)})

    def test_verification_status_limit(self):
        with pytest.raises(MalformedInputError):
            parse_input(
                OrganizationInput,
                name="Acme",
                industry="Software",
                jurisdiction="PT",
                established_on=date(2019, 4, 1),
                contact_info="hello@acme.test",
                verification_status="v" * 31,
            )

    def test_experience_level_limit(self):
        with pytest.raises(MalformedInputError):
            parse_input(
                TalentInput,
                display_name="Ada",
                skills=["rust"],
                location="Lisbon",
                narrative="n",
                experience_level="e" * 21,
            )


class TestValidateIdentity:
    def test_accepts_identity(self):
        assert validate_identity("0xabc") == "0xabc"

    @pytest.mark.parametrize("identity", ["", " ", None, 7, "a" * 129])
    def test_rejects_malformed(self, identity):
        with pytest.raises(MalformedInputError):
            validate_identity(identity)
