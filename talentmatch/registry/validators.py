"""Pydantic input models enforcing registry field limits.

Every model rejects blank strings and unknown fields. ``parse_input`` turns
pydantic's ValidationError into MalformedInputError so callers only ever see
registry errors.
"""
from datetime import date, datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from talentmatch.persistence.models import ACTIVE, AVAILABLE, STANDARD_TIER, UNVERIFIED, as_utc
from talentmatch.registry.exceptions import MalformedInputError

MAX_IDENTITY_LENGTH = 128
MAX_LIST_ENTRY_LENGTH = 50
MAX_SKILLS = 10
MAX_COMPETENCIES = 10
MAX_CRITERIA = 5

InputT = TypeVar("InputT", bound=BaseModel)


def _check_entries(values: list[str]) -> list[str]:
    for i, item in enumerate(values):
        if not item.strip():
            raise ValueError(f"entry {i} must not be blank")
        if len(item) > MAX_LIST_ENTRY_LENGTH:
            raise ValueError(f"entry {i} exceeds {MAX_LIST_ENTRY_LENGTH} characters")
    return values


class _RegistryInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    @field_validator("*", mode="after")
    @classmethod
    def reject_blank_strings(cls, v):
        """Whitespace-only strings count as empty."""
        if isinstance(v, str) and not v.strip():
            raise ValueError("must not be blank")
        return v


class TalentInput(_RegistryInput):
    """Talent profile fields."""

    display_name: str = Field(min_length=1, max_length=100)
    skills: list[str] = Field(min_length=1, max_length=MAX_SKILLS)
    location: str = Field(min_length=1, max_length=100)
    narrative: str = Field(min_length=1, max_length=500)
    experience_level: str = Field(min_length=1, max_length=20)
    availability: str = Field(default=AVAILABLE, min_length=1, max_length=20)

    @field_validator("skills")
    @classmethod
    def check_skills(cls, v: list[str]) -> list[str]:
        return _check_entries(v)


class OpportunityInput(_RegistryInput):
    """Opportunity fields. The expiration-vs-now check needs a clock and lives in the service."""

    title: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=500)
    location: str = Field(min_length=1, max_length=100)
    competencies: list[str] = Field(min_length=1, max_length=MAX_COMPETENCIES)
    expires_at: datetime
    status: str = Field(default=ACTIVE, min_length=1, max_length=20)

    @field_validator("competencies")
    @classmethod
    def check_competencies(cls, v: list[str]) -> list[str]:
        return _check_entries(v)

    @field_validator("expires_at")
    @classmethod
    def normalize_expiration(cls, v: datetime) -> datetime:
        """Store UTC; SQLite keeps wall-clock time and drops the offset."""
        return as_utc(v)


class OrganizationInput(_RegistryInput):
    """Organization fields."""

    name: str = Field(min_length=1, max_length=100)
    industry: str = Field(min_length=1, max_length=50)
    jurisdiction: str = Field(min_length=1, max_length=50)
    established_on: date
    contact_info: str = Field(min_length=1, max_length=200)
    tier: str = Field(default=STANDARD_TIER, min_length=1, max_length=20)
    verification_status: str = Field(default=UNVERIFIED, min_length=1, max_length=30)


class CriteriaInput(_RegistryInput):
    """Matching criteria attached to a compatibility evaluation."""

    criteria: list[str] = Field(default_factory=list, max_length=MAX_CRITERIA)

    @field_validator("criteria")
    @classmethod
    def check_criteria(cls, v: list[str]) -> list[str]:
        return _check_entries(v)


def parse_input(model: type[InputT], **fields: Any) -> InputT:
    """
    Validate fields against an input model.

    Raises:
        MalformedInputError: One message per failing field
    """
    try:
        return model(**fields)
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or model.__name__}: {err['msg']}"
            for err in exc.errors()
        ]
        raise MalformedInputError(errors) from exc


def validate_identity(identity: Any) -> str:
    """
    Check that an identity is usable as a record key.

    Raises:
        MalformedInputError: If identity is not a non-blank string of at
            most 128 characters
    """
    if not isinstance(identity, str) or not identity.strip():
        raise MalformedInputError(["identity must be a non-blank string"])
    if len(identity) > MAX_IDENTITY_LENGTH:
        raise MalformedInputError([f"identity exceeds {MAX_IDENTITY_LENGTH} characters"])
    return identity
