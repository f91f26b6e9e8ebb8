"""SQLAlchemy models for TalentMatch.

Every registry table is keyed by the owning identity, so the primary key
itself enforces the one-record-per-identity rule.
"""
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Column,
    Date,
    DateTime,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase

from talentmatch.confidence import confidence_for


def utcnow() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on the way back)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Availability / status defaults
AVAILABLE = "Available"
ACTIVE = "Active"
UNVERIFIED = "Unverified"
STANDARD_TIER = "Standard"


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class TalentProfile(Base):
    """Talent profile, one per identity."""

    __tablename__ = "talent_profiles"

    identity = Column(String(128), primary_key=True)
    display_name = Column(String(100), nullable=False)
    skills = Column(JSON, nullable=False, default=list)  # up to 10 entries
    location = Column(String(100), nullable=False)
    narrative = Column(Text, nullable=False)
    experience_level = Column(String(20), nullable=False)
    availability = Column(String(20), nullable=False, default=AVAILABLE)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False)
    last_active_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<TalentProfile {self.identity} ({self.display_name})>"


class Organization(Base):
    """Organization record, one per owner identity."""

    __tablename__ = "organizations"

    identity = Column(String(128), primary_key=True)
    name = Column(String(100), nullable=False)
    industry = Column(String(50), nullable=False)
    jurisdiction = Column(String(50), nullable=False)
    established_on = Column(Date, nullable=False)
    verification_status = Column(String(30), nullable=False, default=UNVERIFIED)
    contact_info = Column(String(200), nullable=False)
    tier = Column(String(20), nullable=False, default=STANDARD_TIER)
    registered_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<Organization {self.identity} ({self.name})>"


class Opportunity(Base):
    """Published opportunity, one per publisher identity."""

    __tablename__ = "opportunities"

    publisher = Column(String(128), primary_key=True)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String(100), nullable=False)
    competencies = Column(JSON, nullable=False, default=list)  # up to 10 entries
    status = Column(String(20), nullable=False, default=ACTIVE)

    # Timestamps
    published_at = Column(DateTime(timezone=True), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)

    def is_expired(self, at: datetime) -> bool:
        """Whether the deadline has passed. Advisory only; nothing enforces it."""
        return as_utc(at) > as_utc(self.expires_at)

    def __repr__(self) -> str:
        return f"<Opportunity {self.publisher} - {self.title} ({self.status})>"


class CompatibilityRecord(Base):
    """Compatibility matrix entry for a (talent, opportunity) pair."""

    __tablename__ = "compatibility_records"

    talent_identity = Column(String(128), primary_key=True)
    opportunity_identity = Column(String(128), primary_key=True)
    score = Column(Integer, nullable=False)
    criteria = Column(JSON, nullable=False, default=list)  # up to 5 entries
    confidence = Column(Integer, nullable=False)
    evaluated_at = Column(DateTime(timezone=True), nullable=False)

    def record_evaluation(
        self,
        score: int,
        criteria: list[str],
        evaluated_at: datetime,
    ) -> None:
        """Write score and confidence together so they never drift apart."""
        self.score = score
        self.confidence = confidence_for(score)
        self.criteria = list(criteria)
        self.evaluated_at = evaluated_at

    def __repr__(self) -> str:
        return (
            f"<CompatibilityRecord {self.talent_identity} -> "
            f"{self.opportunity_identity}: {self.score} ({self.confidence})>"
        )
