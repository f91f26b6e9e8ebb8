"""Database persistence layer."""
from .database import Database, build_engine
from .models import Base, CompatibilityRecord, Opportunity, Organization, TalentProfile
from .repository import KeyedRepository

__all__ = [
    "Base",
    "TalentProfile",
    "Organization",
    "Opportunity",
    "CompatibilityRecord",
    "KeyedRepository",
    "Database",
    "build_engine",
]
