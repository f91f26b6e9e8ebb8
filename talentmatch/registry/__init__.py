"""Identity-keyed record store for talent, organizations and opportunities."""
from talentmatch.registry.clock import Clock, FixedClock, SystemClock, read_clock
from talentmatch.registry.exceptions import (
    AlreadyExistsError,
    ClockUnavailableError,
    ErrorKind,
    ExpirationInPastError,
    MalformedInputError,
    NotFoundError,
    RegistryError,
    UnauthorizedError,
)
from talentmatch.registry.opportunity_service import OpportunityService
from talentmatch.registry.organization_service import OrganizationService
from talentmatch.registry.outcomes import Outcome
from talentmatch.registry.talent_service import TalentService

__all__ = [
    "TalentService",
    "OpportunityService",
    "OrganizationService",
    "Outcome",
    "Clock",
    "SystemClock",
    "FixedClock",
    "read_clock",
    "ErrorKind",
    "RegistryError",
    "MalformedInputError",
    "ExpirationInPastError",
    "AlreadyExistsError",
    "NotFoundError",
    "UnauthorizedError",
    "ClockUnavailableError",
]
