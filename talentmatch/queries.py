"""Read-only lookups across the registry and the compatibility matrix."""
from typing import Optional

from sqlalchemy.orm import Session

from talentmatch.persistence.models import (
    CompatibilityRecord,
    Opportunity,
    Organization,
    TalentProfile,
)
from talentmatch.registry.validators import validate_identity


class RegistryQueries:
    """Point lookups by identity. Absence is None, never an error."""

    def __init__(self, session: Session):
        self.session = session

    def get_talent(self, identity: str) -> Optional[TalentProfile]:
        return self.session.get(TalentProfile, validate_identity(identity))

    def get_organization(self, identity: str) -> Optional[Organization]:
        return self.session.get(Organization, validate_identity(identity))

    def get_opportunity(self, identity: str) -> Optional[Opportunity]:
        return self.session.get(Opportunity, validate_identity(identity))

    def get_compatibility(
        self,
        talent_identity: str,
        opportunity_identity: str,
    ) -> Optional[CompatibilityRecord]:
        """Matrix entry for the pair, or None if it was never evaluated."""
        key = (validate_identity(talent_identity), validate_identity(opportunity_identity))
        return self.session.get(CompatibilityRecord, key)
