"""Organization registry."""
import logging
from datetime import date

from talentmatch.persistence.models import STANDARD_TIER, Organization
from talentmatch.registry.base import RecordService
from talentmatch.registry.outcomes import Outcome
from talentmatch.registry.validators import OrganizationInput, parse_input

logger = logging.getLogger(__name__)


class OrganizationService(RecordService[Organization]):
    """Establish, update and dissolve the caller's organization."""

    model = Organization
    input_model = OrganizationInput
    record_type = "organization"

    def establish(
        self,
        identity: str,
        name: str,
        industry: str,
        jurisdiction: str,
        established_on: date,
        contact_info: str,
        tier: str = STANDARD_TIER,
    ) -> Outcome:
        """
        Register the caller's organization. Verification starts as "Unverified".

        Raises:
            AlreadyExistsError: If the caller already has an organization
            MalformedInputError: If a field is empty or over its limit
            ClockUnavailableError: If the clock cannot be read
        """
        identity = self._require_absent(identity)
        data = parse_input(
            OrganizationInput,
            name=name,
            industry=industry,
            jurisdiction=jurisdiction,
            established_on=established_on,
            contact_info=contact_info,
            tier=tier,
        )
        now = self._now()

        organization = Organization(
            identity=identity,
            **data.model_dump(),
            registered_at=now,
        )
        self._insert(identity, organization)
        return Outcome.CREATED

    def update(self, identity: str, **changes) -> Outcome:
        """Change fields of the caller's organization (verification status included)."""
        organization = self._require_present(identity)
        data = self._merged_input(organization, changes)

        self._apply(organization, data)
        self.records.save(organization)
        logger.info("Updated organization for %s (%s)", identity, ", ".join(sorted(changes)))
        return Outcome.UPDATED

    def dissolve(self, identity: str) -> Outcome:
        """
        Remove the caller's organization.

        Raises:
            NotFoundError: If the caller has no organization
        """
        organization = self._require_present(identity)
        self._remove(organization, identity)
        return Outcome.DELETED
