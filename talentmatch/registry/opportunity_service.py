"""Opportunity registry."""
import logging
from datetime import datetime

from talentmatch.persistence.models import Opportunity, as_utc
from talentmatch.registry.base import RecordService
from talentmatch.registry.exceptions import ExpirationInPastError
from talentmatch.registry.outcomes import Outcome
from talentmatch.registry.validators import OpportunityInput, parse_input

logger = logging.getLogger(__name__)


class OpportunityService(RecordService[Opportunity]):
    """Publish, update and terminate the caller's opportunity."""

    model = Opportunity
    input_model = OpportunityInput
    record_type = "opportunity"

    def publish(
        self,
        identity: str,
        title: str,
        description: str,
        location: str,
        competencies: list[str],
        expires_at: datetime,
    ) -> Outcome:
        """
        Publish an opportunity under the caller's identity.

        Status starts as "Active" and published_at is the current time.
        An expiration equal to the current time is accepted.

        Returns:
            Outcome.CREATED

        Raises:
            AlreadyExistsError: If the caller already published one
            MalformedInputError: If a field is empty or over its limit
            ExpirationInPastError: If expires_at is before the current time
            ClockUnavailableError: If the clock cannot be read
        """
        identity = self._require_absent(identity)
        data = parse_input(
            OpportunityInput,
            title=title,
            description=description,
            location=location,
            competencies=competencies,
            expires_at=expires_at,
        )
        now = self._now()
        self._check_expiration(data.expires_at, now)

        opportunity = Opportunity(
            publisher=identity,
            **data.model_dump(),
            published_at=now,
        )
        self._insert(identity, opportunity)
        return Outcome.CREATED

    def update(self, identity: str, **changes) -> Outcome:
        """
        Change fields of the caller's opportunity, including status.

        A changed expiration is checked against the current time again.

        Raises:
            NotFoundError: If the caller has no opportunity
            MalformedInputError: If no field, an unknown field, or an invalid
                value is given
            ExpirationInPastError: If a new expires_at is in the past
        """
        opportunity = self._require_present(identity)
        data = self._merged_input(opportunity, changes)
        if "expires_at" in changes:
            self._check_expiration(data.expires_at, self._now())

        self._apply(opportunity, data)
        self.records.save(opportunity)
        logger.info("Updated opportunity for %s (%s)", identity, ", ".join(sorted(changes)))
        return Outcome.UPDATED

    def terminate(self, identity: str) -> Outcome:
        """
        Remove the caller's opportunity.

        Raises:
            NotFoundError: If the caller has no opportunity
        """
        opportunity = self._require_present(identity)
        self._remove(opportunity, identity)
        return Outcome.DELETED

    @staticmethod
    def _check_expiration(expires_at: datetime, now: datetime) -> None:
        if as_utc(expires_at) < now:
            raise ExpirationInPastError(as_utc(expires_at), now)
