"""Talent profile registry."""
import logging

from talentmatch.persistence.models import TalentProfile
from talentmatch.registry.base import RecordService
from talentmatch.registry.outcomes import Outcome
from talentmatch.registry.validators import TalentInput, parse_input

logger = logging.getLogger(__name__)


class TalentService(RecordService[TalentProfile]):
    """Publish, update and remove the caller's talent profile."""

    model = TalentProfile
    input_model = TalentInput
    record_type = "talent profile"

    def establish(
        self,
        identity: str,
        display_name: str,
        skills: list[str],
        location: str,
        narrative: str,
        experience_level: str,
    ) -> Outcome:
        """
        Create the caller's talent profile.

        Availability starts as "Available"; created_at and last_active_at
        are both set to the current time.

        Args:
            identity: Caller identity (the record key)
            display_name: Public name
            skills: 1-10 skills, each at most 50 characters
            location: Where the talent is based
            narrative: Free-text summary
            experience_level: e.g. "Senior"

        Returns:
            Outcome.CREATED

        Raises:
            AlreadyExistsError: If the caller already has a profile
            MalformedInputError: If a field is empty or over its limit
            ClockUnavailableError: If the clock cannot be read
        """
        identity = self._require_absent(identity)
        data = parse_input(
            TalentInput,
            display_name=display_name,
            skills=skills,
            location=location,
            narrative=narrative,
            experience_level=experience_level,
        )
        now = self._now()

        profile = TalentProfile(
            identity=identity,
            **data.model_dump(),
            created_at=now,
            last_active_at=now,
        )
        self._insert(identity, profile)
        return Outcome.CREATED

    def update(self, identity: str, **changes) -> Outcome:
        """
        Change fields of the caller's profile and touch last_active_at.

        Accepts any TalentInput field, including availability.

        Raises:
            NotFoundError: If the caller has no profile
            MalformedInputError: If no field, an unknown field, or an invalid
                value is given
        """
        profile = self._require_present(identity)
        data = self._merged_input(profile, changes)
        now = self._now()

        self._apply(profile, data)
        profile.last_active_at = now
        self.records.save(profile)
        logger.info("Updated talent profile for %s (%s)", identity, ", ".join(sorted(changes)))
        return Outcome.UPDATED

    def deactivate(self, identity: str) -> Outcome:
        """
        Remove the caller's profile.

        Raises:
            NotFoundError: If the caller has no profile
        """
        profile = self._require_present(identity)
        self._remove(profile, identity)
        return Outcome.DELETED
