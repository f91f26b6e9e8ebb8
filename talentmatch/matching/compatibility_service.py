"""Compatibility matrix maintenance."""
import logging
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from talentmatch.matching.scorer import score_pair
from talentmatch.matching.scorer_protocol import Scorer
from talentmatch.persistence.models import CompatibilityRecord, Opportunity, TalentProfile
from talentmatch.persistence.repository import KeyedRepository
from talentmatch.registry.clock import Clock, SystemClock, read_clock
from talentmatch.registry.exceptions import AlreadyExistsError, NotFoundError, UnauthorizedError
from talentmatch.registry.outcomes import Outcome
from talentmatch.registry.validators import CriteriaInput, parse_input, validate_identity

logger = logging.getLogger(__name__)


class CompatibilityService:
    """Score talent/opportunity pairs and keep the matrix up to date."""

    record_type = "compatibility record"

    def __init__(
        self,
        session: Session,
        scorer: Scorer,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize compatibility service.

        Args:
            session: Database session
            scorer: Scoring engine
            clock: Time source (defaults to SystemClock)
        """
        self.session = session
        self.scorer = scorer
        self.clock = clock or SystemClock()
        self.records = KeyedRepository(session, CompatibilityRecord)
        self.talent = KeyedRepository(session, TalentProfile)
        self.opportunities = KeyedRepository(session, Opportunity)

    def evaluate(
        self,
        identity: str,
        talent_identity: str,
        opportunity_identity: str,
        criteria: Sequence[str] = (),
    ) -> Outcome:
        """
        Score a pair and write the result into the matrix.

        Either record may be absent; the scorer decides what that means.
        Re-evaluating a pair overwrites the previous entry.

        Args:
            identity: Caller; must be the talent or the opportunity publisher
            talent_identity: Key of the talent profile
            opportunity_identity: Key (publisher) of the opportunity
            criteria: Up to 5 matching criteria

        Returns:
            Outcome.CREATED for a new pair, Outcome.UPDATED for a re-evaluation

        Raises:
            UnauthorizedError: If the caller is not a party of the pair
            MalformedInputError: If an identity or the criteria are malformed
            ClockUnavailableError: If the clock cannot be read
            ValueError: If the scorer returns a score outside [0, 100]
        """
        key = self._authorize(identity, talent_identity, opportunity_identity, "evaluate")
        checked = parse_input(CriteriaInput, criteria=list(criteria)).criteria

        score, confidence = score_pair(
            self.talent.get(talent_identity),
            self.opportunities.get(opportunity_identity),
            checked,
            self.scorer,
        )
        now = read_clock(self.clock)

        record = self.records.get(key)
        if record is not None:
            record.record_evaluation(score, checked, now)
            self.records.save(record)
            outcome = Outcome.UPDATED
        else:
            record = CompatibilityRecord(
                talent_identity=talent_identity,
                opportunity_identity=opportunity_identity,
            )
            record.record_evaluation(score, checked, now)
            try:
                self.records.add(record)
            except IntegrityError as exc:
                raise AlreadyExistsError(self.record_type, f"{talent_identity}/{opportunity_identity}") from exc
            outcome = Outcome.CREATED

        logger.info(
            "Scored %s -> %s: %d (confidence %d)",
            talent_identity,
            opportunity_identity,
            score,
            confidence,
        )
        return outcome

    def withdraw(self, identity: str, talent_identity: str, opportunity_identity: str) -> Outcome:
        """
        Remove a pair's matrix entry.

        Raises:
            UnauthorizedError: If the caller is not a party of the pair
            NotFoundError: If the pair was never evaluated
        """
        key = self._authorize(identity, talent_identity, opportunity_identity, "withdraw")
        record = self.records.get(key)
        if record is None:
            raise NotFoundError(self.record_type, f"{talent_identity}/{opportunity_identity}")

        self.records.delete(record)
        logger.info("Removed compatibility record %s -> %s", talent_identity, opportunity_identity)
        return Outcome.DELETED

    def _authorize(
        self,
        identity: str,
        talent_identity: str,
        opportunity_identity: str,
        action: str,
    ) -> tuple[str, str]:
        identity = validate_identity(identity)
        key = (validate_identity(talent_identity), validate_identity(opportunity_identity))
        if identity not in key:
            logger.warning("%s tried to %s %s -> %s", identity, action, *key)
            raise UnauthorizedError(identity, f"{action} compatibility of {key[0]} and {key[1]}")
        return key
