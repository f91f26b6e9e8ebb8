"""Shared guards for the keyed registry services."""
import logging
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from talentmatch.persistence.models import Base
from talentmatch.persistence.repository import KeyedRepository
from talentmatch.registry.clock import Clock, SystemClock, read_clock
from talentmatch.registry.exceptions import AlreadyExistsError, MalformedInputError, NotFoundError
from talentmatch.registry.validators import parse_input, validate_identity

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class RecordService(Generic[ModelT]):
    """
    Base for services managing one record per identity.

    Subclasses set ``model``, ``input_model`` and ``record_type`` and build
    their public operations from the guards below: existence checks,
    validation, the clock read, and the single committed write.
    """

    model: type[ModelT]
    input_model: type[BaseModel]
    record_type: str

    def __init__(self, session: Session, clock: Optional[Clock] = None):
        """
        Initialize service with database session.

        Args:
            session: SQLAlchemy database session
            clock: Time source (defaults to SystemClock)
        """
        self.session = session
        self.clock = clock or SystemClock()
        self.records: KeyedRepository[ModelT] = KeyedRepository(session, self.model)

    def get(self, identity: str) -> Optional[ModelT]:
        """Return the caller's record, or None."""
        return self.records.get(validate_identity(identity))

    def _now(self) -> datetime:
        return read_clock(self.clock)

    def _require_absent(self, identity: str) -> str:
        identity = validate_identity(identity)
        if self.records.exists(identity):
            logger.warning("Rejected duplicate %s for %s", self.record_type, identity)
            raise AlreadyExistsError(self.record_type, identity)
        return identity

    def _require_present(self, identity: str) -> ModelT:
        identity = validate_identity(identity)
        record = self.records.get(identity)
        if record is None:
            logger.warning("No %s for %s", self.record_type, identity)
            raise NotFoundError(self.record_type, identity)
        return record

    def _insert(self, identity: str, record: ModelT) -> None:
        try:
            self.records.add(record)
        except IntegrityError as exc:
            # Lost a race with another writer for the same key
            raise AlreadyExistsError(self.record_type, identity) from exc
        logger.info("Created %s for %s", self.record_type, identity)

    def _merged_input(self, record: ModelT, changes: dict[str, Any]) -> BaseModel:
        """Validate the record's current fields overlaid with the requested changes."""
        if not changes:
            raise MalformedInputError(["no fields to update"])
        current = {
            name: getattr(record, name)
            for name in self.input_model.model_fields
        }
        unknown = sorted(set(changes) - set(current))
        if unknown:
            raise MalformedInputError([f"{name}: unknown field" for name in unknown])
        return parse_input(self.input_model, **{**current, **changes})

    def _apply(self, record: ModelT, data: BaseModel) -> None:
        for name, value in data.model_dump().items():
            setattr(record, name, value)

    def _remove(self, record: ModelT, identity: str) -> None:
        self.records.delete(record)
        logger.info("Removed %s for %s", self.record_type, identity)
